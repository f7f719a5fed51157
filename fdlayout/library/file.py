# FDLAYOUT: Intel Flash Descriptor Layout Utility
# Copyright (c) 2010-2021, Intel Corporation
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; Version 2.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#

"""
Reading firmware images from files

usage:
    >>> rom = read_file('spi.bin', max_size=0x2000000)
"""

import os
from typing import Optional
from fdlayout.library.logger import logger

DEFAULT_MAX_FILE_SIZE = 512 * 1024 * 1024


def get_main_dir() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))


def get_utilcmd_dir() -> str:
    return os.path.join(get_main_dir(), 'fdlayout', 'utilcmd')


def validate_file_exists(filepath: str, file_type: str = 'file') -> bool:
    """Checks that filepath names an existing regular file, logging the reason if not."""
    if not filepath:
        logger().log_error(f'No path given for {file_type}')
        return False
    if not os.path.exists(filepath):
        logger().log_error(f"Cannot find {file_type} '{filepath}'")
        return False
    if not os.path.isfile(filepath):
        logger().log_error(f"'{filepath}' is not a regular file")
        return False
    return True


def validate_file_size(filepath: str, max_size: Optional[int] = None) -> bool:
    if max_size is None:
        max_size = DEFAULT_MAX_FILE_SIZE
    try:
        file_size = os.path.getsize(filepath)
    except OSError as err:
        logger().log_error(f"Cannot get the size of '{filepath}': {err}")
        return False
    if file_size > max_size:
        logger().log_error(f"'{filepath}' is 0x{file_size:X} bytes, larger than the 0x{max_size:X} bytes limit")
        return False
    return True


def read_file(filename: str, size: int = 0, validate: bool = True, max_size: Optional[int] = None) -> bytes:
    """
    Reads a whole file, or its first size bytes.

    Returns b'' when the file does not pass validation or cannot be read;
    the reason is logged.
    """
    if validate and not (validate_file_exists(filename, 'input file') and validate_file_size(filename, max_size)):
        return b''
    try:
        with open(filename, 'rb') as f:
            data = f.read(size) if size else f.read()
    except OSError as err:
        logger().log_error(f"Unable to read '{filename:.256}': {err}")
        return b''
    logger().log_debug(f"[file] Read 0x{len(data):X} bytes from '{filename:.256}'")
    return data
