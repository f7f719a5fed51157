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

import os
import platform
import struct
from typing import Tuple
from fdlayout.library.file import get_main_dir


BOUNDARY_1KB = 0x400
BOUNDARY_1MB = 0x100000

ALIGNED_4KB = 0xFFF

MASK_15b = 0x7FFF
MASK_32b = 0xFFFFFFFF


def get_bits(value: int, start: int, nbits: int) -> int:
    ret = value >> start
    ret &= (1 << nbits) - 1
    return ret


def DD(val: int) -> bytes:
    return struct.pack('<L', val)


def get_version() -> str:
    version_file = os.path.join(get_main_dir(), 'fdlayout', 'VERSION')
    if not os.path.exists(version_file):
        return '0.0.0'
    with open(version_file, 'r') as verFile:
        return verFile.read().strip()


def os_version() -> Tuple[str, str, str, str]:
    return platform.system(), platform.release(), platform.version(), platform.machine()
