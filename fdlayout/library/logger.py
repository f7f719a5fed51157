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
Logging functions

Messages go to stdout, or to a log file when one is set with -l/--log.

usage:
    >>> logger().log('[FDLAYOUT] message')
    >>> logger().log_error('Flash Descriptor not found')
    >>> logger().set_log_file('fdlayout.log')
"""

import logging
import os
import platform
import string
import sys
from enum import Enum
from typing import Dict, Optional

LOGGER_NAME = 'FDLAYOUT_LOGGER'
LOG_FORMAT = '%(additional)s%(message)s'


class level(Enum):
    DEBUG = 10
    VERBOSE = 13
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


LEVEL_PREFIX: Dict[int, str] = {
    level.DEBUG.value: '[*] [DEBUG] ',
    level.VERBOSE.value: '[*] [VERBOSE] ',
    level.WARNING.value: 'WARNING: ',
    level.ERROR.value: 'ERROR: ',
}

LEVEL_COLOR: Dict[int, str] = {
    level.DEBUG.value: 'BLUE',
    level.VERBOSE.value: 'GREY',
    level.WARNING.value: 'YELLOW',
    level.ERROR.value: 'RED',
    level.CRITICAL.value: 'PURPLE',
}

ANSI_COLORS: Dict[str, str] = {
    'GREY': '\033[90m',
    'RED': '\033[91m',
    'GREEN': '\033[92m',
    'YELLOW': '\033[93m',
    'BLUE': '\033[94m',
    'PURPLE': '\033[95m',
    'CYAN': '\033[96m',
    'WHITE': '\033[97m',
    'END': '\033[0m',
}


def use_colors() -> bool:
    # https://no-color.org/
    if os.getenv('NO_COLOR') is not None:
        return False
    try:
        if not sys.stdout.isatty():
            return False
    except AttributeError:
        return False
    system = platform.system().lower()
    if system == 'windows':
        os.system('color')
    return system in ('windows', 'linux')


class fdlayoutFilter(logging.Filter):
    def filter(self, record):
        record.additional = LEVEL_PREFIX.get(record.levelno, '')
        return True


class fdlayoutLogFormatter(logging.Formatter):
    """Plain formatter for log files. The color argument of a record is dropped."""

    def format(self, record):
        record.args = tuple()
        return super().format(record)


class fdlayoutStreamFormatter(logging.Formatter):
    """Console formatter, colorized when stdout is a color capable terminal."""

    colors = ANSI_COLORS if use_colors() else {}

    def format(self, record):
        color = LEVEL_COLOR.get(record.levelno, 'WHITE')
        if record.args:
            if record.args[0] in self.colors:
                color = record.args[0]
            record.args = tuple()
        text = super().format(record)
        if color in self.colors:
            return f'{self.colors[color]}{text}{self.colors["END"]}'
        return text


class Logger:
    """Class for logging to console and text file."""

    VERBOSE: bool = False
    DEBUG: bool = False

    LOG_TO_FILE: bool = False
    LOG_FILE_NAME: str = ''

    def __init__(self):
        self.logfile = None
        self.logstream = logging.StreamHandler(sys.stdout)
        self.logstream.setFormatter(fdlayoutStreamFormatter(LOG_FORMAT))
        self.logFormatter = fdlayoutLogFormatter(LOG_FORMAT)
        self.fdlayoutLogger = logging.getLogger(LOGGER_NAME)
        self.fdlayoutLogger.setLevel(level.INFO.value)
        self.fdlayoutLogger.propagate = False
        if not self.fdlayoutLogger.handlers:
            self.fdlayoutLogger.addHandler(self.logstream)
        if not self.fdlayoutLogger.filters:
            self.fdlayoutLogger.addFilter(fdlayoutFilter(LOGGER_NAME))
        logging.addLevelName(level.VERBOSE.value, level.VERBOSE.name)

    def log(self, text: str, level: level = level.INFO, color: Optional[str] = None) -> None:
        """Sends plain text to logging."""
        self.fdlayoutLogger.log(level.value, text, color)

    def log_verbose(self, text: str) -> None:
        self.log(text, level.VERBOSE)

    def log_debug(self, text: str) -> None:
        self.log(text, level.DEBUG)

    def log_warning(self, text: str) -> None:
        self.log(text, level.WARNING)

    def log_error(self, text: str) -> None:
        self.log(text, level.ERROR)

    def set_log_level(self, verbose: bool, debug: bool, vverbose: bool) -> None:
        self.VERBOSE = self.VERBOSE or verbose or vverbose
        self.DEBUG = self.DEBUG or debug or vverbose
        self.setlevel()

    def setlevel(self) -> None:
        if self.DEBUG:
            self.fdlayoutLogger.setLevel(level.DEBUG.value)
        elif self.VERBOSE:
            self.fdlayoutLogger.setLevel(level.VERBOSE.value)
        else:
            self.fdlayoutLogger.setLevel(level.INFO.value)

    def set_log_file(self, name: str) -> None:
        """Redirects the output to the file name. An empty name goes back to console output."""
        self.disable()
        if not name:
            return
        try:
            self.logfile = logging.FileHandler(filename=name, mode='a')
        except OSError:
            print(f'WARNING: Could not open log file: {name}')
            return
        self.logfile.setFormatter(self.logFormatter)
        self.fdlayoutLogger.addHandler(self.logfile)
        self.fdlayoutLogger.removeHandler(self.logstream)
        self.LOG_FILE_NAME = name
        self.LOG_TO_FILE = True

    def close(self) -> None:
        """Closes the log file and restores console output."""
        if self.logfile is None:
            return
        self.fdlayoutLogger.removeHandler(self.logfile)
        try:
            self.logfile.close()
        except OSError:
            print('WARNING: Could not close log file')
        self.logfile = None
        self.fdlayoutLogger.addHandler(self.logstream)

    def disable(self) -> None:
        self.LOG_TO_FILE = False
        self.LOG_FILE_NAME = ''
        self.close()


_logger = Logger()


def logger() -> Logger:
    """Returns a Logger instance."""
    return _logger


##################################################################################
# Hex dump functions
##################################################################################

def _printable(c: int) -> str:
    ch = chr(c)
    if ch in string.printable and ch not in string.whitespace:
        return ch
    return '.'


def dump_buffer_bytes(arr: bytes, length: int = 16) -> str:
    """Returns a hex dump of the buffer with an ASCII column"""
    lines = []
    for off in range(0, len(arr), length):
        chunk = arr[off:off + length]
        hex_str = ''.join(f'{c:02X} ' for c in chunk).ljust(length * 3)
        lines.append(f'{hex_str}| {"".join(_printable(c) for c in chunk)}')
    return '\n'.join(lines)


def print_buffer_bytes(arr: bytes, length: int = 16) -> None:
    logger().log(dump_buffer_bytes(arr, length))
