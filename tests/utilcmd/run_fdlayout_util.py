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
import tempfile
import unittest
from typing import Tuple

import fdlayout_util
from fdlayout.library.logger import logger


class UtilTestCase(unittest.TestCase):
    """Runs fdlayout_util commands and captures their output through the log file."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.log_file = os.path.join(self.tmp.name, 'fdlayout.log')

    def tearDown(self):
        self.tmp.cleanup()

    def write_rom(self, data: bytes, name: str = 'rom.bin') -> str:
        rom = os.path.join(self.tmp.name, name)
        with open(rom, 'wb') as f:
            f.write(data)
        return rom

    def run_util(self, *args: str) -> Tuple[int, str]:
        try:
            ret = fdlayout_util.main(['-nb', '-l', self.log_file] + list(args))
        finally:
            logger().close()
        output = ''
        if os.path.exists(self.log_file):
            with open(self.log_file) as f:
                output = f.read()
            os.remove(self.log_file)
        return ret, output
