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

import unittest

from fdlayout.library.regions import BIOS, FLASH_DESCRIPTOR, ME
from fdlayout.library.returncode import ExitCode
from tests.helpers.image_utils import flreg, make_image
from tests.utilcmd.run_fdlayout_util import UtilTestCase

TYPICAL_FLREGS = {
    FLASH_DESCRIPTOR: flreg(0x0, 0xFFF),
    BIOS: flreg(0x200000, 0x7FFFFF),
    ME: flreg(0x1000, 0x1FFFFF),
}


class TestLayoutUtil(UtilTestCase):

    def test_layout(self):
        rom = self.write_rom(make_image(TYPICAL_FLREGS))
        ret, output = self.run_util('layout', rom)
        self.assertEqual(ret, ExitCode.OK)
        self.assertIn('Your ROM is 0MB end address at 0x1000', output)
        expected = '\n'.join([
            '-------------- 0x0', 'FD = 4Kb', '-------------- 0xfff', '',
            '-------------- 0x1000', 'ME = 1MB', '-------------- 0x1fffff', '',
            '-------------- 0x200000', 'BIOS = 6MB', '-------------- 0x7fffff', '',
        ])
        self.assertIn(expected, output)

    def test_layout_strict(self):
        rom = self.write_rom(make_image(TYPICAL_FLREGS))
        ret, output = self.run_util('layout', rom, '--strict')
        self.assertEqual(ret, ExitCode.OK)
        self.assertIn('BIOS = 6MB', output)

    def test_layout_strict_rejects_descriptor(self):
        rom = self.write_rom(make_image({BIOS: flreg(0x1000, 0x1FFF)}))
        self.assertEqual(self.run_util('layout', rom)[0], ExitCode.OK)
        ret, output = self.run_util('layout', rom, '--strict')
        self.assertEqual(ret, ExitCode.ERROR)
        self.assertIn('ERROR: No valid Flash Descriptor found', output)

    def test_no_descriptor(self):
        rom = self.write_rom(b'\xFF' * 0x1000)
        ret, output = self.run_util('layout', rom)
        self.assertEqual(ret, ExitCode.ERROR)
        self.assertIn('ERROR: No Flash Descriptor found in this image', output)

    def test_region_table_outside_of_image(self):
        rom = self.write_rom(make_image(TYPICAL_FLREGS, size=0x200, frba=0x1F0)[:0x200])
        ret, output = self.run_util('layout', rom)
        self.assertEqual(ret, ExitCode.ERROR)
        self.assertIn('is outside of the image', output)

    def test_no_regions(self):
        rom = self.write_rom(make_image())
        ret, output = self.run_util('layout', rom)
        self.assertEqual(ret, ExitCode.WARNING)
        self.assertIn('WARNING: The Flash Descriptor does not define any region', output)

    def test_missing_file(self):
        ret, output = self.run_util('layout', 'missing.bin')
        self.assertEqual(ret, ExitCode.ERROR)
        self.assertIn("ERROR: Could not read firmware image 'missing.bin'", output)

    def test_usage(self):
        self.assertEqual(self.run_util('layout')[0], ExitCode.OK)
        self.assertEqual(self.run_util('layout', 'rom.bin', '--bogus')[0], ExitCode.ERROR)


if __name__ == '__main__':
    unittest.main()
