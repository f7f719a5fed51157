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

import random
import unittest

from fdlayout.hal import layout
from fdlayout.hal.layout import LayoutRow, build, describe_image_size, render, size_to_unit
from fdlayout.hal.spi_region import decode_flreg
from fdlayout.library.exceptions import OutOfBoundsError, SignatureNotFoundError
from fdlayout.library.regions import BIOS, FLASH_DESCRIPTOR, GBE, ME, PLATFORM_DATA
from tests.helpers.image_utils import UNUSED_FLREG, flreg, make_image

TYPICAL_FLREGS = {
    FLASH_DESCRIPTOR: flreg(0x0, 0xFFF),
    BIOS: flreg(0x200000, 0x7FFFFF),
    ME: flreg(0x1000, 0x1FFFFF),
}


class TestSizeToUnit(unittest.TestCase):

    def test_units(self):
        self.assertEqual(size_to_unit(0x1000), (4, 'Kb'))
        self.assertEqual(size_to_unit(9999), (9, 'Kb'))
        self.assertEqual(size_to_unit(10000), (0, 'MB'))
        self.assertEqual(size_to_unit(0x3000), (0, 'MB'))
        self.assertEqual(size_to_unit(0x200000), (2, 'MB'))
        self.assertEqual(size_to_unit(0x1FF000), (1, 'MB'))


class TestBuild(unittest.TestCase):

    def test_typical_layout(self):
        rows = build(make_image(TYPICAL_FLREGS))
        self.assertEqual(rows, [
            LayoutRow(0x0, 4, 'Kb', 0xFFF, 'FD', FLASH_DESCRIPTOR),
            LayoutRow(0x1000, 1, 'MB', 0x1FFFFF, 'ME', ME),
            LayoutRow(0x200000, 6, 'MB', 0x7FFFFF, 'BIOS', BIOS),
        ])

    def test_single_bios_region(self):
        image = bytearray(0x80)
        image[16:20] = b'\x5A\xA5\xF0\x0F'
        image[20:24] = b'\x00\x00\x02\x00'
        for offset in range(32, 68, 4):
            image[offset:offset + 4] = b'\xFF\x7F\x00\x00'
        image[36:40] = b'\x00\x00\x00\x00'
        rows = build(bytes(image))
        self.assertEqual(rows, [LayoutRow(0x0, 4, 'Kb', 0xFFF, 'BIOS', BIOS)])
        self.assertEqual(render(rows), ['-------------- 0x0', 'BIOS = 4Kb', '-------------- 0xfff', ''])

    def test_equal_bases_keep_catalog_order(self):
        rows = build(make_image({
            PLATFORM_DATA: flreg(0x1000, 0x1FFF),
            GBE: flreg(0x1000, 0x2FFF),
            BIOS: flreg(0x1000, 0xFFFFF),
        }))
        self.assertEqual([row.short_name for row in rows], ['BIOS', 'GbE', 'PD'])
        self.assertEqual([row.base for row in rows], [0x1000] * 3)

    def test_no_regions(self):
        self.assertEqual(build(make_image()), [])

    def test_sorted_and_present(self):
        rng = random.Random(9)
        for _ in range(50):
            flregs = {r: rng.choice([rng.getrandbits(32), UNUSED_FLREG]) for r in range(9)}
            rows = build(make_image(flregs))
            bases = [row.base for row in rows]
            self.assertEqual(bases, sorted(bases))
            expected = [r for r in range(9) if decode_flreg(flregs[r], r).size >= 1]
            self.assertEqual(sorted(row.region_type for row in rows), expected)

    def test_no_signature(self):
        with self.assertRaises(SignatureNotFoundError):
            build(b'\x00' * 0x1000)

    def test_region_table_outside_of_image(self):
        with self.assertRaises(OutOfBoundsError):
            build(make_image(size=0x60, frba=0x40)[:0x50])

    def test_memoryview_image(self):
        image = make_image(TYPICAL_FLREGS)
        self.assertEqual(build(memoryview(image)), build(image))
        self.assertEqual(build(memoryview(b'\xFF' * 0x10 + image)[0x10:]), build(image))

    def test_strict(self):
        image = make_image(TYPICAL_FLREGS)
        self.assertEqual(build(image, strict=True), build(image))


class TestRender(unittest.TestCase):

    def test_render_rows(self):
        lines = render(build(make_image(TYPICAL_FLREGS)))
        self.assertEqual(lines, [
            '-------------- 0x0', 'FD = 4Kb', '-------------- 0xfff', '',
            '-------------- 0x1000', 'ME = 1MB', '-------------- 0x1fffff', '',
            '-------------- 0x200000', 'BIOS = 6MB', '-------------- 0x7fffff', '',
        ])

    def test_render_sizes_in_hex(self):
        rows = build(make_image({FLASH_DESCRIPTOR: flreg(0x0, 0xFFF), BIOS: flreg(0x1000000, 0x27FFFFF)}))
        self.assertEqual(rows[1], LayoutRow(0x1000000, 24, 'MB', 0x27FFFFF, 'BIOS', BIOS))
        self.assertEqual(render(rows)[4:8], ['-------------- 0x1000000', 'BIOS = 18MB', '-------------- 0x27fffff', ''])

    def test_render_empty(self):
        self.assertEqual(render([]), [])

    def test_format_region_line(self):
        region = decode_flreg(0x07FF0200, BIOS)
        self.assertEqual(layout.format_region_line(region), '00200000:007fffff BIOS')

    def test_describe_image_size(self):
        self.assertEqual(describe_image_size(0x800000), 'Your ROM is 8MB end address at 0x800000')
        self.assertEqual(describe_image_size(0x1000), 'Your ROM is 0MB end address at 0x1000')


if __name__ == '__main__':
    unittest.main()
