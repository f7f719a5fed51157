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
Flash region layout report

Regions defined by the Flash Descriptor are decoded, absent regions
(size < 1) are dropped and the rest are ordered by base address. Regions
sharing a base address keep catalog order.

usage:
    >>> rows = build(rom)
    >>> print_layout(rows)

Output:

    -------------- 0x0
    FD = 4Kb
    -------------- 0xfff

    -------------- 0x1000
    ME = 2MB
    -------------- 0x200fff
"""

from collections import namedtuple
from typing import Iterable, List, Tuple
from fdlayout.library.defines import BOUNDARY_1KB, BOUNDARY_1MB
from fdlayout.library.logger import logger
from fdlayout.hal.spi_descriptor import Image, as_buffer, get_region_table, locate
from fdlayout.hal.spi_region import RegionInfo, decode_all, is_present

KB_UNIT = 'Kb'
MB_UNIT = 'MB'
# sizes below this many bytes are shown in KB
KB_THRESHOLD = 10000
SEPARATOR = '--------------'

LayoutRow = namedtuple('LayoutRow', 'base size_value size_unit limit short_name region_type')


def sort_regions(regions: Iterable[RegionInfo]) -> List[RegionInfo]:
    return sorted(regions, key=lambda region: (region.base, region.region_type))


def get_regions(image: Image, strict: bool = False) -> List[RegionInfo]:
    """Returns the regions present in the image, ordered by base address."""
    image = as_buffer(image)
    location = locate(image, strict)
    logger().log_debug(f'[layout] Flash Region table at offset 0x{location.region_table_offset:08X}')
    regions = []
    for region in decode_all(get_region_table(image, location)):
        if not is_present(region):
            logger().log_debug(f'[layout] {region.short_name} region is not used (FLREG 0x{region.flreg:08X})')
            continue
        regions.append(region)
    return sort_regions(regions)


def size_to_unit(size: int) -> Tuple[int, str]:
    if size < KB_THRESHOLD:
        return (size // BOUNDARY_1KB, KB_UNIT)
    return (size // BOUNDARY_1MB, MB_UNIT)


def make_row(region: RegionInfo) -> LayoutRow:
    (size_value, size_unit) = size_to_unit(region.size)
    return LayoutRow(region.base, size_value, size_unit, region.limit, region.short_name, region.region_type)


def build(image: Image, strict: bool = False) -> List[LayoutRow]:
    return [make_row(region) for region in get_regions(image, strict)]


def render(rows: Iterable[LayoutRow]) -> List[str]:
    lines = []
    for row in rows:
        lines.append(f'{SEPARATOR} 0x{row.base:x}')
        # the size keeps the hex radix of the address lines
        lines.append(f'{row.short_name} = {row.size_value:x}{row.size_unit}')
        lines.append(f'{SEPARATOR} 0x{row.limit:x}')
        lines.append('')
    return lines


def print_layout(rows: Iterable[LayoutRow]) -> None:
    for line in render(rows):
        logger().log(line)


def format_region_line(region: RegionInfo) -> str:
    return f'{region.base:08x}:{region.limit:08x} {region.short_name}'


def describe_image_size(size: int) -> str:
    return f'Your ROM is {size // BOUNDARY_1MB:d}MB end address at 0x{size:x}'
