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
Flash Region (FLREGx) decoding

usage:
    >>> region = decode(region_table, BIOS)
    >>> region.base, region.limit, region.size
    >>> decode_flreg(0x07FF0200, BIOS)
"""

import struct
from collections import namedtuple
from typing import List
from fdlayout.library.defines import ALIGNED_4KB, MASK_15b, MASK_32b
from fdlayout.library.exceptions import OutOfBoundsError
from fdlayout.library.logger import logger
from fdlayout.library.regions import MAX_REGIONS, check_region_type, name_of

FLREG_SIZE = 4
REGION_TABLE_SIZE = MAX_REGIONS * FLREG_SIZE

# 15-bit base/limit fields in 4KB pages (0xFFF for IFD v1)
FREGx_BASE_MASK = MASK_15b
FREGx_LIMIT_MASK = MASK_15b << 16
FLA_SHIFT = 12
FLA_PAGE_MASK = ALIGNED_4KB

RegionInfo = namedtuple('RegionInfo', 'region_type name short_name flreg base limit size')


def decode_flreg(flreg: int, region_type: int) -> RegionInfo:
    (name, short_name) = name_of(region_type)
    flreg &= MASK_32b
    base = (flreg & FREGx_BASE_MASK) << FLA_SHIFT
    limit = ((flreg & FREGx_LIMIT_MASK) >> 4) | FLA_PAGE_MASK
    size = limit - base + 1
    if size < 0:
        size = 0
    return RegionInfo(region_type, name, short_name, flreg, base, limit, size)


def read_flreg(region_table: bytes, region_type: int) -> int:
    flreg_off = check_region_type(region_type) * FLREG_SIZE
    if flreg_off + FLREG_SIZE > len(region_table):
        raise OutOfBoundsError(f'FLREG{region_type:d}', flreg_off, FLREG_SIZE, len(region_table))
    return struct.unpack_from('<I', region_table, flreg_off)[0]


def decode(region_table: bytes, region_type: int) -> RegionInfo:
    """Decodes the base, limit and size of one region from the region table (FRBA)."""
    return decode_flreg(read_flreg(region_table, region_type), region_type)


def decode_all(region_table: bytes) -> List[RegionInfo]:
    return [decode(region_table, r) for r in range(MAX_REGIONS)]


def is_present(region: RegionInfo) -> bool:
    return region.size >= 1


def print_flash_regions(regions: List[RegionInfo]) -> None:
    logger().log('------------------------------------------------------------')
    logger().log('Flash Region             | FLREGx    | Base     | Limit     ')
    logger().log('------------------------------------------------------------')
    for region in regions:
        used_str = '' if is_present(region) else '(not used)'
        logger().log(f'{region.region_type:d} {region.name:22} | {region.flreg:08X}  | {region.base:08X} | {region.limit:08X} {used_str}')
