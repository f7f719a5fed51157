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
Flash region catalog

usage:
    >>> name_of(BIOS)
    ('BIOS', 'BIOS')
    >>> region_name_short(ME)
    'ME'
"""

from collections import namedtuple
from typing import Dict, Tuple
from fdlayout.library.exceptions import InvalidRegionTypeError

#
# Flash Regions
#

MAX_REGIONS = 9

FLASH_DESCRIPTOR = 0
BIOS = 1
ME = 2
GBE = 3
PLATFORM_DATA = 4
RESERVED_1 = 5
RESERVED_2 = 6
RESERVED_3 = 7
EMBEDDED_CONTROLLER = 8

REGION_NAME_tuple = namedtuple('RegionName', 'name short_name')

REGION_NAMES: Dict[int, REGION_NAME_tuple] = {
    FLASH_DESCRIPTOR: REGION_NAME_tuple('Flash Descriptor', 'FD'),
    BIOS: REGION_NAME_tuple('BIOS', 'BIOS'),
    ME: REGION_NAME_tuple('Intel ME', 'ME'),
    GBE: REGION_NAME_tuple('GbE', 'GbE'),
    PLATFORM_DATA: REGION_NAME_tuple('Platform Data', 'PD'),
    RESERVED_1: REGION_NAME_tuple('Reserved_1', 'RES1'),
    RESERVED_2: REGION_NAME_tuple('Reserved_2', 'RES2'),
    RESERVED_3: REGION_NAME_tuple('Reserved_3', 'RES3'),
    EMBEDDED_CONTROLLER: REGION_NAME_tuple('EC', 'EC'),
}


def check_region_type(region_type: int) -> int:
    # bool is an int subclass but never a region index
    if isinstance(region_type, bool) or not isinstance(region_type, int):
        raise InvalidRegionTypeError(f'Invalid region type: {region_type!r}')
    if not (0 <= region_type < MAX_REGIONS):
        raise InvalidRegionTypeError(f'Invalid region type: {region_type:d}')
    return region_type


def name_of(region_type: int) -> Tuple[str, str]:
    """Returns (full name, short name) of a region type."""
    entry = REGION_NAMES[check_region_type(region_type)]
    return (entry.name, entry.short_name)


def region_name_short(region_type: int) -> str:
    return name_of(region_type)[1]


def region_type_from_name(name: str) -> int:
    """Looks a region type up by index, short name or full name (case insensitive)."""
    name = name.strip()
    if name.isdigit():
        return check_region_type(int(name))
    for region_type, entry in REGION_NAMES.items():
        if name.lower() in (entry.name.lower(), entry.short_name.lower()):
            return region_type
    raise InvalidRegionTypeError(f"Unknown region '{name}'")
