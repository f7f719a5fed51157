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
Flash Descriptor location in a firmware image

The descriptor (FDBAR) is found by scanning the image for the FLVALSIG
signature on 4-byte boundaries. FLMAP0 follows the signature, and its
bits [23:16] hold the Flash Region Base Address (FRBA) in 16-byte units.

usage:
    >>> location = locate(rom)
    >>> region_table = get_region_table(rom, location)
"""

import struct
from collections import namedtuple
from typing import Union
from fdlayout.library.defines import get_bits
from fdlayout.library.exceptions import OutOfBoundsError, SignatureNotFoundError
from fdlayout.library.logger import logger
from fdlayout.library.regions import FLASH_DESCRIPTOR
from fdlayout.hal.spi_region import REGION_TABLE_SIZE, decode, is_present

Image = Union[bytes, bytearray, memoryview]

FD_SIGNATURE = 0x0FF0A55A
FD_SIGNATURE_BYTES = struct.pack('<I', FD_SIGNATURE)
FD_SIGNATURE_ALIGN = 4
# FLVALSIG sits at this offset from the start of a descriptor
FD_SIGNATURE_OFFSET = 0x10
FLMAP0_OFFSET = 0x4
FLMAP0_SIZE = 4
FRBA_SHIFT = 4

DescriptorLocation = namedtuple('DescriptorLocation', 'header_offset region_table_offset flmap0')


def check_range(image: Image, what: str, offset: int, length: int) -> None:
    if offset < 0 or offset + length > len(image):
        raise OutOfBoundsError(what, offset, length, len(image))


def as_buffer(image: Image) -> Union[bytes, bytearray]:
    """
    Returns the image as bytes or bytearray for searching.

    A memoryview over a whole bytes or bytearray object gives back that object.
    Other views are copied once.
    """
    if not isinstance(image, (bytes, bytearray, memoryview)):
        raise TypeError(f'Invalid image object type {type(image)}')
    if not isinstance(image, memoryview):
        return image
    if isinstance(image.obj, (bytes, bytearray)) and image.c_contiguous and image.nbytes == len(image.obj):
        return image.obj
    return image.tobytes()


def find_signature(image: Image, start: int = 0) -> int:
    """Returns the lowest 4-byte aligned signature offset at or after start, or -1."""
    image = as_buffer(image)
    end = len(image) - FD_SIGNATURE_ALIGN
    pos = image.find(FD_SIGNATURE_BYTES, start)
    while pos != -1 and pos < end:
        if pos % FD_SIGNATURE_ALIGN == 0:
            return pos
        pos = image.find(FD_SIGNATURE_BYTES, pos + 1)
    return -1


def get_frba(flmap0: int) -> int:
    return get_bits(flmap0, 16, 8) << FRBA_SHIFT


def locate_at(image: Image, header_offset: int) -> DescriptorLocation:
    flmap0_off = header_offset + FLMAP0_OFFSET
    check_range(image, 'FLMAP0', flmap0_off, FLMAP0_SIZE)
    flmap0 = struct.unpack_from('<I', image, flmap0_off)[0]
    frba = get_frba(flmap0)
    check_range(image, 'Flash Region table', frba, REGION_TABLE_SIZE)
    return DescriptorLocation(header_offset, frba, flmap0)


def get_region_table(image: Image, location: DescriptorLocation) -> bytes:
    check_range(image, 'Flash Region table', location.region_table_offset, REGION_TABLE_SIZE)
    return bytes(image[location.region_table_offset:location.region_table_offset + REGION_TABLE_SIZE])


def is_descriptor_start(image: Image, location: DescriptorLocation) -> bool:
    fd_region = decode(get_region_table(image, location), FLASH_DESCRIPTOR)
    return is_present(fd_region) and fd_region.base == location.header_offset - FD_SIGNATURE_OFFSET


def locate(image: Image, strict: bool = False) -> DescriptorLocation:
    """
    Locates the Flash Descriptor and its region table in the image.

    The first aligned signature is used. With strict, a candidate is accepted
    only when its Flash Descriptor region starts at the descriptor itself;
    rejected candidates are skipped and the scan continues.

    Raises:
        SignatureNotFoundError: no (acceptable) signature in the image
        OutOfBoundsError: FLMAP0 or the region table lie outside of the image
    """
    image = as_buffer(image)

    rejected = 0
    pos = find_signature(image)
    while pos != -1:
        logger().log_debug(f'[spi_fd] Flash Descriptor signature found at offset 0x{pos:08X}')
        if not strict:
            return locate_at(image, pos)
        try:
            location = locate_at(image, pos)
            if is_descriptor_start(image, location):
                return location
        except OutOfBoundsError as err:
            logger().log_debug(f'[spi_fd] {err}')
        logger().log_debug(f'[spi_fd] Rejected signature at offset 0x{pos:08X}')
        rejected += 1
        pos = find_signature(image, pos + FD_SIGNATURE_ALIGN)

    if rejected:
        raise SignatureNotFoundError(f'No valid Flash Descriptor found in this image ({rejected:d} signatures rejected)')
    raise SignatureNotFoundError(f'No Flash Descriptor found in this image (signature 0x{FD_SIGNATURE:08X})')
