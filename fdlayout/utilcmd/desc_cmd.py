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
The desc command prints the Flash Descriptor map and all region registers
of a firmware image, including the regions which are not used.

>>> fdlayout_util desc <rom> [--strict]

Examples:

>>> fdlayout_util desc spi.bin
"""

from argparse import ArgumentParser

from fdlayout.command import BaseCommand
from fdlayout.hal.spi_descriptor import FD_SIGNATURE, FD_SIGNATURE_OFFSET, get_region_table, locate
from fdlayout.hal.spi_region import decode_all, print_flash_regions
from fdlayout.library.logger import print_buffer_bytes

FD_HEADER_DUMP_SIZE = 0x20


class DescCommand(BaseCommand):

    def parse_arguments(self) -> None:
        parser = ArgumentParser(prog='fdlayout_util desc', usage=__doc__)
        parser.add_argument('_rom', metavar='<rom>', type=str, help='firmware image file')
        parser.add_argument('--strict', dest='_strict', action='store_true',
                            help='only accept a signature whose Flash Descriptor region starts at the descriptor')
        parser.parse_args(self.argv, namespace=self)
        self.func = self.dump_descriptor

    def dump_descriptor(self) -> None:
        rom = self.read_image(self._rom)
        if not rom:
            return
        location = locate(rom, self._strict or self.strict_default())
        fd_off = max(location.header_offset - FD_SIGNATURE_OFFSET, 0)

        self.logger.log(f'[spi_fd] Flash Descriptor signature found at offset 0x{location.header_offset:08X}')
        self.logger.log('')
        self.logger.log('########################################################')
        self.logger.log('# FLASH DESCRIPTOR')
        self.logger.log('########################################################')
        self.logger.log('')
        print_buffer_bytes(rom[fd_off:location.header_offset + FD_HEADER_DUMP_SIZE - FD_SIGNATURE_OFFSET])
        self.logger.log('')
        self.logger.log(f'+ 0x{location.header_offset:04X} Signature: 0x{FD_SIGNATURE:08X}')
        self.logger.log(f'+ 0x{location.header_offset + 4:04X} FLMAP0   : 0x{location.flmap0:08X}')
        self.logger.log(f'  Flash Region Base Address   : 0x{location.region_table_offset:08X}')
        self.logger.log('')
        self.logger.log(f'+ 0x{location.region_table_offset:04X} Region Section:')
        print_flash_regions(decode_all(get_region_table(rom, location)))


commands = {'desc': DescCommand}
