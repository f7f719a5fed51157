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
The region command prints base and limit of a single flash region.

>>> fdlayout_util region <rom> <region> [--strict]

<region> is a region index (0-8) or name:
FD, BIOS, ME, GbE, PD, RES1, RES2, RES3, EC

Examples:

>>> fdlayout_util region spi.bin BIOS
>>> fdlayout_util region spi.bin 2
"""

from argparse import ArgumentParser

from fdlayout.command import BaseCommand
from fdlayout.hal.layout import format_region_line
from fdlayout.hal.spi_descriptor import get_region_table, locate
from fdlayout.hal.spi_region import decode, is_present
from fdlayout.library.regions import MAX_REGIONS, region_name_short, region_type_from_name
from fdlayout.library.returncode import ExitCode


class RegionCommand(BaseCommand):

    def parse_arguments(self) -> None:
        parser = ArgumentParser(prog='fdlayout_util region', usage=__doc__)
        parser.add_argument('_rom', metavar='<rom>', type=str, help='firmware image file')
        parser.add_argument('_region', metavar='<region>', type=str,
                            help=f"region index or name ({', '.join(region_name_short(r) for r in range(MAX_REGIONS))})")
        parser.add_argument('--strict', dest='_strict', action='store_true',
                            help='only accept a signature whose Flash Descriptor region starts at the descriptor')
        parser.parse_args(self.argv, namespace=self)
        self.func = self.dump_region

    def dump_region(self) -> None:
        region_type = region_type_from_name(self._region)
        rom = self.read_image(self._rom)
        if not rom:
            return
        location = locate(rom, self._strict or self.strict_default())
        region = decode(get_region_table(rom, location), region_type)
        self.logger.log(format_region_line(region))
        if not is_present(region):
            self.logger.log_warning(f'{region.name} region is not used')
            self.ExitCode = ExitCode.WARNING


commands = {'region': RegionCommand}
