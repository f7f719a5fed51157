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
The flreg command decodes a raw Flash Region register value.

>>> fdlayout_util flreg <region> <value>

Examples:

>>> fdlayout_util flreg BIOS 0x0FFF0800
>>> fdlayout_util flreg 2 07FF0003
"""

from argparse import ArgumentParser

from fdlayout.command import BaseCommand
from fdlayout.hal.layout import size_to_unit
from fdlayout.hal.spi_region import decode_flreg, is_present
from fdlayout.library.regions import MAX_REGIONS, region_name_short, region_type_from_name
from fdlayout.library.returncode import ExitCode


class FlregCommand(BaseCommand):

    def parse_arguments(self) -> None:
        parser = ArgumentParser(prog='fdlayout_util flreg', usage=__doc__)
        parser.add_argument('_region', metavar='<region>', type=str,
                            help=f"region index or name ({', '.join(region_name_short(r) for r in range(MAX_REGIONS))})")
        parser.add_argument('_value', metavar='<value>', type=lambda x: int(x, 16), help='FLREG value (hex)')
        parser.parse_args(self.argv, namespace=self)
        self.func = self.decode_value

    def decode_value(self) -> None:
        region = decode_flreg(self._value, region_type_from_name(self._region))
        self.logger.log(f'FLREG{region.region_type:d} ({region.name}) = 0x{region.flreg:08X}')
        self.logger.log(f'  Base : 0x{region.base:08X}')
        self.logger.log(f'  Limit: 0x{region.limit:08X}')
        if not is_present(region):
            self.logger.log_warning(f'{region.name} region is not used')
            self.ExitCode = ExitCode.WARNING
            return
        (size_value, size_unit) = size_to_unit(region.size)
        self.logger.log(f'  Size : 0x{region.size:08X} ({size_value:d}{size_unit})')


commands = {'flreg': FlregCommand}
