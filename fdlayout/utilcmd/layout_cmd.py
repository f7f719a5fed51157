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
The layout command prints the flash regions defined by the Flash Descriptor
of a firmware image, ordered by base address.

>>> fdlayout_util layout <rom> [--strict]

Examples:

>>> fdlayout_util layout spi.bin
>>> fdlayout_util layout spi.bin --strict
"""

from argparse import ArgumentParser

from fdlayout.command import BaseCommand
from fdlayout.hal.layout import build, describe_image_size, print_layout
from fdlayout.library.returncode import ExitCode


class LayoutCommand(BaseCommand):

    def parse_arguments(self) -> None:
        parser = ArgumentParser(prog='fdlayout_util layout', usage=__doc__)
        parser.add_argument('_rom', metavar='<rom>', type=str, help='firmware image file')
        parser.add_argument('--strict', dest='_strict', action='store_true',
                            help='only accept a signature whose Flash Descriptor region starts at the descriptor')
        parser.parse_args(self.argv, namespace=self)
        self.func = self.dump_layout

    def dump_layout(self) -> None:
        rom = self.read_image(self._rom)
        if not rom:
            return
        self.logger.log(describe_image_size(len(rom)))
        self.logger.log('')

        rows = build(rom, self._strict or self.strict_default())
        if not rows:
            self.logger.log_warning('The Flash Descriptor does not define any region')
            self.ExitCode = ExitCode.WARNING
            return
        print_layout(rows)


commands = {'layout': LayoutCommand}
