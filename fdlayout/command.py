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

import traceback
from typing import Optional, Sequence

from fdlayout.library.exceptions import FlashDescriptorError
from fdlayout.library.file import read_file
from fdlayout.library.logger import logger
from fdlayout.library.options import Options
from fdlayout.library.returncode import ExitCode


class BaseCommand:

    def __init__(self, argv: Sequence[str], options: Options = None):
        self.argv = argv
        self.logger = logger()
        self.options = options if options is not None else Options()
        self.ExitCode = ExitCode.OK

    def run(self) -> None:
        try:
            self.func()
        except FlashDescriptorError as err:
            self.logger.log_error(str(err))
            self.ExitCode = ExitCode.ERROR
        except Exception:
            self.logger.log_error('An error occured during the execution of the command!')
            self.logger.log_error('Please run with the debug option for further details')
            if logger().DEBUG:
                traceback.print_exc()
            self.ExitCode = ExitCode.EXCEPTION

    def func(self) -> None:
        raise NotImplementedError('sub class should overwrite the func() method')

    def set_up(self) -> None:
        pass

    def tear_down(self) -> None:
        pass

    def parse_arguments(self) -> None:
        raise NotImplementedError('sub class should overwrite the parse_arguments() method')

    def strict_default(self) -> bool:
        return self.options.get_bool_data('Layout_Config', 'strict_signature', False)

    def max_image_size(self) -> Optional[int]:
        return self.options.get_int_data('Layout_Config', 'max_image_size', None)

    def read_image(self, filename: str) -> bytes:
        self.logger.log(f"[FDLAYOUT] Reading firmware image from file '{filename}'")
        rom = read_file(filename, max_size=self.max_image_size())
        if not rom:
            self.logger.log_error(f"Could not read firmware image '{filename}'")
            self.ExitCode = ExitCode.ERROR
        return rom
