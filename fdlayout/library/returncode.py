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


class ExitCode:
    OK = 0
    WARNING = 2
    ERROR = 16
    EXCEPTION = 32

    help_epilog = """\
  Exit Code
  ---------
  FDLAYOUT returns an integer exit code:
  - Exit code is 0:       the command completed successfully
  - Exit code is not 0:   each bit means the following:
      - Bit 1: WARNING         the command completed with a warning
      - Bit 4: ERROR           the image could not be read or parsed
      - Bit 5: EXCEPTION       the command threw an unexpected exception

"""
