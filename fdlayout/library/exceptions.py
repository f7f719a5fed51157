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


# ================================================
# Flash Descriptor parsing
# ================================================

class FlashDescriptorError(RuntimeError):
    pass


class SignatureNotFoundError(FlashDescriptorError):
    pass


class OutOfBoundsError(FlashDescriptorError):
    def __init__(self, what: str, offset: int, length: int, image_size: int) -> None:
        super(OutOfBoundsError, self).__init__(
            f'{what} at 0x{offset:X} (0x{length:X} bytes) is outside of the image (0x{image_size:X} bytes)')
        self.offset = offset
        self.length = length
        self.image_size = image_size


class InvalidRegionTypeError(FlashDescriptorError):
    pass


# ================================================
# Configuration
# ================================================

class ConfigError(RuntimeError):
    pass
