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

import os
import configparser
from typing import Any, Optional
from fdlayout.library.file import get_main_dir
from fdlayout.library.exceptions import ConfigError


class NoDefault():
    pass


class Options(object):

    def __init__(self, options_name: str = ''):
        if not options_name:
            options_path = os.path.join(get_main_dir(), 'fdlayout', 'options')
            if not os.path.isdir(options_path):
                raise ConfigError(f'Unable to locate configuration options: {options_path}')
            options_name = os.path.join(options_path, 'cmd_options.ini')
        self.config = configparser.ConfigParser()
        try:
            with open(options_name) as options_file:
                self.config.read_file(options_file)
        except (OSError, configparser.Error) as err:
            raise ConfigError(f'Unable to read configuration options {options_name}: {err}') from err

    def get_section_data(self, section: str, key: str, default: Any = NoDefault) -> str:
        try:
            ret_data = self.config.get(section, key)
        except configparser.Error as e:
            if default is NoDefault:
                raise ConfigError(str(e)) from e
            return default
        return ret_data

    def get_bool_data(self, section: str, key: str, default: Any = NoDefault) -> bool:
        raw_data = self.get_section_data(section, key, default)
        if isinstance(raw_data, bool):
            return raw_data
        if raw_data.strip().lower() in ('1', 'yes', 'true', 'on'):
            return True
        if raw_data.strip().lower() in ('0', 'no', 'false', 'off'):
            return False
        raise ConfigError(f'[{section}] {key}: not a boolean value: {raw_data}')

    def get_int_data(self, section: str, key: str, default: Any = NoDefault) -> Optional[int]:
        raw_data = self.get_section_data(section, key, default)
        if raw_data is None or isinstance(raw_data, int):
            return raw_data
        try:
            return int(raw_data, 0)
        except ValueError as err:
            raise ConfigError(f'[{section}] {key}: not an integer value: {raw_data}') from err
