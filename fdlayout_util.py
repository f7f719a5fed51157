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
Flash Descriptor layout utility

usage:
    fdlayout_util [options] <command> [command args]

    fdlayout_util layout spi.bin
    fdlayout_util -l out.log region spi.bin BIOS
"""

import argparse
import importlib
import os
import sys
from time import time
from typing import Any, Dict, Optional, Sequence

from fdlayout.library.banner import print_banner, print_banner_properties
from fdlayout.library.defines import get_version, os_version
from fdlayout.library.exceptions import ConfigError
from fdlayout.library.file import get_utilcmd_dir
from fdlayout.library.logger import logger
from fdlayout.library.options import Options
from fdlayout.library.returncode import ExitCode

CMD_ARGS_USAGE = 'Arguments of the command. Run <command> -h for details.\n\nRegister values are in hex\n\n'


def import_cmds() -> Dict[str, Any]:
    """Collects the commands exported by the fdlayout.utilcmd modules"""
    modules = sorted(f[:-3] for f in os.listdir(get_utilcmd_dir()) if f.endswith('_cmd.py'))
    logger().log_debug(f'[FDLAYOUT] Command modules: {modules}')
    commands: Dict[str, Any] = {}
    for name in modules:
        try:
            module = importlib.import_module(f'fdlayout.utilcmd.{name}')
        except ImportError as msg:
            logger().log_error(f"Unable to import command module {name}: '{msg}'")
            continue
        commands.update(getattr(module, 'commands', {}))
    commands['help'] = None
    return commands


def build_parser(cmds: Dict[str, Any]) -> argparse.ArgumentParser:
    names = sorted(cmds)
    parser = argparse.ArgumentParser(usage='%(prog)s [options] <command>', formatter_class=argparse.RawDescriptionHelpFormatter,
                                     epilog=ExitCode.help_epilog, add_help=False)
    group = parser.add_argument_group('Options')
    group.add_argument('-h', '--help', dest='show_help', action='store_true', help='Show this message and exit')
    group.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    group.add_argument('-d', '--debug', action='store_true', help='Debug logging')
    group.add_argument('-vv', '--vverbose', action='store_true', help='Very verbose logging (Verbose + Debug)')
    group.add_argument('-l', '--log', help='Write the output to a log file instead of the console')
    group.add_argument('-nb', '--no_banner', dest='_show_banner', action='store_false', default=None,
                       help="Don't display the banner")
    group.add_argument('_cmd', metavar='Command', nargs='?', choices=names, type=str.lower, default='help',
                       help=f"Command to run: {{{','.join(names)}}}")
    group.add_argument('_cmd_args', metavar='Command Args', nargs=argparse.REMAINDER, help=CMD_ARGS_USAGE)
    return parser


def parse_args(argv: Sequence[str]) -> Optional[Dict[str, Any]]:
    """Parses the global options. Returns None when only help was requested."""
    cmds = import_cmds()
    parser = build_parser(cmds)
    par = vars(parser.parse_args(argv))
    if par['_cmd'] == 'help' or par['show_help']:
        if par['_show_banner'] is not False:
            print_banner(argv, get_version())
        parser.print_help()
        return None
    par['commands'] = cmds
    return par


class FdlayoutUtil:

    def __init__(self, switches: Dict[str, Any], argv: Sequence[str]):
        self.logger = logger()
        self.__dict__.update(switches)
        self.argv = argv
        self.options = Options()
        self.parse_switches()

    def parse_switches(self) -> None:
        self.logger.set_log_level(self.verbose, self.debug, self.vverbose)
        if self.log:
            self.logger.set_log_file(self.log)
        if self._show_banner is None:
            self._show_banner = self.options.get_bool_data('Util_Config', 'show_banner', True)
        if not self._cmd_args:
            self._cmd_args = ['--help']

    def main(self) -> int:
        """Runs the selected command and returns its exit code"""
        if self._show_banner:
            print_banner(self.argv, get_version())
            print_banner_properties(os_version())

        comm = self.commands[self._cmd](self._cmd_args, options=self.options)
        try:
            comm.parse_arguments()
        except SystemExit as err:
            # argparse exits after -h (code 0) and on invalid arguments
            return ExitCode.ERROR if err.code else ExitCode.OK

        self.logger.log(f"[FDLAYOUT] Executing command '{self._cmd}' with args {self._cmd_args}\n")
        try:
            comm.set_up()
        except Exception as msg:
            self.logger.log_error(str(msg))
            return ExitCode.EXCEPTION

        start = time()
        comm.run()
        self.logger.log_verbose(f'[FDLAYOUT] Time elapsed {time() - start:.3f}')
        comm.tear_down()
        return comm.ExitCode


def run(cli_cmd: str = '') -> int:
    return main(cli_cmd.split())


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        par = parse_args(argv)
        if par is None:
            return ExitCode.OK
        return FdlayoutUtil(par, argv).main()
    except ConfigError as msg:
        logger().log_error(str(msg))
        return ExitCode.EXCEPTION


if __name__ == '__main__':
    sys.exit(main())
