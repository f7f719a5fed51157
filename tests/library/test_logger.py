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
import tempfile
import unittest

from fdlayout.library.logger import dump_buffer_bytes, logger


class TestLogFile(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.cwd = os.getcwd()
        os.chdir(self.tmp.name)

    def tearDown(self):
        logger().close()
        os.chdir(self.cwd)
        self.tmp.cleanup()

    def test_log_file_is_used_as_given(self):
        logger().set_log_file('out.log')
        self.assertTrue(logger().LOG_TO_FILE)
        self.assertEqual(logger().LOG_FILE_NAME, 'out.log')
        logger().log('FD = 4Kb')
        logger().log_error('No Flash Descriptor found')
        logger().close()
        self.assertEqual(os.listdir(self.tmp.name), ['out.log'])
        with open('out.log') as f:
            self.assertEqual(f.read(), 'FD = 4Kb\nERROR: No Flash Descriptor found\n')

    def test_empty_name_keeps_console(self):
        logger().set_log_file('')
        self.assertFalse(logger().LOG_TO_FILE)
        self.assertIsNone(logger().logfile)
        self.assertEqual(os.listdir(self.tmp.name), [])


class TestDumpBuffer(unittest.TestCase):

    def test_dump(self):
        self.assertEqual(dump_buffer_bytes(b'\x5A\xA5\xF0\x0FAB', 4),
                         '5A A5 F0 0F | Z...\n41 42       | AB')


if __name__ == '__main__':
    unittest.main()
