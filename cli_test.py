#!/usr/bin/env python
# Copyright 2026 The Pigweed Authors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
"""Tests the sensirion_shdlc command line tool."""

# pylint: disable=protected-access

import contextlib
import io
from pathlib import Path
import tempfile
import unittest

from sensirion_shdlc import __main__ as cli
from sensirion_shdlc.encode import encode_frame


class TestArguments(unittest.TestCase):
    """Tests command line parsing."""
    def test_encode(self):
        args = cli._parse_args(['encode', '00', '7e11'])
        self.assertEqual(args.command, 'encode')
        self.assertEqual(b''.join(args.data), b'\x00\x7e\x11')
        self.assertIsNone(args.color)
        self.assertIsNone(args.max_payload_size)

    def test_global_options(self):
        args = cli._parse_args(
            ['--no-color', '--max-payload-size', '8', '-v', 'scan', 'x.bin'])
        self.assertFalse(args.color)
        self.assertEqual(args.max_payload_size, 8)
        self.assertTrue(args.verbose)
        self.assertEqual(args.file, Path('x.bin'))

    def test_invalid_hex(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli._parse_args(['decode', '7g'])

    def test_invalid_max_payload_size(self):
        for value in ('-1', '259', '1000', 'big'):
            with self.subTest(value=value):
                with contextlib.redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit):
                        cli._parse_args(
                            ['--max-payload-size', value, 'encode', '00'])

    def test_main_rejects_large_limit(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit):
                cli.main(['--max-payload-size', '1000', 'encode', '00' * 600])
        self.assertIn('max_payload_size', stderr.getvalue())


class TestCommands(unittest.TestCase):
    """Tests the encode, decode and scan commands."""
    def test_encode(self):
        output = io.StringIO()
        self.assertEqual(cli.encode_command(b'\x00\x7e\x11', 258, output), 0)
        self.assertEqual(output.getvalue(), '7e 00 7d 5e 7d 31 70 7e\n')

    def test_encode_too_large(self):
        output = io.StringIO()
        with self.assertLogs('sensirion_shdlc', level='ERROR'):
            self.assertEqual(cli.encode_command(b'abc', 2, output), 1)
        self.assertEqual(output.getvalue(), '')

    def test_decode(self):
        output = io.StringIO()
        self.assertEqual(
            cli.decode_command(b'\x7e\x00\x7d\x5e\x7d\x31\x70\x7e', 258,
                               output), 0)
        self.assertEqual(output.getvalue(), '00 7e 11\n')

    def test_decode_error(self):
        output = io.StringIO()
        with self.assertLogs('sensirion_shdlc', level='ERROR') as logs:
            self.assertEqual(cli.decode_command(b'\x7e\x01\x00\x7e', 258,
                                                output), 1)
        self.assertIn('CHECKSUM_MISMATCH', logs.output[0])

    def test_scan(self):
        with tempfile.TemporaryDirectory() as folder:
            path = Path(folder, 'capture.bin')
            path.write_bytes(b'\x00' + encode_frame(b'\x01\x02') +
                             b'\x7e\x01\x00\x7e')
            output = io.StringIO()
            with self.assertLogs('sensirion_shdlc', level='INFO'):
                self.assertEqual(cli.scan_command(path, 258, output), 1)

        lines = output.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0], '   1 ok    01 02')
        self.assertTrue(lines[1].startswith('   2 error CHECKSUM_MISMATCH'))

    def test_scan_all_valid(self):
        with tempfile.TemporaryDirectory() as folder:
            path = Path(folder, 'capture.bin')
            path.write_bytes(encode_frame(b'A') + encode_frame(b''))
            output = io.StringIO()
            with self.assertLogs('sensirion_shdlc', level='INFO'):
                self.assertEqual(cli.scan_command(path, 258, output), 0)

        self.assertEqual(output.getvalue().splitlines(),
                         ['   1 ok    41', '   2 ok    '])


if __name__ == '__main__':
    unittest.main()
