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
"""Tests the codec error types."""

import json
import unittest

from sensirion_shdlc import errors


class TestErrors(unittest.TestCase):
    """Tests error kinds, hierarchy and serialization."""
    def test_default_message(self):
        error = errors.DecodeError(errors.ErrorKind.UNTERMINATED_FRAME)
        self.assertEqual(str(error), 'no flag byte terminates the frame')
        self.assertEqual(error.as_dict(), {
            'kind': 'unterminated_frame',
            'message': 'no flag byte terminates the frame',
        })

    def test_checksum_mismatch(self):
        error = errors.ChecksumMismatchError(0xFE, 0x00)
        self.assertIsInstance(error, errors.DecodeError)
        self.assertIs(error.kind, errors.ErrorKind.CHECKSUM_MISMATCH)
        self.assertEqual(str(error), 'expected checksum 0xfe, received 0x00')
        self.assertEqual(error.as_dict()['expected'], 0xFE)
        self.assertEqual(error.as_dict()['actual'], 0x00)

    def test_capacity_exceeded(self):
        error = errors.CapacityExceededError(300, 258)
        self.assertNotIsInstance(error, errors.DecodeError)
        self.assertEqual(str(error), '300 B exceeds the limit of 258 B')
        self.assertEqual(error.as_dict(), {
            'kind': 'capacity_exceeded',
            'message': '300 B exceeds the limit of 258 B',
            'size': 300,
            'limit': 258,
        })

    def test_frame_too_large(self):
        error = errors.FrameTooLargeError(600, 520)
        self.assertIsInstance(error, errors.CapacityExceededError)
        self.assertIsInstance(error, errors.DecodeError)
        self.assertIs(error.kind, errors.ErrorKind.CAPACITY_EXCEEDED)

    def test_serializable(self):
        error = errors.ChecksumMismatchError(1, 2)
        self.assertEqual(json.loads(json.dumps(error.as_dict())),
                         error.as_dict())

    def test_kinds_are_distinct(self):
        descriptions = [kind.value for kind in errors.ErrorKind]
        self.assertEqual(len(descriptions), 6)
        self.assertEqual(len(set(descriptions)), len(descriptions))


if __name__ == '__main__':
    unittest.main()
