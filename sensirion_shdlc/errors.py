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
"""Errors raised while encoding or decoding SHDLC frames."""

import enum
from typing import Any, Dict


class ErrorKind(enum.Enum):
    """The kinds of failure the codec can report."""
    CAPACITY_EXCEEDED = 'frame or payload exceeds the maximum size'
    MISSING_START_DELIMITER = 'frame does not begin with a flag byte'
    UNTERMINATED_FRAME = 'no flag byte terminates the frame'
    TRUNCATED_ESCAPE = 'escape byte is not followed by an escaped byte'
    EMPTY_BODY = 'frame has no checksum byte'
    CHECKSUM_MISMATCH = 'checksum does not match the payload'


class ShdlcError(Exception):
    """Base class for all SHDLC codec errors."""
    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str = ''):
        super().__init__(message or kind.value)
        self.kind = kind

    def as_dict(self) -> Dict[str, Any]:
        """Returns a JSON-friendly representation of the error."""
        return {'kind': self.kind.name.lower(), 'message': str(self)}


class CapacityExceededError(ShdlcError):
    """The payload is too large to be encoded into a frame."""
    def __init__(self, size: int, limit: int):
        super().__init__(ErrorKind.CAPACITY_EXCEEDED,
                         f'{size} B exceeds the limit of {limit} B')
        self.size = size
        self.limit = limit

    def as_dict(self) -> Dict[str, Any]:
        return dict(super().as_dict(), size=self.size, limit=self.limit)


class DecodeError(ShdlcError):
    """A received frame could not be decoded."""


class FrameTooLargeError(CapacityExceededError, DecodeError):
    """A received frame or its unstuffed body is larger than allowed."""


class ChecksumMismatchError(DecodeError):
    """The checksum byte in a frame does not match its payload."""
    def __init__(self, expected: int, actual: int):
        super().__init__(
            ErrorKind.CHECKSUM_MISMATCH,
            f'expected checksum 0x{expected:02x}, received 0x{actual:02x}')
        self.expected = expected
        self.actual = actual

    def as_dict(self) -> Dict[str, Any]:
        return dict(super().as_dict(),
                    expected=self.expected,
                    actual=self.actual)
