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
"""Decoder functions and classes for SHDLC frames."""

import enum
import logging
from typing import Iterator, Optional

from sensirion_shdlc import protocol
from sensirion_shdlc.errors import (
    ChecksumMismatchError,
    DecodeError,
    ErrorKind,
    FrameTooLargeError,
)

_LOG = logging.getLogger('sensirion_shdlc')

_FLAG = bytes([protocol.FLAG])


class _State(enum.Enum):
    EXPECT_START = 0
    READING_BODY = 1
    DONE = 2


def _check_body(stuffed: bytes, max_payload_size: int) -> bytes:
    data = protocol.unstuff(stuffed)

    if not data:
        raise DecodeError(ErrorKind.EMPTY_BODY)

    if len(data) > max_payload_size + 1:
        raise FrameTooLargeError(len(data) - 1, max_payload_size)

    payload, received = data[:-1], data[-1]
    expected = protocol.checksum(payload)
    if expected != received:
        raise ChecksumMismatchError(expected, received)

    return payload


def decode_frame(frame: bytes,
                 max_payload_size: int = protocol.MAX_PAYLOAD_SIZE) -> bytes:
    """Decodes a single SHDLC frame and returns its payload.

    The frame must begin with a flag byte. Everything up to the next flag byte
    is the frame body; bytes after that flag are ignored.

    Raises:
      DecodeError: the frame is malformed or its checksum does not match; the
          error's kind attribute identifies the problem
      ValueError: max_payload_size is above the protocol maximum
    """
    protocol.check_max_payload_size(max_payload_size)
    limit = protocol.max_frame_size(max_payload_size)

    state = _State.EXPECT_START
    body = bytearray()
    end = 0

    for end, byte in enumerate(frame, 1):
        if state is _State.EXPECT_START:
            if byte != protocol.FLAG:
                raise DecodeError(ErrorKind.MISSING_START_DELIMITER)
            state = _State.READING_BODY
        elif state is _State.READING_BODY:
            if byte == protocol.FLAG:
                state = _State.DONE
                break
            if len(body) + 2 >= limit:
                raise FrameTooLargeError(len(body) + 3, limit)
            body.append(byte)
        else:
            raise AssertionError(f'Invalid decoder state: {state}')

    if state is _State.EXPECT_START:
        raise DecodeError(ErrorKind.MISSING_START_DELIMITER)
    if state is _State.READING_BODY:
        raise DecodeError(ErrorKind.UNTERMINATED_FRAME)

    if end < len(frame):
        _LOG.debug('Ignoring %d B after the end of the frame',
                   len(frame) - end)

    return _check_body(bytes(body), max_payload_size)


class Frame:
    """Represents a frame found in a byte stream."""
    def __init__(self,
                 raw_encoded: bytes,
                 payload: bytes = b'',
                 error: Optional[DecodeError] = None):
        """Creates a frame.

        Arguments:
            raw_encoded: The stuffed frame body, excluding flag bytes.
            payload: The decoded payload; empty if decoding failed.
            error: Why decoding failed, or None for a valid frame.
        """
        self.raw_encoded = raw_encoded
        self.payload = payload
        self.error = error

    def ok(self) -> bool:
        """True if this represents a valid frame."""
        return self.error is None

    def __repr__(self) -> str:
        if self.ok():
            body = f'payload={self.payload!r}'
        else:
            body = str(self.error)

        return f'{type(self).__name__}({body})'


class _StreamState(enum.Enum):
    INTERFRAME = 0
    FRAME = 1
    OVERFLOW = 2


class FrameDecoder:
    """Splits a stream of received data into SHDLC frames.

    After a bad frame, decoding resumes at the next flag byte.
    """
    def __init__(self, max_payload_size: int = protocol.MAX_PAYLOAD_SIZE):
        self._max_payload_size = protocol.check_max_payload_size(
            max_payload_size)
        self._max_body_size = protocol.max_frame_size(max_payload_size) - 2
        self._raw_data = bytearray()
        self._discarded = 0
        self._state = _StreamState.INTERFRAME

    def process(self, data: bytes) -> Iterator[Frame]:
        """Decodes and yields frames, including corrupt frames.

        The ok() method on Frame indicates whether it is valid or represents a
        frame decoding error.

        Yields:
          Frames, which may be valid (frame.ok()) or corrupt (!frame.ok())
        """
        for byte in data:
            frame = self._process_byte(byte)
            if frame:
                yield frame

    def process_valid_frames(self, data: bytes) -> Iterator[Frame]:
        """Decodes and yields valid frames, logging any errors."""
        for frame in self.process(data):
            if frame.ok():
                yield frame
            else:
                _LOG.warning('Failed to decode frame: %s; discarded %d bytes',
                             frame.error, len(frame.raw_encoded))
                _LOG.debug('Discarded data: %s', frame.raw_encoded)

    def _finish_frame(self) -> Frame:
        raw = bytes(self._raw_data)
        self._raw_data.clear()

        try:
            payload = decode_frame(_FLAG + raw + _FLAG,
                                   self._max_payload_size)
        except DecodeError as err:
            return Frame(raw, error=err)

        return Frame(raw, payload)

    def _process_byte(self, byte: int) -> Optional[Frame]:
        frame: Optional[Frame] = None

        if self._state is _StreamState.INTERFRAME:
            if byte == protocol.FLAG:
                if self._discarded:
                    _LOG.debug('Discarded %d B before the frame',
                               self._discarded)
                    self._discarded = 0
                self._state = _StreamState.FRAME
            else:
                self._discarded += 1
        elif self._state is _StreamState.FRAME:
            if byte == protocol.FLAG:
                # Empty frames are ignored; the flag may also open a frame.
                if self._raw_data:
                    frame = self._finish_frame()
            elif len(self._raw_data) >= self._max_body_size:
                frame = Frame(
                    bytes(self._raw_data),
                    error=FrameTooLargeError(
                        len(self._raw_data) + 1, self._max_body_size))
                self._raw_data.clear()
                self._state = _StreamState.OVERFLOW
            else:
                self._raw_data.append(byte)
        elif self._state is _StreamState.OVERFLOW:
            if byte == protocol.FLAG:
                self._state = _StreamState.FRAME
        else:
            raise AssertionError(f'Invalid decoder state: {self._state}')

        return frame
