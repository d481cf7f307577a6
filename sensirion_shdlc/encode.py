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
"""Encoder functions for SHDLC frames."""

import logging
from typing import Any, Callable

from sensirion_shdlc import protocol
from sensirion_shdlc.errors import CapacityExceededError

_LOG = logging.getLogger('sensirion_shdlc')
_VERBOSE = logging.DEBUG - 1

_FLAG = bytes([protocol.FLAG])


def encode_frame(payload: bytes,
                 max_payload_size: int = protocol.MAX_PAYLOAD_SIZE) -> bytes:
    """Encodes a payload as a delimited, checksummed and stuffed frame.

    Raises:
      CapacityExceededError: the payload is longer than max_payload_size
      ValueError: max_payload_size is not an integer from 0 to MAX_PAYLOAD_SIZE
    """
    protocol.check_max_payload_size(max_payload_size)
    if len(payload) > max_payload_size:
        raise CapacityExceededError(len(payload), max_payload_size)

    body = bytes(payload) + bytes([protocol.checksum(payload)])
    return b''.join([_FLAG, protocol.stuff(body), _FLAG])


def write_frame(payload: bytes,
                write: Callable[[bytes], Any],
                max_payload_size: int = protocol.MAX_PAYLOAD_SIZE) -> None:
    """Encodes a payload and passes the frame to the provided write function."""
    frame = encode_frame(payload, max_payload_size)
    _LOG.log(_VERBOSE, 'Write %2d B: %s', len(frame), frame)
    write(frame)
