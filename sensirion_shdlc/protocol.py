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
"""Module for low-level SHDLC protocol features."""

from sensirion_shdlc.errors import DecodeError, ErrorKind

# Special flag character for delimiting SHDLC frames.
FLAG = 0x7E

# Special character for escaping other special characters in a frame.
ESCAPE = 0x7D

# Software flow control characters, which are also escaped.
XON = 0x11
XOFF = 0x13

ESCAPE_MASK = 0x20

RESERVED_BYTES = frozenset((FLAG, ESCAPE, XON, XOFF))

# Address, command, length and up to 255 data bytes.
MAX_PAYLOAD_SIZE = 258


def max_frame_size(max_payload_size: int = MAX_PAYLOAD_SIZE) -> int:
    """Largest encoded frame for a payload limit: every byte escaped."""
    return 2 + 2 * (max_payload_size + 1)


MAX_FRAME_SIZE = max_frame_size()


def check_max_payload_size(max_payload_size: int) -> int:
    """Raises ValueError unless the limit is within 0 to MAX_PAYLOAD_SIZE."""
    if (not isinstance(max_payload_size, int)
            or isinstance(max_payload_size, bool)
            or not 0 <= max_payload_size <= MAX_PAYLOAD_SIZE):
        raise ValueError(f'max_payload_size must be an integer from 0 to '
                         f'{MAX_PAYLOAD_SIZE}, not {max_payload_size!r}')
    return max_payload_size


def escape(byte: int) -> int:
    """Escapes or unescapes a byte, which should have been preceeded by 0x7d."""
    return byte ^ ESCAPE_MASK


def checksum(data: bytes) -> int:
    """Inverted low byte of the sum of all bytes."""
    return ~sum(data) & 0xFF


def stuff(data: bytes) -> bytes:
    """Replaces every reserved byte with an escape sequence."""
    # The escape character must go first so inserted escapes are not doubled.
    data = bytes(data)
    for byte in (ESCAPE, FLAG, XON, XOFF):
        data = data.replace(bytes([byte]), bytes([ESCAPE, escape(byte)]))
    return data


def unstuff(data: bytes) -> bytes:
    """Reverses stuff().

    Any byte may follow an escape character; it is unescaped without checking
    that the result is a reserved byte, since conformant peers accept such
    sequences.

    Raises:
      DecodeError: the data ends with an escape character
    """
    output = bytearray()
    stream = iter(data)

    for byte in stream:
        if byte == ESCAPE:
            escaped = next(stream, None)
            if escaped is None:
                raise DecodeError(ErrorKind.TRUNCATED_ESCAPE)
            output.append(escape(escaped))
        else:
            output.append(byte)

    return bytes(output)
