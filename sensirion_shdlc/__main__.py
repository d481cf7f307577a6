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
"""Encodes and decodes Sensirion SHDLC frames from the command line.

  python -m sensirion_shdlc encode 00 7e 11
  python -m sensirion_shdlc decode 7e 00 7d 5e 7d 31 70 7e
  python -m sensirion_shdlc scan capture.bin
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional, TextIO

from sensirion_shdlc import log, protocol
from sensirion_shdlc.config import ShdlcPrefs
from sensirion_shdlc.decode import FrameDecoder, decode_frame
from sensirion_shdlc.encode import encode_frame
from sensirion_shdlc.errors import ShdlcError

_LOG = logging.getLogger('sensirion_shdlc')


def _hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value!r} is not valid hex')


def _max_payload_size(value: str) -> int:
    try:
        return protocol.check_max_payload_size(int(value))
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err))


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses and returns the command line arguments."""
    parser = argparse.ArgumentParser(
        prog='sensirion-shdlc',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--config',
                        type=Path,
                        help='YAML file to load settings from')
    parser.add_argument('--max-payload-size',
                        type=_max_payload_size,
                        help='largest payload to accept, in bytes')
    parser.add_argument('-v',
                        '--verbose',
                        action='store_true',
                        help='log debug messages')
    parser.add_argument('--no-color',
                        dest='color',
                        action='store_false',
                        default=None,
                        help='disable colored log output')
    parser.add_argument('--log-file', type=Path, help='also log to this file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode',
                                          help='print the frame for a payload')
    encode_parser.add_argument('data',
                               nargs='*',
                               type=_hex,
                               help='payload bytes as hex')

    decode_parser = subparsers.add_parser('decode',
                                          help='print the payload of a frame')
    decode_parser.add_argument('data',
                               nargs='+',
                               type=_hex,
                               help='frame bytes as hex')

    scan_parser = subparsers.add_parser(
        'scan', help='print every frame in a captured byte stream')
    scan_parser.add_argument('file',
                             type=Path,
                             help='binary file with received data')

    return parser.parse_args(argv)


def encode_command(data: bytes,
                   max_payload_size: int,
                   output: TextIO = sys.stdout) -> int:
    """Prints the encoded frame for a payload."""
    try:
        frame = encode_frame(data, max_payload_size)
    except ShdlcError as err:
        _LOG.error('Cannot encode %d B payload: %s', len(data), err)
        return 1

    print(frame.hex(' '), file=output)
    return 0


def decode_command(data: bytes,
                   max_payload_size: int,
                   output: TextIO = sys.stdout) -> int:
    """Prints the payload of an encoded frame."""
    try:
        payload = decode_frame(data, max_payload_size)
    except ShdlcError as err:
        _LOG.error('Cannot decode frame (%s): %s', err.kind.name, err)
        return 1

    print(payload.hex(' '), file=output)
    return 0


def scan_command(file: Path,
                 max_payload_size: int,
                 output: TextIO = sys.stdout) -> int:
    """Prints one line for each frame found in a binary file."""
    decoder = FrameDecoder(max_payload_size)
    failures = 0
    count = 0

    for count, frame in enumerate(decoder.process(file.read_bytes()), 1):
        if frame.ok():
            print(f'{count:4} ok    {frame.payload.hex(" ")}', file=output)
        else:
            failures += 1
            assert frame.error is not None
            print(f'{count:4} error {frame.error.kind.name}: {frame.error}',
                  file=output)

    _LOG.info('Found %d frames in %s; %d failed to decode', count, file,
              failures)
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    prefs = ShdlcPrefs()
    if args.config is not None:
        if not args.config.is_file():
            raise FileNotFoundError(f'Cannot load config file: {args.config}')
        prefs.load_config_file(args.config)

    log.install(logging.DEBUG if args.verbose else prefs.log_level,
                prefs.color if args.color is None else args.color,
                args.log_file)

    max_payload_size = (args.max_payload_size if args.max_payload_size
                        is not None else prefs.max_payload_size)

    if args.command == 'encode':
        return encode_command(b''.join(args.data), max_payload_size)
    if args.command == 'decode':
        return decode_command(b''.join(args.data), max_payload_size)
    return scan_command(args.file, max_payload_size)


if __name__ == '__main__':
    sys.exit(main())
