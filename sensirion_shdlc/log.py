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
"""Tools for configuring Python logging."""

import logging
from pathlib import Path
from typing import Optional, Union

import coloredlogs  # type: ignore

_FORMAT = '%(asctime)s %(levelname)s %(message)s'
_DATE_FORMAT = '%Y%m%d %H:%M:%S'

_LEVEL_STYLES = {
    'debug': {
        'color': 244
    },
    'warning': {
        'color': 'yellow',
        'bold': True
    },
    'error': {
        'color': 'red'
    },
    'critical': {
        'color': 'red',
        'bold': True
    },
}


def install(level: int = logging.INFO,
            use_color: bool = True,
            log_file: Optional[Union[str, Path]] = None) -> None:
    """Configures the root logger for the sensirion_shdlc tool."""
    root = logging.getLogger()

    if use_color:
        coloredlogs.install(level=level,
                            logger=root,
                            fmt=_FORMAT,
                            datefmt=_DATE_FORMAT,
                            level_styles=_LEVEL_STYLES)
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        handler.setLevel(level)
        root.addHandler(handler)
        root.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        file_handler.setLevel(level)
        root.addHandler(file_handler)
