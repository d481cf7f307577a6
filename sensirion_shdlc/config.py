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
"""YAML settings for the sensirion_shdlc command line tool.

Settings are read from these files in order, later files overriding earlier
ones:

1. ``.sensirion_shdlc.yaml`` in the current directory
2. ``~/.sensirion_shdlc.yaml``

If ``SENSIRION_SHDLC_CONFIG_FILE`` names a file, only that file is loaded.

::

   ---
   config_title: sensirion_shdlc
   max_payload_size: 64
   log_level: DEBUG
   color: false
"""

import enum
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from sensirion_shdlc import protocol

_LOG = logging.getLogger(__package__)

CONFIG_TITLE = 'sensirion_shdlc'
ENVIRONMENT_VAR = 'SENSIRION_SHDLC_CONFIG_FILE'
PROJECT_FILE = Path('.sensirion_shdlc.yaml')
USER_FILE = Path('~/.sensirion_shdlc.yaml')

_DEFAULT_CONFIG: Dict[str, Any] = {
    'max_payload_size': protocol.MAX_PAYLOAD_SIZE,
    'log_level': 'INFO',
    'color': True,
}


class MissingConfigTitle(Exception):
    """Exception for when an existing YAML file is missing config_title."""


class Stage(enum.Enum):
    DEFAULT = 0
    PROJECT_FILE = 1
    USER_FILE = 2
    ENVIRONMENT_VAR_FILE = 3
    OUT_OF_BAND = 4


class ShdlcPrefs:
    """Settings loaded from YAML config files."""
    def __init__(self,
                 project_file: Optional[Path] = PROJECT_FILE,
                 user_file: Optional[Path] = USER_FILE,
                 environment_var: Optional[str] = ENVIRONMENT_VAR) -> None:
        self._config: Dict[str, Any] = {}
        self.reset_config()

        for path, stage in ((project_file, Stage.PROJECT_FILE),
                            (user_file, Stage.USER_FILE)):
            if path is not None:
                self.load_config_file(_expand(path), stage)

        if environment_var is None:
            return
        environment_config = os.environ.get(environment_var)
        if environment_config:
            env_file_path = Path(environment_config)
            if not env_file_path.is_file():
                raise FileNotFoundError(
                    f'Cannot load config file: {env_file_path}')
            self.reset_config()
            self.load_config_file(env_file_path, Stage.ENVIRONMENT_VAR_FILE)

    def reset_config(self) -> None:
        self._config = dict(_DEFAULT_CONFIG)

    def load_config_file(self,
                         file_path: Path,
                         stage: Stage = Stage.OUT_OF_BAND) -> None:
        """Load a config file and extract the sensirion_shdlc section."""
        if not file_path.is_file():
            return

        for cfg in yaml.safe_load_all(file_path.read_text()):
            if not cfg:
                continue
            if not isinstance(cfg, dict):
                raise ValueError(
                    f'The config file "{file_path}" must contain a mapping, '
                    f'not {type(cfg).__name__}')
            if CONFIG_TITLE in cfg:
                section = cfg[CONFIG_TITLE]
            elif cfg.get('config_title') == CONFIG_TITLE:
                section = {k: v for k, v in cfg.items() if k != 'config_title'}
            else:
                raise MissingConfigTitle(
                    f'\n\nThe config file "{file_path}" is missing the '
                    f'expected "config_title: {CONFIG_TITLE}" setting.')

            if section is None:
                section = {}
            if not isinstance(section, dict):
                raise ValueError(
                    f'The "{CONFIG_TITLE}" section in "{file_path}" must be '
                    f'a mapping, not {type(section).__name__}')

            _LOG.debug('Loaded %s settings from %s', stage.name, file_path)
            self._config.update(section)

    @property
    def max_payload_size(self) -> int:
        value = self._config['max_payload_size']
        if (not isinstance(value, int) or isinstance(value, bool)
                or not 0 < value <= protocol.MAX_PAYLOAD_SIZE):
            raise ValueError(
                f'max_payload_size must be an integer from 1 to '
                f'{protocol.MAX_PAYLOAD_SIZE}, not {value!r}')
        return value

    @property
    def log_level(self) -> int:
        value = self._config['log_level']
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        level = logging.getLevelName(str(value).upper())
        if not isinstance(level, int):
            raise ValueError(f'Unknown log_level {value!r}')
        return level

    @property
    def color(self) -> bool:
        return bool(self._config['color'])


def _expand(path: Path) -> Path:
    return Path(os.path.expandvars(str(path.expanduser())))
