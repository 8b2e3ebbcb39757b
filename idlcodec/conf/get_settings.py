# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from idlcodec.conf.settings import CodecSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'IDLCODEC_CONFIG_YAML'
DEFAULT_SETTINGS_FILEPATH = str(Path(__file__).parent / 'default.yml')


class _SettingsMetadata(NamedTuple):
    source: str
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """ Return the settings shared by the whole process.

    The yaml file is taken from the environment variable `IDLCODEC_CONFIG_YAML`, when it is not set the packaged
    defaults are used. The file is loaded only once, the environment can't point to another file afterwards.
    """
    source = os.environ.get(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(source)


def _load_settings_singleton(source: str) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    _settings_singleton = _SettingsMetadata(source=source, settings=load_yaml_settings(source))
    return _settings_singleton.settings


def load_yaml_settings(filepath: str) -> CodecSettings:
    """ Load and validate a settings yaml file.

    The file may use the `extends` key, relative names are also looked up next to the packaged defaults.
    """
    from idlcodec.utils.yaml import model_from_extended_yaml
    settings = model_from_extended_yaml(CodecSettings, filepath=filepath, fallback_root=Path(__file__).parent)
    logger.debug('settings loaded', source=filepath, settings=settings.model_dump())
    return settings
