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
from typing import NamedTuple, Optional, Union

from structlog import get_logger

from xmlrpc_codec.conf import CONFIG_YAML_ENV_VAR
from xmlrpc_codec.conf.settings import CodecSettings

logger = get_logger()


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the process-wide codec settings.

    The settings are loaded from the yaml filepath in the 'XMLRPC_CODEC_CONFIG_YAML' env var. If it is not set the
    defaults of `CodecSettings` are used.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, `None` when the defaults are in use.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def load_settings_from_yaml(filepath: Union[Path, str]) -> CodecSettings:
    """Load and validate settings from a yaml file, without touching the process-wide settings."""
    from xmlrpc_codec.utils.yaml import model_from_yaml
    return model_from_yaml(CodecSettings, filepath=filepath)


def _load_settings_singleton(source: Optional[str]) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    if source is None:
        settings = CodecSettings()
    else:
        logger.info('loading codec settings', source=source)
        settings = load_settings_from_yaml(source)

    # concurrent first calls may build this twice, the results are equal and immutable
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings
