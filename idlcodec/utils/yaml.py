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

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel
from structlog import get_logger

from idlcodec.utils.dict import merge_dicts

logger = get_logger()

EXTENDS_KEY = 'extends'

M = TypeVar('M', bound=BaseModel)


def read_yaml_dict(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that holds a mapping, an empty file is an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{path}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{path}' cannot be parsed as a dictionary")
    return contents


def read_extended_yaml_dict(filepath: Union[Path, str], *, fallback_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Read a yaml file that can extend another one through the `extends` key.

    The `extends` value is a path relative to the extending file, or an absolute path. When it can't be found next to
    the extending file it is looked up under `fallback_root`, so user files can extend the packaged defaults by name.
    Values of the extending file take precedence, nested mappings are merged key by key.

    The `extends` key itself is never present in the result.
    """
    return _read_extended_yaml_dict(Path(filepath), fallback_root, ())


def _read_extended_yaml_dict(path: Path, fallback_root: Optional[Path], chain: tuple[Path, ...]) -> dict[str, Any]:
    resolved = path.resolve()
    if resolved in chain:
        raise ValueError(f"'{path}' extends itself")

    contents = read_yaml_dict(path)
    base_name = contents.pop(EXTENDS_KEY, None)
    if not base_name:
        return contents

    base_path = path.parent / str(base_name)
    if not base_path.is_file() and fallback_root is not None:
        base_path = fallback_root / str(base_name)

    logger.debug('extending yaml', path=str(path), base=str(base_path))
    base = _read_extended_yaml_dict(base_path, fallback_root, chain + (resolved,))
    return merge_dicts(base, contents)


def model_from_extended_yaml(model: type[M], *, filepath: Union[Path, str], fallback_root: Optional[Path] = None) -> M:
    """Read an extended yaml file and validate it into the given pydantic model."""
    return model.model_validate(read_extended_yaml_dict(filepath, fallback_root=fallback_root))
