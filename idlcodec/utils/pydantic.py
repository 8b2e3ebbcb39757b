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

from typing import Annotated, Any

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator


def _to_bytes(value: Any) -> bytes:
    """Convert a list of byte values or a hex string to bytes, or pass through if already bytes."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return bytes.fromhex(value)
    if isinstance(value, (list, tuple)):
        # bytes() raises ValueError for items outside 0..255
        return bytes(value)
    raise ValueError(f'Expected a list of bytes or hex string, got {type(value).__name__}')


def _bytes_to_list(value: bytes) -> list[int]:
    """Convert bytes to a list of ints, the way IDL files store byte arrays."""
    return list(value)


# Byte strings stored in JSON as arrays of ints, like `"discriminator": [1, 2, 3]`.
#
# Behavior:
#     - Deserialization: accepts bytes, a list of ints or a hex str
#     - Serialization: always outputs a list of ints
ByteArray = Annotated[
    bytes,
    BeforeValidator(_to_bytes),
    PlainSerializer(_bytes_to_list, return_type=list[int]),
]


class BaseModel(PydanticBaseModel):
    """ Base for every model in the project: instances are immutable and unknown keys are rejected.

    Loading an IDL or a settings file with a misspelled key raises `ValidationError`.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)
