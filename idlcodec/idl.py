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

"""
Models for the Anchor IDL JSON format, limited to what the accounts coder needs.

An IDL declares accounts (a name plus the discriminator that tags its data) and type definitions (the structural
shape of each type). Accounts refer to their type definition by name:

    {
        "accounts": [{"name": "Counter", "discriminator": [1, 2, 3, 4, 5, 6, 7, 8]}],
        "types": [
            {"name": "Counter", "type": {"kind": "struct", "fields": [{"name": "count", "type": "u64"}]}}
        ]
    }

Instructions, events, errors and constants are accepted so that full IDL files can be loaded, but their content is
not interpreted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Optional, TypeAlias, Union

from pydantic import Field
from pydantic.functional_validators import BeforeValidator

from idlcodec.utils.pydantic import BaseModel, ByteArray

IdlTypePrimitive: TypeAlias = Literal[
    'bool',
    'u8',
    'i8',
    'u16',
    'i16',
    'u32',
    'i32',
    'f32',
    'u64',
    'i64',
    'f64',
    'u128',
    'i128',
    'u256',
    'i256',
    'bytes',
    'string',
    'pubkey',
]


def _defined_ref_from_str(value: Any) -> Any:
    """Older IDLs write `{"defined": "Name"}` instead of `{"defined": {"name": "Name"}}`."""
    if isinstance(value, str):
        return {'name': value}
    return value


class IdlDefinedRef(BaseModel):
    name: str
    # generic arguments are parsed so that such IDLs can be loaded, the layout compiler rejects them
    generics: list[Any] = []


class IdlTypeOption(BaseModel):
    option: IdlType


class IdlTypeCOption(BaseModel):
    coption: IdlType


class IdlTypeVec(BaseModel):
    vec: IdlType


class IdlTypeArray(BaseModel):
    array: tuple[IdlType, int]


class IdlTypeDefined(BaseModel):
    defined: Annotated[IdlDefinedRef, BeforeValidator(_defined_ref_from_str)]

    @classmethod
    def of(cls, name: str) -> IdlTypeDefined:
        """Reference to the type definition with the given name."""
        return cls(defined=IdlDefinedRef(name=name))


IdlType: TypeAlias = Union[
    IdlTypePrimitive,
    IdlTypeOption,
    IdlTypeCOption,
    IdlTypeVec,
    IdlTypeArray,
    IdlTypeDefined,
]


class IdlField(BaseModel):
    name: str
    type: IdlType
    docs: list[str] = []


# struct and enum variant fields are either all named, or all positional (tuple-like)
IdlDefinedFields: TypeAlias = Union[list[IdlField], list[IdlType]]


class IdlEnumVariant(BaseModel):
    name: str
    fields: Optional[IdlDefinedFields] = None


class IdlTypeDefTyStruct(BaseModel):
    kind: Literal['struct']
    fields: Optional[IdlDefinedFields] = None


class IdlTypeDefTyEnum(BaseModel):
    kind: Literal['enum']
    variants: list[IdlEnumVariant]


class IdlTypeDefTyType(BaseModel):
    kind: Literal['type']
    alias: IdlType


IdlTypeDefTy: TypeAlias = Annotated[
    Union[IdlTypeDefTyStruct, IdlTypeDefTyEnum, IdlTypeDefTyType],
    Field(discriminator='kind'),
]


class IdlTypeDef(BaseModel):
    name: str
    type: IdlTypeDefTy
    docs: list[str] = []
    serialization: str = 'borsh'
    repr_: Optional[dict[str, Any]] = Field(default=None, alias='repr')
    generics: list[Any] = []


class IdlAccount(BaseModel):
    name: str
    discriminator: ByteArray
    docs: list[str] = []


class Idl(BaseModel):
    address: Optional[str] = None
    metadata: dict[str, Any] = {}
    docs: list[str] = []
    instructions: list[Any] = []
    accounts: Optional[list[IdlAccount]] = None
    events: list[Any] = []
    errors: list[Any] = []
    types: Optional[list[IdlTypeDef]] = None
    constants: list[Any] = []

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Idl:
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, data: str | bytes) -> Idl:
        return cls.model_validate_json(data)

    @classmethod
    def from_file(cls, filepath: str | Path) -> Idl:
        """Load an IDL from a JSON file, like the ones `anchor build` writes to `target/idl/`."""
        return cls.from_json(Path(filepath).read_bytes())

    def find_account(self, name: str) -> Optional[IdlAccount]:
        """First declared account with the given name, if any."""
        for account in self.accounts or ():
            if account.name == name:
                return account
        return None


def find_type_def(types: list[IdlTypeDef], name: str) -> Optional[IdlTypeDef]:
    """First type definition with the given name, if any."""
    for type_def in types:
        if type_def.name == name:
            return type_def
    return None


IdlTypeOption.model_rebuild()
IdlTypeCOption.model_rebuild()
IdlTypeVec.model_rebuild()
IdlTypeArray.model_rebuild()
IdlField.model_rebuild()
IdlEnumVariant.model_rebuild()
IdlTypeDefTyStruct.model_rebuild()
IdlTypeDefTyEnum.model_rebuild()
IdlTypeDefTyType.model_rebuild()
IdlTypeDef.model_rebuild()
Idl.model_rebuild()
