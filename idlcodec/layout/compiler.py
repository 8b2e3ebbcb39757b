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
Compile IDL type definitions into layouts.

Type references are resolved by name against the full list of type definitions, each reference is compiled into a new
layout, so two fields of the same defined type hold two equivalent (but distinct) layouts. Recursive definitions can't
have a static layout in Borsh without indirection, so they are rejected.
"""

from __future__ import annotations

from typing import Optional

from idlcodec.exception import LayoutError, SchemaError
from idlcodec.idl import (
    Idl,
    IdlDefinedFields,
    IdlField,
    IdlType,
    IdlTypeArray,
    IdlTypeCOption,
    IdlTypeDef,
    IdlTypeDefined,
    IdlTypeDefTyEnum,
    IdlTypeDefTyStruct,
    IdlTypeDefTyType,
    IdlTypeOption,
    IdlTypeVec,
    find_type_def,
)
from idlcodec.layout.bytes_layout import BytesLayout, PubkeyLayout, StrLayout
from idlcodec.layout.collection_layout import ArrayLayout, VecLayout
from idlcodec.layout.enum_layout import EnumLayout, EnumVariant
from idlcodec.layout.layout import Layout
from idlcodec.layout.option_layout import COptionLayout, OptionLayout
from idlcodec.layout.scalar_layout import BoolLayout, F32Layout, F64Layout
from idlcodec.layout.sized_int_layout import (
    I8Layout,
    I16Layout,
    I32Layout,
    I64Layout,
    I128Layout,
    I256Layout,
    U8Layout,
    U16Layout,
    U32Layout,
    U64Layout,
    U128Layout,
    U256Layout,
)
from idlcodec.layout.struct_layout import StructLayout, TupleStructLayout
from idlcodec.serialization.encoding.bytes import LENGTH_PREFIX_SIZE

# Mapping between primitive type names and Layout classes, all of them are built without arguments.
PRIMITIVE_LAYOUT_MAP: dict[str, type[Layout]] = {
    'bool': BoolLayout,
    'u8': U8Layout,
    'i8': I8Layout,
    'u16': U16Layout,
    'i16': I16Layout,
    'u32': U32Layout,
    'i32': I32Layout,
    'f32': F32Layout,
    'u64': U64Layout,
    'i64': I64Layout,
    'f64': F64Layout,
    'u128': U128Layout,
    'i128': I128Layout,
    'u256': U256Layout,
    'i256': I256Layout,
    'bytes': BytesLayout,
    'string': StrLayout,
    'pubkey': PubkeyLayout,
}


def type_def_layout(type_def: IdlTypeDef, types: list[IdlTypeDef]) -> Layout:
    """ Build the layout of a type definition, any type it refers to is looked up in `types`.

    Raises `LayoutError` when the definition (or anything it refers to) can't be compiled: unknown type names,
    generics, recursive definitions or a serialization other than borsh.
    """
    return _type_def_layout(type_def, types, frozenset())


def type_layout(ty: IdlType, types: list[IdlTypeDef]) -> Layout:
    """Build the layout of a type reference, like the type of a single field."""
    return _type_layout(ty, types, frozenset())


def _type_def_layout(type_def: IdlTypeDef, types: list[IdlTypeDef], seen: frozenset[str]) -> Layout:
    if type_def.serialization != 'borsh':
        raise LayoutError(f'unsupported serialization for {type_def.name}: {type_def.serialization}')
    if type_def.generics:
        raise LayoutError(f'generic types are not supported: {type_def.name}')
    seen = seen | {type_def.name}
    ty = type_def.type
    match ty:
        case IdlTypeDefTyStruct():
            return _fields_layout(ty.fields or [], types, seen)
        case IdlTypeDefTyEnum():
            variants = []
            for variant in ty.variants:
                fields_layout = _fields_layout(variant.fields, types, seen) if variant.fields else None
                variants.append(EnumVariant(variant.name, fields_layout))
            try:
                return EnumLayout(variants)
            except ValueError as e:
                raise LayoutError(f'{type_def.name}: {e}') from e
        case IdlTypeDefTyType():
            return _type_layout(ty.alias, types, seen)
        case _:
            raise LayoutError(f'unsupported type definition kind for {type_def.name}')


def _fields_layout(fields: IdlDefinedFields, types: list[IdlTypeDef], seen: frozenset[str]) -> Layout:
    # XXX: an empty list is a unit struct, it is compiled as a struct with no named fields
    if not fields or isinstance(fields[0], IdlField):
        return StructLayout((field.name, _type_layout(field.type, types, seen)) for field in fields)
    else:
        return TupleStructLayout(_type_layout(item, types, seen) for item in fields)


def _type_layout(ty: IdlType, types: list[IdlTypeDef], seen: frozenset[str]) -> Layout:
    match ty:
        case str():
            layout_class = PRIMITIVE_LAYOUT_MAP.get(ty)
            if layout_class is None:
                raise LayoutError(f'unsupported primitive type: {ty}')
            return layout_class()
        case IdlTypeOption():
            return OptionLayout(_type_layout(ty.option, types, seen))
        case IdlTypeCOption():
            return COptionLayout(_type_layout(ty.coption, types, seen))
        case IdlTypeVec():
            return VecLayout(_type_layout(ty.vec, types, seen))
        case IdlTypeArray():
            item, length = ty.array
            return ArrayLayout(_type_layout(item, types, seen), length)
        case IdlTypeDefined():
            name = ty.defined.name
            if ty.defined.generics:
                raise LayoutError(f'generic arguments are not supported: {name}')
            if name in seen:
                raise LayoutError(f'recursive type: {name}')
            type_def = find_type_def(types, name)
            if type_def is None:
                raise LayoutError(f'type not found: {name}')
            return _type_def_layout(type_def, types, seen)
        case _:
            raise LayoutError(f'unsupported type: {ty!r}')


def type_size(ty: IdlType, idl: Idl) -> int:
    """ Size in bytes of the smallest encoding of a type, computed from the IDL alone.

    The result is the same as `Layout.static_size()` of the compiled layout, but nothing is compiled: the type
    definitions are walked directly, so it also works for types whose layout was never built. Raises `SchemaError`
    if a referenced type is not defined.

    >>> type_size('u64', Idl())
    8
    >>> type_size(IdlTypeArray(array=('u16', 3)), Idl())
    6
    """
    return _type_size(ty, idl.types or [], frozenset())


def _type_size(ty: IdlType, types: list[IdlTypeDef], seen: frozenset[str]) -> int:
    match ty:
        case str():
            layout_class = PRIMITIVE_LAYOUT_MAP.get(ty)
            if layout_class is None:
                raise SchemaError(f'unsupported primitive type: {ty}')
            return layout_class().static_size()
        case IdlTypeOption():
            return 1 + _type_size(ty.option, types, seen)
        case IdlTypeCOption():
            return 4 + _type_size(ty.coption, types, seen)
        case IdlTypeVec():
            return LENGTH_PREFIX_SIZE
        case IdlTypeArray():
            item, length = ty.array
            return _type_size(item, types, seen) * length
        case IdlTypeDefined():
            name = ty.defined.name
            if name in seen:
                raise SchemaError(f'recursive type: {name}')
            type_def = find_type_def(types, name)
            if type_def is None:
                raise SchemaError(f'type not found: {name}')
            return _type_def_size(type_def, types, seen | {name})
        case _:
            raise SchemaError(f'unsupported type: {ty!r}')


def _type_def_size(type_def: IdlTypeDef, types: list[IdlTypeDef], seen: frozenset[str]) -> int:
    ty = type_def.type
    match ty:
        case IdlTypeDefTyStruct():
            return _fields_size(ty.fields, types, seen)
        case IdlTypeDefTyEnum():
            return 1 + max((_fields_size(variant.fields, types, seen) for variant in ty.variants), default=0)
        case IdlTypeDefTyType():
            return _type_size(ty.alias, types, seen)
        case _:
            raise SchemaError(f'unsupported type definition kind for {type_def.name}')


def _fields_size(fields: Optional[IdlDefinedFields], types: list[IdlTypeDef], seen: frozenset[str]) -> int:
    total = 0
    for field in fields or ():
        ty = field.type if isinstance(field, IdlField) else field
        total += _type_size(ty, types, seen)
    return total
