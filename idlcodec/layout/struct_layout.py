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

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple


class StructLayout(Layout[dict[str, Any]]):
    """ Represents a struct with named fields, values are mappings from field name to field value.

    Fields are written in declaration order with no padding. Keys that are not fields are ignored when encoding, so a
    decoded value can be re-encoded after adding unrelated keys to it.
    """

    __slots__ = ('_fields',)

    _fields: dict[str, Layout]

    def __init__(self, fields: Iterable[tuple[str, Layout]]) -> None:
        # XXX: the order is important, `dict` keeps insertion order
        self._fields = dict(fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    @override
    def static_size(self) -> int:
        return sum(layout.static_size() for layout in self._fields.values())

    @override
    def _check_value(self, value: dict[str, Any], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise TypeError('expected mapping of field names to values')
        for field_name, field_layout in self._fields.items():
            if field_name not in value:
                raise TypeError(f'missing field: {field_name}')
            if deep:
                field_layout._check_value(value[field_name], deep=True)

    @override
    def _encode(self, serializer: Serializer, value: dict[str, Any], /) -> None:
        for field_name, field_layout in self._fields.items():
            field_layout.encode(serializer, value[field_name])

    @override
    def _decode(self, deserializer: Deserializer, /) -> dict[str, Any]:
        return {field_name: field_layout.decode(deserializer) for field_name, field_layout in self._fields.items()}


class TupleStructLayout(Layout[tuple[Any, ...]]):
    """ Represents a struct with positional fields, values are sequences with one item per field.
    """

    __slots__ = ('_fields',)

    _fields: tuple[Layout, ...]

    def __init__(self, fields: Iterable[Layout]) -> None:
        self._fields = tuple(fields)

    @override
    def static_size(self) -> int:
        return sum(layout.static_size() for layout in self._fields)

    @override
    def _check_value(self, value: tuple[Any, ...], /, *, deep: bool) -> None:
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
            raise TypeError('expected list or tuple')
        if len(value) != len(self._fields):
            raise TypeError(f'expected {len(self._fields)} fields, got {len(value)}')
        if deep:
            for item, field_layout in zip(value, self._fields):
                field_layout._check_value(item, deep=True)

    @override
    def _encode(self, serializer: Serializer, value: tuple[Any, ...], /) -> None:
        encode_tuple(serializer, value, tuple(field_layout.encode for field_layout in self._fields))

    @override
    def _decode(self, deserializer: Deserializer, /) -> tuple[Any, ...]:
        return decode_tuple(deserializer, tuple(field_layout.decode for field_layout in self._fields))
