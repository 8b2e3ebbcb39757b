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
Borsh enums are written as a 1-byte variant index followed by the variant's fields, if it has any.

Values are single-key mappings from the variant name to its fields: `{'Active': {'since': 10}}` for named fields,
`{'Pair': (1, 2)}` for positional fields and `{'Empty': None}` for unit variants. A unit variant can also be given as
its bare name, `'Empty'`, but it is always decoded as a mapping.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Optional

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.encoding.int import decode_int, encode_int

MAX_VARIANTS = 256


class EnumVariant(NamedTuple):
    name: str
    # None for unit variants
    fields: Optional[Layout]


class EnumLayout(Layout[dict[str, Any]]):
    __slots__ = ('_variants', '_indexes')

    _variants: tuple[EnumVariant, ...]
    _indexes: dict[str, int]

    def __init__(self, variants: Iterable[EnumVariant]) -> None:
        self._variants = tuple(variants)
        if len(self._variants) > MAX_VARIANTS:
            raise ValueError(f'enum has {len(self._variants)} variants, the limit is {MAX_VARIANTS}')
        self._indexes = {variant.name: index for index, variant in enumerate(self._variants)}

    @property
    def variant_names(self) -> tuple[str, ...]:
        return tuple(variant.name for variant in self._variants)

    @override
    def static_size(self) -> int:
        variant_sizes = [variant.fields.static_size() for variant in self._variants if variant.fields is not None]
        return 1 + max(variant_sizes, default=0)

    def _split_value(self, value: str | Mapping[str, Any]) -> tuple[int, Any]:
        """Get the variant index and the fields value out of an enum value."""
        if isinstance(value, str):
            name, fields_value = value, None
        elif isinstance(value, Mapping):
            if len(value) != 1:
                raise TypeError('expected exactly one variant')
            (name, fields_value), = value.items()
        else:
            raise TypeError('expected variant name or mapping of variant name to fields')
        index = self._indexes.get(name)
        if index is None:
            raise ValueError(f'unknown variant: {name}')
        variant = self._variants[index]
        if variant.fields is None and fields_value not in (None, {}, ()):
            raise TypeError(f'variant {name} has no fields')
        if variant.fields is not None and fields_value is None:
            raise TypeError(f'variant {name} requires fields')
        return index, fields_value

    @override
    def _check_value(self, value: str | Mapping[str, Any], /, *, deep: bool) -> None:
        index, fields_value = self._split_value(value)
        fields_layout = self._variants[index].fields
        if deep and fields_layout is not None:
            fields_layout._check_value(fields_value, deep=True)

    @override
    def _encode(self, serializer: Serializer, value: str | Mapping[str, Any], /) -> None:
        index, fields_value = self._split_value(value)
        encode_int(serializer, index, length=1, signed=False)
        fields_layout = self._variants[index].fields
        if fields_layout is not None:
            fields_layout.encode(serializer, fields_value)

    @override
    def _decode(self, deserializer: Deserializer, /) -> dict[str, Any]:
        index = decode_int(deserializer, length=1, signed=False)
        if index >= len(self._variants):
            raise ValueError(f'invalid variant index: {index}')
        variant = self._variants[index]
        if variant.fields is None:
            return {variant.name: None}
        return {variant.name: variant.fields.decode(deserializer)}
