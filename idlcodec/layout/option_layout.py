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

from typing import ClassVar, TypeVar

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.compound_encoding.optional import decode_optional, encode_optional

V = TypeVar('V')


class OptionLayout(Layout[V | None]):
    """ Represents a value that is either `V` or `None`, with a 1-byte presence tag.
    """

    __slots__ = ('_value',)

    _tag_length: ClassVar[int] = 1
    _value: Layout[V]

    def __init__(self, layout: Layout[V]) -> None:
        self._value = layout

    @override
    def static_size(self) -> int:
        return self._tag_length + self._value.static_size()

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _encode(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.encode, tag_length=self._tag_length)

    @override
    def _decode(self, deserializer: Deserializer, /) -> V | None:
        return decode_optional(deserializer, self._value.decode, tag_length=self._tag_length)


class COptionLayout(OptionLayout[V]):
    """ Same as OptionLayout, but the presence tag is a 4-byte little-endian integer.

    When the value is `None` only the tag is written, nothing is reserved for the absent value.
    """

    _tag_length = 4
