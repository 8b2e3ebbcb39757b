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

from collections.abc import Sequence
from typing import TypeVar

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.compound_encoding.collection import (
    decode_array,
    decode_collection,
    encode_array,
    encode_collection,
)
from idlcodec.serialization.encoding.bytes import LENGTH_PREFIX_SIZE

T = TypeVar('T')


class VecLayout(Layout[list[T]]):
    """ Represents a variable length sequence, prefixed by its item count. Decoded as `list`.
    """

    __slots__ = ('_item', '_item_size')

    _item: Layout[T]
    _item_size: int

    def __init__(self, item_layout: Layout[T], /) -> None:
        self._item = item_layout
        self._item_size = item_layout.static_size()

    @override
    def static_size(self) -> int:
        return LENGTH_PREFIX_SIZE

    @override
    def _check_value(self, value: list[T], /, *, deep: bool) -> None:
        # str and bytes are sequences too, but never what a vec means
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
            raise TypeError('expected list or tuple')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _encode(self, serializer: Serializer, value: list[T], /) -> None:
        encode_collection(serializer, value, self._item.encode, item_size=self._item_size)

    @override
    def _decode(self, deserializer: Deserializer, /) -> list[T]:
        return decode_collection(deserializer, self._item.decode, list, item_size=self._item_size)


class ArrayLayout(Layout[list[T]]):
    """ Represents a fixed length sequence, the length comes from the type so there is no prefix. Decoded as `list`.
    """

    __slots__ = ('_item', '_length')

    _item: Layout[T]
    _length: int

    def __init__(self, item_layout: Layout[T], length: int, /) -> None:
        if length < 0:
            raise ValueError('array length cannot be negative')
        self._item = item_layout
        self._length = length

    @override
    def static_size(self) -> int:
        return self._item.static_size() * self._length

    @override
    def _check_value(self, value: list[T], /, *, deep: bool) -> None:
        if not isinstance(value, Sequence) or isinstance(value, str):
            raise TypeError('expected list or tuple')
        if len(value) != self._length:
            raise ValueError(f'expected {self._length} items, got {len(value)}')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _encode(self, serializer: Serializer, value: list[T], /) -> None:
        encode_array(serializer, value, self._item.encode, length=self._length)

    @override
    def _decode(self, deserializer: Deserializer, /) -> list[T]:
        return decode_array(deserializer, self._item.decode, list, length=self._length)
