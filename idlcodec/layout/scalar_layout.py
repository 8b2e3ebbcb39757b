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

from typing import ClassVar

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.encoding.bool import decode_bool, encode_bool
from idlcodec.serialization.encoding.float import decode_float, encode_float


class BoolLayout(Layout[bool]):
    """ Represents `bool` values, 1 byte.
    """

    @override
    def static_size(self) -> int:
        return 1

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected boolean')

    @override
    def _encode(self, serializer: Serializer, value: bool, /) -> None:
        encode_bool(serializer, value)

    @override
    def _decode(self, deserializer: Deserializer, /) -> bool:
        return decode_bool(deserializer)


class _FloatLayout(Layout[float]):
    _byte_size: ClassVar[int]

    @override
    def static_size(self) -> int:
        return self._byte_size

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        # ints are accepted, like everywhere a float is expected in Python
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError('expected float')

    @override
    def _encode(self, serializer: Serializer, value: float, /) -> None:
        encode_float(serializer, float(value), length=self._byte_size)

    @override
    def _decode(self, deserializer: Deserializer, /) -> float:
        return decode_float(deserializer, length=self._byte_size)


class F32Layout(_FloatLayout):
    _byte_size = 4


class F64Layout(_FloatLayout):
    _byte_size = 8
