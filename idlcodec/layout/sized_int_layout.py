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

r"""
Layouts for Borsh integers, from `u8`/`i8` up to `u256`/`i256`.

Each concrete class fixes its width and signedness as class arguments:

>>> U16Layout.value_range()
range(0, 65536)
>>> I8Layout().to_bytes(-1)
b'\xff'
"""

from __future__ import annotations

from typing import Any, ClassVar

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.encoding.int import decode_int, encode_int, int_range


class _SizedIntLayout(Layout[int]):
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    def __init_subclass__(cls, *, signed: bool, byte_size: int, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._signed = signed
        cls._byte_size = byte_size

    @classmethod
    def value_range(cls) -> range:
        return int_range(cls._byte_size, cls._signed)

    @override
    def static_size(self) -> int:
        return self._byte_size

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # bool is a subclass of int but never a valid integer field
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('expected integer')
        value_range = self.value_range()
        if value not in value_range:
            raise ValueError(f'{value} is out of range [{value_range.start}, {value_range.stop - 1}]')

    @override
    def _encode(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _decode(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class U8Layout(_SizedIntLayout, signed=False, byte_size=1):
    pass


class I8Layout(_SizedIntLayout, signed=True, byte_size=1):
    pass


class U16Layout(_SizedIntLayout, signed=False, byte_size=2):
    pass


class I16Layout(_SizedIntLayout, signed=True, byte_size=2):
    pass


class U32Layout(_SizedIntLayout, signed=False, byte_size=4):
    pass


class I32Layout(_SizedIntLayout, signed=True, byte_size=4):
    pass


class U64Layout(_SizedIntLayout, signed=False, byte_size=8):
    pass


class I64Layout(_SizedIntLayout, signed=True, byte_size=8):
    pass


class U128Layout(_SizedIntLayout, signed=False, byte_size=16):
    pass


class I128Layout(_SizedIntLayout, signed=True, byte_size=16):
    pass


class U256Layout(_SizedIntLayout, signed=False, byte_size=32):
    pass


class I256Layout(_SizedIntLayout, signed=True, byte_size=32):
    pass
