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

from typing_extensions import override

from idlcodec.layout.layout import Layout
from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.encoding.bytes import LENGTH_PREFIX_SIZE, decode_bytes, encode_bytes
from idlcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
from idlcodec.types import Pubkey


class BytesLayout(Layout[bytes]):
    """ Represents variable length `bytes` values, prefixed by their length.
    """

    @override
    def static_size(self) -> int:
        return LENGTH_PREFIX_SIZE

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError('expected bytes type')

    @override
    def _encode(self, serializer: Serializer, value: bytes, /) -> None:
        encode_bytes(serializer, bytes(value))

    @override
    def _decode(self, deserializer: Deserializer, /) -> bytes:
        return decode_bytes(deserializer)


class StrLayout(Layout[str]):
    """ Represents `str` values, utf-8 encoded and prefixed by their length in bytes.
    """

    @override
    def static_size(self) -> int:
        return LENGTH_PREFIX_SIZE

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str type')

    @override
    def _encode(self, serializer: Serializer, value: str, /) -> None:
        encode_utf8(serializer, value)

    @override
    def _decode(self, deserializer: Deserializer, /) -> str:
        return decode_utf8(deserializer)


class PubkeyLayout(Layout[Pubkey]):
    """ Represents a public key, exactly 32 raw bytes and no prefix.

    Values can be given as `Pubkey`, as 32 `bytes` or as a base58 `str`, they are always decoded as `Pubkey`.
    """

    @override
    def static_size(self) -> int:
        return Pubkey.LENGTH

    def _filter_in(self, value: Pubkey | bytes | str, /) -> Pubkey:
        """Mechanism to convert accepted values into Pubkey before serializing."""
        if isinstance(value, Pubkey):
            return value
        if isinstance(value, str):
            return Pubkey.from_base58(value)
        return Pubkey(value)

    @override
    def _check_value(self, value: Pubkey | bytes | str, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray, str)):
            raise TypeError(f'expected pubkey, not {type(value)}')
        # raises ValueError for bad base58 or wrong length
        self._filter_in(value)

    @override
    def _encode(self, serializer: Serializer, value: Pubkey | bytes | str, /) -> None:
        serializer.write_bytes(self._filter_in(value))

    @override
    def _decode(self, deserializer: Deserializer, /) -> Pubkey:
        return Pubkey(deserializer.read_bytes(Pubkey.LENGTH))
