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

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from idlcodec.serialization import Buffer, Deserializer, Serializer

T = TypeVar('T')


class Layout(ABC, Generic[T]):
    """ This class models how a value of one IDL type is (de)serialized.

    A layout is compiled once from a type definition (see `idlcodec.layout.compiler`) and is immutable afterwards, so
    the same instance can be shared by every call that encodes or decodes that type. Compound layouts (structs, enums,
    options, vectors, arrays) hold the layouts of their inner types.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError or ValueError if the value cannot be encoded with this layout.

        The check recurses into compound values, so a struct checks all of its fields.
        """
        # XXX: subclasses must implement Layout._check_value, not Layout.check_value
        self._check_value(value, deep=True)

    @final
    def encode(self, serializer: Serializer, value: T, /) -> int:
        """ Encode a value and return how many bytes were written.

        The value is "shallow checked" before anything is written for it, compound layouts encode inner values with
        `Layout.encode` so each of them is checked in turn.
        """
        # XXX: subclasses must implement Layout._encode, not Layout.encode
        self._check_value(value, deep=False)
        start = serializer.cur_pos()
        self._encode(serializer, value)
        return serializer.cur_pos() - start

    @final
    def decode(self, deserializer: Deserializer, /) -> T:
        """ Decode a value, consuming only the bytes that belong to it.

        Decoders are expected to always produce valid values, the shallow check after decoding is only a double check.
        """
        # XXX: subclasses must implement Layout._decode, not Layout.decode
        value = self._decode(deserializer)
        self._check_value(value, deep=False)
        return value

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.encode(serializer, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes`, all bytes must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.decode(deserializer)
        deserializer.finalize()
        return value

    @abstractmethod
    def static_size(self) -> int:
        """ Size in bytes of the smallest encoding of this type.

        For fixed-size types it is the exact size. Variable-length types (bytes, strings, vectors) count only their
        length prefix, which is the size of their empty value.
        """
        raise NotImplementedError

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Layout.check_value`.

        Compound layouts should use `Layout._check_value` on the inner layouts instead of `Layout.check_value` and pass
        the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _encode(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `encode`, you can assume that the given value has been "shallow checked".
        """
        raise NotImplementedError

    @abstractmethod
    def _decode(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `decode`.
        """
        raise NotImplementedError
