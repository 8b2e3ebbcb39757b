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
Read side of the serialization layer.

A `Deserializer` consumes a byte sequence from the front. Reads are exact: asking for more bytes than what is left
raises `OutOfDataError` and consumes nothing.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_deserializer import BytesDeserializer


class Deserializer(ABC):
    def finalize(self) -> None:
        """Fail if anything is left to read, the deserializer must not be used afterwards."""
        raise TypeError(f'{type(self).__name__} cannot check for trailing data')

    @abstractmethod
    def remaining(self) -> int:
        """Amount of bytes left to read."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int) -> Buffer:
        """Return the next `n` bytes without consuming them."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int) -> Buffer:
        """Consume and return the next `n` bytes."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.remaining() == 0

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_all(self) -> Buffer:
        """Consume everything that is left."""
        return self.read_bytes(self.remaining())

    def read_struct(self, format: str) -> tuple[Any, ...]:
        """Read and unpack as many bytes as `format` takes."""
        return struct.unpack(format, self.read_bytes(struct.calcsize(format)))

    def with_max_bytes(self, max_bytes: Optional[int]) -> Deserializer:
        """ Wrap this deserializer so that no more than `max_bytes` can be read through the wrapper.

        With `max_bytes=None` there is no limit and this deserializer is returned as is.
        """
        if max_bytes is None:
            return self
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)
