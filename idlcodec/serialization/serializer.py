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
Write side of the serialization layer.

Layouts never touch buffers directly, they write through a `Serializer`. The in-memory implementation is the only one
used to build account data, adapters can be stacked on top of it to enforce limits.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    def finalize(self) -> Buffer:
        """Return everything written so far, the serializer must not be written to afterwards."""
        raise TypeError(f'{type(self).__name__} does not hold its output')

    @abstractmethod
    def cur_pos(self) -> int:
        """Amount of bytes written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        """Append a byte sequence, the serializer keeps its own copy."""
        raise NotImplementedError

    def write_byte(self, data: int) -> None:
        # bytes() raises ValueError for values outside 0..255
        self.write_bytes(bytes((data,)))

    def write_struct(self, format: str, *values: Any) -> None:
        """Pack values with `struct` and write them, formats should be explicitly little-endian (`<`)."""
        self.write_bytes(struct.pack(format, *values))

    def with_max_bytes(self, max_bytes: Optional[int]) -> Serializer:
        """ Wrap this serializer so that no more than `max_bytes` can be written through the wrapper.

        Writes are still stored in this serializer, so `finalize` should be called on it and not on the wrapper. With
        `max_bytes=None` there is no limit and this serializer is returned as is.
        """
        if max_bytes is None:
            return self
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()
