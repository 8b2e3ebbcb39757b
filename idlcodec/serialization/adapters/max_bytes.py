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
Size limits for account payloads.

The limit is charged before anything reaches the wrapped (de)serializer, so an oversized write is never stored and a
length prefix claiming more than the limit fails before its contents are touched.
"""

from typing import TypeVar

from typing_extensions import override

from ..deserializer import Deserializer
from ..exceptions import SerializationError
from ..serializer import Serializer
from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter, GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(SerializationError):
    """ Raised when more bytes than allowed go through a size-limited (de)serializer.

    The (de)serialization that raised it has failed as a whole, the adapter must not be used again.
    """


class _ByteBudget:
    __slots__ = ('limit', 'left', 'verb')

    def __init__(self, limit: int, verb: str) -> None:
        if limit < 0:
            raise ValueError('max bytes cannot be negative')
        self.limit = limit
        self.left = limit
        self.verb = verb

    def charge(self, size: int) -> None:
        if size > self.left:
            self.left = -1
            raise MaxBytesExceededError(f'more than {self.limit} bytes {self.verb}')
        self.left -= size


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """Caps the total amount of bytes that can be written through it."""

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._budget = _ByteBudget(max_bytes, 'written')

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._budget.charge(len(memoryview(data).cast('B')))
        super().write_bytes(data)


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    """Caps the total amount of bytes that can be read through it, peeking is free."""

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        super().__init__(deserializer)
        self._budget = _ByteBudget(max_bytes, 'read')

    @override
    def read_bytes(self, n: int) -> Buffer:
        self._budget.charge(max(n, 0))
        return super().read_bytes(n)
