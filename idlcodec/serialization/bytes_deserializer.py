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

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """ In-memory deserializer over any bytes-like object.

    Data is held as a `memoryview` and read through a cursor. Returned chunks are views of the input, nothing is copied
    until a layout converts them. Views of `bytes`, `bytearray` and other `memoryview`s all behave the same.
    """

    __slots__ = ('_view', '_offset')

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast('B')
        self._offset = 0

    @override
    def finalize(self) -> None:
        if self.remaining():
            raise SerializationError('trailing data')

    @override
    def remaining(self) -> int:
        return len(self._view) - self._offset

    @override
    def peek_bytes(self, n: int) -> memoryview:
        if n < 0:
            raise SerializationError('value cannot be negative')
        if n > self.remaining():
            raise OutOfDataError('not enough bytes to read')
        return self._view[self._offset:self._offset + n]

    @override
    def read_bytes(self, n: int) -> memoryview:
        chunk = self.peek_bytes(n)
        self._offset += n
        return chunk
