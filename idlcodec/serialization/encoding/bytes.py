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
Byte sequences are written after a little-endian u32 length prefix, the same prefix used by strings and vectors.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x04\x00\x00\x00' before writing b'test'
>>> bytes(se.finalize()).hex()
'0400000074657374'

>>> de = Deserializer.build_bytes_deserializer(b'\x04\x00\x00\x00testfoo')
>>> decode_bytes(de)
b'test'
>>> bytes(de.read_all())
b'foo'

>>> de = Deserializer.build_bytes_deserializer(b'\x05\x00\x00\x00test')
>>> try:
...     decode_bytes(de)
... except ValueError as e:
...     print(*e.args)
not enough bytes to read
"""

from idlcodec.serialization import Deserializer, Serializer, TooLongError
from idlcodec.serialization.encoding.int import decode_int, encode_int

LENGTH_PREFIX_SIZE = 4
MAX_LENGTH = 2**32 - 1


def encode_length(serializer: Serializer, length: int) -> None:
    """ Writes the u32 length prefix shared by bytes, strings and vectors.
    """
    if length > MAX_LENGTH:
        raise TooLongError(f'length {length} does not fit a u32 prefix')
    encode_int(serializer, length, length=LENGTH_PREFIX_SIZE, signed=False)


def decode_length(deserializer: Deserializer) -> int:
    """ Reads a u32 length prefix.
    """
    return decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('expected bytes')
    encode_length(serializer, len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    size = decode_length(deserializer)
    return bytes(deserializer.read_bytes(size))
