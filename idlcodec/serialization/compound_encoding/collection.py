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
A collection is any value that has a known size and is iterable, it maps to a Borsh `Vec<T>`.

Layout: [N: u32 little-endian][value_0]...[value_N-1]

>>> from idlcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, ['foo', 'ba'], encode_utf8)
>>> bytes(se.finalize()).hex()
'0200000003000000666f6f020000006261'

Breakdown of the result:

    02000000: 2 as u32, the total length
    03000000666f6f: 'foo' (with length prefix)
    020000006261: 'ba' (with length prefix)

When decoding, the builder can be any compatible collection, it only matters that it can be initialized with an
`Iterable[T]`.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0200000003000000666f6f020000006261'))
>>> decode_collection(de, decode_utf8, tuple)
('foo', 'ba')
>>> de.finalize()

Fixed-length arrays have no prefix at all, the length comes from the schema:

>>> from idlcodec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [True, False], encode_bool, length=2)
>>> bytes(se.finalize()).hex()
'0100'
>>> decode_array(Deserializer.build_bytes_deserializer(b'\x01\x00'), decode_bool, list, length=2)
[True, False]
"""

from collections.abc import Collection, Iterable
from typing import Callable, Optional, TypeVar

from idlcodec.serialization import Deserializer, OutOfDataError, Serializer, TooLongError
from idlcodec.serialization.encoding.bytes import decode_length, encode_length

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)

# Items that take no bytes can't be bounded by the data left to read.
MAX_ZERO_SIZE_ITEMS = 2**16


def encode_collection(
    serializer: Serializer,
    values: Collection[T],
    encoder: Encoder[T],
    *,
    item_size: Optional[int] = None,
) -> None:
    if item_size == 0 and len(values) > MAX_ZERO_SIZE_ITEMS:
        raise TooLongError(f'{len(values)} zero-size items, the limit is {MAX_ZERO_SIZE_ITEMS}')
    encode_length(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    item_size: Optional[int] = None,
) -> R:
    """ Decode a u32-prefixed collection.

    With `item_size` (the static size of an item) the count is checked before any item is decoded: zero-size items
    are capped at `MAX_ZERO_SIZE_ITEMS`, other items take at least one byte each.
    """
    length = decode_length(deserializer)
    if item_size == 0:
        if length > MAX_ZERO_SIZE_ITEMS:
            raise TooLongError(f'{length} zero-size items, the limit is {MAX_ZERO_SIZE_ITEMS}')
    elif item_size is not None and length > deserializer.remaining():
        # every item takes at least one byte
        raise OutOfDataError('not enough bytes to read')
    return builder(decoder(deserializer) for _ in range(length))


def encode_array(serializer: Serializer, values: Collection[T], encoder: Encoder[T], *, length: int) -> None:
    if len(values) != length:
        raise ValueError(f'expected {length} items, got {len(values)}')
    for value in values:
        encoder(serializer, value)


def decode_array(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    length: int,
) -> R:
    return builder(decoder(deserializer) for _ in range(length))
