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
An optional value is a presence tag followed by the value when there is one.

Borsh `Option<T>` uses a 1-byte tag, the C-compatible `COption<T>` used by SPL programs uses a 4-byte little-endian tag.
The tag size is a parameter:

    [tag = 0] when None
    [tag = 1][value] when not None

>>> from idlcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'foo', encode_utf8)
>>> encode_optional(se, None, encode_utf8)
>>> encode_optional(se, None, encode_utf8, tag_length=4)
>>> bytes(se.finalize()).hex()
'0103000000666f6f0000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0103000000666f6f0000000000'))
>>> decode_optional(de, decode_utf8)
'foo'
>>> str(decode_optional(de, decode_utf8))
'None'
>>> str(decode_optional(de, decode_utf8, tag_length=4))
'None'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> try:
...     decode_optional(de, decode_utf8)
... except ValueError as e:
...     print(*e.args)
invalid option tag: 2
"""

from typing import Optional, TypeVar

from idlcodec.serialization import Deserializer, Serializer
from idlcodec.serialization.encoding.int import decode_int, encode_int

from . import Decoder, Encoder

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T], *, tag_length: int = 1) -> None:
    if value is None:
        encode_int(serializer, 0, length=tag_length, signed=False)
    else:
        encode_int(serializer, 1, length=tag_length, signed=False)
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T], *, tag_length: int = 1) -> Optional[T]:
    tag = decode_int(deserializer, length=tag_length, signed=False)
    if tag == 0:
        return None
    elif tag == 1:
        return decoder(deserializer)
    else:
        raise ValueError(f'invalid option tag: {tag}')
