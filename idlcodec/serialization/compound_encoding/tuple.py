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
A fixed tuple of heterogeneous values, as used by struct fields and enum variant fields.

There isn't a "format" per-se, the encoding of `(A, B, C)` is just the encoding of A concatenated with B concatenated
with C, in declaration order, with no prefix or padding.

>>> from idlcodec.serialization.encoding.bool import encode_bool, decode_bool
>>> from idlcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, ('foo', False), (encode_utf8, encode_bool))
>>> bytes(se.finalize()).hex()
'03000000666f6f00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03000000666f6f00'))
>>> decode_tuple(de, (decode_utf8, decode_bool))
('foo', False)
"""

from typing import Any, Sequence

from idlcodec.serialization import Deserializer, Serializer

from . import Decoder, Encoder


def encode_tuple(serializer: Serializer, values: Sequence[Any], encoders: tuple[Encoder[Any], ...]) -> None:
    if len(values) != len(encoders):
        raise ValueError(f'expected {len(encoders)} values, got {len(values)}')
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Any, ...]:
    return tuple(decoder(deserializer) for decoder in decoders)
