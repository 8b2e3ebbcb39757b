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
Borsh booleans take a single byte, `0x00` is false and `0x01` is true. No other byte is accepted when decoding.

>>> se = Serializer.build_bytes_serializer()
>>> for flag in (False, True, True):
...     encode_bool(se, flag)
>>> bytes(se.finalize()).hex()
'000101'

>>> de = Deserializer.build_bytes_deserializer(bytes([1, 2]))
>>> decode_bool(de)
True
>>> decode_bool(de)
Traceback (most recent call last):
...
ValueError: b'\x02' is not a valid boolean
"""

from idlcodec.serialization import Deserializer, Serializer

_BYTE_TO_BOOL = {0: False, 1: True}


def encode_bool(serializer: Serializer, value: bool) -> None:
    if not isinstance(value, bool):
        raise TypeError('expected bool')
    serializer.write_byte(int(value))


def decode_bool(deserializer: Deserializer) -> bool:
    byte = deserializer.read_byte()
    try:
        return _BYTE_TO_BOOL[byte]
    except KeyError:
        raise ValueError(f'{bytes([byte])!r} is not a valid boolean') from None
