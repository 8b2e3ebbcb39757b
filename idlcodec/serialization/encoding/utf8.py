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
Borsh strings: the UTF-8 bytes of the string with the same u32 prefix as byte sequences. The prefix is a byte count.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'añ')
>>> data = bytes(se.finalize())
>>> data.hex()
'0300000061c3b1'
>>> decode_utf8(Deserializer.build_bytes_deserializer(data))
'añ'
"""

from idlcodec.serialization import Deserializer, Serializer

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError('expected str')
    encode_bytes(serializer, value.encode('utf-8'))


def decode_utf8(deserializer: Deserializer) -> str:
    """Invalid UTF-8 raises `UnicodeDecodeError`, which is a `ValueError`."""
    return decode_bytes(deserializer).decode('utf-8')
