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
This module implements IEEE 754 floats in little-endian byte order, with 4 (f32) or 8 (f64) bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 0000c03f
>>> encode_float(se, -2.0, length=8)  # writes 00000000000000c0
>>> bytes(se.finalize()).hex()
'0000c03f00000000000000c0'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c03f00000000000000c0'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=8)
-2.0
"""

from idlcodec.serialization import Deserializer, Serializer

_FORMATS: dict[int, str] = {
    4: '<f',
    8: '<d',
}


def _get_format(length: int) -> str:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'unsupported float length: {length}')


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encodes a float using 4 or 8 bytes.
    """
    serializer.write_struct(_get_format(length), value)


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decodes a float from 4 or 8 bytes.
    """
    value, = deserializer.read_struct(_get_format(length))
    return value
