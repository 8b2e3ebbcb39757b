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
Fixed-width integers, little-endian and two's complement when signed. Borsh uses widths of 1, 2, 4, 8, 16 and 32
bytes, the functions here accept any width.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 300, length=2, signed=False)
>>> encode_int(se, -2, length=4, signed=True)
>>> data = bytes(se.finalize())
>>> data.hex()
'2c01feffffff'
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_int(de, length=2, signed=False), decode_int(de, length=4, signed=True)
(300, -2)

Values that don't fit the width are rejected instead of being truncated:

>>> encode_int(se, 256, length=1, signed=False)
Traceback (most recent call last):
...
ValueError: 256 does not fit in 1 unsigned byte(s)
"""

from idlcodec.serialization import Deserializer, Serializer


def int_range(length: int, signed: bool) -> range:
    """All values an integer of `length` bytes can hold.

    >>> int_range(1, signed=True)
    range(-128, 128)
    """
    bits = 8 * length
    if signed:
        return range(-(1 << (bits - 1)), 1 << (bits - 1))
    return range(0, 1 << bits)


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    if number not in int_range(length, signed):
        kind = 'signed' if signed else 'unsigned'
        raise ValueError(f'{number} does not fit in {length} {kind} byte(s)')
    serializer.write_bytes(number.to_bytes(length, 'little', signed=signed))


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    return int.from_bytes(deserializer.read_bytes(length), 'little', signed=signed)
