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

from __future__ import annotations

import base58
from typing_extensions import Self

from idlcodec.serialization import Buffer


class Pubkey(bytes):
    """ A 32-byte public key.

    It behaves as `bytes` everywhere (equality, hashing, slicing), only its text form is base58, which is how keys
    are shown and parsed everywhere else.

    >>> key = Pubkey(bytes(32))
    >>> str(key)
    '11111111111111111111111111111111'
    >>> Pubkey.from_base58('11111111111111111111111111111111') == bytes(32)
    True
    """

    LENGTH = 32

    def __new__(cls, data: Buffer) -> Self:
        if len(data) != cls.LENGTH:
            raise ValueError(f'pubkey must have {cls.LENGTH} bytes, got {len(data)}')
        return super().__new__(cls, data)

    @classmethod
    def from_base58(cls, value: str) -> Self:
        try:
            data = base58.b58decode(value)
        except ValueError as e:
            raise ValueError(f'invalid base58 pubkey: {value!r}') from e
        return cls(data)

    def to_base58(self) -> str:
        return base58.b58encode(bytes(self)).decode('ascii')

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"Pubkey('{self.to_base58()}')"
