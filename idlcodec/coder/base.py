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

from abc import ABC, abstractmethod
from typing import Any, Optional

from idlcodec.coder.filters import FilterDescriptor
from idlcodec.serialization import Buffer


class AccountsCoder(ABC):
    """
    Encodes and decodes account data of a program.

    Account data is framed as `discriminator + payload`. The discriminator identifies the account type and the payload
    is the encoded value. Implementations differ in how payloads are encoded.
    """

    __slots__ = ()

    @abstractmethod
    def encode(self, account_name: str, value: Any) -> bytes:
        """Encode a value of the given account type, the result starts with the account discriminator."""
        raise NotImplementedError

    @abstractmethod
    def decode(self, account_name: str, data: Buffer) -> Any:
        """Decode account data, the discriminator is checked first."""
        raise NotImplementedError

    @abstractmethod
    def decode_unchecked(self, account_name: str, data: Buffer) -> Any:
        """Decode account data without checking the discriminator."""
        raise NotImplementedError

    @abstractmethod
    def decode_any(self, data: Buffer) -> Any:
        """Decode account data of any known account type, the type is chosen by the discriminator."""
        raise NotImplementedError

    @abstractmethod
    def memcmp(self, account_name: str, append_data: Optional[bytes] = None) -> FilterDescriptor:
        """Filter that matches stored accounts of the given type."""
        raise NotImplementedError

    @abstractmethod
    def size(self, account_name: str) -> int:
        """Size of the smallest account data of the given type, discriminator included."""
        raise NotImplementedError
