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

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, NamedTuple, Optional

import base58
from structlog import get_logger
from typing_extensions import override

from idlcodec.coder.base import AccountsCoder
from idlcodec.coder.filters import FilterDescriptor
from idlcodec.conf import get_global_settings
from idlcodec.conf.settings import CodecSettings
from idlcodec.exception import AccountNotFound, DiscriminatorMismatch, SchemaError, UnknownAccountType
from idlcodec.idl import Idl, IdlTypeDefined, find_type_def
from idlcodec.layout import Layout, type_def_layout, type_size
from idlcodec.serialization import Buffer, Deserializer, Serializer

logger = get_logger()


class AccountLayout(NamedTuple):
    discriminator: bytes
    layout: Layout


class BorshAccountsCoder(AccountsCoder):
    """
    Encodes and decodes Borsh account data described by an Anchor IDL.

    A layout is compiled for every account declared in the IDL when the coder is created, if any of them can't be
    compiled the coder is not created at all. The registry of layouts is never changed afterwards, so a coder can be
    shared between threads.

    >>> idl = Idl.from_dict({
    ...     'accounts': [{'name': 'Counter', 'discriminator': [1, 2, 3, 4, 5, 6, 7, 8]}],
    ...     'types': [{'name': 'Counter', 'type': {'kind': 'struct', 'fields': [{'name': 'count', 'type': 'u64'}]}}],
    ... })
    >>> coder = BorshAccountsCoder(idl)
    >>> data = coder.encode('Counter', {'count': 42})
    >>> data.hex()
    '01020304050607082a00000000000000'
    >>> coder.decode('Counter', data)
    {'count': 42}
    """

    __slots__ = ('_idl', '_settings', '_account_layouts', 'log')

    def __init__(self, idl: Idl, *, settings: Optional[CodecSettings] = None) -> None:
        if settings is None:
            settings = get_global_settings()
        self.log = logger.new()
        self._idl = idl
        self._settings = settings
        self._account_layouts = MappingProxyType(self._build_account_layouts(idl))
        self.log.debug('accounts coder created', accounts=list(self._account_layouts))

    def _build_account_layouts(self, idl: Idl) -> dict[str, AccountLayout]:
        if not idl.accounts:
            return {}

        types = idl.types
        if types is None:
            raise SchemaError('accounts require type definitions')

        account_layouts: dict[str, AccountLayout] = {}
        for account in idl.accounts:
            if account.name in account_layouts:
                # the first declaration wins, as in `Idl.find_account`
                self.log.debug('duplicate account ignored', account=account.name)
                continue
            type_def = find_type_def(types, account.name)
            if type_def is None:
                raise SchemaError(f'account not found: {account.name}')
            layout = type_def_layout(type_def, types)
            self.log.debug('account layout compiled', account=account.name, static_size=layout.static_size())
            account_layouts[account.name] = AccountLayout(bytes(account.discriminator), layout)
        return account_layouts

    @property
    def idl(self) -> Idl:
        return self._idl

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    @property
    def account_layouts(self) -> Mapping[str, AccountLayout]:
        """Read-only registry of account layouts, in declaration order."""
        return self._account_layouts

    def _get_account_layout(self, account_name: str) -> AccountLayout:
        account_layout = self._account_layouts.get(account_name)
        if account_layout is None:
            raise UnknownAccountType(f'unknown account: {account_name}')
        return account_layout

    @override
    def encode(self, account_name: str, value: Any) -> bytes:
        """ Encode a value of the given account type, the result starts with the account discriminator.

        The payload can't take more than `ACCOUNT_ENCODE_MAX_SIZE` bytes, larger values raise `MaxBytesExceededError`.
        Invalid values raise `TypeError` or `ValueError`.
        """
        discriminator, layout = self._get_account_layout(account_name)
        serializer = Serializer.build_bytes_serializer()
        layout.encode(serializer.with_max_bytes(self._settings.ACCOUNT_ENCODE_MAX_SIZE), value)
        return discriminator + bytes(serializer.finalize())

    @override
    def decode(self, account_name: str, data: Buffer) -> Any:
        """ Decode account data, raises `DiscriminatorMismatch` if it doesn't start with the account discriminator.
        """
        discriminator, _ = self._get_account_layout(account_name)
        if bytes(memoryview(data).cast('B')[:len(discriminator)]) != discriminator:
            raise DiscriminatorMismatch(f'invalid account discriminator for {account_name}')
        return self.decode_unchecked(account_name, data)

    @override
    def decode_unchecked(self, account_name: str, data: Buffer) -> Any:
        """ Decode account data skipping the discriminator, whatever its bytes are.

        Bytes after the payload are ignored, accounts are often allocated with more space than their current value
        takes.
        """
        discriminator, layout = self._get_account_layout(account_name)
        # byte view of the input, slicing it doesn't copy
        payload = memoryview(data).cast('B')[len(discriminator):]
        deserializer = Deserializer.build_bytes_deserializer(payload)
        return layout.decode(deserializer.with_max_bytes(self._settings.ACCOUNT_DECODE_MAX_SIZE))

    @override
    def decode_any(self, data: Buffer) -> Any:
        """ Decode account data of any registered account type, chosen by the leading bytes of the data.

        Discriminators are tried in declaration order and the first one that matches is used. Raises `AccountNotFound`
        when none matches.
        """
        view = memoryview(data).cast('B')
        for account_name, (discriminator, _) in self._account_layouts.items():
            if bytes(view[:len(discriminator)]) == discriminator:
                return self.decode_unchecked(account_name, data)
        raise AccountNotFound('account not found')

    @override
    def memcmp(self, account_name: str, append_data: Optional[bytes] = None) -> FilterDescriptor:
        """ Filter that matches stored accounts of the given type, optionally followed by `append_data`.
        """
        discriminator = self.account_discriminator(account_name)
        if append_data:
            discriminator += bytes(append_data)
        return FilterDescriptor(offset=0, bytes=base58.b58encode(discriminator).decode('ascii'))

    @override
    def size(self, account_name: str) -> int:
        """ Size of the smallest account data of the given type, discriminator included.

        Variable length values (bytes, strings and vectors) are counted as empty, so for types that have them this is
        only a lower bound.
        """
        discriminator, _ = self._get_account_layout(account_name)
        return len(discriminator) + type_size(IdlTypeDefined.of(account_name), self._idl)

    def account_discriminator(self, name: str) -> bytes:
        """ The discriminator declared in the IDL for the given account.

        This looks at the IDL directly, it doesn't need the account to have a layout. Raises `AccountNotFound` if no
        account with that name is declared.
        """
        account = self._idl.find_account(name)
        if account is None:
            raise AccountNotFound(f'account not found: {name}')
        return bytes(account.discriminator)
