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
Encode and decode Anchor account data with the layouts described by a program IDL.
"""

from idlcodec.coder import AccountLayout, AccountsCoder, BorshAccountsCoder, FilterDescriptor
from idlcodec.conf import CodecSettings
from idlcodec.exception import (
    AccountNotFound,
    DiscriminatorMismatch,
    IdlCodecError,
    LayoutError,
    SchemaError,
    UnknownAccountType,
)
from idlcodec.idl import Idl
from idlcodec.types import Pubkey
from idlcodec.version import __version__

__all__ = [
    'AccountLayout',
    'AccountNotFound',
    'AccountsCoder',
    'BorshAccountsCoder',
    'CodecSettings',
    'DiscriminatorMismatch',
    'FilterDescriptor',
    'Idl',
    'IdlCodecError',
    'LayoutError',
    'Pubkey',
    'SchemaError',
    'UnknownAccountType',
    '__version__',
]
