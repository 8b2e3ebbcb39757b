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


class IdlCodecError(Exception):
    """General error class"""


class SchemaError(IdlCodecError):
    """The IDL cannot be used to build the requested layout or size.

    Raised when accounts are declared without type definitions, or when a name refers to a type that is not defined.
    """


class LayoutError(SchemaError):
    """A type definition uses a shape or a type reference that cannot be compiled into a layout"""


class UnknownAccountType(IdlCodecError):
    """The account name is not registered in the coder"""


class DiscriminatorMismatch(IdlCodecError):
    """The leading bytes of the data are not the discriminator of the expected account"""


class AccountNotFound(IdlCodecError):
    """No account declared in the IDL matches the given name or discriminator"""
