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
This module holds compound encoding implementations.

Compound encoders are generic in some way and delegate the encoding of some portion to another encoder. For example an
`Option<T>` encoder writes the presence tag and delegates the rest to an encoder that knows how to encode `T`.

Submodules follow the same shape as the simple encoders in `idlcodec.serialization.encoding`, taking the inner
encoder/decoder as a parameter.
"""

from typing import Any, Protocol, TypeVar

from idlcodec.serialization.deserializer import Deserializer
from idlcodec.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    # XXX: the return value is ignored, layouts return the amount of bytes written and can be used directly
    def __call__(self, serializer: Serializer, value: T_contra, /) -> Any:
        ...
