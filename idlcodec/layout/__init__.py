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

from idlcodec.layout.bytes_layout import BytesLayout, PubkeyLayout, StrLayout
from idlcodec.layout.collection_layout import ArrayLayout, VecLayout
from idlcodec.layout.compiler import PRIMITIVE_LAYOUT_MAP, type_def_layout, type_layout, type_size
from idlcodec.layout.enum_layout import EnumLayout, EnumVariant
from idlcodec.layout.layout import Layout
from idlcodec.layout.option_layout import COptionLayout, OptionLayout
from idlcodec.layout.scalar_layout import BoolLayout, F32Layout, F64Layout
from idlcodec.layout.struct_layout import StructLayout, TupleStructLayout

__all__ = [
    'PRIMITIVE_LAYOUT_MAP',
    'ArrayLayout',
    'BoolLayout',
    'BytesLayout',
    'COptionLayout',
    'EnumLayout',
    'EnumVariant',
    'F32Layout',
    'F64Layout',
    'Layout',
    'OptionLayout',
    'PubkeyLayout',
    'StrLayout',
    'StructLayout',
    'TupleStructLayout',
    'VecLayout',
    'type_def_layout',
    'type_layout',
    'type_size',
]
