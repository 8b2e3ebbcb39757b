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

from copy import deepcopy
from typing import Any, Mapping, TypeVar

K = TypeVar('K')


def merge_dicts(base: Mapping[K, Any], override: Mapping[K, Any]) -> dict[K, Any]:
    """
    Return a new dict with `override` merged on top of `base`, neither input is modified.

    Nested dicts present on both sides are merged recursively, any other value in `override` replaces the one in
    `base`.

    >>> base = dict(a=1, nested=dict(b=2, c=3), d=dict(e=4))
    >>> merge_dicts(base, dict(nested=dict(c=5), d=6)) == dict(a=1, nested=dict(b=2, c=5), d=6)
    True
    >>> base == dict(a=1, nested=dict(b=2, c=3), d=dict(e=4))
    True
    """
    merged: dict[K, Any] = deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_dicts(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
