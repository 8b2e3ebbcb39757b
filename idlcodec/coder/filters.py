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

from typing import Any

from idlcodec.utils.pydantic import BaseModel


class FilterDescriptor(BaseModel):
    """ Matches stored accounts whose data has the given bytes at the given offset.

    `bytes` is base58 encoded, which is what account queries expect, see `to_rpc`.
    """

    offset: int = 0
    bytes: str

    def to_rpc(self) -> dict[str, Any]:
        """Shape used by the `filters` parameter of `getProgramAccounts`."""
        return {'memcmp': {'offset': self.offset, 'bytes': self.bytes}}
