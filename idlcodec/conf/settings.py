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

from typing import Optional

from pydantic import field_validator

from idlcodec.utils.pydantic import BaseModel


class CodecSettings(BaseModel):
    # Most bytes an account payload can take when encoding, the discriminator is not counted. Encoding a larger value
    # fails with MaxBytesExceededError. Set to `None` to disable the limit.
    ACCOUNT_ENCODE_MAX_SIZE: Optional[int] = 1000

    # Most bytes an account payload can take when decoding, trailing bytes that are not read don't count. Set to
    # `None` to disable the limit.
    ACCOUNT_DECODE_MAX_SIZE: Optional[int] = 10 * 1024 * 1024  # 10 MiB, the largest account data size on Solana

    @field_validator('ACCOUNT_ENCODE_MAX_SIZE', 'ACCOUNT_DECODE_MAX_SIZE')
    @classmethod
    def _check_max_size(cls, max_size: Optional[int]) -> Optional[int]:
        if max_size is not None and max_size <= 0:
            raise ValueError('max size must be positive')
        return max_size
