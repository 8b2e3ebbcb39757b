import unittest
from typing import Any, Optional
from unittest import main as ut_main

from structlog import get_logger

from idlcodec.coder import BorshAccountsCoder
from idlcodec.conf import CodecSettings
from idlcodec.idl import Idl

logger = get_logger()
main = ut_main

COUNTER_DISCRIMINATOR = bytes([1, 2, 3, 4, 5, 6, 7, 8])


def counter_idl_dict() -> dict[str, Any]:
    """A program with a single `Counter` account that holds a u64."""
    return {
        'address': 'Counter111111111111111111111111111111111111',
        'metadata': {'name': 'counter', 'version': '0.1.0', 'spec': '0.1.0'},
        'instructions': [],
        'accounts': [
            {'name': 'Counter', 'discriminator': list(COUNTER_DISCRIMINATOR)},
        ],
        'types': [
            {
                'name': 'Counter',
                'type': {'kind': 'struct', 'fields': [{'name': 'count', 'type': 'u64'}]},
            },
        ],
    }


def vault_idl_dict() -> dict[str, Any]:
    """A program with a few accounts that use every kind of type."""
    return {
        'address': 'Vau1t11111111111111111111111111111111111111',
        'metadata': {'name': 'vault', 'version': '0.1.0', 'spec': '0.1.0'},
        'instructions': [],
        'accounts': [
            {'name': 'Vault', 'discriminator': [211, 8, 232, 43, 2, 152, 117, 119]},
            {'name': 'Config', 'discriminator': [155, 12, 170, 224, 30, 250, 204, 130]},
            {'name': 'Pair', 'discriminator': [85, 72, 49, 176, 182, 228, 141, 82]},
        ],
        'types': [
            {
                'name': 'Vault',
                'type': {
                    'kind': 'struct',
                    'fields': [
                        {'name': 'owner', 'type': 'pubkey'},
                        {'name': 'bump', 'type': 'u8'},
                        {'name': 'balance', 'type': 'u64'},
                        {'name': 'status', 'type': {'defined': {'name': 'Status'}}},
                        {'name': 'delegate', 'type': {'option': 'pubkey'}},
                        {'name': 'close_authority', 'type': {'coption': 'pubkey'}},
                        {'name': 'history', 'type': {'vec': 'i64'}},
                        {'name': 'seed', 'type': {'array': ['u8', 4]}},
                        {'name': 'label', 'type': 'string'},
                    ],
                },
            },
            {
                'name': 'Status',
                'type': {
                    'kind': 'enum',
                    'variants': [
                        {'name': 'Uninitialized'},
                        {'name': 'Active', 'fields': [{'name': 'since', 'type': 'i64'}]},
                        {'name': 'Frozen', 'fields': ['u16', 'bool']},
                    ],
                },
            },
            {
                'name': 'Config',
                'type': {
                    'kind': 'struct',
                    'fields': [
                        {'name': 'fee_bps', 'type': 'u16'},
                        {'name': 'enabled', 'type': 'bool'},
                        {'name': 'limits', 'type': {'defined': {'name': 'Limits'}}},
                    ],
                },
            },
            {
                'name': 'Limits',
                'type': {'kind': 'type', 'alias': {'array': ['u32', 2]}},
            },
            {
                'name': 'Pair',
                'type': {'kind': 'struct', 'fields': ['i32', 'f64']},
            },
        ],
    }


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logger.new()
        self.settings = CodecSettings()

    def build_idl(self, idl_dict: Optional[dict[str, Any]] = None) -> Idl:
        if idl_dict is None:
            idl_dict = counter_idl_dict()
        return Idl.from_dict(idl_dict)

    def build_coder(
        self,
        idl_dict: Optional[dict[str, Any]] = None,
        *,
        settings: Optional[CodecSettings] = None,
    ) -> BorshAccountsCoder:
        return BorshAccountsCoder(self.build_idl(idl_dict), settings=settings or self.settings)
