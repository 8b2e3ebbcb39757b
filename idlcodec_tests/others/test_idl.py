from pathlib import Path

import pytest
from pydantic import ValidationError

from idlcodec.coder import BorshAccountsCoder
from idlcodec.conf import CodecSettings
from idlcodec.idl import (
    Idl,
    IdlField,
    IdlTypeArray,
    IdlTypeDefined,
    IdlTypeDefTyEnum,
    IdlTypeDefTyStruct,
    IdlTypeDefTyType,
    IdlTypeOption,
    find_type_def,
)
from idlcodec.types import Pubkey
from idlcodec_tests.unittest import vault_idl_dict

FIXTURE = Path(__file__).parent / 'fixtures' / 'counter_idl.json'


def test_from_file() -> None:
    idl = Idl.from_file(FIXTURE)
    assert idl.address == 'Counter111111111111111111111111111111111111'
    assert idl.metadata['name'] == 'counter'
    assert len(idl.instructions) == 1
    assert len(idl.errors) == 1

    account = idl.find_account('Counter')
    assert account is not None
    assert account.discriminator == bytes([255, 176, 4, 245, 188, 253, 124, 25])
    assert idl.find_account('Missing') is None

    type_def = find_type_def(idl.types, 'Counter')
    assert type_def is not None
    assert type_def.docs == ['Number of times the counter was incremented.']
    assert isinstance(type_def.type, IdlTypeDefTyStruct)
    fields = type_def.type.fields
    assert [field.name for field in fields] == ['authority', 'count', 'last_update']
    assert fields[2].type == IdlTypeOption(option='i64')
    assert find_type_def(idl.types, 'Missing') is None


def test_from_file_round_trip() -> None:
    idl = Idl.from_file(FIXTURE)
    coder = BorshAccountsCoder(idl, settings=CodecSettings())
    value = {'authority': Pubkey(bytes(range(32))), 'count': 3, 'last_update': None}
    data = coder.encode('Counter', value)
    assert coder.size('Counter') == 8 + 32 + 8 + 9
    assert len(data) == 8 + 32 + 8 + 1
    assert coder.decode('Counter', data) == value


def test_from_json() -> None:
    idl = Idl.from_json(FIXTURE.read_text())
    assert idl == Idl.from_file(FIXTURE)


def test_type_kinds() -> None:
    idl = Idl.from_dict(vault_idl_dict())
    kinds = {type_def.name: type(type_def.type) for type_def in idl.types}
    assert kinds == {
        'Vault': IdlTypeDefTyStruct,
        'Status': IdlTypeDefTyEnum,
        'Config': IdlTypeDefTyStruct,
        'Limits': IdlTypeDefTyType,
        'Pair': IdlTypeDefTyStruct,
    }
    assert idl.types[3].type.alias == IdlTypeArray(array=('u32', 2))
    assert idl.types[4].type.fields == ['i32', 'f64']
    status = idl.types[1].type
    assert status.variants[0].fields is None
    assert isinstance(status.variants[1].fields[0], IdlField)
    assert status.variants[2].fields == ['u16', 'bool']


def test_defined_reference_forms() -> None:
    assert IdlTypeDefined.model_validate({'defined': 'Foo'}) == IdlTypeDefined.of('Foo')
    assert IdlTypeDefined.model_validate({'defined': {'name': 'Foo'}}) == IdlTypeDefined.of('Foo')


def test_discriminator_forms() -> None:
    idl = Idl.from_dict({'accounts': [{'name': 'A', 'discriminator': 'ff00'}]})
    assert idl.accounts[0].discriminator == b'\xff\x00'
    assert idl.model_dump()['accounts'][0]['discriminator'] == [255, 0]


@pytest.mark.parametrize(
    'idl_dict',
    [
        {'accounts': [{'name': 'A', 'discriminator': [256]}]},
        {'accounts': [{'name': 'A'}]},
        {'types': [{'name': 'A', 'type': {'kind': 'union', 'fields': []}}]},
        {'types': [{'name': 'A', 'type': {'kind': 'struct', 'fields': [{'name': 'x', 'type': 'u512'}]}}]},
        {'types': [{'name': 'A', 'type': {'kind': 'type', 'alias': {'vec': 'u8', 'extra': 1}}}]},
    ],
)
def test_invalid_idl(idl_dict) -> None:
    with pytest.raises(ValidationError):
        Idl.from_dict(idl_dict)


def test_idl_is_frozen() -> None:
    idl = Idl.from_dict(vault_idl_dict())
    with pytest.raises(ValidationError):
        idl.address = 'other'  # type: ignore[misc]
