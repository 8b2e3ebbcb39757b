import pytest

from idlcodec.exception import LayoutError, SchemaError
from idlcodec.idl import Idl, IdlTypeArray, IdlTypeCOption, IdlTypeDefined, IdlTypeOption, IdlTypeVec
from idlcodec.layout import (
    PRIMITIVE_LAYOUT_MAP,
    EnumLayout,
    StructLayout,
    TupleStructLayout,
    type_def_layout,
    type_layout,
    type_size,
)
from idlcodec.types import Pubkey
from idlcodec_tests import unittest
from idlcodec_tests.unittest import vault_idl_dict

PRIMITIVE_SIZES = {
    'bool': 1,
    'u8': 1,
    'i8': 1,
    'u16': 2,
    'i16': 2,
    'u32': 4,
    'i32': 4,
    'f32': 4,
    'u64': 8,
    'i64': 8,
    'f64': 8,
    'u128': 16,
    'i128': 16,
    'u256': 32,
    'i256': 32,
    'bytes': 4,
    'string': 4,
    'pubkey': 32,
}


def _idl(*type_defs) -> Idl:
    return Idl.from_dict({'types': list(type_defs)})


def _struct(name, fields):
    return {'name': name, 'type': {'kind': 'struct', 'fields': fields}}


@pytest.mark.parametrize(['primitive', 'size'], PRIMITIVE_SIZES.items())
def test_primitive_sizes(primitive: str, size: int) -> None:
    assert set(PRIMITIVE_LAYOUT_MAP) == set(PRIMITIVE_SIZES)
    assert type_layout(primitive, []).static_size() == size
    assert type_size(primitive, Idl()) == size


def test_compound_sizes() -> None:
    idl = _idl(vault_idl_dict()['types'][1])
    assert type_size(IdlTypeOption(option='u64'), idl) == 9
    assert type_size(IdlTypeCOption(coption='u64'), idl) == 12
    assert type_size(IdlTypeVec(vec='u64'), idl) == 4
    assert type_size(IdlTypeArray(array=('pubkey', 3)), idl) == 96
    assert type_size(IdlTypeDefined.of('Status'), idl) == 1 + 8


class CompilerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.idl = self.build_idl(vault_idl_dict())
        self.types = self.idl.types

    def test_struct(self) -> None:
        layout = type_def_layout(self.types[0], self.types)
        self.assertIsInstance(layout, StructLayout)
        self.assertEqual(layout.field_names[:3], ('owner', 'bump', 'balance'))

    def test_enum(self) -> None:
        layout = type_def_layout(self.types[1], self.types)
        self.assertIsInstance(layout, EnumLayout)
        self.assertEqual(layout.variant_names, ('Uninitialized', 'Active', 'Frozen'))
        self.assertEqual(layout.to_bytes({'Frozen': (1, True)}), b'\x02\x01\x00\x01')

    def test_alias(self) -> None:
        layout = type_def_layout(self.types[3], self.types)
        self.assertEqual(layout.static_size(), 8)
        self.assertEqual(layout.from_bytes(bytes(8)), [0, 0])

    def test_tuple_struct(self) -> None:
        layout = type_def_layout(self.types[4], self.types)
        self.assertIsInstance(layout, TupleStructLayout)

    def test_static_size_agrees_with_type_size(self) -> None:
        for type_def in self.types:
            layout = type_def_layout(type_def, self.types)
            self.assertEqual(layout.static_size(), type_size(IdlTypeDefined.of(type_def.name), self.idl))

    def test_unit_struct(self) -> None:
        idl = _idl({'name': 'Marker', 'type': {'kind': 'struct'}}, _struct('Empty', []))
        for type_def in idl.types:
            layout = type_def_layout(type_def, idl.types)
            self.assertEqual(layout.static_size(), 0)
            self.assertEqual(layout.to_bytes({}), b'')
            self.assertEqual(type_size(IdlTypeDefined.of(type_def.name), idl), 0)

    def test_unit_enum_variants(self) -> None:
        variants = [{'name': 'Bid'}, {'name': 'Ask', 'fields': []}]
        idl = _idl({'name': 'Side', 'type': {'kind': 'enum', 'variants': variants}})
        layout = type_def_layout(idl.types[0], idl.types)
        self.assertEqual(layout.static_size(), 1)
        self.assertEqual(layout.to_bytes('Ask'), b'\x01')
        self.assertEqual(layout.from_bytes(b'\x01'), {'Ask': None})
        self.assertEqual(type_size(IdlTypeDefined.of('Side'), idl), 1)

    def test_legacy_defined_reference(self) -> None:
        idl = _idl(_struct('Outer', [{'name': 'inner', 'type': {'defined': 'Inner'}}]), _struct('Inner', ['pubkey']))
        layout = type_def_layout(idl.types[0], idl.types)
        key = Pubkey(bytes(32))
        self.assertEqual(layout.from_bytes(layout.to_bytes({'inner': [key]})), {'inner': (key,)})

    def test_shared_type_used_twice(self) -> None:
        idl = _idl(
            _struct('Pair', [{'name': 'a', 'type': {'defined': {'name': 'Point'}}},
                             {'name': 'b', 'type': {'defined': {'name': 'Point'}}}]),
            _struct('Point', [{'name': 'x', 'type': 'i16'}, {'name': 'y', 'type': 'i16'}]),
        )
        layout = type_def_layout(idl.types[0], idl.types)
        self.assertEqual(layout.static_size(), 8)

    def test_type_not_found(self) -> None:
        idl = _idl(_struct('Outer', [{'name': 'inner', 'type': {'defined': {'name': 'Missing'}}}]))
        with self.assertRaises(LayoutError) as cm:
            type_def_layout(idl.types[0], idl.types)
        self.assertEqual(str(cm.exception), 'type not found: Missing')
        with self.assertRaises(SchemaError):
            type_size(IdlTypeDefined.of('Outer'), idl)
        with self.assertRaises(SchemaError):
            type_size(IdlTypeDefined.of('Counter'), Idl())

    def test_recursive_type(self) -> None:
        idl = _idl(
            _struct('Node', [{'name': 'next', 'type': {'option': {'defined': {'name': 'Node'}}}}]),
            _struct('A', [{'name': 'b', 'type': {'vec': {'defined': {'name': 'B'}}}}]),
            _struct('B', [{'name': 'a', 'type': {'defined': {'name': 'A'}}}]),
        )
        for type_def in idl.types:
            with self.assertRaises(LayoutError):
                type_def_layout(type_def, idl.types)
        with self.assertRaises(SchemaError):
            type_size(IdlTypeDefined.of('Node'), idl)

    def test_generics_are_rejected(self) -> None:
        idl = _idl(
            {'name': 'Wrapper', 'generics': [{'kind': 'type', 'name': 'T'}], 'type': {'kind': 'struct', 'fields': []}},
            _struct('User', [
                {'name': 'w', 'type': {'defined': {'name': 'Wrapper', 'generics': [{'kind': 'type', 'type': 'u8'}]}}},
            ]),
        )
        for type_def in idl.types:
            with self.assertRaises(LayoutError):
                type_def_layout(type_def, idl.types)

    def test_non_borsh_serialization_is_rejected(self) -> None:
        idl = _idl({'name': 'Raw', 'serialization': 'bytemuck', 'type': {'kind': 'struct', 'fields': ['u8']}})
        with self.assertRaises(LayoutError):
            type_def_layout(idl.types[0], idl.types)
