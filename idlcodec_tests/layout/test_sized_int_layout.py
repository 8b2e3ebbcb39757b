import struct

import pytest

from idlcodec.layout import sized_int_layout


def _test_bounds_struct_pack(fmt: str, lower_bound: int, upper_bound: int) -> None:
    struct.pack(fmt, lower_bound)
    try:
        struct.pack(fmt, lower_bound - 1)
    except struct.error:
        pass
    else:
        assert False
    struct.pack(fmt, upper_bound)
    try:
        struct.pack(fmt, upper_bound + 1)
    except struct.error:
        pass
    else:
        assert False


@pytest.mark.parametrize(
    ['layout_class', 'fmt', 'lower_bound', 'upper_bound'],
    [
        (sized_int_layout.I8Layout, '<b', -128, 127),
        (sized_int_layout.U8Layout, '<B', 0, 255),
        (sized_int_layout.I16Layout, '<h', -32768, 32767),
        (sized_int_layout.U16Layout, '<H', 0, 65535),
        (sized_int_layout.I32Layout, '<i', -2147483648, 2147483647),
        (sized_int_layout.U32Layout, '<I', 0, 4294967295),
        (sized_int_layout.I64Layout, '<q', -9223372036854775808, 9223372036854775807),
        (sized_int_layout.U64Layout, '<Q', 0, 18446744073709551615),
    ],
)
def test_bounds(layout_class, fmt, lower_bound, upper_bound) -> None:
    assert layout_class.value_range().start == lower_bound
    assert layout_class.value_range().stop - 1 == upper_bound
    _test_bounds_struct_pack(fmt, lower_bound, upper_bound)

    layout = layout_class()
    assert layout.static_size() == struct.calcsize(fmt)
    for value in (lower_bound, upper_bound):
        assert layout.to_bytes(value) == struct.pack(fmt, value)
        assert layout.from_bytes(struct.pack(fmt, value)) == value
    with pytest.raises(ValueError):
        layout.to_bytes(lower_bound - 1)
    with pytest.raises(ValueError):
        layout.to_bytes(upper_bound + 1)


def test_wide_int_bounds() -> None:
    assert sized_int_layout.U128Layout.value_range().stop == 2**128
    assert sized_int_layout.I128Layout.value_range().start == -(2**127)
    assert sized_int_layout.U256Layout.value_range().stop == 2**256
    assert sized_int_layout.I256Layout.value_range().start == -(2**255)

    layout = sized_int_layout.I128Layout()
    assert layout.static_size() == 16
    assert layout.to_bytes(-1) == b'\xff' * 16
    assert layout.from_bytes(b'\xff' * 16) == -1

    layout = sized_int_layout.U256Layout()
    assert layout.static_size() == 32
    assert layout.to_bytes(1) == b'\x01' + bytes(31)


def test_bool_is_not_an_int() -> None:
    with pytest.raises(TypeError):
        sized_int_layout.U8Layout().to_bytes(True)
