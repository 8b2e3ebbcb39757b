import pytest

from idlcodec.serialization import Deserializer, OutOfDataError, SerializationError, Serializer
from idlcodec.serialization.encoding.bytes import decode_length, encode_length
from idlcodec.serialization.exceptions import TooLongError


def test_serializer_copies_written_buffers() -> None:
    se = Serializer.build_bytes_serializer()
    data = bytearray(b'abc')
    se.write_bytes(data)
    data[0] = ord('x')
    se.write_byte(0xff)
    assert se.cur_pos() == 4
    assert bytes(se.finalize()) == b'abc\xff'


def test_serializer_write_struct() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_struct('<Hb', 1, -1)
    assert bytes(se.finalize()) == b'\x01\x00\xff'


def test_deserializer_reads() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04\x05')
    assert de.remaining() == 5
    assert de.read_byte() == 1
    assert bytes(de.peek_bytes(2)) == b'\x02\x03'
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    assert not de.is_empty()
    assert bytes(de.read_all()) == b'\x04\x05'
    assert de.is_empty()
    de.finalize()


def test_deserializer_reads_memoryview_slices() -> None:
    data = memoryview(bytearray(b'\x00\x00\x2a\x00'))[2:]
    de = Deserializer.build_bytes_deserializer(data)
    assert de.read_struct('<H') == (42,)
    de.finalize()


def test_deserializer_out_of_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(OutOfDataError):
        de.read_bytes(2)
    # a failed read consumes nothing
    assert bytes(de.read_bytes(1)) == b'\x01'
    with pytest.raises(OutOfDataError):
        de.read_byte()
    with pytest.raises(SerializationError):
        de.read_bytes(-1)


def test_deserializer_trailing_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    de.read_byte()
    with pytest.raises(SerializationError, match='trailing data'):
        de.finalize()


def test_length_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    encode_length(se, 2**32 - 1)
    data = bytes(se.finalize())
    assert data == b'\xff\xff\xff\xff'
    assert decode_length(Deserializer.build_bytes_deserializer(data)) == 2**32 - 1
    with pytest.raises(TooLongError):
        encode_length(Serializer.build_bytes_serializer(), 2**32)


def test_out_of_data_is_a_value_error() -> None:
    assert issubclass(OutOfDataError, ValueError)
