import pytest

from gamenet.linking import LinkingContext
from gamenet.memorystream import InputMemoryStream, OutputMemoryStream


class _GameObject:
    def __init__(self, name):
        self.name = name


def test_uint32_is_little_endian():
    out = OutputMemoryStream()
    out.write_primitive("I", 0x01020304)
    assert out.getvalue() == bytes.fromhex("04030201")
    assert out.length == 4


def test_primitive_round_trip():
    out = OutputMemoryStream()
    out.write_primitive("i", -42)
    out.write_primitive("H", 65535)
    out.write_primitive("d", 3.25)
    out.write_primitive("?", True)
    out.write_primitive("q", -(2**40))
    inp = InputMemoryStream(out.getvalue())
    assert inp.read_primitive("i") == -42
    assert inp.read_primitive("H") == 65535
    assert inp.read_primitive("d") == 3.25
    assert inp.read_primitive("?") is True
    assert inp.read_primitive("q") == -(2**40)
    assert inp.remaining_data_size == 0


def test_int_list_round_trip():
    out = OutputMemoryStream()
    out.write_int_list([1, -2, 3, 2**31 - 1])
    inp = InputMemoryStream(out.getvalue())
    assert inp.read_int_list() == [1, -2, 3, 2**31 - 1]


def test_empty_int_list_writes_only_count():
    out = OutputMemoryStream()
    out.write_int_list([])
    assert out.getvalue() == bytes(8)
    assert InputMemoryStream(out.getvalue()).read_int_list() == []


def test_generic_list_round_trip():
    out = OutputMemoryStream()
    out.write_list("f", [0.5, -1.25, 8.0])
    out.write_list("B", [7, 8])
    inp = InputMemoryStream(out.getvalue())
    assert inp.read_list("f") == [0.5, -1.25, 8.0]
    assert inp.read_list("B") == [7, 8]


def test_string_round_trip():
    out = OutputMemoryStream()
    out.write_string("hello")
    out.write_string("ünïcode")
    inp = InputMemoryStream(out.getvalue())
    assert inp.read_string() == "hello"
    assert inp.read_string() == "ünïcode"
    assert inp.remaining_data_size == 0


def test_string_layout_is_count_then_bytes():
    out = OutputMemoryStream()
    out.write_string("ab")
    data = out.getvalue()
    assert data.endswith(b"ab")
    assert InputMemoryStream(data).read_primitive("Q") == 2


def test_game_object_round_trip():
    context = LinkingContext()
    hero = _GameObject("hero")
    context.add_game_object(hero, 17)
    out = OutputMemoryStream(context)
    out.write_game_object(hero)
    assert InputMemoryStream(out.getvalue()).read_primitive("I") == 17
    inp = InputMemoryStream(out.getvalue(), linking_context=context)
    assert inp.read_game_object() is hero


def test_unknown_game_object_reads_back_as_none():
    context = LinkingContext()
    out = OutputMemoryStream(context)
    out.write_game_object(_GameObject("stranger"))
    inp = InputMemoryStream(out.getvalue(), linking_context=context)
    assert inp.read_game_object() is None


def test_game_object_without_context_raises():
    with pytest.raises(ValueError):
        OutputMemoryStream().write_game_object(_GameObject("x"))
    with pytest.raises(ValueError):
        InputMemoryStream(b"\x00\x00\x00\x00").read_game_object()


def test_reading_past_end_raises_and_keeps_position():
    inp = InputMemoryStream(b"\x01\x02")
    with pytest.raises(EOFError):
        inp.read_primitive("I")
    assert inp.remaining_data_size == 2
    assert inp.read_primitive("H") == 0x0201


def test_byte_count_limits_reading():
    inp = InputMemoryStream(b"\x01\x02\x03\x04", 2)
    assert inp.read_bytes(2) == b"\x01\x02"
    with pytest.raises(EOFError):
        inp.read_bytes(1)


def test_byte_count_larger_than_buffer_raises():
    with pytest.raises(ValueError):
        InputMemoryStream(b"\x00", 2)


@pytest.mark.parametrize("fmt", ["", "2i", "zz"])
def test_invalid_format_raises(fmt):
    with pytest.raises(ValueError):
        OutputMemoryStream().write_primitive(fmt, 1)


def test_value_that_does_not_fit_raises():
    with pytest.raises(ValueError):
        OutputMemoryStream().write_primitive("B", 256)


def test_large_payload_round_trip():
    payload = bytes(i % 253 for i in range(5000))
    out = OutputMemoryStream()
    out.write_bytes(payload)
    out.write_primitive("I", 99)
    inp = InputMemoryStream(out.getvalue())
    assert inp.read_bytes(len(payload)) == payload
    assert inp.read_primitive("I") == 99