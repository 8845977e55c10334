import math

import pytest

from gamenet.byteswap import byte_swap, byte_swap2, byte_swap4, byte_swap8


def test_pinned_swaps():
    assert byte_swap2(0x1234) == 0x3412
    assert byte_swap4(0x12345678) == 0x78563412
    assert byte_swap8(0x0102030405060708) == 0x0807060504030201


@pytest.mark.parametrize("value", [0, 1, 0xFF, 0x1234, 0xFFFF, 0xABCD])
def test_swap2_is_involution(value):
    assert byte_swap2(byte_swap2(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0xFF00FF00, 0xDEADBEEF, 0xFFFFFFFF])
def test_swap4_is_involution(value):
    assert byte_swap4(byte_swap4(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0xFFFFFFFFFFFFFFFF, 0x0123456789ABCDEF])
def test_swap8_is_involution(value):
    assert byte_swap8(byte_swap8(value)) == value


def test_swap_of_palindromic_bytes_is_identity():
    assert byte_swap2(0xABAB) == 0xABAB
    assert byte_swap4(0xFFFFFFFF) == 0xFFFFFFFF


@pytest.mark.parametrize(
    "func,bits", [(byte_swap2, 16), (byte_swap4, 32), (byte_swap8, 64)]
)
def test_out_of_range_raises(func, bits):
    with pytest.raises(ValueError):
        func(1 << bits)
    with pytest.raises(ValueError):
        func(-1)


def test_generic_matches_fixed_width():
    assert byte_swap(0x1234, "H") == byte_swap2(0x1234)
    assert byte_swap(0xDEADBEEF, "I") == byte_swap4(0xDEADBEEF)
    assert byte_swap(0x0123456789ABCDEF, "Q") == byte_swap8(0x0123456789ABCDEF)


def test_generic_one_byte_unchanged():
    assert byte_swap(200, "B") == 200
    assert byte_swap(-5, "b") == -5
    assert byte_swap(True, "?") is True


@pytest.mark.parametrize("value", [1.5, -2.25, 0.0, 1e10])
def test_generic_float_round_trip(value):
    assert byte_swap(byte_swap(value, "d"), "d") == value
    swapped = byte_swap(byte_swap(value, "f"), "f")
    assert math.isclose(swapped, value, rel_tol=1e-6)


@pytest.mark.parametrize("value", [-1, -32768, 12345])
def test_generic_signed_round_trip(value):
    assert byte_swap(byte_swap(value, "h"), "h") == value
    assert byte_swap(byte_swap(value, "i"), "i") == value


def test_generic_unsupported_size_raises():
    with pytest.raises(ValueError):
        byte_swap(b"abc", "3s")