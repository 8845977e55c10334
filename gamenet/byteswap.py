"""Byte-order reversal for fixed-size integers and packed primitives."""

from __future__ import annotations

import struct


def _check_range(data: int, bits: int) -> None:
    if not 0 <= data < (1 << bits):
        raise ValueError(f"{data} does not fit in an unsigned {bits}-bit integer")


def byte_swap2(data: int) -> int:
    """Reverse the two bytes of an unsigned 16-bit integer."""
    _check_range(data, 16)
    return ((data >> 8) | (data << 8)) & 0xFFFF


def byte_swap4(data: int) -> int:
    """Reverse the four bytes of an unsigned 32-bit integer."""
    _check_range(data, 32)
    return (
        ((data >> 24) & 0x000000FF)
        | ((data >> 8) & 0x0000FF00)
        | ((data << 8) & 0x00FF0000)
        | ((data << 24) & 0xFF000000)
    )


def byte_swap8(data: int) -> int:
    """Reverse the eight bytes of an unsigned 64-bit integer."""
    _check_range(data, 64)
    return (
        ((data >> 56) & 0x00000000000000FF)
        | ((data >> 40) & 0x000000000000FF00)
        | ((data >> 24) & 0x0000000000FF0000)
        | ((data >> 8) & 0x00000000FF000000)
        | ((data << 8) & 0x000000FF00000000)
        | ((data << 24) & 0x0000FF0000000000)
        | ((data << 40) & 0x00FF000000000000)
        | ((data << 56) & 0xFF00000000000000)
    )


def byte_swap(value, fmt: str):
    """Reverse the byte order of ``value`` packed with the struct format ``fmt``.

    The format describes a single primitive (for example ``"I"``, ``"h"`` or
    ``"f"``) of 1, 2, 4 or 8 bytes. One-byte values come back unchanged.
    """
    packer = struct.Struct("<" + fmt)
    if packer.size not in (1, 2, 4, 8):
        raise ValueError(f"unsupported primitive size {packer.size} for format {fmt!r}")
    packed = packer.pack(value)
    if packer.size == 1:
        return value
    (swapped,) = packer.unpack(packed[::-1])
    return swapped