"""Byte-aligned serialization streams with object references."""

from __future__ import annotations

import struct
from functools import lru_cache
from typing import Any, Iterable

from gamenet.linking import LinkingContext


@lru_cache(maxsize=None)
def _packer(fmt: str) -> struct.Struct:
    """Return a little-endian packer for a format holding a single primitive."""
    try:
        packer = struct.Struct("<" + fmt)
    except struct.error as exc:
        raise ValueError(f"invalid primitive format {fmt!r}") from exc
    if len(packer.unpack(bytes(packer.size))) != 1:
        raise ValueError(f"format {fmt!r} must describe exactly one primitive")
    return packer


class OutputMemoryStream:
    """Appends little-endian primitives to a growable byte buffer."""

    def __init__(self, linking_context: LinkingContext | None = None) -> None:
        self._buffer = bytearray()
        self.linking_context = linking_context

    @property
    def length(self) -> int:
        """Number of bytes written."""
        return len(self._buffer)

    def write_bytes(self, data: bytes) -> None:
        self._buffer.extend(data)

    def write_primitive(self, fmt: str, value: Any) -> None:
        """Write one value packed with the struct format ``fmt``."""
        packer = _packer(fmt)
        try:
            self._buffer.extend(packer.pack(value))
        except struct.error as exc:
            raise ValueError(f"cannot pack {value!r} as {fmt!r}: {exc}") from exc

    def write_int_list(self, values: Iterable[int]) -> None:
        """Write a 64-bit element count followed by 32-bit signed integers."""
        items = list(values)
        self.write_primitive("Q", len(items))
        for item in items:
            self.write_primitive("i", item)

    def write_list(self, fmt: str, values: Iterable[Any]) -> None:
        """Write a 32-bit element count followed by each value as ``fmt``."""
        items = list(values)
        self.write_primitive("I", len(items))
        for item in items:
            self.write_primitive(fmt, item)

    def write_string(self, text: str) -> None:
        """Write a 64-bit byte count followed by the UTF-8 bytes."""
        encoded = text.encode("utf-8")
        self.write_primitive("Q", len(encoded))
        self.write_bytes(encoded)

    def write_game_object(self, game_object: Any) -> None:
        """Write the object's network id from the linking context."""
        if self.linking_context is None:
            raise ValueError("writing a game object needs a linking context")
        self.write_primitive("I", self.linking_context.get_network_id(game_object))

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class InputMemoryStream:
    """Reads little-endian primitives from a byte buffer."""

    def __init__(
        self,
        data: bytes,
        byte_count: int | None = None,
        linking_context: LinkingContext | None = None,
    ) -> None:
        self._buffer = bytes(data)
        if byte_count is None:
            byte_count = len(self._buffer)
        if not 0 <= byte_count <= len(self._buffer):
            raise ValueError("byte count exceeds the size of the buffer")
        self._capacity = byte_count
        self._head = 0
        self.linking_context = linking_context

    @property
    def remaining_data_size(self) -> int:
        return self._capacity - self._head

    def read_bytes(self, byte_count: int) -> bytes:
        """Read ``byte_count`` bytes; the position is unchanged on failure."""
        if byte_count < 0:
            raise ValueError("byte count must be non-negative")
        new_head = self._head + byte_count
        if new_head > self._capacity:
            raise EOFError(
                f"cannot read {byte_count} bytes, {self.remaining_data_size} remain"
            )
        chunk = self._buffer[self._head:new_head]
        self._head = new_head
        return chunk

    def read_primitive(self, fmt: str) -> Any:
        packer = _packer(fmt)
        (value,) = packer.unpack(self.read_bytes(packer.size))
        return value

    def read_int_list(self) -> list[int]:
        count = self.read_primitive("Q")
        return [self.read_primitive("i") for _ in range(count)]

    def read_list(self, fmt: str) -> list[Any]:
        count = self.read_primitive("I")
        return [self.read_primitive(fmt) for _ in range(count)]

    def read_string(self) -> str:
        length = self.read_primitive("Q")
        return self.read_bytes(length).decode("utf-8")

    def read_game_object(self) -> Any | None:
        """Read a network id and return the object it refers to, or None."""
        if self.linking_context is None:
            raise ValueError("reading a game object needs a linking context")
        return self.linking_context.get_game_object(self.read_primitive("I"))