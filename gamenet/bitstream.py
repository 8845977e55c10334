"""Bit-level serialization streams for compact network packets."""

from __future__ import annotations

import math
import struct

from gamenet.robomath import Quaternion, Vector3

_QUAT_PRECISION = 2.0 / 65535.0
_INITIAL_BYTE_CAPACITY = 1500


def convert_to_fixed(number: float, minimum: float, precision: float) -> int:
    """Map ``number`` onto an integer step count above ``minimum``."""
    return int((number - minimum) / precision)


def convert_from_fixed(number: int, minimum: float, precision: float) -> float:
    """Map a step count produced by :func:`convert_to_fixed` back to a float."""
    return float(number) * precision + minimum


def _check_bit_count(bit_count: int) -> None:
    if bit_count < 0:
        raise ValueError("bit count must be non-negative")


class OutputMemoryBitStream:
    """Writes values into a buffer bit by bit, least significant bit first."""

    def __init__(self) -> None:
        self._buffer = bytearray(_INITIAL_BYTE_CAPACITY)
        self._bit_head = 0

    @property
    def bit_length(self) -> int:
        """Number of bits written so far."""
        return self._bit_head

    @property
    def byte_length(self) -> int:
        """Number of bytes touched by the bits written so far."""
        return (self._bit_head + 7) >> 3

    def _ensure_capacity(self, bit_count: int) -> None:
        needed = (bit_count + 7) >> 3
        if needed > len(self._buffer):
            new_size = max(len(self._buffer) * 2, needed)
            self._buffer.extend(bytes(new_size - len(self._buffer)))

    def write_bits(self, data: int, bit_count: int) -> None:
        """Write the low ``bit_count`` bits of the integer ``data``."""
        _check_bit_count(bit_count)
        data &= (1 << bit_count) - 1
        self._ensure_capacity(self._bit_head + bit_count)
        remaining = bit_count
        while remaining > 0:
            byte_offset = self._bit_head >> 3
            bit_offset = self._bit_head & 0x7
            take = min(8 - bit_offset, remaining)
            chunk = data & ((1 << take) - 1)
            keep_mask = (1 << bit_offset) - 1
            self._buffer[byte_offset] = (
                (self._buffer[byte_offset] & keep_mask) | (chunk << bit_offset)
            ) & 0xFF
            data >>= take
            remaining -= take
            self._bit_head += take

    def write_bytes(self, data: bytes) -> None:
        """Write whole bytes, which need not start on a byte boundary."""
        for byte in data:
            self.write_bits(byte, 8)

    def write_uint(self, value: int, bit_count: int = 32) -> None:
        """Write an unsigned integer that must fit in ``bit_count`` bits."""
        _check_bit_count(bit_count)
        if not 0 <= value < (1 << bit_count):
            raise ValueError(f"{value} does not fit in {bit_count} unsigned bits")
        self.write_bits(value, bit_count)

    def write_int(self, value: int, bit_count: int = 32) -> None:
        """Write a two's-complement signed integer of ``bit_count`` bits."""
        _check_bit_count(bit_count)
        if bit_count == 0:
            if value != 0:
                raise ValueError("only 0 fits in 0 bits")
            return
        low = -(1 << (bit_count - 1))
        high = (1 << (bit_count - 1)) - 1
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in {bit_count} signed bits")
        self.write_bits(value, bit_count)

    def write_float(self, value: float) -> None:
        """Write a 32-bit IEEE float."""
        self.write_bytes(struct.pack("<f", value))

    def write_bool(self, value: bool) -> None:
        """Write a single bit."""
        self.write_bits(1 if value else 0, 1)

    def write_vector3(self, vector: Vector3) -> None:
        self.write_float(vector.x)
        self.write_float(vector.y)
        self.write_float(vector.z)

    def write_quaternion(self, quat: Quaternion) -> None:
        """Write a unit quaternion as three 16-bit fixed values and a sign bit."""
        self.write_uint(convert_to_fixed(quat.x, -1.0, _QUAT_PRECISION), 16)
        self.write_uint(convert_to_fixed(quat.y, -1.0, _QUAT_PRECISION), 16)
        self.write_uint(convert_to_fixed(quat.z, -1.0, _QUAT_PRECISION), 16)
        self.write_bool(quat.w < 0)

    def write_string(self, text: str) -> None:
        """Write a 32-bit byte count followed by the UTF-8 bytes."""
        encoded = text.encode("utf-8")
        self.write_uint(len(encoded), 32)
        self.write_bytes(encoded)

    def getvalue(self) -> bytes:
        """Return the written data, padded with zero bits to a whole byte."""
        return bytes(self._buffer[: self.byte_length])


class InputMemoryBitStream:
    """Reads values bit by bit from a buffer written by OutputMemoryBitStream."""

    def __init__(self, data: bytes, bit_count: int | None = None) -> None:
        self._buffer = bytes(data)
        if bit_count is None:
            bit_count = len(self._buffer) * 8
        _check_bit_count(bit_count)
        if bit_count > len(self._buffer) * 8:
            raise ValueError("bit count exceeds the size of the buffer")
        self._bit_capacity = bit_count
        self._bit_head = 0

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def remaining_bit_count(self) -> int:
        return self._bit_capacity - self._bit_head

    def read_bits(self, bit_count: int) -> int:
        """Read ``bit_count`` bits as an unsigned integer."""
        _check_bit_count(bit_count)
        if bit_count > self.remaining_bit_count:
            raise EOFError(
                f"cannot read {bit_count} bits, {self.remaining_bit_count} remain"
            )
        result = 0
        shift = 0
        remaining = bit_count
        while remaining > 0:
            byte_offset = self._bit_head >> 3
            bit_offset = self._bit_head & 0x7
            take = min(8 - bit_offset, remaining)
            chunk = (self._buffer[byte_offset] >> bit_offset) & ((1 << take) - 1)
            result |= chunk << shift
            shift += take
            remaining -= take
            self._bit_head += take
        return result

    def read_bytes(self, byte_count: int) -> bytes:
        if byte_count < 0:
            raise ValueError("byte count must be non-negative")
        if byte_count * 8 > self.remaining_bit_count:
            raise EOFError(f"cannot read {byte_count} bytes")
        return bytes(self.read_bits(8) for _ in range(byte_count))

    def read_uint(self, bit_count: int = 32) -> int:
        return self.read_bits(bit_count)

    def read_int(self, bit_count: int = 32) -> int:
        """Read a two's-complement signed integer of ``bit_count`` bits."""
        raw = self.read_bits(bit_count)
        if bit_count and raw & (1 << (bit_count - 1)):
            raw -= 1 << bit_count
        return raw

    def read_float(self) -> float:
        (value,) = struct.unpack("<f", self.read_bytes(4))
        return value

    def read_bool(self) -> bool:
        return bool(self.read_bits(1))

    def read_vector3(self) -> Vector3:
        x = self.read_float()
        y = self.read_float()
        z = self.read_float()
        return Vector3(x, y, z)

    def read_quaternion(self) -> Quaternion:
        """Read a quaternion written by ``write_quaternion``."""
        x = convert_from_fixed(self.read_uint(16), -1.0, _QUAT_PRECISION)
        y = convert_from_fixed(self.read_uint(16), -1.0, _QUAT_PRECISION)
        z = convert_from_fixed(self.read_uint(16), -1.0, _QUAT_PRECISION)
        w = math.sqrt(max(0.0, 1.0 - (x * x + y * y + z * z)))
        if self.read_bool():
            w = -w
        return Quaternion(x, y, z, w)

    def read_string(self) -> str:
        length = self.read_uint(32)
        return self.read_bytes(length).decode("utf-8")

    def reset_to_capacity(self, byte_capacity: int) -> None:
        """Rewind to the start and limit reading to ``byte_capacity`` bytes."""
        if not 0 <= byte_capacity <= len(self._buffer):
            raise ValueError("byte capacity exceeds the size of the buffer")
        self._bit_capacity = byte_capacity << 3
        self._bit_head = 0