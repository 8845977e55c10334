"""Small vector and quaternion math used by the game networking code."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

PI = 3.1415926535


@dataclass
class Vector3:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> None:
        """Replace all three components."""
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vector3:
        if isinstance(scalar, (int, float)):
            return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    def __imul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length_2d(self) -> float:
        return math.sqrt(self.length_sq_2d())

    def length_sq_2d(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        length = self.length()
        self.x /= length
        self.y /= length
        self.z /= length

    def normalize_2d(self) -> None:
        """Scale the x and y components in place to unit 2D length."""
        length = self.length_2d()
        self.x /= length
        self.y /= length


@dataclass
class Quaternion:
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


def dot(left: Vector3, right: Vector3) -> float:
    return left.x * right.x + left.y * right.y + left.z * right.z


def dot_2d(left: Vector3, right: Vector3) -> float:
    return left.x * right.x + left.y * right.y


def cross(left: Vector3, right: Vector3) -> Vector3:
    return Vector3(
        left.y * right.z - left.z * right.y,
        left.z * right.x - left.x * right.z,
        left.x * right.y - left.y * right.x,
    )


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linear interpolation between ``a`` and ``b``."""
    return a + t * (b - a)


def get_random_float() -> float:
    """Return a random float in [0, 1)."""
    return random.random()


def get_random_vector(minimum: Vector3, maximum: Vector3) -> Vector3:
    """Return a vector with each component drawn between the bounds."""
    r = Vector3(get_random_float(), get_random_float(), get_random_float())
    return minimum + r * (maximum - minimum)


def is_2d_vector_equal(a: Vector3, b: Vector3) -> bool:
    return a.x == b.x and a.y == b.y


def to_degrees(radians: float) -> float:
    return radians * 180.0 / PI


def get_required_bits(value: int) -> int:
    """Number of bits needed to hold a non-negative integer."""
    if value < 0:
        raise ValueError("value must be non-negative")
    return value.bit_length()


ZERO = Vector3(0.0, 0.0, 0.0)
UNIT_X = Vector3(1.0, 0.0, 0.0)
UNIT_Y = Vector3(0.0, 1.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
RED = Vector3(1.0, 0.0, 0.0)
GREEN = Vector3(0.0, 1.0, 0.0)
BLUE = Vector3(0.0, 0.0, 1.0)
LIGHT_YELLOW = Vector3(1.0, 1.0, 0.88)
LIGHT_BLUE = Vector3(0.68, 0.85, 0.9)
LIGHT_PINK = Vector3(1.0, 0.71, 0.76)
LIGHT_GREEN = Vector3(0.56, 0.93, 0.56)