"""Two, three and four component vectors and vector helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vector2:
    """A two component vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    X_AXIS: ClassVar[Vector2]
    Y_AXIS: ClassVar[Vector2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vector2:
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector2:
        return Vector2(self.x / s, self.y / s)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.X_AXIS = Vector2(1.0, 0.0)
Vector2.Y_AXIS = Vector2(0.0, 1.0)


@dataclass(frozen=True)
class Vector3:
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    X_AXIS: ClassVar[Vector3]
    Y_AXIS: ClassVar[Vector3]
    Z_AXIS: ClassVar[Vector3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vector3:
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector3:
        return Vector3(self.x / s, self.y / s, self.z / s)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.X_AXIS = Vector3(1.0, 0.0, 0.0)
Vector3.Y_AXIS = Vector3(0.0, 1.0, 0.0)
Vector3.Z_AXIS = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Vector4:
    """A four component vector, also addressable as r, g, b, a."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, s: float) -> Vector4:
        return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector4:
        return Vector4(self.x / s, self.y / s, self.z / s, self.w / s)


def dot(a: Vector3, b: Vector3) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude_sqr(a: Vector3) -> float:
    """Squared length of a vector."""
    return a.x * a.x + a.y * a.y + a.z * a.z


def magnitude(a: Vector3) -> float:
    """Length of a vector."""
    return math.sqrt(magnitude_sqr(a))


def distance_sqr(a: Vector3, b: Vector3) -> float:
    """Squared distance between two points."""
    return abs(magnitude_sqr(a - b))


def distance(a: Vector3, b: Vector3) -> float:
    """Distance between two points."""
    return math.sqrt(distance_sqr(a, b))


def normalize(a: Vector3) -> Vector3:
    """Unit vector in the direction of ``a``; raises ZeroDivisionError for a zero vector."""
    return a / magnitude(a)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product of two vectors."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )