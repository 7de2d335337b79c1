"""Row-major 4x4 matrices for row-vector transforms."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import ClassVar, Iterable, Iterator, Tuple, Union

from .vector import Vector3, normalize

Row = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix; a default instance is the identity.

    ``@`` is the matrix product; ``*`` and ``/`` scale by a number.
    """

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0
    m34: float = 0.0
    m41: float = 0.0
    m42: float = 0.0
    m43: float = 0.0
    m44: float = 1.0

    ZERO: ClassVar[Matrix4]
    IDENTITY: ClassVar[Matrix4]

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Matrix4:
        """Build a matrix from 16 values in row-major order."""
        values = tuple(values)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        return cls(*values)

    @property
    def values(self) -> Tuple[float, ...]:
        return astuple(self)

    def rows(self) -> Tuple[Row, Row, Row, Row]:
        v = self.values
        return v[0:4], v[4:8], v[8:12], v[12:16]  # type: ignore[return-value]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __neg__(self) -> Matrix4:
        return Matrix4(*(-a for a in self))

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a - b for a, b in zip(self, other)))

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other.rows()))
        return Matrix4(
            *(sum(a * b for a, b in zip(row, col)) for row in self.rows() for col in columns)
        )

    def __mul__(self, s: float) -> Matrix4:
        if isinstance(s, Matrix4):
            return NotImplemented
        return Matrix4(*(a * s for a in self))

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Matrix4:
        return Matrix4(*(a / s for a in self))

    @classmethod
    def translation(cls, v: Union[Vector3, Iterable[float]]) -> Matrix4:
        """Translation by a vector or an (x, y, z) triple."""
        x, y, z = v
        return cls(m41=x, m42=y, m43=z)

    @classmethod
    def rotation_x(cls, rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return cls(m22=c, m23=s, m32=-s, m33=c)

    @classmethod
    def rotation_y(cls, rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return cls(m11=c, m13=-s, m31=s, m33=c)

    @classmethod
    def rotation_z(cls, rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return cls(m11=c, m12=s, m21=-s, m22=c)

    @classmethod
    def rotation_axis(cls, axis: Vector3, rad: float) -> Matrix4:
        """Rotation of ``rad`` radians about ``axis``, which need not be unit length."""
        u = normalize(axis)
        x, y, z = u.x, u.y, u.z
        s, c = math.sin(rad), math.cos(rad)
        t = 1.0 - c
        return cls(
            c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0,
            x * y * t - z * s, c + y * y * t, y * z * t + x * s, 0.0,
            x * z * t + y * s, y * z * t - x * s, c + z * z * t, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_quaternion(cls, q) -> Matrix4:
        """Rotation matrix of a quaternion with x, y, z, w attributes."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls(
            1.0 - 2.0 * y * y - 2.0 * z * z,
            2.0 * x * y + 2.0 * z * w,
            2.0 * x * z - 2.0 * y * w,
            0.0,
            2.0 * x * y - 2.0 * z * w,
            1.0 - 2.0 * x * x - 2.0 * z * z,
            2.0 * y * z + 2.0 * x * w,
            0.0,
            2.0 * x * z + 2.0 * y * w,
            2.0 * y * z - 2.0 * x * w,
            1.0 - 2.0 * x * x - 2.0 * y * y,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def scaling(cls, s: Union[float, Vector3, Iterable[float]]) -> Matrix4:
        """Uniform scaling by a number, or per-axis scaling by a vector or triple."""
        if isinstance(s, (int, float)):
            sx = sy = sz = s
        else:
            sx, sy, sz = s
        return cls(m11=sx, m22=sy, m33=sz)


Matrix4.ZERO = Matrix4(*([0.0] * 16))
Matrix4.IDENTITY = Matrix4()


def transform_coord(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a point, applying translation."""
    return Vector3(
        v.x * m.m11 + v.y * m.m21 + v.z * m.m31 + m.m41,
        v.x * m.m12 + v.y * m.m22 + v.z * m.m32 + m.m42,
        v.x * m.m13 + v.y * m.m23 + v.z * m.m33 + m.m43,
    )


def transform_normal(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a direction, ignoring translation."""
    return Vector3(
        v.x * m.m11 + v.y * m.m21 + v.z * m.m31,
        v.x * m.m12 + v.y * m.m22 + v.z * m.m32,
        v.x * m.m13 + v.y * m.m23 + v.z * m.m33,
    )


def transpose(m: Matrix4) -> Matrix4:
    """Swap rows and columns."""
    return Matrix4(*(value for column in zip(*m.rows()) for value in column))


def get_translation(m: Matrix4) -> Vector3:
    return Vector3(m.m41, m.m42, m.m43)


def get_right(m: Matrix4) -> Vector3:
    return Vector3(m.m11, m.m12, m.m13)


def get_up(m: Matrix4) -> Vector3:
    return Vector3(m.m21, m.m22, m.m23)


def get_look(m: Matrix4) -> Vector3:
    return Vector3(m.m31, m.m32, m.m33)


def get_scale(m: Matrix4) -> Vector3:
    return Vector3(m.m11, m.m22, m.m33)