"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from .matrix import Matrix4
from .vector import Vector3, normalize


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0.0 else math.nan


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quaternion]
    ZERO: ClassVar[Quaternion]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __mul__(self, s: float) -> Quaternion:
        if isinstance(s, Quaternion):
            return NotImplemented
        return Quaternion(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Quaternion:
        return Quaternion(self.x / s, self.y / s, self.z / s, self.w / s)

    def conjugate(self) -> Quaternion:
        """The quaternion with its vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """The multiplicative inverse; raises ZeroDivisionError for the zero quaternion."""
        return self.conjugate() / self.magnitude_squared()

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalized(self) -> Quaternion:
        """Unit quaternion; raises ZeroDivisionError for the zero quaternion."""
        return self / self.magnitude()

    def dot(self, q: Quaternion) -> float:
        return self.x * q.x + self.y * q.y + self.z * q.z + self.w * q.w

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis``, which need not be unit length."""
        c = math.cos(angle * 0.5)
        s = math.sin(angle * 0.5)
        a = normalize(axis)
        return cls(a.x * s, a.y * s, a.z * s, c)

    @classmethod
    def from_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> Quaternion:
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return cls(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        )

    @classmethod
    def from_rotation_matrix(cls, m: Matrix4) -> Quaternion:
        """Quaternion from the rotation part of ``m``, chosen by its largest component."""
        w = _sqrt(m.m11 + m.m22 + m.m33 + 1.0) * 0.5
        x = _sqrt(m.m11 - m.m22 - m.m33 + 1.0) * 0.5
        y = _sqrt(-m.m11 + m.m22 - m.m33 + 1.0) * 0.5
        z = _sqrt(-m.m11 - m.m22 + m.m33 + 1.0) * 0.5

        if w >= x and w >= y and w >= z:
            ratio = 1.0 / (4.0 * w)
            return cls(
                (m.m23 - m.m32) * ratio,
                (m.m31 - m.m13) * ratio,
                (m.m12 - m.m21) * ratio,
                w,
            )
        if x >= w and x >= y and x >= z:
            ratio = 1.0 / (4.0 * x)
            return cls(
                x,
                (m.m12 - m.m21) * ratio,
                (m.m31 - m.m13) * ratio,
                (m.m23 - m.m32) * ratio,
            )
        if y >= w and y >= x and y >= z:
            ratio = 1.0 / (4.0 * y)
            return cls(
                (m.m31 - m.m13) * ratio,
                y,
                (m.m23 - m.m32) * ratio,
                (m.m31 - m.m13) * ratio,
            )
        if z >= x and z >= y and z >= w:
            ratio = 1.0 / (4.0 * z)
            return cls(
                (m.m31 - m.m13) * ratio,
                (m.m23 - m.m32) * ratio,
                z,
                (m.m12 - m.m21) * ratio,
            )
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def lerp(cls, q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        """Component-wise linear interpolation, not normalized."""
        return q0 * (1.0 - t) + q1 * t

    @classmethod
    def slerp(cls, q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        """Spherical interpolation along the shorter arc, normalized."""
        d = q0.dot(q1)
        q1_scale = 1.0
        if d < 0.0:
            d = -d
            q1_scale = -1.0
        if d > 0.9999:
            return cls.lerp(q0, q1, t).normalized()

        theta = math.acos(d)
        sin_theta = math.sin(theta)
        scale0 = math.sin(theta * (1.0 - t)) / sin_theta
        scale1 = q1_scale * math.sin(theta * t) / sin_theta
        q = cls(
            q0.x * scale0 + q1.x * scale1,
            q0.y * scale0 + q1.y * scale1,
            q0.z * scale0 + q1.z * scale1,
            q0.w * scale0 + q1.w * scale1,
        )
        return q.normalized()


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)
Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)