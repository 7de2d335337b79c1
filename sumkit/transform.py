"""Position, rotation and scale of an object."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matrix import Matrix4
from .quaternion import Quaternion
from .vector import Vector3


@dataclass
class Transform:
    """An object's placement: scaled, then rotated, then translated."""

    position: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    rotation: Quaternion = field(default_factory=lambda: Quaternion.IDENTITY)
    scale: Vector3 = field(default_factory=lambda: Vector3.ONE)

    def matrix(self) -> Matrix4:
        """The world matrix for row vectors."""
        return (
            Matrix4.scaling(self.scale)
            @ Matrix4.rotation_quaternion(self.rotation)
            @ Matrix4.translation(self.position)
        )