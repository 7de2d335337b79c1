"""Vertex layouts and indexed meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import ClassVar, Generic, List, Tuple, TypeVar

from .colors import Color
from .vector import Vector2, Vector3

MAX_BONE_WEIGHTS = 4


class VertexFormat(IntFlag):
    """Flags naming the elements a vertex layout carries."""

    POSITION = 0x1 << 0
    NORMAL = 0x1 << 1
    TANGENT = 0x1 << 2
    COLOR = 0x1 << 3
    TEX_COORD = 0x1 << 4
    BLEND_INDEX = 0x1 << 5
    BLEND_WEIGHT = 0x1 << 6


@dataclass
class VertexP:
    """A vertex with a position only."""

    FORMAT: ClassVar[VertexFormat] = VertexFormat.POSITION

    position: Vector3 = field(default_factory=lambda: Vector3.ZERO)


@dataclass
class VertexPC:
    """A vertex with a position and a colour."""

    FORMAT: ClassVar[VertexFormat] = VertexFormat.POSITION | VertexFormat.COLOR

    position: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    color: Color = field(default_factory=Color)


@dataclass
class VertexPX:
    """A vertex with a position and a texture coordinate."""

    FORMAT: ClassVar[VertexFormat] = VertexFormat.POSITION | VertexFormat.TEX_COORD

    position: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    uv_coord: Vector2 = field(default_factory=lambda: Vector2.ZERO)


@dataclass
class Vertex:
    """A full vertex: position, normal, tangent, texture coordinate and skinning data."""

    FORMAT: ClassVar[VertexFormat] = (
        VertexFormat.POSITION
        | VertexFormat.NORMAL
        | VertexFormat.TANGENT
        | VertexFormat.TEX_COORD
        | VertexFormat.BLEND_INDEX
        | VertexFormat.BLEND_WEIGHT
    )
    MAX_BONE_WEIGHTS: ClassVar[int] = MAX_BONE_WEIGHTS

    position: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    normal: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    tangent: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    uv_coord: Vector2 = field(default_factory=lambda: Vector2.ZERO)
    bone_indices: Tuple[int, ...] = (0,) * MAX_BONE_WEIGHTS
    bone_weights: Tuple[float, ...] = (0.0,) * MAX_BONE_WEIGHTS

    def __post_init__(self) -> None:
        self.bone_indices = tuple(self.bone_indices)
        self.bone_weights = tuple(self.bone_weights)
        if len(self.bone_indices) != MAX_BONE_WEIGHTS:
            raise ValueError(f"a vertex holds exactly {MAX_BONE_WEIGHTS} bone indices")
        if len(self.bone_weights) != MAX_BONE_WEIGHTS:
            raise ValueError(f"a vertex holds exactly {MAX_BONE_WEIGHTS} bone weights")


V = TypeVar("V")


@dataclass
class Mesh(Generic[V]):
    """Vertices and the triangle indices into them."""

    vertices: List[V] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)