"""Height-field terrain built from an 8-bit heightmap."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .mesh import Mesh, Vertex
from .vector import Vector2, Vector3

PathLike = Union[str, Path]


@dataclass
class Terrain:
    """A square grid of vertices, one per heightmap sample, triangulated into cells."""

    mesh: Mesh[Vertex] = field(default_factory=Mesh)
    rows: int = 0
    columns: int = 0

    @classmethod
    def from_heightmap(cls, data: bytes, max_height: float, tile_count: float) -> Terrain:
        """Build a terrain from raw height bytes.

        The grid side is the integer square root of the data length; each byte
        scales to a height in ``[0, max_height]``. Raises ValueError for empty data.
        """
        samples = bytes(data)
        dimensions = math.isqrt(len(samples))
        if dimensions == 0:
            raise ValueError("heightmap holds no samples")
        rows = columns = dimensions

        vertices = [
            Vertex(
                position=Vector3(float(x), samples[x + z * columns] / 255.0 * max_height, float(z)),
                normal=Vector3.Y_AXIS,
                tangent=Vector3.X_AXIS,
                uv_coord=Vector2(x / columns * tile_count, z / rows * tile_count),
            )
            for z in range(rows)
            for x in range(columns)
        ]

        indices = []
        for z in range(rows - 1):
            for x in range(columns - 1):
                bl = x + z * columns
                tl = x + (z + 1) * columns
                br = (x + 1) + z * columns
                tr = (x + 1) + (z + 1) * columns
                indices.extend((bl, tl, tr, bl, tr, br))

        return cls(Mesh(vertices, indices), rows, columns)

    @classmethod
    def from_file(cls, path: PathLike, max_height: float, tile_count: float) -> Terrain:
        """Build a terrain from a raw heightmap file."""
        return cls.from_heightmap(Path(path).read_bytes(), max_height, tile_count)

    @property
    def width(self) -> float:
        """Extent along x, in grid units."""
        return float(self.columns)

    @property
    def length(self) -> float:
        """Extent along z, in grid units."""
        return float(self.rows)

    def height_at(self, position: Vector3) -> float:
        """Interpolated ground height under ``position``; 0.0 outside the grid."""
        x = int(position.x)
        z = int(position.z)
        if x < 0 or z < 0 or x + 1 >= self.columns or z + 1 >= self.rows:
            return 0.0

        vertices = self.mesh.vertices
        bl = vertices[x + z * self.columns].position.y
        tl = vertices[x + (z + 1) * self.columns].position.y
        br = vertices[(x + 1) + z * self.columns].position.y
        tr = vertices[(x + 1) + (z + 1) * self.columns].position.y

        u = position.x - x
        v = position.z - z
        if u > v:
            return br + (tr - br) * v + (bl - br) * (1.0 - u)
        return tl + (tr - tl) * u + (bl - tl) * (1.0 - v)