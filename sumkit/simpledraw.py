"""Immediate-mode batching of debug lines and faces."""

from __future__ import annotations

import math
from typing import Iterable, List, NamedTuple, Tuple, Union

from .colors import BLUE, GREEN, RED, Color
from .matrix import Matrix4
from .mesh import VertexPC
from .scalar import PI, TWO_PI
from .vector import Vector3

Point = Union[Vector3, Iterable[float]]


class DrawBatch(NamedTuple):
    """The vertices gathered since the last flush: line pairs and face triples."""

    lines: List[VertexPC]
    faces: List[VertexPC]


def _surface(theta: float, phi: float, rx: float, ry: float, rz: float) -> Vector3:
    sp = math.sin(phi)
    return Vector3(math.sin(theta) * sp * rx, math.cos(phi) * ry, math.cos(theta) * sp * rz)


class SimpleDraw:
    """Collects coloured lines and triangles, each list capped at ``max_vertex_count``.

    Shapes that would overflow a list are dropped one primitive at a time.
    """

    def __init__(self, max_vertex_count: int) -> None:
        if max_vertex_count < 0:
            raise ValueError("max_vertex_count must not be negative")
        self.max_vertex_count = max_vertex_count
        self._lines: List[VertexPC] = []
        self._faces: List[VertexPC] = []

    @property
    def line_vertices(self) -> Tuple[VertexPC, ...]:
        return tuple(self._lines)

    @property
    def face_vertices(self) -> Tuple[VertexPC, ...]:
        return tuple(self._faces)

    def add_line(self, v0: Vector3, v1: Vector3, color: Color) -> None:
        if len(self._lines) + 2 <= self.max_vertex_count:
            self._lines.extend((VertexPC(v0, color), VertexPC(v1, color)))

    def add_face(self, v0: Vector3, v1: Vector3, v2: Vector3, color: Color) -> None:
        if len(self._faces) + 3 <= self.max_vertex_count:
            self._faces.extend((VertexPC(v0, color), VertexPC(v1, color), VertexPC(v2, color)))

    @staticmethod
    def _corners(min_corner: Point, max_corner: Point):
        min_x, min_y, min_z = min_corner
        max_x, max_y, max_z = max_corner
        return (
            Vector3(min_x, min_y, min_z),  # bottom left front
            Vector3(min_x, max_y, min_z),  # top left front
            Vector3(max_x, max_y, min_z),  # top right front
            Vector3(max_x, min_y, min_z),  # bottom right front
            Vector3(min_x, min_y, max_z),  # bottom left back
            Vector3(min_x, max_y, max_z),  # top left back
            Vector3(max_x, max_y, max_z),  # top right back
            Vector3(max_x, min_y, max_z),  # bottom right back
        )

    def add_aabb(self, min_corner: Point, max_corner: Point, color: Color) -> None:
        """Wireframe box between two corners."""
        blf, tlf, trf, brf, blb, tlb, trb, brb = self._corners(min_corner, max_corner)
        edges = (
            (blf, tlf), (tlf, trf), (trf, brf), (brf, blf),
            (blb, tlb), (tlb, trb), (trb, brb), (brb, blb),
            (tlf, tlb), (trf, trb),
            (blf, blb), (brf, brb),
        )
        for a, b in edges:
            self.add_line(a, b, color)

    def add_filled_aabb(self, min_corner: Point, max_corner: Point, color: Color) -> None:
        """Solid box between two corners, two triangles per side."""
        blf, tlf, trf, brf, blb, tlb, trb, brb = self._corners(min_corner, max_corner)
        faces = (
            (blf, tlf, trf), (blf, trf, brf),
            (brb, trb, tlb), (brb, tlb, blb),
            (brf, trf, trb), (brf, trb, brb),
            (blb, tlb, tlf), (blb, tlf, blf),
            (tlf, tlb, trb), (tlf, trb, trf),
            (brf, brb, blb), (brf, blb, blf),
        )
        for a, b, c in faces:
            self.add_face(a, b, c, color)

    def add_sphere(
        self, slices: int, rings: int, radius: float, pos: Vector3, color: Color
    ) -> None:
        """Wire sphere drawn as two families of circles."""
        self.add_oval(slices, rings, radius, radius, pos, color)

    def add_filled_sphere(
        self, slices: int, rings: int, radius: float, pos: Vector3, color: Color
    ) -> None:
        self.add_filled_oval(slices, rings, radius, radius, radius, pos, color)

    def add_ground_circle(self, slices: int, radius: float, pos: Vector3, color: Color) -> None:
        """Circle in the xz plane around ``pos``."""
        if slices <= 0:
            return
        horz_rot = TWO_PI / slices
        for s in range(slices):
            rot0 = s * horz_rot
            rot1 = (s + 1) * horz_rot
            v0 = Vector3(math.sin(rot0) * radius, 0.0, math.cos(rot0) * radius)
            v1 = Vector3(math.sin(rot1) * radius, 0.0, math.cos(rot1) * radius)
            self.add_line(v0 + pos, v1 + pos, color)

    def add_oval(
        self, slices: int, rings: int, r1: float, r2: float, pos: Vector3, color: Color
    ) -> None:
        """Horizontal circles of radius ``r1`` and sideways circles of radius ``r2``."""
        if slices <= 0 or rings <= 0:
            return
        vert_rot = PI / rings
        horz_rot = TWO_PI / slices
        for r in range(rings):
            phi = r * vert_rot
            sp, cp = math.sin(phi), math.cos(phi)
            for s in range(slices):
                rot0 = s * horz_rot
                rot1 = (s + 1) * horz_rot
                v0 = Vector3(math.sin(rot0) * sp * r1, cp * r1, math.cos(rot0) * sp * r1)
                v1 = Vector3(math.sin(rot1) * sp * r1, cp * r1, math.cos(rot1) * sp * r1)
                self.add_line(v0 + pos, v1 + pos, color)

                v0 = Vector3(cp * r2, math.cos(rot0) * sp * r2, math.sin(rot0) * sp * r2)
                v1 = Vector3(cp * r2, math.cos(rot1) * sp * r2, math.sin(rot1) * sp * r2)
                self.add_line(v0 + pos, v1 + pos, color)

    def add_ellipsoid(
        self,
        slices: int,
        rings: int,
        radius_x: float,
        radius_y: float,
        radius_z: float,
        pos: Vector3,
        color: Color,
    ) -> None:
        """Wire ellipsoid drawn as horizontal rings."""
        if slices <= 0 or rings <= 0:
            return
        vert_rot = PI / rings
        horz_rot = TWO_PI / slices
        for r in range(rings):
            phi = r * vert_rot
            for s in range(slices):
                v0 = _surface(s * horz_rot, phi, radius_x, radius_y, radius_z)
                v1 = _surface((s + 1) * horz_rot, phi, radius_x, radius_y, radius_z)
                self.add_line(v0 + pos, v1 + pos, color)

    def add_filled_oval(
        self,
        slices: int,
        rings: int,
        radius_x: float,
        radius_y: float,
        radius_z: float,
        pos: Vector3,
        color: Color,
    ) -> None:
        """Solid ellipsoid, two triangles per ring segment."""
        if slices <= 0 or rings <= 0:
            return
        vert_rot = PI / rings
        horz_rot = TWO_PI / slices
        radii = (radius_x, radius_y, radius_z)
        for r in range(rings):
            phi0 = r * vert_rot
            phi1 = (r + 1) * vert_rot
            for s in range(slices):
                theta0 = s * horz_rot
                theta1 = (s + 1) * horz_rot
                v0 = _surface(theta0, phi0, *radii)
                v1 = _surface(theta1, phi0, *radii)
                v2 = _surface(theta0, phi1, *radii)
                self.add_face(v0 + pos, v1 + pos, v2 + pos, color)
                v3 = _surface(theta1, phi1, *radii)
                self.add_face(v1 + pos, v3 + pos, v2 + pos, color)

    def add_cone(
        self, slices: int, radius: float, circle_pos: Vector3, cone_tip: Vector3, color: Color
    ) -> None:
        """Cone sides from a circle in the xz plane to ``cone_tip``."""
        if slices <= 0:
            return
        horz_rot = TWO_PI / slices
        for s in range(slices):
            rot0 = s * horz_rot
            rot1 = (s + 1) * horz_rot
            v0 = Vector3(math.sin(rot0) * radius, 0.0, math.cos(rot0) * radius)
            v1 = Vector3(math.sin(rot1) * radius, 0.0, math.cos(rot1) * radius)
            self.add_face(v1 + circle_pos, cone_tip, v0 + circle_pos, color)

    def add_ground_plane(self, size: float, color: Color) -> None:
        """Unit grid of lines in the xz plane, centred on the origin."""
        hs = size * 0.5
        count = math.floor(size) + 1 if size >= 0 else 0
        for i in range(count):
            self.add_line(Vector3(i - hs, 0.0, -hs), Vector3(i - hs, 0.0, hs), color)
            self.add_line(Vector3(-hs, 0.0, i - hs), Vector3(hs, 0.0, i - hs), color)

    def add_transform(self, m: Matrix4) -> None:
        """Axis gizmo of a matrix: right in red, up in green, look in blue."""
        side = Vector3(m.m11, m.m12, m.m13)
        up = Vector3(m.m21, m.m22, m.m23)
        look = Vector3(m.m31, m.m32, m.m33)
        pos = Vector3(m.m41, m.m42, m.m43)
        self.add_line(pos, pos + side, RED)
        self.add_line(pos, pos + up, GREEN)
        self.add_line(pos, pos + look, BLUE)

    def flush(self) -> DrawBatch:
        """Hand over everything gathered so far and start empty."""
        batch = DrawBatch(self._lines, self._faces)
        self._lines = []
        self._faces = []
        return batch