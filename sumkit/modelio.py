"""Text file formats for models, materials, skeletons and animations."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from .colors import Color
from .matrix import Matrix4
from .mesh import Mesh, Vertex
from .model import (
    Animation,
    AnimationBuilder,
    AnimationClip,
    Bone,
    Material,
    MaterialData,
    MeshData,
    Model,
    Skeleton,
)
from .quaternion import Quaternion
from .vector import Vector2, Vector3

PathLike = Union[str, Path]

NO_TEXTURE = "<none>"
ANIMATION_LABEL = "[ANIMATION]"
EMPTY_LABEL = "[EMPTY]"


class ModelIOError(ValueError):
    """Raised when a model file does not have the expected layout."""


def _fmt(value: float) -> str:
    return f"{value:f}"


def _line(*values: float) -> str:
    return " ".join(_fmt(v) for v in values) + "\n"


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._it = (token for line in lines for token in line.split())

    def next(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ModelIOError(f"unexpected end of data while reading {what}") from None

    def expect(self, label: str) -> None:
        token = self.next(label)
        if token != label:
            raise ModelIOError(f"expected {label!r}, found {token!r}")

    def integer(self, what: str) -> int:
        token = self.next(what)
        try:
            return int(token)
        except ValueError:
            raise ModelIOError(f"{what}: {token!r} is not an integer") from None

    def number(self, what: str) -> float:
        token = self.next(what)
        try:
            return float(token)
        except ValueError:
            raise ModelIOError(f"{what}: {token!r} is not a number") from None

    def numbers(self, count: int, what: str) -> List[float]:
        return [self.number(what) for _ in range(count)]

    def field_int(self, label: str) -> int:
        self.expect(label)
        return self.integer(label)

    def field_float(self, label: str) -> float:
        self.expect(label)
        return self.number(label)

    def count(self, label: str) -> int:
        value = self.field_int(label)
        if value < 0:
            raise ModelIOError(f"{label} {value} is negative")
        return value


def write_animation(stream: TextIO, animation: Animation) -> None:
    """Write the position, rotation and scale tracks of an animation."""
    stream.write(f"PositionKeyCount: {len(animation.position_keys)}\n")
    for key in animation.position_keys:
        stream.write(_line(key.time, *key.key))
    stream.write(f"RotationKeyCount: {len(animation.rotation_keys)}\n")
    for key in animation.rotation_keys:
        q = key.key
        stream.write(_line(key.time, q.x, q.y, q.z, q.w))
    stream.write(f"ScaleKeyCount: {len(animation.scale_keys)}\n")
    for key in animation.scale_keys:
        stream.write(_line(key.time, *key.key))


def _read_animation(tokens: _Tokens) -> Animation:
    builder = AnimationBuilder()
    for _ in range(tokens.count("PositionKeyCount:")):
        time, x, y, z = tokens.numbers(4, "position key")
        builder.add_position_key(Vector3(x, y, z), time)
    for _ in range(tokens.count("RotationKeyCount:")):
        time, x, y, z, w = tokens.numbers(5, "rotation key")
        builder.add_rotation_key(Quaternion(x, y, z, w), time)
    for _ in range(tokens.count("ScaleKeyCount:")):
        time, x, y, z = tokens.numbers(4, "scale key")
        builder.add_scale_key(Vector3(x, y, z), time)
    return builder.build()


def read_animation(stream: TextIO) -> Animation:
    """Read an animation written by write_animation."""
    return _read_animation(_Tokens(stream))


def _write_vertex(stream: TextIO, v: Vertex) -> None:
    floats = " ".join(
        _fmt(value) for value in (*v.position, *v.normal, *v.tangent, v.uv_coord.x, v.uv_coord.y)
    )
    indices = " ".join(str(int(i)) for i in v.bone_indices)
    weights = " ".join(_fmt(w) for w in v.bone_weights)
    stream.write(f"{floats} {indices} {weights}\n")


def _read_vertex(tokens: _Tokens) -> Vertex:
    f = tokens.numbers(11, "vertex")
    bone_indices = tuple(tokens.integer("vertex bone index") for _ in range(4))
    bone_weights = tuple(tokens.numbers(4, "vertex bone weight"))
    return Vertex(
        position=Vector3(f[0], f[1], f[2]),
        normal=Vector3(f[3], f[4], f[5]),
        tangent=Vector3(f[6], f[7], f[8]),
        uv_coord=Vector2(f[9], f[10]),
        bone_indices=bone_indices,
        bone_weights=bone_weights,
    )


def save_model(path: PathLike, model: Model) -> Optional[Path]:
    """Write the meshes to ``<path>.model``; returns the file, or None if there are no meshes."""
    if not model.mesh_data:
        return None
    target = Path(path).with_suffix(".model")
    with target.open("w") as stream:
        stream.write(f"MeshCount: {len(model.mesh_data)}\n")
        for mesh_data in model.mesh_data:
            stream.write(f"MaterialIndex: {mesh_data.material_index}\n")
            mesh = mesh_data.mesh
            stream.write(f"VertexCount: {len(mesh.vertices)}\n")
            for vertex in mesh.vertices:
                _write_vertex(stream, vertex)
            indices = mesh.indices
            stream.write(f"IndexCount: {len(indices)}\n")
            for start in range(0, len(indices) - 2, 3):
                a, b, c = indices[start:start + 3]
                stream.write(f"{a} {b} {c}\n")
    return target


def load_model(path: PathLike, model: Model) -> Model:
    """Replace the model's meshes with those in the file at ``path``."""
    with Path(path).open() as stream:
        tokens = _Tokens(stream)
        mesh_data = []
        for _ in range(tokens.count("MeshCount:")):
            material_index = tokens.field_int("MaterialIndex:")
            vertices = [_read_vertex(tokens) for _ in range(tokens.count("VertexCount:"))]
            index_count = tokens.count("IndexCount:")
            indices = [0] * index_count
            for start in range(0, index_count - 2, 3):
                indices[start:start + 3] = [tokens.integer("index") for _ in range(3)]
            mesh_data.append(MeshData(Mesh(vertices, indices), material_index))
    model.mesh_data = mesh_data
    return model


def save_material(path: PathLike, model: Model) -> Optional[Path]:
    """Write the materials to ``<path>.material``; returns the file, or None if there are none."""
    if not model.material_data:
        return None
    target = Path(path).with_suffix(".material")
    with target.open("w") as stream:
        stream.write(f"MaterialCount: {len(model.material_data)}\n")
        for data in model.material_data:
            m = data.material
            for color in (m.ambient, m.diffuse, m.emissive, m.specular):
                stream.write(_line(*color))
            stream.write(f"Power: {_fmt(m.power)}\n")
            for name in (
                data.diffuse_map_name,
                data.normal_map_name,
                data.spec_map_name,
                data.bump_map_name,
            ):
                stream.write(f"{name or NO_TEXTURE}\n")
    return target


def load_material(path: PathLike, model: Model) -> Model:
    """Replace the model's materials with those in ``<path>.material``.

    Texture names are resolved against the directory of the material file.
    """
    source = Path(path).with_suffix(".material")

    def texture_name(tokens: _Tokens) -> str:
        name = tokens.next("texture name")
        return "" if name == NO_TEXTURE else str(source.with_name(name))

    with source.open() as stream:
        tokens = _Tokens(stream)
        materials = []
        for _ in range(tokens.count("MaterialCount:")):
            ambient, diffuse, emissive, specular = (
                Color(*tokens.numbers(4, "colour")) for _ in range(4)
            )
            power = tokens.field_float("Power:")
            material = Material(
                ambient=ambient, diffuse=diffuse, specular=specular, emissive=emissive, power=power
            )
            materials.append(
                MaterialData(
                    material=material,
                    diffuse_map_name=texture_name(tokens),
                    normal_map_name=texture_name(tokens),
                    spec_map_name=texture_name(tokens),
                    bump_map_name=texture_name(tokens),
                )
            )
    model.material_data = materials
    return model


def save_skeleton(path: PathLike, model: Model) -> Optional[Path]:
    """Write the skeleton to ``<path>.skeleton``; returns the file, or None if there are no bones."""
    skeleton = model.skeleton
    if skeleton is None or not skeleton.bones:
        return None
    if skeleton.root is None:
        raise ValueError("skeleton has no root bone")
    target = Path(path).with_suffix(".skeleton")
    with target.open("w") as stream:
        stream.write(f"BoneCount: {len(skeleton.bones)}\n")
        stream.write(f"RootBone: {skeleton.root.index}\n")
        for bone in skeleton.bones:
            stream.write(f"BoneName: {bone.name}\n")
            stream.write(f"BoneImdex: {bone.index}\n")
            stream.write(f"BoneParentIndex: {bone.parent_index}\n")
            stream.write(f"BoneChildCount: {len(bone.children_indices)}\n")
            for child in bone.children_indices:
                stream.write(f"{child}\n")
            for matrix in (bone.to_parent_transform, bone.offset_transform):
                for row in matrix.rows():
                    stream.write(_line(*row))
    return target


def _bone_at(bones: List[Bone], index: int) -> Bone:
    if not 0 <= index < len(bones):
        raise ModelIOError(f"bone index {index} is out of range")
    return bones[index]


def load_skeleton(path: PathLike, model: Model) -> Model:
    """Replace the model's skeleton with the one in ``<path>.skeleton``."""
    with Path(path).with_suffix(".skeleton").open() as stream:
        tokens = _Tokens(stream)
        bone_count = tokens.count("BoneCount:")
        root_index = tokens.field_int("RootBone:")
        bones = [Bone() for _ in range(bone_count)]
        skeleton = Skeleton(root=_bone_at(bones, root_index), bones=bones)
        for bone in bones:
            tokens.expect("BoneName:")
            bone.name = tokens.next("bone name")
            bone.index = tokens.field_int("BoneImdex:")
            bone.parent_index = tokens.field_int("BoneParentIndex:")
            if bone.parent_index > -1:
                bone.parent = _bone_at(bones, bone.parent_index)
            child_count = tokens.count("BoneChildCount:")
            bone.children_indices = [tokens.integer("child index") for _ in range(child_count)]
            bone.children = [_bone_at(bones, i) for i in bone.children_indices]
            bone.to_parent_transform = Matrix4.from_values(tokens.numbers(16, "matrix"))
            bone.offset_transform = Matrix4.from_values(tokens.numbers(16, "matrix"))
    model.skeleton = skeleton
    return model


def save_animations(path: PathLike, model: Model) -> Optional[Path]:
    """Write the animation clips to ``<path>.animset``.

    Nothing is written, and None returned, without bones or clips.
    """
    if model.skeleton is None or not model.skeleton.bones or not model.animation_clips:
        return None
    target = Path(path).with_suffix(".animset")
    with target.open("w") as stream:
        stream.write(f"AnimClipCount: {len(model.animation_clips)}\n")
        for clip in model.animation_clips:
            stream.write(f"AnimationClipName: {clip.name}\n")
            stream.write(f"TickDuration: {_fmt(clip.tick_duration)}\n")
            stream.write(f"TicksPerSecond: {_fmt(clip.ticks_per_second)}\n")
            stream.write(f"BoneAnimCount: {len(clip.bone_animations)}\n")
            for animation in clip.bone_animations:
                if animation is None:
                    stream.write(f"{EMPTY_LABEL}\n")
                    continue
                stream.write(f"{ANIMATION_LABEL}\n")
                write_animation(stream, animation)
    return target


def load_animations(path: PathLike, model: Model) -> Model:
    """Append the clips in ``<path>.animset`` to the model's animation clips."""
    with Path(path).with_suffix(".animset").open() as stream:
        tokens = _Tokens(stream)
        for _ in range(tokens.count("AnimClipCount:")):
            tokens.expect("AnimationClipName:")
            clip = AnimationClip(name=tokens.next("clip name"))
            clip.tick_duration = tokens.field_float("TickDuration:")
            clip.ticks_per_second = tokens.field_float("TicksPerSecond:")
            for _ in range(tokens.count("BoneAnimCount:")):
                label = tokens.next("bone animation label")
                clip.bone_animations.append(
                    _read_animation(tokens) if label == ANIMATION_LABEL else None
                )
            model.animation_clips.append(clip)
    return model