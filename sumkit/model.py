"""Models: meshes, materials, skeletons and keyframed animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .colors import BLACK, WHITE, Color
from .matrix import Matrix4
from .mesh import Mesh, Vertex
from .quaternion import Quaternion
from .vector import Vector3

T = TypeVar("T")

AnimationCallback = Callable[[], None]
AnimationParameterCallback = Callable[[Any], None]


@dataclass(frozen=True)
class Keyframe(Generic[T]):
    """A value at a point in time."""

    key: T
    time: float = 0.0


@dataclass
class Animation:
    """Position, rotation and scale tracks plus event tracks."""

    position_keys: List[Keyframe[Vector3]] = field(default_factory=list)
    rotation_keys: List[Keyframe[Quaternion]] = field(default_factory=list)
    scale_keys: List[Keyframe[Vector3]] = field(default_factory=list)
    event_keys: List[Keyframe[AnimationCallback]] = field(default_factory=list)
    event_parameter_keys: List[Keyframe[AnimationParameterCallback]] = field(
        default_factory=list
    )
    duration: float = 0.0


class AnimationBuilder:
    """Collects keyframes into an Animation; the add methods chain."""

    def __init__(self) -> None:
        self._working = Animation()

    def _extend(self, time: float) -> None:
        self._working.duration = max(self._working.duration, time)

    def add_position_key(self, pos: Vector3, time: float) -> AnimationBuilder:
        self._working.position_keys.append(Keyframe(pos, time))
        self._extend(time)
        return self

    def add_rotation_key(self, rot: Quaternion, time: float) -> AnimationBuilder:
        self._working.rotation_keys.append(Keyframe(rot, time))
        self._extend(time)
        return self

    def add_scale_key(self, scale: Vector3, time: float) -> AnimationBuilder:
        self._working.scale_keys.append(Keyframe(scale, time))
        self._extend(time)
        return self

    def build(self) -> Animation:
        """Return the collected animation and start a fresh one."""
        result, self._working = self._working, Animation()
        return result


@dataclass
class AnimationClip:
    """A named clip holding one animation slot per bone; empty slots are None."""

    name: str = ""
    tick_duration: float = 0.0
    ticks_per_second: float = 0.0
    bone_animations: List[Optional[Animation]] = field(default_factory=list)


@dataclass(eq=False)
class Bone:
    """A node of a skeleton with its local and offset transforms."""

    name: str = ""
    index: int = -1
    parent: Optional[Bone] = field(default=None, repr=False)
    parent_index: int = -1
    children: List[Bone] = field(default_factory=list, repr=False)
    children_indices: List[int] = field(default_factory=list)
    to_parent_transform: Matrix4 = field(default_factory=Matrix4)
    offset_transform: Matrix4 = field(default_factory=Matrix4)


@dataclass
class Skeleton:
    """All bones of a model and the root among them."""

    root: Optional[Bone] = None
    bones: List[Bone] = field(default_factory=list)


@dataclass
class Material:
    """Surface colours and specular power."""

    ambient: Color = WHITE
    diffuse: Color = WHITE
    specular: Color = WHITE
    emissive: Color = BLACK
    power: float = 10.0


@dataclass
class MaterialData:
    """A material and the names of its texture maps; empty names mean no map."""

    material: Material = field(default_factory=Material)
    diffuse_map_name: str = ""
    normal_map_name: str = ""
    spec_map_name: str = ""
    bump_map_name: str = ""


@dataclass
class MeshData:
    """A mesh and the index of the material it uses."""

    mesh: Mesh[Vertex] = field(default_factory=Mesh)
    material_index: int = 0


@dataclass
class Model:
    """Meshes, materials, an optional skeleton and animation clips."""

    mesh_data: List[MeshData] = field(default_factory=list)
    material_data: List[MaterialData] = field(default_factory=list)
    skeleton: Optional[Skeleton] = None
    animation_clips: List[AnimationClip] = field(default_factory=list)


@dataclass
class DirectionalLight:
    """A light shining in one direction."""

    ambient: Color = WHITE
    diffuse: Color = WHITE
    specular: Color = WHITE
    direction: Vector3 = field(default_factory=lambda: Vector3.Z_AXIS)