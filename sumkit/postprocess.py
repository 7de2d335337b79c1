"""Settings for a full-screen post-processing pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterator, List, Optional, Tuple

TEXTURE_SLOTS = 4


class PostProcessMode(IntEnum):
    """The effect applied by the pass."""

    NONE = 0
    MONOCHROME = 1
    INVERT = 2
    MIRROR = 3
    BLUR = 4
    COMBINE2 = 5
    MOTION_BLUR = 6
    CHROMATIC_ABERRATION = 7
    WAVE = 8


MODE_NAMES = (
    "None",
    "Monochrome",
    "Invert",
    "Mirror",
    "Blur",
    "Combine2",
    "MotionBlur",
    "ChromaticAberration",
    "Wave",
)


@dataclass(frozen=True)
class PostProcessData:
    """The values handed to the shader: the mode and up to three parameters."""

    mode: int = 0
    param0: float = 0.0
    param1: float = 0.0
    param2: float = 0.0


@dataclass
class PostProcessingEffect:
    """Mode, per-mode tuning values and the source textures of the pass."""

    mode: PostProcessMode = PostProcessMode.NONE
    mirror_scale_x: float = -1.0
    mirror_scale_y: float = -1.0
    blur_strength: float = 5.0
    aberration_value: float = 0.005
    wave_length: float = 0.05
    num_waves: float = 20.0
    textures: List[Optional[Any]] = field(default_factory=lambda: [None] * TEXTURE_SLOTS)

    def set_texture(self, texture: Optional[Any], slot: int = 0) -> None:
        """Put a texture into a slot; raises IndexError for an invalid slot."""
        if not 0 <= slot < TEXTURE_SLOTS:
            raise IndexError(f"invalid texture slot {slot}")
        self.textures[slot] = texture

    def bound_textures(self) -> Iterator[Tuple[int, Any]]:
        """The (slot, texture) pairs of the slots that hold a texture."""
        for slot, texture in enumerate(self.textures):
            if texture is not None:
                yield slot, texture

    def build_data(self, screen_width: float, screen_height: float) -> PostProcessData:
        """Shader values for the current mode; blur strength is relative to the screen size."""
        mode = self.mode
        if mode is PostProcessMode.MIRROR:
            return PostProcessData(int(mode), self.mirror_scale_x, self.mirror_scale_y)
        if mode in (PostProcessMode.BLUR, PostProcessMode.MOTION_BLUR):
            return PostProcessData(
                int(mode),
                self.blur_strength / screen_width,
                self.blur_strength / screen_height,
            )
        if mode is PostProcessMode.CHROMATIC_ABERRATION:
            return PostProcessData(int(mode), self.aberration_value, self.aberration_value)
        if mode is PostProcessMode.WAVE:
            return PostProcessData(int(mode), self.wave_length, self.num_waves)
        return PostProcessData(int(mode))