import pytest

from sumkit.postprocess import (
    MODE_NAMES,
    TEXTURE_SLOTS,
    PostProcessData,
    PostProcessingEffect,
    PostProcessMode,
)


def test_mode_names_follow_enum_order():
    names = [MODE_NAMES[PostProcessMode(i)] for i in range(len(PostProcessMode))]
    assert names == [
        "None",
        "Monochrome",
        "Invert",
        "Mirror",
        "Blur",
        "Combine2",
        "MotionBlur",
        "ChromaticAberration",
        "Wave",
    ]


@pytest.mark.parametrize(
    "mode", [PostProcessMode.NONE, PostProcessMode.MONOCHROME, PostProcessMode.INVERT, PostProcessMode.COMBINE2]
)
def test_modes_without_parameters(mode):
    effect = PostProcessingEffect(mode=mode)
    assert effect.build_data(800, 600) == PostProcessData(int(mode))


def test_mirror_uses_scales():
    effect = PostProcessingEffect(mode=PostProcessMode.MIRROR)
    data = effect.build_data(800, 600)
    assert (data.param0, data.param1) == (effect.mirror_scale_x, effect.mirror_scale_y)
    assert data.mode == int(PostProcessMode.MIRROR)


@pytest.mark.parametrize("mode", [PostProcessMode.BLUR, PostProcessMode.MOTION_BLUR])
def test_blur_is_relative_to_screen(mode):
    effect = PostProcessingEffect(mode=mode, blur_strength=8.0)
    data = effect.build_data(400, 200)
    assert data.param0 == pytest.approx(8.0 / 400)
    assert data.param1 == pytest.approx(8.0 / 200)
    assert data.param2 == 0.0


def test_chromatic_aberration_uses_one_value_twice():
    effect = PostProcessingEffect(mode=PostProcessMode.CHROMATIC_ABERRATION, aberration_value=0.25)
    data = effect.build_data(800, 600)
    assert data.param0 == data.param1 == 0.25


def test_wave_parameters():
    effect = PostProcessingEffect(mode=PostProcessMode.WAVE, wave_length=0.1, num_waves=7.0)
    data = effect.build_data(800, 600)
    assert (data.param0, data.param1) == (0.1, 7.0)


def test_set_texture_and_bound_textures():
    effect = PostProcessingEffect()
    texture = object()
    effect.set_texture(texture, 2)
    assert list(effect.bound_textures()) == [(2, texture)]
    effect.set_texture(None, 2)
    assert list(effect.bound_textures()) == []


def test_set_texture_rejects_invalid_slot():
    effect = PostProcessingEffect()
    with pytest.raises(IndexError):
        effect.set_texture(object(), TEXTURE_SLOTS)
    with pytest.raises(IndexError):
        effect.set_texture(object(), -1)