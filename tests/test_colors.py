import pytest

from sumkit.colors import (
    BLACK,
    NAMED_COLORS,
    TRANSPARENT,
    WHITE,
    color_by_name,
)
from sumkit.vector import Vector4


def test_pinned_source_value():
    assert color_by_name("CornflowerBlue") == Vector4(0.392156899, 0.584313750, 0.929411829, 1.0)


def test_lookup_ignores_case_and_separators():
    expected = NAMED_COLORS["LightGoldenrodYellow"]
    assert color_by_name("light_goldenrod_yellow") == expected
    assert color_by_name("Light Goldenrod Yellow") == expected
    assert color_by_name("LIGHTGOLDENRODYELLOW") == expected


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("NotAColour")


def test_aliases_share_values():
    assert color_by_name("Aqua") == color_by_name("Cyan")
    assert color_by_name("Fuchsia") == color_by_name("Magenta")


def test_black_white_transparent():
    assert tuple(color_by_name("Black")) == (0.0, 0.0, 0.0, 1.0)
    assert tuple(color_by_name("White")) == (1.0, 1.0, 1.0, 1.0)
    assert tuple(color_by_name("Transparent")) == (0.0, 0.0, 0.0, 0.0)
    assert color_by_name("black") == BLACK
    assert color_by_name("white") == WHITE
    assert color_by_name("transparent") == TRANSPARENT


def test_only_transparent_is_not_opaque():
    translucent = [name for name, c in NAMED_COLORS.items() if c.a != 1.0]
    assert translucent == ["Transparent"]


def test_components_in_unit_range():
    assert all(0.0 <= v <= 1.0 for c in NAMED_COLORS.values() for v in c)


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        NAMED_COLORS["Custom"] = WHITE  # type: ignore[index]
    with pytest.raises(KeyError):
        color_by_name("Custom")