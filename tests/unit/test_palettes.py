import pytest

from visiprint.errors import PaletteTooSmall
from visiprint.palettes import (
    DEFAULT_CHARACTERS,
    DEFAULT_COLORS,
    GREY_COLORS,
    PALETTE_REGISTRY,
    grey_ramp,
    palette_entry,
)
from visiprint.utils.color import is_color


def test_default_palettes() -> None:
    assert DEFAULT_CHARACTERS == " .o+=*BO"
    assert len(DEFAULT_COLORS) == 16
    assert DEFAULT_COLORS[0] == (0, 0, 0)
    assert DEFAULT_COLORS[15] == (160, 64, 255)
    assert all(is_color(color) for color in DEFAULT_COLORS)


def test_registry() -> None:
    assert PALETTE_REGISTRY["default"] is DEFAULT_COLORS
    assert PALETTE_REGISTRY["grey"] is GREY_COLORS


def test_grey_ramp() -> None:
    ramp = grey_ramp(3)
    assert ramp == [(0, 0, 0), (128, 128, 128), (255, 255, 255)]
    assert len(GREY_COLORS) == 16
    assert GREY_COLORS[-1] == (255, 255, 255)


def test_palette_entry() -> None:
    assert palette_entry("abc", 2) == "c"


def test_palette_entry_too_small() -> None:
    with pytest.raises(PaletteTooSmall) as excinfo:
        palette_entry("abc", 3, "character palette")
    assert excinfo.value.value == 3
    assert excinfo.value.size == 3
    assert "character palette" in str(excinfo.value)
    assert isinstance(excinfo.value, IndexError)
