import pytest

from visiprint.errors import PaletteTooSmall
from visiprint.renderer.text import render_framed_text, render_text
from visiprint.walk import generate
from tests.test_utils import RecordingPalette, make_grid, random_bytes


def test_render_text_mapping() -> None:
    grid = make_grid([[0, 1, 2], [3, 4, 5]])
    assert render_text(grid) == " .o\n+=*"


def test_render_text_known_vector() -> None:
    grid = generate(b"\x00", 8, 8, 8)
    lines = render_text(grid).split("\n")
    assert lines[0] == "." + " " * 7
    assert lines[3] == "   ." + " " * 4
    assert lines[4] == " " * 8


@pytest.mark.parametrize("width, height", [(32, 32), (17, 9), (8, 20), (1, 1)])
def test_render_text_shape(width: int, height: int) -> None:
    grid = generate(random_bytes(width * height, 32), 8, width, height)
    text = render_text(grid)
    assert text.count("\n") == height - 1
    assert not text.endswith("\n")
    assert all(len(line) == width for line in text.split("\n"))


def test_render_text_custom_characters() -> None:
    grid = make_grid([[0, 1], [1, 0]], num_levels=3)
    assert render_text(grid, "_#") == "_#\n#_"
    assert render_text(grid, ["a", "b"]) == "ab\nba"


def test_render_text_palette_too_small() -> None:
    grid = make_grid([[0, 1, 2]])
    with pytest.raises(PaletteTooSmall):
        render_text(grid, "ab")


def test_render_text_empty_grid_needs_only_background() -> None:
    grid = generate(b"", 8, 4, 2)
    assert render_text(grid, " ") == "    \n    "


def test_render_text_row_outer_order() -> None:
    grid = make_grid([[1, 2], [3, 4]])
    palette = RecordingPalette("abcde")
    render_text(grid, palette)
    assert palette.lookups == [1, 2, 3, 4]


def test_render_framed_text() -> None:
    grid = make_grid([[0, 1, 2], [3, 4, 5]])
    assert render_framed_text(grid) == "+---+\n| .o|\n|+=*|\n+---+"


def test_render_framed_text_title() -> None:
    grid = generate(b"\x00", 8, 11, 3)
    lines = render_framed_text(grid, title="MD5").split("\n")
    assert lines[0] == "+---[MD5]---+"
    assert lines[-1] == "+" + "-" * 11 + "+"
    assert len(lines) == 5
    assert all(len(line) == 13 for line in lines)


def test_render_framed_text_long_title_is_cut() -> None:
    grid = generate(b"", 8, 4, 1)
    assert render_framed_text(grid, title="SHA256").split("\n")[0] == "+[SHA+"
