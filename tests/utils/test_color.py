import pytest

from visiprint.utils.color import css_color, hex_color, is_color


def test_css_color() -> None:
    assert css_color((32, 128, 128)) == "rgb(32,128,128)"


def test_hex_color() -> None:
    assert hex_color((255, 0, 10)) == "#ff000a"


@pytest.mark.parametrize(
    "value, expected",
    [
        ((0, 0, 0), True),
        ([255, 255, 255], True),
        ((0, 0), False),
        ((0, 0, 256), False),
        ((0, -1, 0), False),
        ((0.5, 0, 0), False),
        ((True, 0, 0), False),
        ("abc", False),
    ],
)
def test_is_color(value: object, expected: bool) -> None:
    assert is_color(value) is expected
