import pytest

from visiprint.config import (
    DEFAULT_HEIGHT,
    DEFAULT_NUM_LEVELS,
    DEFAULT_WIDTH,
    WalkConfig,
)
from visiprint.errors import InvalidDimensions


def test_defaults() -> None:
    config = WalkConfig.from_options()
    assert config == WalkConfig(
        num_levels=DEFAULT_NUM_LEVELS, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT
    )
    assert (config.num_levels, config.width, config.height) == (8, 32, 32)


def test_partial_options() -> None:
    config = WalkConfig.from_options(width=16)
    assert (config.num_levels, config.width, config.height) == (8, 16, 32)


@pytest.mark.parametrize(
    "options",
    [
        {"width": 0},
        {"height": 0},
        {"num_levels": 0},
        {"num_levels": 2},
        {"width": -5},
        {"width": 8.0},
        {"height": "8"},
        {"num_levels": False},
    ],
)
def test_invalid_options(options: dict) -> None:
    with pytest.raises(InvalidDimensions):
        WalkConfig.from_options(**options)


def test_invalid_dimensions_is_value_error() -> None:
    with pytest.raises(ValueError):
        WalkConfig(width=0).validate()


@pytest.mark.parametrize(
    "width, height, start",
    [(32, 32, (16, 16)), (17, 9, (8, 4)), (1, 1, (0, 0)), (8, 3, (4, 1))],
)
def test_start_is_centre(width: int, height: int, start: tuple[int, int]) -> None:
    assert WalkConfig(width=width, height=height).start == start


def test_saturation() -> None:
    assert WalkConfig().saturation == 6
    assert WalkConfig(num_levels=3).saturation == 1
