"""Built-in colour tables and character palettes.

``DEFAULT_COLORS`` has 16 entries so it covers any grid generated with up to
16 levels. ``DEFAULT_CHARACTERS`` covers the default 8 levels.
"""

from typing import Dict, List, Sequence, TypeVar

from visiprint.errors import PaletteTooSmall
from visiprint.types import Color, ColorTable

T = TypeVar("T")


DEFAULT_COLORS: List[Color] = [
    (0, 0, 0),
    (32, 128, 128),
    (128, 128, 255),
    (255, 255, 0),
    (0, 0, 255),
    (200, 0, 255),
    (128, 128, 0),
    (128, 0, 0),
    (128, 0, 128),
    (0, 128, 128),
    (0, 0, 128),
    (128, 69, 69),
    (64, 192, 192),
    (0, 64, 192),
    (128, 64, 192),
    (160, 64, 255),
]

DEFAULT_CHARACTERS = " .o+=*BO"


def grey_ramp(levels: int) -> List[Color]:
    """Evenly spaced grey levels from black to white."""
    if levels < 2:
        return [(0, 0, 0)] * levels
    step = 255 / (levels - 1)
    ramp: List[Color] = []
    for i in range(levels):
        v = round(i * step)
        ramp.append((v, v, v))
    return ramp


GREY_COLORS: List[Color] = grey_ramp(16)

PALETTE_REGISTRY: Dict[str, ColorTable] = {
    "default": DEFAULT_COLORS,
    "grey": GREY_COLORS,
}


def palette_entry(palette: Sequence[T], value: int, kind: str = "palette") -> T:
    """Look up ``palette[value]``, failing with :class:`PaletteTooSmall`.

    No clamping and no fallback: a palette too short for the grid is a caller
    error surfaced at the first cell that needs the missing entry.
    """
    try:
        return palette[value]
    except IndexError as e:
        raise PaletteTooSmall(value, len(palette), kind) from e
