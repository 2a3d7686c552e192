"""Colour helpers shared by the renderers' callers."""

from typing import Any

from visiprint.types import Color


def is_color(value: Any) -> bool:
    """Return True if ``value`` is an RGB triple of ints in ``0..255``."""
    if not isinstance(value, (tuple, list)) or len(value) != 3:
        return False
    return all(
        isinstance(channel, int)
        and not isinstance(channel, bool)
        and 0 <= channel <= 255
        for channel in value
    )


def css_color(color: Color) -> str:
    """Format an RGB triple as a CSS ``rgb(r,g,b)`` string."""
    r, g, b = color
    return f"rgb({r},{g},{b})"


def hex_color(color: Color) -> str:
    """Format an RGB triple as ``#rrggbb``."""
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"
