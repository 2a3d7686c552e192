"""Text rendering of fingerprint grids."""

from typing import List, Optional

from visiprint.grid import Grid
from visiprint.palettes import DEFAULT_CHARACTERS, palette_entry
from visiprint.types import CharacterPalette


def render_text(grid: Grid, characters: Optional[CharacterPalette] = None) -> str:
    """Return ``height`` lines of ``width`` characters joined by ``\\n``.

    The character for cell value ``v`` is ``characters[v]``. There is no
    trailing newline.

    Raises:
        PaletteTooSmall: If ``characters`` has no entry for some cell value.
    """
    if characters is None:
        characters = DEFAULT_CHARACTERS
    lines: List[str] = []
    for row in grid.rows():
        lines.append(
            "".join(
                palette_entry(characters, value, "character palette") for value in row
            )
        )
    return "\n".join(lines)


def render_framed_text(
    grid: Grid,
    characters: Optional[CharacterPalette] = None,
    title: Optional[str] = None,
) -> str:
    """Text art inside an ssh-keygen style border.

    The optional title is centred in the top border as ``[title]`` and cut to
    fit the grid width.
    """
    body = render_text(grid, characters)
    top = "-" * grid.width
    if title:
        label = f"[{title}]"[: grid.width]
        pad = (grid.width - len(label)) // 2
        top = "-" * pad + label + "-" * (grid.width - pad - len(label))
    lines = [f"+{top}+"]
    lines.extend(f"|{line}|" for line in body.split("\n"))
    lines.append("+" + "-" * grid.width + "+")
    return "\n".join(lines)
