"""Common type aliases.

``ColorTable`` and ``CharacterPalette`` are the currency of the renderers: a
palette is any indexable sequence whose entry ``i`` is used for cell value
``i``.
"""

from typing import Sequence, Tuple


Color = Tuple[int, int, int]
ColorTable = Sequence[Color]
CharacterPalette = Sequence[str]

# Grid coordinate (col, row)
Coordinate = Tuple[int, int]

# Single cursor move (dx, dy), each component is -1 or +1
Step = Tuple[int, int]
