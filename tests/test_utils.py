import random
from typing import Any, List, Sequence

from pyrsistent import pvector

from visiprint.grid import Grid


class RecordingPalette(list):  # type: ignore[type-arg]
    """List that remembers every index looked up through ``[]``."""

    def __init__(self, items: Sequence[Any]) -> None:
        super().__init__(items)
        self.lookups: List[int] = []

    def __getitem__(self, index: Any) -> Any:
        self.lookups.append(index)
        return super().__getitem__(index)


def make_grid(rows: Sequence[Sequence[int]], num_levels: int = 8) -> Grid:
    """Build a grid from row lists, ``rows[row][col]``."""
    height = len(rows)
    width = len(rows[0])
    cells = [value for row in rows for value in row]
    return Grid(cells=pvector(cells), width=width, height=height, num_levels=num_levels)


def random_bytes(seed: int, length: int) -> bytes:
    return random.Random(seed).randbytes(length)


def reference_field(
    data: bytes, num_levels: int, width: int, height: int
) -> List[List[int]]:
    """Straight nested-list walk, ``field[x][y]``, to cross-check the generator."""
    field = [[0] * height for _ in range(width)]
    x, y = width // 2, height // 2
    for value in data:
        for _ in range(4):
            x += 1 if value & 0x1 else -1
            y += 1 if value & 0x2 else -1
            x = min(max(x, 0), width - 1)
            y = min(max(y, 0), height - 1)
            if field[x][y] < num_levels - 2:
                field[x][y] += 1
            value >>= 2
    return field
