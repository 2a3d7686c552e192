"""Immutable fingerprint ``Grid``.

The grid is the only artifact passed between the walk generator and the
renderers. Design notes:

* Cells live in one flat persistent vector (``pyrsistent.PVector``) in
    **row-major** order: the cell at column ``col`` and row ``row`` is stored
    at ``row * width + col``. Use :meth:`Grid.index` rather than computing the
    offset by hand.
* Every cell value lies in ``[0, num_levels - 2]``; ``0`` means unvisited.
* ``source`` keeps the input bytes for traceability only. Nothing reprocesses
    it.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import PVector as PersistentVector, pmap, pvector
from pyrsistent.typing import PMap, PVector

from visiprint.errors import InvalidDimensions


@dataclass(frozen=True)
class Grid:
    """Bounded visit counts of a walk.

    Attributes:
        cells (PVector[int]): Row-major flat buffer of ``width * height`` values.
        width (int): Number of columns.
        height (int): Number of rows.
        num_levels (int): Exclusive upper bound of the level range.
        source (bytes): Input the grid was generated from.
    """

    cells: PVector[int]
    width: int
    height: int
    num_levels: int
    source: bytes = b""

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(
                f"Grid must be at least 1x1, got {self.width}x{self.height}"
            )
        # hand-built grids may pass a list; freeze it like the generator does
        if not isinstance(self.cells, PersistentVector):
            object.__setattr__(self, "cells", pvector(self.cells))
        object.__setattr__(self, "source", bytes(self.source))
        if len(self.cells) != self.width * self.height:
            raise InvalidDimensions(
                f"Expected {self.width * self.height} cells for a "
                f"{self.width}x{self.height} grid, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, width: int, height: int, num_levels: int) -> "Grid":
        """All-zero grid of the given geometry."""
        return cls(
            cells=pvector([0] * (width * height)),
            width=width,
            height=height,
            num_levels=num_levels,
        )

    def index(self, col: int, row: int) -> int:
        """Flat buffer offset of ``(col, row)``."""
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(
                f"Out of bounds: {(col, row)} for grid {self.width}x{self.height}"
            )
        return row * self.width + col

    def cell(self, col: int, row: int) -> int:
        return self.cells[self.index(col, row)]

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        col, row = pos
        return self.cell(col, row)

    def rows(self) -> Iterator[Tuple[int, ...]]:
        """Yield each row top to bottom as a tuple of values."""
        for row in range(self.height):
            start = row * self.width
            yield tuple(self.cells[start : start + self.width])

    def nonzero(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(col, row, value)`` for visited cells in row-major order."""
        for offset, value in enumerate(self.cells):
            if value != 0:
                yield offset % self.width, offset // self.width, value

    @property
    def max_value(self) -> int:
        return max(self.cells) if len(self.cells) else 0

    def to_array(self) -> npt.NDArray[np.int64]:
        """Return a fresh ``(height, width)`` array; indexing is ``[row, col]``."""
        return np.array(list(self.cells), dtype=np.int64).reshape(
            self.height, self.width
        )

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for logs and debugging.

        Returns:
            PMap[str, Any]: Geometry, level range, input length/hex and the
            number of visited cells.
        """
        return pmap(
            {
                "width": self.width,
                "height": self.height,
                "num_levels": self.num_levels,
                "source": self.source.hex(),
                "source_length": len(self.source),
                "visited": sum(1 for value in self.cells if value != 0),
                "max_value": self.max_value,
            }
        )
