"""Walk generator: bytes to :class:`~visiprint.grid.Grid`.

Each input byte conveys four 2-bit move commands, least-significant pair
first. For a pair ``g``:

* bit 0 set moves one column right, clear moves one column left;
* bit 1 set moves one row down, clear moves one row up.

After every single move the cursor is clamped to the grid, so hitting an edge
pins it there instead of tunnelling past. The cell under the cursor is then
incremented unless it already holds ``num_levels - 2`` (saturating counter).

The processing order is part of the output contract: two implementations fed
the same bytes and parameters must produce identical grids.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Union

from pyrsistent import pvector

from visiprint.config import WalkConfig
from visiprint.grid import Grid
from visiprint.types import Coordinate, Step

logger = logging.getLogger(__name__)

ByteInput = Union[bytes, bytearray, memoryview, Iterable[int]]

STEPS_PER_BYTE = 4


def as_bytes(data: ByteInput) -> bytes:
    """Normalize accepted inputs to ``bytes``.

    Raises:
        TypeError: For ``str`` input (text must be encoded or hashed first)
            and for a bare ``int``.
        ValueError: For integers outside ``0..255``.
    """
    if isinstance(data, str):
        raise TypeError("Expected bytes, got str; encode or hash the text first")
    # bytes(n) would silently build n zero bytes
    if isinstance(data, int):
        raise TypeError(f"Expected bytes, got int {data!r}")
    if isinstance(data, bytes):
        return data
    return bytes(data)


def byte_steps(value: int) -> List[Step]:
    """Return the four moves encoded by one byte, low bit pair first."""
    moves: List[Step] = []
    for _ in range(STEPS_PER_BYTE):
        dx = 1 if value & 0x1 else -1
        dy = 1 if value & 0x2 else -1
        moves.append((dx, dy))
        value >>= 2
    return moves


def steps(data: ByteInput) -> Iterator[Step]:
    """Yield every move for ``data`` in processing order."""
    for value in as_bytes(data):
        yield from byte_steps(value)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def walk_path(
    data: ByteInput, config: Optional[WalkConfig] = None
) -> Iterator[Coordinate]:
    """Yield the cursor position after each move.

    The start position itself is not yielded; an empty input yields nothing.
    """
    config = (config or WalkConfig()).validate()
    col, row = config.start
    for dx, dy in steps(data):
        col = clamp(col + dx, 0, config.width - 1)
        row = clamp(row + dy, 0, config.height - 1)
        yield col, row


def walk(data: ByteInput, config: Optional[WalkConfig] = None) -> Grid:
    """Run the walk for ``data`` under ``config`` and return the grid."""
    config = (config or WalkConfig()).validate()
    source = as_bytes(data)
    saturation = config.saturation

    cells = [0] * (config.width * config.height)
    for col, row in walk_path(source, config):
        offset = row * config.width + col
        if cells[offset] < saturation:
            cells[offset] += 1

    grid = Grid(
        cells=pvector(cells),
        width=config.width,
        height=config.height,
        num_levels=config.num_levels,
        source=source,
    )
    logger.debug(
        f"Generated {grid.width}x{grid.height} grid from {len(source)} bytes"
        f" ({sum(1 for v in cells if v)} cells visited)"
    )
    return grid


def generate(
    data: ByteInput,
    num_levels: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Grid:
    """Generate the fingerprint grid of ``data``.

    Arguments:
        data: Raw input bytes, typically a digest.
        num_levels: Level range bound, default 8. Must be at least 3.
        width: Grid width, default 32.
        height: Grid height, default 32.

    Returns:
        Grid: Immutable grid of visit counts.

    Raises:
        InvalidDimensions: If a parameter is non-integer or too small. Only
            ``None`` selects a default; an explicit ``0`` is an error.
    """
    config = WalkConfig.from_options(num_levels=num_levels, width=width, height=height)
    return walk(data, config)
