"""Walk parameters.

``WalkConfig`` is the explicit parameter record handed to the generator.
Defaults live in module constants; nothing here is shared mutable state.
"""

from dataclasses import dataclass
from typing import Any, Optional

from visiprint.errors import InvalidDimensions
from visiprint.types import Coordinate


DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 32
DEFAULT_NUM_LEVELS = 8
MIN_NUM_LEVELS = 3


def _check_int(name: str, value: Any, minimum: int) -> None:
    # bool is an int subclass but never a sensible dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidDimensions(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True)
class WalkConfig:
    """Grid geometry and level range for a walk.

    Attributes:
        num_levels (int): Exclusive upper bound of the level range. Cells
            saturate at ``num_levels - 2``.
        width (int): Grid width in cells.
        height (int): Grid height in cells.
    """

    num_levels: int = DEFAULT_NUM_LEVELS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @classmethod
    def from_options(
        cls,
        num_levels: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> "WalkConfig":
        """Build a config, substituting defaults only for absent (``None``) values.

        An explicit ``0`` is kept and rejected by :meth:`validate` rather than
        silently replaced by a default.
        """
        return cls(
            num_levels=DEFAULT_NUM_LEVELS if num_levels is None else num_levels,
            width=DEFAULT_WIDTH if width is None else width,
            height=DEFAULT_HEIGHT if height is None else height,
        ).validate()

    def validate(self) -> "WalkConfig":
        """Return ``self`` or raise :class:`InvalidDimensions`."""
        _check_int("width", self.width, 1)
        _check_int("height", self.height, 1)
        _check_int("num_levels", self.num_levels, MIN_NUM_LEVELS)
        return self

    @property
    def start(self) -> Coordinate:
        """Cursor start, the grid centre rounded down."""
        return (self.width // 2, self.height // 2)

    @property
    def saturation(self) -> int:
        """Highest value a cell can reach."""
        return self.num_levels - 2
