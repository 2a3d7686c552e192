"""Error taxonomy.

Both errors subclass a builtin so callers that already catch ``ValueError`` /
``IndexError`` keep working. Nothing here is retried; every failure is a
caller supplied parameter problem.
"""


class InvalidDimensions(ValueError):
    """Width, height, level count or scale is non-positive or degenerate."""


class PaletteTooSmall(IndexError):
    """A colour table or character palette has no entry for a cell value.

    Raised at the point of the out-of-range lookup, never pre-validated.

    Attributes:
        value: Cell value that could not be looked up.
        size: Length of the palette that was indexed.
    """

    def __init__(self, value: int, size: int, kind: str = "palette") -> None:
        super().__init__(
            f"{kind} has {size} entries, no entry for cell value {value}"
        )
        self.value = value
        self.size = size
