from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from visiprint.errors import InvalidDimensions
from visiprint.grid import Grid
from visiprint.palettes import DEFAULT_COLORS, palette_entry
from visiprint.types import ColorTable


DEFAULT_SCALE = 1.0

UInt8Array = npt.NDArray[np.uint8]


def _check_scale(scale: float) -> None:
    if not scale > 0:
        raise InvalidDimensions(f"scale must be positive, got {scale!r}")


def scaled_size(width: int, height: int, scale: float) -> Tuple[int, int]:
    """Surface size for a ``width x height`` grid drawn at ``scale``."""
    _check_scale(scale)
    size = (int(width * scale), int(height * scale))
    if size[0] < 1 or size[1] < 1:
        raise InvalidDimensions(
            f"scale {scale} shrinks a {width}x{height} grid to nothing"
        )
    return size


@dataclass(frozen=True)
class PixelBuffer:
    """Unscaled per-cell RGB pixels of a grid.

    Attributes:
        pixels: ``(height, width, 3)`` uint8 array, one pixel per cell,
            indexed ``[row, col]``.
        scale: Scale factor the consumer should apply when displaying.
    """

    pixels: UInt8Array
    scale: float = DEFAULT_SCALE

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """Display size ``(width, height)`` after scaling."""
        return scaled_size(self.width, self.height, self.scale)


def render_pixels(
    grid: Grid,
    colors: Optional[ColorTable] = None,
    scale: float = DEFAULT_SCALE,
) -> PixelBuffer:
    """
    Map a grid to a pixel buffer: ``colors[0]`` everywhere, then ``colors[v]``
    on every cell with value ``v != 0``. Zero cells keep the background.
    """
    _check_scale(scale)
    if colors is None:
        colors = DEFAULT_COLORS

    pixels: UInt8Array = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
    pixels[...] = palette_entry(colors, 0, "color table")
    for col, row, value in grid.nonzero():
        pixels[row, col] = palette_entry(colors, value, "color table")
    return PixelBuffer(pixels=pixels, scale=scale)


def to_image(buffer: PixelBuffer) -> Image.Image:
    """Surface adapter: scale a pixel buffer up to a Pillow image."""
    img = Image.fromarray(buffer.pixels)
    if img.size != buffer.size:
        img = img.resize(buffer.size, resample=Image.Resampling.NEAREST)
    return img


def render_image(
    grid: Grid,
    colors: Optional[ColorTable] = None,
    scale: float = DEFAULT_SCALE,
) -> Image.Image:
    return to_image(render_pixels(grid, colors=colors, scale=scale))


def draw_fingerprint(
    surface: Image.Image,
    grid: Grid,
    colors: Optional[ColorTable] = None,
    scale: float = DEFAULT_SCALE,
) -> None:
    """
    Draw a grid onto a caller supplied Pillow image, starting at the origin.

    Covers ``scaled_size(...)`` pixels with exactly the pixels
    :func:`render_image` produces, so both paths agree at any scale. Pixels
    outside the covered area are left untouched.
    """
    surface.paste(render_image(grid, colors=colors, scale=scale), (0, 0))


class ImageRenderer:
    colors: ColorTable
    scale: float

    def __init__(
        self,
        colors: Optional[ColorTable] = None,
        scale: float = DEFAULT_SCALE,
    ):
        _check_scale(scale)
        self.colors = colors if colors is not None else DEFAULT_COLORS
        self.scale = scale

    def pixels(self, grid: Grid) -> PixelBuffer:
        return render_pixels(grid, colors=self.colors, scale=self.scale)

    def render(self, grid: Grid) -> Image.Image:
        return render_image(grid, colors=self.colors, scale=self.scale)
