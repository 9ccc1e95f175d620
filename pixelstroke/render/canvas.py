"""Raster canvas sink.

``RasterCanvas`` is a small in-memory rendering backend: it implements the
PixelSink protocol on top of a numpy array so strategy output can be looked
at, compared in tests, or saved as an image with Pillow.

Inks:
    OPAQUE: Stamped pixels are set to the canvas value. Idempotent, so
        stamping a pixel twice is invisible.
    ACCUMULATE: Every stamp adds one to the pixel. Not idempotent; a value
        above one shows that a pixel was stamped more than once.

Example usage::

    from pixelstroke.render import Ink, RasterCanvas

    canvas = RasterCanvas(32, 32, ink=Ink.ACCUMULATE)
    canvas.stamp_line(2, 2, 20, 9)
    assert canvas.to_array().max() == 1
    canvas.save('line.png')
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from ..algorithms.lines import line_points
from ..domain.context import Brush

logger = logging.getLogger(__name__)


class Ink(enum.Enum):
    OPAQUE = 'opaque'
    ACCUMULATE = 'accumulate'


class RasterCanvas:
    """In-memory raster surface implementing the PixelSink protocol.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        brush: Brush stamped by stamp_point and stamp_line. Defaults to a
            one pixel brush.
        ink: How stamps combine with the existing pixels.
        value: Pixel value written by the OPAQUE ink.

    Raises:
        ValueError: If width or height is not positive.

    Attributes:
        stamp_count: Number of brush stamps and horizontal runs applied,
            including those clipped away entirely.
    """

    def __init__(self, width: int, height: int, brush: Optional[Brush] = None,
                 ink: Ink = Ink.OPAQUE, value: int = 255):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.brush = brush or Brush()
        self.ink = ink
        self.value = value
        self.pixels = np.zeros((height, width), dtype=np.uint16)
        self.stamp_count = 0
        self._footprint = self.brush.mask()

    def _apply(self, region: np.ndarray, mask: np.ndarray) -> None:
        if self.ink is Ink.ACCUMULATE:
            region[mask] += 1
        else:
            region[mask] = self.value

    def stamp_point(self, x: int, y: int) -> None:
        """Stamp the brush centred on (x, y), clipped to the canvas."""
        self.stamp_count += 1
        fh, fw = self._footprint.shape
        left = x - fw // 2
        top = y - fh // 2

        x0, y0 = max(left, 0), max(top, 0)
        x1, y1 = min(left + fw, self.width), min(top + fh, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        mask = self._footprint[y0 - top:y1 - top, x0 - left:x1 - left]
        self._apply(self.pixels[y0:y1, x0:x1], mask)

    def stamp_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Stamp the brush on every pixel of the segment."""
        for x, y in line_points((x1, y1), (x2, y2)):
            self.stamp_point(x, y)

    def stamp_hline(self, x1: int, y: int, x2: int) -> None:
        """Paint the pixel run x1..x2 on row y (no brush footprint)."""
        self.stamp_count += 1
        if x1 > x2:
            x1, x2 = x2, x1
        if not 0 <= y < self.height:
            return
        x1, x2 = max(x1, 0), min(x2, self.width - 1)
        if x1 > x2:
            return
        row = self.pixels[y, x1:x2 + 1]
        self._apply(row, np.ones(row.shape, dtype=bool))

    def touched(self) -> np.ndarray:
        """Boolean mask of the pixels stamped at least once."""
        return self.pixels > 0

    def touched_points(self) -> set[tuple[int, int]]:
        """Set of (x, y) pixels stamped at least once."""
        ys, xs = np.nonzero(self.pixels)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def clear(self) -> None:
        self.pixels.fill(0)
        self.stamp_count = 0

    def to_array(self) -> np.ndarray:
        """Copy of the raw pixel values, shape (height, width)."""
        return self.pixels.copy()

    def to_image(self) -> Image.Image:
        """Grayscale Pillow image of the canvas (values clipped to 255)."""
        data = np.clip(self.pixels, 0, 255).astype(np.uint8)
        return Image.fromarray(data)

    def save(self, path: str | Path) -> None:
        """Save the canvas as an image file (format from the extension)."""
        self.to_image().save(path)
        logger.debug("Saved %dx%d canvas to %s", self.width, self.height, path)
