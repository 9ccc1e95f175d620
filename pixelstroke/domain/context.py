"""Drawing context passed to every strategy call.

The context is the strategies' read-only view of the tool session: which
brush is active, which modifier keys are held, how the pointer controller
captures points, whether the stroke is cumulative or replaces the previous
preview, and where the pixel operations go.

Pixel operations are delivered to a ``PixelSink``. The package ships two
sinks (``pixelstroke.render.RecordingSink`` and
``pixelstroke.render.RasterCanvas``); any object with the three stamp
methods works.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Optional, Protocol

import numpy as np

from ..algorithms.polygon import fill_polygon
from ..config import DEFAULT_BRUSH_SIZE


class TracePolicy(enum.Enum):
    """How the stroke of the current call relates to earlier calls."""
    ACCUMULATE = 'accumulate'  # stroke is cumulative
    LAST = 'last'              # only the latest segment is authoritative


class Modifiers(enum.IntFlag):
    """Modifier keys held while drawing that change stroke output."""
    NONE = 0
    FROM_CENTER = 1


class ControllerKind(enum.Enum):
    """How pointer events become stroke points."""
    FREEHAND = 'freehand'
    LINE_FREEHAND = 'line_freehand'
    TWO_POINTS = 'two_points'
    FOUR_POINTS = 'four_points'
    POINT_BY_POINT = 'point_by_point'
    ONE_POINT = 'one_point'


@dataclass(frozen=True)
class Controller:
    """Mode flags of the pointer controller.

    Attributes:
        kind: Capture mode.
        shape_angle: Rotation of rectangle/ellipse shapes in radians,
            0 when axis aligned.
    """
    kind: ControllerKind = ControllerKind.FREEHAND
    shape_angle: float = 0.0

    @property
    def is_freehand(self) -> bool:
        return self.kind in (ControllerKind.FREEHAND, ControllerKind.LINE_FREEHAND)

    @property
    def is_two_points(self) -> bool:
        return self.kind is ControllerKind.TWO_POINTS


class BrushType(enum.Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
    LINE = 'line'
    IMAGE = 'image'


@dataclass(frozen=True)
class Brush:
    """Brush descriptor.

    Attributes:
        type: Brush shape.
        size: Diameter in pixels for the generated shapes.
        image: Boolean footprint for IMAGE brushes (custom brushes).

    Raises:
        ValueError: If size is below 1 or an IMAGE brush has no image.
    """
    type: BrushType = BrushType.CIRCLE
    size: int = DEFAULT_BRUSH_SIZE
    image: Optional[np.ndarray] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Brush size must be positive, got {self.size}")
        if self.type is BrushType.IMAGE and self.image is None:
            raise ValueError("Image brushes need an image")

    @property
    def is_image(self) -> bool:
        return self.type is BrushType.IMAGE

    def mask(self) -> np.ndarray:
        """Boolean footprint of the brush, shape (h, w)."""
        if self.is_image:
            return np.asarray(self.image, dtype=bool)

        n = self.size
        if self.type is BrushType.SQUARE or n <= 2:
            return np.ones((n, n), dtype=bool)
        if self.type is BrushType.LINE:
            footprint = np.zeros((n, n), dtype=bool)
            footprint[n // 2, :] = True
            return footprint

        # Pixel centres inside the circle of diameter n
        r = n / 2.0
        yy, xx = np.mgrid[0:n, 0:n]
        return (xx + 0.5 - r) ** 2 + (yy + 0.5 - r) ** 2 <= r * r


class PixelSink(Protocol):
    """Receiver of the pixel operations produced by strategies."""

    def stamp_point(self, x: int, y: int) -> None:
        """Stamp the brush once at (x, y)."""
        ...

    def stamp_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Stamp the brush along the segment (x1, y1)-(x2, y2)."""
        ...

    def stamp_hline(self, x1: int, y: int, x2: int) -> None:
        """Fill the horizontal run x1..x2 (inclusive) on row y."""
        ...


PolygonFiller = Callable[[Sequence, Callable[[int, int, int], None]], None]


@dataclass
class DrawingContext:
    """Per-call parameters and pixel sinks for strategies.

    Attributes:
        sink: Destination of the stamp operations.
        brush: Active brush.
        modifiers: Modifier keys held.
        controller: Pointer controller mode and shape angle.
        trace_policy: ACCUMULATE or LAST.
        filled: Whether the shape is drawn filled.
        polygon_filler: Fill backend, ``polygon_filler(vertices, hline)``.
        strict: Raise StrokeContractError on strategy protocol breaches
            instead of logging them.

    Example:
        >>> from pixelstroke.render import RecordingSink
        >>> ctx = DrawingContext(sink=RecordingSink())
        >>> ctx.is_freehand
        True
    """
    sink: PixelSink
    brush: Brush = field(default_factory=Brush)
    modifiers: Modifiers = Modifiers.NONE
    controller: Controller = field(default_factory=Controller)
    trace_policy: TracePolicy = TracePolicy.ACCUMULATE
    filled: bool = False
    polygon_filler: PolygonFiller = fill_polygon
    strict: bool = False

    @property
    def shape_angle(self) -> float:
        return self.controller.shape_angle

    @property
    def is_freehand(self) -> bool:
        return self.controller.is_freehand

    @property
    def is_two_points(self) -> bool:
        return self.controller.is_two_points

    @property
    def from_center(self) -> bool:
        return bool(self.modifiers & Modifiers.FROM_CENTER)

    def stamp_point(self, x: int, y: int) -> None:
        self.sink.stamp_point(x, y)

    def stamp_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.sink.stamp_line(x1, y1, x2, y2)

    def stamp_hline(self, x1: int, y: int, x2: int) -> None:
        self.sink.stamp_hline(x1, y, x2)

    def fill_polygon(self, points: Sequence) -> None:
        """Scan convert points with the fill backend into stamp_hline."""
        self.polygon_filler(points, self.stamp_hline)
