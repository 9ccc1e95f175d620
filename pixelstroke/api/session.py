"""Session layer for driving strategies from a tool loop.

A drawing tool calls its strategy once per input frame while the pointer
is dragged. ``StrokeSession`` owns the strategy's ``SessionState`` for one
tool and offers the object-style contract the tool loop expects: ``begin``
at pointer-down, then ``join``/``fill`` per frame, ``bounds`` for redraw
areas.

Example usage:
    Incremental freehand drawing::

        from pixelstroke.api import StrokeSession
        from pixelstroke.domain import DrawingContext, Stroke
        from pixelstroke.render import RasterCanvas

        canvas = RasterCanvas(64, 64)
        ctx = DrawingContext(sink=canvas)
        session = StrokeSession('as_pixel_perfect')

        session.begin()
        session.join(ctx, Stroke.from_tuples([(3, 3)]))
        session.join(ctx, Stroke.from_tuples([(3, 3), (9, 5)]))
        session.join(ctx, Stroke.from_tuples([(9, 5), (12, 12)]))

    One-shot rendering::

        from pixelstroke.api import render_stroke

        canvas = render_stroke([(2, 2), (20, 12)], 'as_rectangles', fill=True)
        canvas.save('rect.png')
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from ..config import DEFAULT_CANVAS_SIZE
from ..domain.context import (
    Brush,
    Controller,
    ControllerKind,
    DrawingContext,
    Modifiers,
    TracePolicy,
)
from ..domain.geometry import Point, Rect, Stroke
from ..render.canvas import Ink, RasterCanvas
from ..strategies.base import SessionState, StrategyName, StrokeStrategy
from ..strategies.registry import get_strategy

_logger = logging.getLogger(__name__)


def _as_stroke(points) -> Stroke:
    if isinstance(points, Stroke):
        return points
    return Stroke([p if isinstance(p, Point) else Point.from_tuple(p) for p in points])


@dataclass
class StrokeSession:
    """A strategy bound to the state of one tool's drag sessions.

    Attributes:
        strategy: Strategy instance, StrategyName, or strategy name string.
        state: Session buffers; replaced only by the caller.

    Example:
        >>> session = StrokeSession(StrategyName.AS_LINES)
        >>> session.snaps_by_angle
        True
    """
    strategy: StrokeStrategy | StrategyName | str
    state: SessionState = field(default_factory=SessionState)

    def __post_init__(self):
        if not isinstance(self.strategy, StrokeStrategy):
            self.strategy = get_strategy(self.strategy)

    @property
    def snaps_by_angle(self) -> bool:
        return self.strategy.snaps_by_angle

    def begin(self) -> None:
        """Start a new drag session (pointer-down)."""
        self.strategy.reset(self.state)
        _logger.debug("Session started with %r", self.strategy)

    def join(self, ctx: DrawingContext, stroke) -> None:
        """Emit the outline of stroke for the current frame."""
        stroke = _as_stroke(stroke)
        _logger.debug("join %s: %d points", self.strategy.name.value, len(stroke))
        self.strategy.join_stroke(ctx, stroke, self.state)

    def fill(self, ctx: DrawingContext, stroke) -> None:
        """Emit the filled area of stroke for the current frame."""
        stroke = _as_stroke(stroke)
        _logger.debug("fill %s: %d points", self.strategy.name.value, len(stroke))
        self.strategy.fill_stroke(ctx, stroke, self.state)

    def bounds(self, ctx: DrawingContext, stroke) -> Rect:
        """Predicted bounds of what join/fill would touch."""
        return self.strategy.stroke_bounds(ctx, _as_stroke(stroke))


def render_stroke(
    points: Iterable,
    strategy: StrokeStrategy | StrategyName | str = StrategyName.AS_LINES,
    *,
    width: int = DEFAULT_CANVAS_SIZE[0],
    height: int = DEFAULT_CANVAS_SIZE[1],
    fill: bool = False,
    brush: Optional[Brush] = None,
    controller: Optional[Controller] = None,
    modifiers: Modifiers = Modifiers.NONE,
    trace_policy: TracePolicy = TracePolicy.ACCUMULATE,
    ink: Ink = Ink.OPAQUE,
) -> RasterCanvas:
    """Render a whole stroke onto a fresh canvas in one call.

    Args:
        points: Stroke points as Point objects or (x, y) tuples.
        strategy: Strategy to use. Default is AS_LINES.
        width: Canvas width. Default from DEFAULT_CANVAS_SIZE.
        height: Canvas height. Default from DEFAULT_CANVAS_SIZE.
        fill: Use fill_stroke instead of join_stroke, and mark the context
            as filled.
        brush: Brush for the canvas and context. Default 1px circle.
        controller: Controller flags. Default is a two-point controller,
            since the whole stroke is known up front.
        modifiers: Modifier keys.
        trace_policy: Trace policy of the single call.
        ink: Canvas ink.

    Returns:
        The RasterCanvas the stroke was drawn on.
    """
    brush = brush or Brush()
    canvas = RasterCanvas(width, height, brush=brush, ink=ink)
    ctx = DrawingContext(
        sink=canvas,
        brush=brush,
        modifiers=modifiers,
        controller=controller or Controller(ControllerKind.TWO_POINTS),
        trace_policy=trace_policy,
        filled=fill,
    )

    session = StrokeSession(strategy)
    session.begin()
    stroke = _as_stroke(points)
    if fill:
        session.fill(ctx, stroke)
    else:
        session.join(ctx, stroke)
    return canvas
