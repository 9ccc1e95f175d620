"""Strategies that stamp stroke points without interpolation."""

from __future__ import annotations

from ..domain.context import DrawingContext
from ..domain.geometry import Point, Stroke
from ..utils.numeric import trunc_div
from .base import SessionState, StrategyName, StrokeStrategy


class NoneStrategy(StrokeStrategy):
    """Stamp every point independently, in order.

    Used by scattered tools (spray-like single stamps) where the points
    must not be connected.
    """

    name = StrategyName.NONE

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        for pt in stroke:
            ctx.stamp_point(pt.x, pt.y)


class FirstPointStrategy(StrokeStrategy):
    """Stamp a single point: the first one, or the centre of the stroke.

    With a two-point controller and the FROM_CENTER modifier the stamp
    goes to the integer mean of all stroke points; otherwise it goes to the
    first point. Angle snapping is requested because the direction from the
    first to the last point is meaningful to some inks (e.g. gradients).
    """

    name = StrategyName.FIRST_POINT
    snaps_by_angle = True

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        if stroke.is_empty:
            return

        if ctx.is_two_points and ctx.from_center:
            mid = mean_point(stroke)
        else:
            mid = stroke.first

        ctx.stamp_point(mid.x, mid.y)


def mean_point(stroke: Stroke) -> Point:
    """Arithmetic mean of the stroke points, truncated towards zero."""
    n = len(stroke)
    sx = sum(p.x for p in stroke)
    sy = sum(p.y for p in stroke)
    return Point(trunc_div(sx, n), trunc_div(sy, n))
