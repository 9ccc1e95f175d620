"""Cubic Bezier curve strategy."""

from __future__ import annotations

from ..algorithms.spline import draw_spline
from ..domain.context import DrawingContext
from ..domain.geometry import Stroke
from .base import SessionState, StrategyName, StrokeStrategy


class BezierStrategy(StrokeStrategy):
    """Draw the stroke as a chain of cubic Bezier segments.

    Points are consumed in groups of four control points. A trailing group
    of one point is stamped, two points become a straight line, and three
    points form a degenerate cubic whose middle control point is used
    twice. There is no dedicated fill for curves.
    """

    name = StrategyName.AS_BEZIER

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        n = len(stroke)
        for c in range(0, n, 4):
            remaining = n - c
            if remaining == 1:
                ctx.stamp_point(stroke[c].x, stroke[c].y)
            elif remaining == 2:
                a, b = stroke[c], stroke[c + 1]
                ctx.stamp_line(a.x, a.y, b.x, b.y)
            elif remaining == 3:
                draw_spline(stroke[c], stroke[c + 1], stroke[c + 1], stroke[c + 2],
                            ctx.stamp_line)
            else:
                draw_spline(stroke[c], stroke[c + 1], stroke[c + 2], stroke[c + 3],
                            ctx.stamp_line)
