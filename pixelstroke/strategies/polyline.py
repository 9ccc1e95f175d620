"""Strategies that connect stroke points with discrete line walks.

Both strategies rasterize every consecutive pair of stroke points through
the segment rasterizer, which never records the same pixel twice in a row,
and stamp the resulting pixels one by one. They differ in what they keep
between calls of a drag session:

    LinesStrategy: remembers the last stamped point so an idle tap is not
        stamped over and over, and starts every call from a fresh buffer.
    PixelPerfectStrategy: accumulates the whole path for the session and
        drops the inner pixel of every L-shaped corner, which gives the
        one-pixel-wide look of hand-placed pixel art.
"""

from __future__ import annotations

import logging

from ..algorithms.lines import rasterize_segment_into
from ..domain.context import DrawingContext, TracePolicy
from ..domain.geometry import Point, Stroke
from .base import (
    SessionState,
    StrategyName,
    StrokeStrategy,
    check_contract,
    fill_contour_then_polygon,
)

logger = logging.getLogger(__name__)


def _rasterize_stroke(stroke: Stroke, into: Stroke) -> None:
    for c in range(len(stroke) - 1):
        rasterize_segment_into(into, stroke[c], stroke[c + 1])


class LinesStrategy(StrokeStrategy):
    """Connect consecutive points with straight pixel lines.

    Handles freehand pencils, straight lines and polygon outlines. When
    the context is filled and the controller is not freehand, the outline
    is closed with a line from the last point back to the first.
    """

    name = StrategyName.AS_LINES
    snaps_by_angle = True

    def _stamp_tap(self, ctx: DrawingContext, stroke: Stroke,
                   state: SessionState) -> None:
        state.last_emitted = Stroke([stroke.first])
        ctx.stamp_point(stroke.first.x, stroke.first.y)

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        if stroke.is_empty:
            return

        if len(stroke) == 1:
            self._stamp_tap(ctx, stroke, state)
            return

        if len(stroke) == 2 and stroke[0] == stroke[1]:
            # A tap; only stamp it again if it moved or a LAST policy
            # call asks for a fresh preview
            if (state.last_emitted.is_empty or
                    state.last_emitted[0] != stroke[0] or
                    ctx.trace_policy is TracePolicy.LAST):
                self._stamp_tap(ctx, stroke, state)
                return
        else:
            pts = state.pts
            _rasterize_stroke(stroke, pts)

            # Freehand continuation (e.g. shift+click) starts on the pixel
            # the previous call already stamped
            start = 1 if ctx.is_freehand else 0
            for pt in pts.points[start:]:
                ctx.stamp_point(pt.x, pt.y)

            last = pts.last
            pts.reset()
            if not check_contract(ctx, not state.last_emitted.is_empty,
                                  "line join before any point was stamped"):
                state.last_emitted = Stroke([last])
            state.last_emitted[0] = last

        # Closed shape (polygon outline)
        if ctx.filled and not ctx.is_freehand:
            first, last = stroke.first, stroke.last
            ctx.stamp_line(first.x, first.y, last.x, last.y)

    def fill_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        fill_contour_then_polygon(self, ctx, stroke, state)


def is_l_corner(prev: Point, cur: Point, nxt: Point) -> bool:
    """True when cur is the inner pixel of an L turn between prev and nxt.

    Both neighbours touch cur along an axis (same column or same row) but
    not along the same one, so prev and nxt are diagonal to each other.
    """
    return ((prev.x == cur.x or prev.y == cur.y) and
            (nxt.x == cur.x or nxt.y == cur.y) and
            prev.x != nxt.x and
            prev.y != nxt.y)


class PixelPerfectStrategy(StrokeStrategy):
    """Freehand lines without staircase corner pixels.

    The path of the whole session is kept in ``state.pts`` and stamped on
    every call. A pixel sitting in the corner of an L-like turn is dropped;
    the pixel after it is stamped without being tested again.

    After a LAST trace policy call (a straight line confirmed with shift)
    accumulation restarts from that line, and the first pixel of the
    buffer is no longer stamped because the confirmed line already did.
    """

    name = StrategyName.AS_PIXEL_PERFECT
    snaps_by_angle = True

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        # Each LAST call is a fresh start; keeping the old points would draw
        # lines from the first point to every previous preview end.
        if ctx.trace_policy is TracePolicy.LAST:
            state.retained_last_policy = True
            state.pts.reset()

        if stroke.is_empty:
            return

        pts = state.pts
        if len(stroke) == 1:
            if pts.is_empty:
                pts.add_point(stroke.first)
            ctx.stamp_point(stroke.first.x, stroke.first.y)
            return

        _rasterize_stroke(stroke, pts)

        n = len(pts)
        c = 0
        while c < n:
            if 0 < c < n - 1 and is_l_corner(pts[c - 1], pts[c], pts[c + 1]):
                c += 1

            if c == 0 and state.retained_last_policy:
                c += 1
                continue

            ctx.stamp_point(pts[c].x, pts[c].y)
            c += 1

        logger.debug("Pixel-perfect path has %d pixels", n)

    def fill_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        fill_contour_then_polygon(self, ctx, stroke, state)
