"""Rectangle and ellipse strategies.

Every consecutive pair of stroke points is taken as two opposite corners
of a shape's bounding box. With a rotation angle (the controller's
``shape_angle``) the shape is turned about the centre of that box.

A positive angle turns both shapes clockwise on screen (y grows downwards).
The rectangle formula is written with a negated sine, the ellipse one with
a plain sine and the opposite signs on the cross terms.
"""

from __future__ import annotations

import math

from ..algorithms.ellipse import (
    ellipse_fill,
    ellipse_outline,
    rotated_ellipse_fill,
    rotated_ellipse_outline,
)
from ..config import ANGLE_EPSILON
from ..domain.context import DrawingContext
from ..domain.geometry import Point, Rect, Stroke
from ..utils.numeric import trunc, trunc_div
from .base import SessionState, StrategyName, StrokeStrategy


def _corner_pairs(stroke: Stroke):
    """Yield (x1, y1, x2, y2) for each consecutive pair, normalised."""
    for c in range(len(stroke) - 1):
        x1, y1 = stroke[c].x, stroke[c].y
        x2, y2 = stroke[c + 1].x, stroke[c + 1].y
        if x1 > x2:
            x1, x2 = x2, x1
        if y1 > y2:
            y1, y2 = y2, y1
        yield x1, y1, x2, y2


def rotate_rectangle(x1: int, y1: int, x2: int, y2: int, angle: float) -> Stroke:
    """Corners of the rectangle (x1, y1)-(x2, y2) rotated about its centre.

    Args:
        x1, y1: First corner.
        x2, y2: Opposite corner.
        angle: Rotation in radians.

    Returns:
        Stroke with the four rotated corners in drawing order.
    """
    cx = trunc_div(x1 + x2, 2)
    cy = trunc_div(y1 + y2, 2)
    a = trunc_div(x2 - x1, 2)
    b = trunc_div(y2 - y1, 2)
    s = -math.sin(angle)
    c = math.cos(angle)

    return Stroke([
        Point(trunc(cx - a * c - b * s), trunc(cy + a * s - b * c)),
        Point(trunc(cx + a * c - b * s), trunc(cy - a * s - b * c)),
        Point(trunc(cx + a * c + b * s), trunc(cy - a * s + b * c)),
        Point(trunc(cx - a * c + b * s), trunc(cy + a * s + b * c)),
    ])


class RectanglesStrategy(StrokeStrategy):
    """Rectangle outlines and filled rectangles."""

    name = StrategyName.AS_RECTANGLES

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        if stroke.is_empty:
            return

        if len(stroke) == 1:
            ctx.stamp_point(stroke.first.x, stroke.first.y)
            return

        angle = ctx.shape_angle
        for x1, y1, x2, y2 in _corner_pairs(stroke):
            if abs(angle) < ANGLE_EPSILON:
                ctx.stamp_line(x1, y1, x2, y1)
                ctx.stamp_line(x1, y2, x2, y2)
                for y in range(y1, y2 + 1):
                    ctx.stamp_point(x1, y)
                    ctx.stamp_point(x2, y)
            else:
                p = rotate_rectangle(x1, y1, x2, y2, angle)
                n = len(p)
                for i in range(n):
                    a, b = p[i], p[(i + 1) % n]
                    ctx.stamp_line(a.x, a.y, b.x, b.y)

    def fill_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        if len(stroke) < 2:
            self.join_stroke(ctx, stroke, state)
            return

        angle = ctx.shape_angle
        for x1, y1, x2, y2 in _corner_pairs(stroke):
            if abs(angle) < ANGLE_EPSILON:
                for y in range(y1, y2 + 1):
                    ctx.stamp_hline(x1, y, x2)
            else:
                ctx.fill_polygon(rotate_rectangle(x1, y1, x2, y2, angle).points)

    def stroke_bounds(self, ctx: DrawingContext, stroke: Stroke) -> Rect:
        angle = ctx.shape_angle
        if abs(angle) <= ANGLE_EPSILON:
            return stroke.bounds()

        bounds = Rect()
        for c in range(len(stroke) - 1):
            a, b = stroke[c], stroke[c + 1]
            bounds |= rotate_rectangle(a.x, a.y, b.x, b.y, angle).bounds()
        return bounds


class EllipsesStrategy(StrokeStrategy):
    """Ellipse outlines and filled ellipses."""

    name = StrategyName.AS_ELLIPSES

    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        if stroke.is_empty:
            return

        if len(stroke) == 1:
            ctx.stamp_point(stroke.first.x, stroke.first.y)
            return

        angle = ctx.shape_angle
        for x1, y1, x2, y2 in _corner_pairs(stroke):
            if abs(angle) < ANGLE_EPSILON:
                ellipse_outline(x1, y1, x2, y2, ctx.stamp_point)
            else:
                rotated_ellipse_outline(
                    trunc_div(x1 + x2, 2), trunc_div(y1 + y2, 2),
                    abs(x2 - x1) // 2, abs(y2 - y1) // 2,
                    angle, ctx.stamp_point)

    def fill_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        if len(stroke) < 2:
            self.join_stroke(ctx, stroke, state)
            return

        angle = ctx.shape_angle
        for x1, y1, x2, y2 in _corner_pairs(stroke):
            if abs(angle) < ANGLE_EPSILON:
                ellipse_fill(x1, y1, x2, y2, ctx.stamp_hline)
            else:
                rotated_ellipse_fill(
                    trunc_div(x1 + x2, 2), trunc_div(y1 + y2, 2),
                    abs(x2 - x1) // 2, abs(y2 - y1) // 2,
                    angle, ctx.stamp_hline)

    def stroke_bounds(self, ctx: DrawingContext, stroke: Stroke) -> Rect:
        """Bounds of the ellipse, with margin for the rotated form.

        For a rotated ellipse with semi-axes a, b the enclosing box has
        semi-axes ``sqrt(a^2 - zd*sin)`` and ``sqrt(b^2 + zd*sin)`` where
        ``zd = (a^2 - b^2) * sin(angle)``, plus one pixel on each side.
        """
        bounds = stroke.bounds()
        angle = ctx.shape_angle

        if abs(angle) > ANGLE_EPSILON:
            center = bounds.center
            a = trunc(bounds.width / 2.0 + 0.5)
            b = trunc(bounds.height / 2.0 + 0.5)
            xd = float(a * a)
            yd = float(b * b)
            s = math.sin(angle)
            zd = (xd - yd) * s

            a = trunc(math.sqrt(xd - zd * s) + 0.5)
            b = trunc(math.sqrt(yd + zd * s) + 0.5)

            return Rect(center.x - a - 1, center.y - b - 1, 2 * a + 3, 2 * b + 3)

        return Rect(bounds.x, bounds.y, bounds.width + 1, bounds.height + 1)
