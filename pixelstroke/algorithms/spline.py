"""Cubic Bezier evaluation for curve strokes."""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from ..config import SPLINE_DENSITY, SPLINE_MAX_POINTS, SPLINE_MIN_POINTS
from ..domain.geometry import Point

Line = Callable[[int, int, int, int], None]


def spline_point_count(p0: Point, p1: Point, p2: Point, p3: Point) -> int:
    """Number of samples used for a curve with these control points.

    Grows with the square root of the control polygon length, clamped to
    [SPLINE_MIN_POINTS, SPLINE_MAX_POINTS].
    """
    chords = (math.hypot(p1.x - p0.x, p1.y - p0.y) +
              math.hypot(p2.x - p1.x, p2.y - p1.y) +
              math.hypot(p3.x - p2.x, p3.y - p2.y))
    npts = int(math.sqrt(chords) * SPLINE_DENSITY)
    return max(SPLINE_MIN_POINTS, min(SPLINE_MAX_POINTS, npts))


def spline_points(p0: Point, p1: Point, p2: Point, p3: Point) -> list[tuple[int, int]]:
    """Sample a cubic Bezier curve into integer pixel positions.

    Args:
        p0: Start point.
        p1: First control point.
        p2: Second control point.
        p3: End point.

    Returns:
        List of (x, y) tuples, ``spline_point_count`` long. The first entry
        is p0 exactly and the last is p3 (rounded half up).
    """
    npts = spline_point_count(p0, p1, p2, p3)
    t = np.linspace(0.0, 1.0, npts)
    mt = 1.0 - t
    w0 = mt ** 3
    w1 = 3 * mt * mt * t
    w2 = 3 * mt * t * t
    w3 = t ** 3

    xs = w0 * p0.x + w1 * p1.x + w2 * p2.x + w3 * p3.x
    ys = w0 * p0.y + w1 * p1.y + w2 * p2.y + w3 * p3.y
    xs = np.floor(xs + 0.5).astype(np.int64)
    ys = np.floor(ys + 0.5).astype(np.int64)

    points = [(p0.x, p0.y)]
    points.extend((int(x), int(y)) for x, y in zip(xs[1:], ys[1:]))
    return points


def draw_spline(p0: Point, p1: Point, p2: Point, p3: Point, line: Line) -> None:
    """Emit the curve as consecutive line(x1, y1, x2, y2) calls."""
    points = spline_points(p0, p1, p2, p3)
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        line(x1, y1, x2, y2)
