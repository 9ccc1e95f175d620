"""Ellipse rasterization.

Axis-aligned ellipses use the integer rectangle form of Bresenham's
midpoint ellipse (as popularised by Alois Zingl): the ellipse is inscribed
in the rectangle spanned by two corner pixels and all four quadrants are
walked together. Rotated ellipses are sampled from their parametric form,
rounded, and joined with the segment rasterizer so the outline stays
8-connected.

The module provides the following functions:
    ellipse_outline: Axis-aligned outline, one callback per pixel.
    ellipse_fill: Axis-aligned filled ellipse, one callback per row span.
    rotated_ellipse_points: Closed pixel outline of a rotated ellipse.
    rotated_ellipse_outline: Rotated outline, one callback per pixel.
    rotated_ellipse_fill: Rotated filled ellipse, one callback per row span.

Rotation convention:
    A positive angle turns the ellipse clockwise on screen (y grows
    downwards): the right end of the major axis moves down. Rotated
    rectangles turn the same way.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from ..config import ANGLE_EPSILON, ELLIPSE_MAX_SEGMENTS, ELLIPSE_MIN_SEGMENTS
from ..domain.geometry import Point, Stroke
from .lines import rasterize_segment_into

Pixel = Callable[[int, int], None]
HLine = Callable[[int, int, int], None]


def _walk_rect_ellipse(x0: int, y0: int, x1: int, y1: int, quad, tip) -> None:
    """Shared quadrant walk for the outline and filled forms.

    ``quad(x0, x1, y_low, y_high)`` is called once per step with the
    current pixels of the four quadrants; ``tip(x0, x1, y)`` finishes the
    flat ellipses whose x walk stops early.
    """
    a = abs(x1 - x0)
    b = abs(y1 - y0)
    b1 = b & 1
    dx = 4 * (1 - a) * b * b
    dy = 4 * (b1 + 1) * a * a
    err = dx + dy + b1 * a * a

    if x0 > x1:
        x0 = x1
        x1 += a
    if y0 > y1:
        y0 = y1
    y0 += (b + 1) // 2
    y1 = y0 - b1
    a8 = 8 * a * a
    b8 = 8 * b * b

    while True:
        quad(x0, x1, y0, y1)
        e2 = 2 * err
        if e2 <= dy:
            y0 += 1
            y1 -= 1
            dy += a8
            err += dy
        if e2 >= dx or 2 * err > dy:
            x0 += 1
            x1 -= 1
            dx += b8
            err += dx
        if x0 > x1:
            break

    while y0 - y1 <= b:
        tip(x0 - 1, x1 + 1, y0, y1)
        y0 += 1
        y1 -= 1


def ellipse_outline(x1: int, y1: int, x2: int, y2: int, pixel: Pixel) -> None:
    """Draw the ellipse inscribed in the rectangle (x1, y1)-(x2, y2).

    Args:
        x1, y1: One corner of the bounding rectangle.
        x2, y2: The opposite corner.
        pixel: Callback receiving (x, y) for every outline pixel. Pixels
            where quadrants meet may be reported more than once.
    """
    def quad(xa, xb, ya, yb):
        pixel(xb, ya)
        pixel(xa, ya)
        pixel(xa, yb)
        pixel(xb, yb)

    def tip(xa, xb, ya, yb):
        pixel(xa, ya)
        pixel(xb, ya)
        pixel(xa, yb)
        pixel(xb, yb)

    _walk_rect_ellipse(x1, y1, x2, y2, quad, tip)


def ellipse_fill(x1: int, y1: int, x2: int, y2: int, hline: HLine) -> None:
    """Fill the ellipse inscribed in the rectangle (x1, y1)-(x2, y2).

    Args:
        x1, y1: One corner of the bounding rectangle.
        x2, y2: The opposite corner.
        hline: Callback receiving (x_left, y, x_right) for each row run.
    """
    def quad(xa, xb, ya, yb):
        hline(xa, ya, xb)
        if yb != ya:
            hline(xa, yb, xb)

    def tip(xa, xb, ya, yb):
        hline(xa, ya, xb)
        if yb != ya:
            hline(xa, yb, xb)

    _walk_rect_ellipse(x1, y1, x2, y2, quad, tip)


def rotated_ellipse_points(cx: int, cy: int, a: int, b: int,
                           angle: float) -> list[tuple[int, int]]:
    """Closed, 8-connected pixel outline of a rotated ellipse.

    Args:
        cx, cy: Centre of the ellipse.
        a: Horizontal semi-axis before rotation.
        b: Vertical semi-axis before rotation.
        angle: Rotation in radians.

    Returns:
        List of (x, y) pixels in traversal order with no consecutive
        duplicates. The first pixel is not repeated at the end.
    """
    a = abs(a)
    b = abs(b)
    if a == 0 and b == 0:
        return [(cx, cy)]

    n = int(np.clip(2 * math.pi * max(a, b), ELLIPSE_MIN_SEGMENTS, ELLIPSE_MAX_SEGMENTS))
    t = np.linspace(0.0, 2.0 * math.pi, n, endpoint=False)
    c, s = math.cos(angle), math.sin(angle)
    ex = a * np.cos(t)
    ey = b * np.sin(t)
    xs = np.floor(cx + ex * c - ey * s + 0.5).astype(np.int64)
    ys = np.floor(cy + ex * s + ey * c + 0.5).astype(np.int64)

    vertices = [Point(int(x), int(y)) for x, y in zip(xs, ys)]
    vertices.append(vertices[0])

    path = Stroke()
    for start, end in zip(vertices, vertices[1:]):
        rasterize_segment_into(path, start, end)
    if len(path) > 1 and path.first == path.last:
        path.points.pop()
    return [p.to_tuple() for p in path]


def rotated_ellipse_outline(cx: int, cy: int, a: int, b: int, angle: float,
                            pixel: Pixel) -> None:
    """Draw a rotated ellipse outline through pixel(x, y)."""
    if abs(angle) < ANGLE_EPSILON:
        ellipse_outline(cx - a, cy - b, cx + a, cy + b, pixel)
        return
    for x, y in rotated_ellipse_points(cx, cy, a, b, angle):
        pixel(x, y)


def rotated_ellipse_fill(cx: int, cy: int, a: int, b: int, angle: float,
                         hline: HLine) -> None:
    """Fill a rotated ellipse, one hline(x1, y, x2) per row, top to bottom."""
    if abs(angle) < ANGLE_EPSILON:
        ellipse_fill(cx - a, cy - b, cx + a, cy + b, hline)
        return

    outline = np.array(rotated_ellipse_points(cx, cy, a, b, angle), dtype=np.int64)
    for y in np.unique(outline[:, 1]):
        row = outline[outline[:, 1] == y, 0]
        hline(int(row.min()), int(y), int(row.max()))
