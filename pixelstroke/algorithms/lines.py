"""Discrete line walking.

The segment rasterizer turns a pair of integer endpoints into the
8-connected pixel path between them. Strategies feed consecutive stroke
segments through ``rasterize_segment_into`` so that the pixel shared by two
segments (and any repeated pixel inside one) is only recorded once; inks
that are not idempotent would otherwise paint those pixels twice.

Example usage::

    from pixelstroke.algorithms.lines import line_points, rasterize_polyline

    line_points((0, 0), (5, 3))
    # [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)]

    path = rasterize_polyline([(0, 0), (3, 0), (3, 3)])
    len(path)  # 7, the corner (3, 0) appears once
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..domain.geometry import Point, Stroke


def _bresenham(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    points = []
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        points.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy

    return points


def line_points(start: Tuple[int, int], end: Tuple[int, int]) -> list[tuple[int, int]]:
    """Generate points along a straight line using Bresenham's algorithm.

    The walk always runs from the lexicographically smaller endpoint so the
    same pixels are chosen whichever way round the endpoints are given;
    swapping them only reverses the result.

    Args:
        start: Starting point as (x, y) integer tuple.
        end: Ending point as (x, y) integer tuple.

    Returns:
        List of (x, y) integer tuples along the line, including both
        endpoints. Consecutive entries are 8-connected and never equal.

    Example:
        >>> line_points((0, 0), (5, 3))
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)]
    """
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])

    if (x1, y1) < (x0, y0):
        points = _bresenham(x1, y1, x0, y0)
        points.reverse()
        return points
    return _bresenham(x0, y0, x1, y1)


def add_point_unique(stroke: Stroke, x: int, y: int) -> None:
    """Append (x, y) unless it equals the stroke's current last point."""
    point = Point(x, y)
    if stroke.is_empty or stroke.last != point:
        stroke.add_point(point)


def rasterize_segment_into(stroke: Stroke, start: Point, end: Point) -> None:
    """Append the pixel walk from start to end into stroke, deduplicated."""
    for x, y in line_points(start.to_tuple(), end.to_tuple()):
        add_point_unique(stroke, x, y)


def rasterize_polyline(points: Iterable, into: Optional[Stroke] = None) -> Stroke:
    """Rasterize every consecutive pair of points into one pixel path.

    Args:
        points: Iterable of Point objects or (x, y) tuples.
        into: Optional stroke to append to. Deduplication also applies
            against whatever the stroke already ends with.

    Returns:
        The stroke the pixels were appended to.
    """
    path = into if into is not None else Stroke()
    pts = [p if isinstance(p, Point) else Point.from_tuple(p) for p in points]
    if len(pts) == 1:
        add_point_unique(path, pts[0].x, pts[0].y)
    for a, b in zip(pts, pts[1:]):
        rasterize_segment_into(path, a, b)
    return path
