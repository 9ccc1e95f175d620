"""Polygon scan conversion.

Converts a closed polygon with integer vertices into horizontal spans
using the even-odd rule. This is the default fill backend used by the
strategies that support area fill (lines, pixel-perfect, rotated
rectangles).

Crossing rule:
    Each non-horizontal edge covers the half-open row range
    ``[ylow, yhigh)`` so a vertex shared by two edges is counted once. On
    the bottom row of the polygon the edges ending there are closed so the
    last row is not lost. Crossings are rounded to the nearest column.

Example usage::

    from pixelstroke.algorithms.polygon import scanline_spans

    scanline_spans([(0, 0), (4, 0), (4, 2), (0, 2)])
    # [(0, 0, 4), (0, 1, 4), (0, 2, 4)]
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from ..domain.geometry import Point

HLine = Callable[[int, int, int], None]


def _as_array(points: Sequence) -> np.ndarray:
    return np.array(
        [p.to_tuple() if isinstance(p, Point) else (p[0], p[1]) for p in points],
        dtype=np.int64,
    ).reshape(-1, 2)


def scanline_spans(points: Sequence) -> list[tuple[int, int, int]]:
    """Scan convert a polygon into horizontal spans.

    Args:
        points: Polygon vertices in order, as Point objects or (x, y)
            tuples. The polygon is implicitly closed.

    Returns:
        List of (x1, y, x2) spans with x1 <= x2, ordered by row and then
        by column. Polygons with fewer than 3 vertices produce no spans.
    """
    verts = _as_array(points)
    if len(verts) < 3:
        return []

    start = verts
    end = np.roll(verts, -1, axis=0)
    sloped = start[:, 1] != end[:, 1]
    start, end = start[sloped], end[sloped]
    if len(start) == 0:
        return []

    # Orient every edge downwards
    flip = start[:, 1] > end[:, 1]
    top = np.where(flip[:, None], end, start).astype(np.float64)
    bot = np.where(flip[:, None], start, end).astype(np.float64)
    inv_slope = (bot[:, 0] - top[:, 0]) / (bot[:, 1] - top[:, 1])

    y_min = int(verts[:, 1].min())
    y_max = int(verts[:, 1].max())

    spans = []
    for y in range(y_min, y_max + 1):
        if y == y_max:
            active = (top[:, 1] <= y) & (bot[:, 1] >= y)
        else:
            active = (top[:, 1] <= y) & (bot[:, 1] > y)
        if not active.any():
            continue
        xs = top[active, 0] + (y - top[active, 1]) * inv_slope[active]
        xs = np.sort(np.floor(xs + 0.5).astype(np.int64))
        for x1, x2 in zip(xs[0::2], xs[1::2]):
            spans.append((int(x1), y, int(x2)))

    return spans


def fill_polygon(points: Sequence, hline: HLine) -> None:
    """Emit every span of the polygon through hline(x1, y, x2)."""
    for x1, y, x2 in scanline_spans(points):
        hline(x1, y, x2)
