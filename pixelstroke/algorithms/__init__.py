"""Pixel-level drawing primitives.

These are the low-level rasterizers the strategies build on. Every
function emits integer pixel coordinates, either as a returned list or
through a typed callback (``pixel(x, y)``, ``line(x1, y1, x2, y2)``,
``hline(x1, y, x2)``).

The module exports the following functions:

Line walking:
    line_points: 8-connected pixel walk between two points.
    add_point_unique: Append a pixel unless it repeats the last one.
    rasterize_segment_into: Walk a segment into a stroke buffer.
    rasterize_polyline: Walk every consecutive pair of points.

Area fill:
    scanline_spans: Even-odd polygon scan conversion.
    fill_polygon: Emit polygon spans through an hline callback.

Curves:
    ellipse_outline, ellipse_fill: Axis-aligned ellipses.
    rotated_ellipse_outline, rotated_ellipse_fill: Rotated ellipses.
    draw_spline, spline_points: Cubic Bezier curves.
"""

from .ellipse import (
    ellipse_fill,
    ellipse_outline,
    rotated_ellipse_fill,
    rotated_ellipse_outline,
    rotated_ellipse_points,
)
from .lines import add_point_unique, line_points, rasterize_polyline, rasterize_segment_into
from .polygon import fill_polygon, scanline_spans
from .spline import draw_spline, spline_point_count, spline_points

__all__ = [
    'line_points', 'add_point_unique', 'rasterize_segment_into', 'rasterize_polyline',
    'scanline_spans', 'fill_polygon',
    'ellipse_outline', 'ellipse_fill',
    'rotated_ellipse_points', 'rotated_ellipse_outline', 'rotated_ellipse_fill',
    'spline_point_count', 'spline_points', 'draw_spline',
]
