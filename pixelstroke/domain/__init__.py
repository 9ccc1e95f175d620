"""Domain objects for stroke rasterization.

This module provides the value objects shared by the strategies, the
primitives and the sinks.

Geometry classes:
    Point: Immutable integer 2D point.
    Rect: Immutable pixel rectangle with inclusive extents.
    Stroke: Ordered sequence of points captured during one drag.

Context classes:
    DrawingContext: Per-call session parameters plus the pixel sink.
    Brush, BrushType: Active brush descriptor.
    Controller, ControllerKind: Pointer controller mode flags.
    Modifiers: Modifier key bit set.
    TracePolicy: Cumulative vs. replace-last stroke semantics.
    PixelSink: Protocol of the three stamp operations.

Example usage::

    from pixelstroke.domain import Point, Stroke

    stroke = Stroke([Point(0, 0), Point(4, 2)])
    stroke.bounds()  # Rect(x=0, y=0, width=5, height=3)
"""

from .context import (
    Brush,
    BrushType,
    Controller,
    ControllerKind,
    DrawingContext,
    Modifiers,
    PixelSink,
    TracePolicy,
)
from .geometry import Point, Rect, Stroke

__all__ = [
    'Point', 'Rect', 'Stroke',
    'DrawingContext', 'Brush', 'BrushType', 'Controller', 'ControllerKind',
    'Modifiers', 'PixelSink', 'TracePolicy',
]
