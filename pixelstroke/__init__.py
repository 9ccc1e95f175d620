"""Stroke rasterization for freehand drawing tools.

pixelstroke turns the points captured while a pointer is dragged into
pixel-level stamp operations (stamp a brush at a point, along a line, or
fill a horizontal run) for a rendering backend to apply.

Architecture Overview:
    - domain: Point, Rect, Stroke and the DrawingContext read by strategies
    - algorithms: line walking, polygon scan conversion, ellipses, splines
    - strategies: the seven stroke strategies and their registry
    - render: reference sinks (RecordingSink, RasterCanvas)
    - api: StrokeSession for tool loops and render_stroke for one-shot use

Example usage:
    Drawing a pixel-perfect freehand line frame by frame::

        from pixelstroke import DrawingContext, RasterCanvas, Stroke, StrokeSession

        canvas = RasterCanvas(64, 64)
        ctx = DrawingContext(sink=canvas)
        session = StrokeSession('as_pixel_perfect')
        session.begin()
        session.join(ctx, Stroke.from_tuples([(1, 1)]))
        session.join(ctx, Stroke.from_tuples([(1, 1), (10, 4)]))

    Predicting the redraw area of a rotated ellipse::

        from pixelstroke import Controller, ControllerKind, get_strategy

        ctx = DrawingContext(sink=canvas,
                             controller=Controller(ControllerKind.TWO_POINTS, 0.5))
        rect = get_strategy('as_ellipses').stroke_bounds(ctx, stroke)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import StrokeSession, render_stroke
from .domain import (
    Brush,
    BrushType,
    Controller,
    ControllerKind,
    DrawingContext,
    Modifiers,
    PixelSink,
    Point,
    Rect,
    Stroke,
    TracePolicy,
)
from .render import Ink, RasterCanvas, RecordingSink, StampOp
from .strategies import (
    STRATEGIES,
    SessionState,
    StrategyName,
    StrokeContractError,
    StrokeStrategy,
    get_strategy,
)

__all__ = [
    # Domain objects
    'Point', 'Rect', 'Stroke',
    'DrawingContext', 'Brush', 'BrushType', 'Controller', 'ControllerKind',
    'Modifiers', 'PixelSink', 'TracePolicy',
    # Strategies
    'StrokeStrategy', 'SessionState', 'StrategyName', 'StrokeContractError',
    'STRATEGIES', 'get_strategy',
    # Sinks
    'RecordingSink', 'StampOp', 'RasterCanvas', 'Ink',
    # Session layer
    'StrokeSession', 'render_stroke',
]

__version__ = '1.0.0'
