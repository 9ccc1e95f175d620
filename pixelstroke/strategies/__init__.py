"""Stroke strategies.

A strategy decides how the points of a stroke become stamp operations.
All strategies share the StrokeStrategy contract and take the per-session
SessionState explicitly.

The module exports the following classes:

Contract:
    StrokeStrategy: Base class of all strategies.
    SessionState: Buffers kept across the calls of one drag session.
    StrategyName: Closed enumeration of the available strategies.
    StrokeContractError: Raised on session protocol breaches (strict mode).

Strategies:
    NoneStrategy: Stamp every point, unconnected.
    FirstPointStrategy: Stamp the first point (or the centre).
    LinesStrategy: Connect points with pixel lines.
    RectanglesStrategy: Rectangles from corner pairs, optionally rotated.
    EllipsesStrategy: Ellipses from corner pairs, optionally rotated.
    BezierStrategy: Cubic Bezier segments from groups of four points.
    PixelPerfectStrategy: Freehand lines with L-corner pixels removed.

Registry:
    STRATEGIES: Mapping from StrategyName to strategy instance.
    get_strategy: Look up a strategy by name.

Example usage::

    from pixelstroke.strategies import SessionState, get_strategy

    strategy = get_strategy('as_lines')
    state = SessionState()
    strategy.reset(state)
    strategy.join_stroke(ctx, stroke, state)
"""

from .base import SessionState, StrategyName, StrokeContractError, StrokeStrategy
from .bezier import BezierStrategy
from .polyline import LinesStrategy, PixelPerfectStrategy, is_l_corner
from .registry import STRATEGIES, get_strategy
from .shapes import EllipsesStrategy, RectanglesStrategy, rotate_rectangle
from .simple import FirstPointStrategy, NoneStrategy, mean_point

__all__ = [
    'StrokeStrategy', 'SessionState', 'StrategyName', 'StrokeContractError',
    'NoneStrategy', 'FirstPointStrategy', 'LinesStrategy', 'RectanglesStrategy',
    'EllipsesStrategy', 'BezierStrategy', 'PixelPerfectStrategy',
    'STRATEGIES', 'get_strategy',
    'is_l_corner', 'rotate_rectangle', 'mean_point',
]
