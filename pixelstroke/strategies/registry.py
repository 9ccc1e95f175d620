"""Strategy registry.

The set of strategies is closed: ``STRATEGIES`` maps every StrategyName to
its (stateless) instance and is the preferred way to look one up.
"""

from __future__ import annotations

from .base import StrategyName, StrokeStrategy
from .bezier import BezierStrategy
from .polyline import LinesStrategy, PixelPerfectStrategy
from .shapes import EllipsesStrategy, RectanglesStrategy
from .simple import FirstPointStrategy, NoneStrategy

STRATEGIES: dict[StrategyName, StrokeStrategy] = {
    StrategyName.NONE: NoneStrategy(),
    StrategyName.FIRST_POINT: FirstPointStrategy(),
    StrategyName.AS_LINES: LinesStrategy(),
    StrategyName.AS_RECTANGLES: RectanglesStrategy(),
    StrategyName.AS_ELLIPSES: EllipsesStrategy(),
    StrategyName.AS_BEZIER: BezierStrategy(),
    StrategyName.AS_PIXEL_PERFECT: PixelPerfectStrategy(),
}


def get_strategy(name: StrategyName | str) -> StrokeStrategy:
    """Look up a strategy by enum member or its string value.

    Args:
        name: A StrategyName, its value ('as_lines') or its member name
            ('AS_LINES').

    Returns:
        The registered strategy instance.

    Raises:
        ValueError: If the name is unknown.
    """
    if isinstance(name, StrategyName):
        return STRATEGIES[name]

    key = str(name)
    for member in StrategyName:
        if key in (member.value, member.name):
            return STRATEGIES[member]
    raise ValueError(f"Unknown stroke strategy: {name!r}")
