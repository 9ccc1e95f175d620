"""Strategy contract shared by all stroke strategies.

A strategy turns the current stroke of a drag session into stamp calls on
the context's pixel sink. Strategies themselves hold no session data: the
small buffers that must survive between calls of one session live in a
``SessionState`` owned by the caller and passed into every call. Calling
``reset`` on that state at pointer-down starts a new session.

Example implementation::

    class CentroidStrategy(StrokeStrategy):
        def join_stroke(self, ctx, stroke, state):
            if stroke.is_empty:
                return
            c = stroke.bounds().center
            ctx.stamp_point(c.x, c.y)
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..domain.context import DrawingContext
from ..domain.geometry import Rect, Stroke

logger = logging.getLogger(__name__)


class StrategyName(enum.Enum):
    """The closed set of stroke strategies."""
    NONE = 'none'
    FIRST_POINT = 'first_point'
    AS_LINES = 'as_lines'
    AS_RECTANGLES = 'as_rectangles'
    AS_ELLIPSES = 'as_ellipses'
    AS_BEZIER = 'as_bezier'
    AS_PIXEL_PERFECT = 'as_pixel_perfect'


class StrokeContractError(AssertionError):
    """A strategy was driven in a way its session protocol forbids."""


@dataclass
class SessionState:
    """Buffers a strategy keeps across the calls of one drag session.

    Attributes:
        last_emitted: The last point stamped by a line join (0 or 1 point).
        pts: Scratch buffer for rasterized segments. Pixel-perfect keeps
            accumulating into it for the whole session.
        retained_last_policy: Set once a LAST trace policy call happened
            in this session (pixel-perfect only).
    """
    last_emitted: Stroke = field(default_factory=Stroke)
    pts: Stroke = field(default_factory=Stroke)
    retained_last_policy: bool = False

    def clear(self) -> None:
        """Forget everything. Clearing twice is the same as clearing once."""
        self.last_emitted.reset()
        self.pts.reset()
        self.retained_last_policy = False


class StrokeStrategy(ABC):
    """Base class for stroke strategies.

    Subclasses must implement:
        - join_stroke(): Emit the outline of the stroke.

    Subclasses may override:
        - fill_stroke(): Emit the filled area (defaults to join_stroke).
        - stroke_bounds(): Predicted bounds of the emitted pixels.
        - reset(): Clear session buffers.
        - snaps_by_angle: Ask the controller for angle snapping.
    """

    name: StrategyName
    snaps_by_angle: bool = False

    def reset(self, state: SessionState) -> None:
        """Start a new drag session."""
        state.clear()

    @abstractmethod
    def join_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        """Emit the outline representation of stroke into ctx's sink."""
        pass

    def fill_stroke(self, ctx: DrawingContext, stroke: Stroke,
                    state: SessionState) -> None:
        """Emit the filled representation of stroke into ctx's sink."""
        self.join_stroke(ctx, stroke, state)

    def stroke_bounds(self, ctx: DrawingContext, stroke: Stroke) -> Rect:
        """Bounding box of the pixels join/fill would touch."""
        return stroke.bounds()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def check_contract(ctx: DrawingContext, condition: bool, message: str) -> bool:
    """Verify a session protocol invariant.

    Args:
        ctx: Context of the current call; ``ctx.strict`` selects fail-fast.
        condition: The invariant.
        message: Description of the breach.

    Returns:
        The condition, so callers can repair state when it does not hold.

    Raises:
        StrokeContractError: If the invariant fails and ctx.strict is set.
    """
    if condition:
        return True
    if ctx.strict:
        raise StrokeContractError(message)
    logger.debug("Strategy contract breach: %s", message)
    return False


def fill_contour_then_polygon(strategy: StrokeStrategy, ctx: DrawingContext,
                              stroke: Stroke, state: SessionState) -> None:
    """Fill used by the polyline strategies.

    Draws the contour first, because the scan converter does not guarantee
    exact edge coverage, then fills the polygon formed by the stroke. The
    contour is skipped for image brushes so semi-transparent custom brushes
    do not paint the edge twice.
    """
    if len(stroke) < 3:
        strategy.join_stroke(ctx, stroke, state)
        return

    if not ctx.brush.is_image:
        strategy.join_stroke(ctx, stroke, state)

    ctx.fill_polygon(stroke.points)
