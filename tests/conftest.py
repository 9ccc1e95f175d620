"""Shared pytest fixtures for the pixelstroke test suite.

Fixtures:
    sink: Fresh RecordingSink
    make_ctx: Factory building a DrawingContext around a RecordingSink
    state: Fresh SessionState
    canvas_factory: Factory building RasterCanvas instances

Options:
    --update-golden: Rewrite golden images in tests/golden

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so the tests run from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from pixelstroke.domain import (  # noqa: E402
    Brush,
    Controller,
    ControllerKind,
    DrawingContext,
    Modifiers,
    TracePolicy,
)
from pixelstroke.render import Ink, RasterCanvas, RecordingSink  # noqa: E402
from pixelstroke.strategies import SessionState  # noqa: E402


def pytest_addoption(parser):
    """Add custom pytest command line options."""
    parser.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Update golden images instead of comparing against them"
    )


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def sink():
    """Empty recording sink."""
    return RecordingSink()


@pytest.fixture
def state():
    """Empty session state."""
    return SessionState()


@pytest.fixture
def make_ctx():
    """Build a DrawingContext with a fresh RecordingSink.

    Keyword arguments:
        kind: ControllerKind (default FREEHAND)
        angle: shape angle in radians (default 0)
        Any other DrawingContext field (brush, modifiers, trace_policy,
        filled, strict, sink).
    """
    def _make(kind=ControllerKind.FREEHAND, angle=0.0, **kwargs):
        kwargs.setdefault('sink', RecordingSink())
        kwargs.setdefault('brush', Brush())
        kwargs.setdefault('modifiers', Modifiers.NONE)
        kwargs.setdefault('trace_policy', TracePolicy.ACCUMULATE)
        return DrawingContext(controller=Controller(kind, angle), **kwargs)
    return _make


@pytest.fixture
def canvas_factory():
    """Build RasterCanvas instances, ACCUMULATE ink by default."""
    def _make(width=32, height=32, brush=None, ink=Ink.ACCUMULATE):
        return RasterCanvas(width, height, brush=brush, ink=ink)
    return _make
