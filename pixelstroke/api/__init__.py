"""High-level interface for tool loops.

StrokeSession binds a strategy to the state of one tool's drag sessions;
render_stroke draws a complete stroke onto a fresh RasterCanvas.

Example usage::

    from pixelstroke.api import render_stroke

    canvas = render_stroke([(4, 4), (28, 20)], 'as_ellipses')
    print(canvas.touched().sum())
"""

from .session import StrokeSession, render_stroke

__all__ = ['StrokeSession', 'render_stroke']
