"""Reference pixel sinks.

The strategies hand their output to any object implementing the
PixelSink protocol. Two are provided:

    RecordingSink: Records stamp calls (StampOp) for previews and tests.
    RasterCanvas: Paints into a numpy array, exportable with Pillow.
"""

from .canvas import Ink, RasterCanvas
from .recording import RecordingSink, StampOp

__all__ = ['RecordingSink', 'StampOp', 'RasterCanvas', 'Ink']
