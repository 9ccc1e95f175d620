"""Unit tests for the reference pixel sinks.

Tests:
    - Brush footprints
    - RasterCanvas stamping, clipping and inks
    - RecordingSink bookkeeping
"""

import numpy as np
import pytest

from pixelstroke.domain import Brush, BrushType
from pixelstroke.render import Ink, RasterCanvas, RecordingSink, StampOp


class TestBrushMask:
    """Tests for Brush.mask."""

    def test_one_pixel(self):
        assert Brush().mask().tolist() == [[True]]

    def test_circle_drops_corners(self):
        mask = Brush(BrushType.CIRCLE, 5).mask()
        assert mask.shape == (5, 5)
        assert mask.sum() == 21
        assert not mask[0, 0] and not mask[4, 4]
        assert mask[2].all() and mask[:, 2].all()

    def test_square(self):
        assert Brush(BrushType.SQUARE, 4).mask().sum() == 16

    def test_line(self):
        mask = Brush(BrushType.LINE, 3).mask()
        assert mask.tolist() == [
            [False, False, False],
            [True, True, True],
            [False, False, False],
        ]

    def test_image(self):
        image = np.array([[1, 0], [0, 1]])
        assert Brush(BrushType.IMAGE, image=image).mask().tolist() == [
            [True, False], [False, True]]

    def test_invalid_brushes(self):
        with pytest.raises(ValueError):
            Brush(size=0)
        with pytest.raises(ValueError):
            Brush(BrushType.IMAGE)


class TestRasterCanvas:
    """Tests for RasterCanvas."""

    def test_rejects_empty_canvas(self):
        with pytest.raises(ValueError, match="positive"):
            RasterCanvas(0, 10)

    def test_accumulate_counts_stamps(self, canvas_factory):
        canvas = canvas_factory(8, 8)
        canvas.stamp_point(3, 4)
        canvas.stamp_point(3, 4)
        assert canvas.pixels[4, 3] == 2
        assert canvas.stamp_count == 2

    def test_opaque_is_idempotent(self, canvas_factory):
        canvas = canvas_factory(8, 8, ink=Ink.OPAQUE)
        canvas.stamp_point(3, 4)
        canvas.stamp_point(3, 4)
        assert canvas.pixels[4, 3] == 255

    def test_footprint_is_centred(self, canvas_factory):
        canvas = canvas_factory(8, 8, brush=Brush(BrushType.SQUARE, 3))
        canvas.stamp_point(4, 4)
        assert canvas.touched_points() == {
            (x, y) for x in range(3, 6) for y in range(3, 6)}

    def test_footprint_is_clipped(self, canvas_factory):
        canvas = canvas_factory(8, 8, brush=Brush(BrushType.SQUARE, 3))
        canvas.stamp_point(-1, -1)
        assert canvas.touched_points() == {(0, 0)}
        canvas.stamp_point(20, 20)
        assert canvas.touched_points() == {(0, 0)}
        assert canvas.stamp_count == 2

    def test_line_touches_each_pixel_once(self, canvas_factory):
        canvas = canvas_factory(16, 16)
        canvas.stamp_line(1, 1, 12, 7)
        assert canvas.to_array().max() == 1
        assert canvas.touched().sum() == 12

    def test_hline(self, canvas_factory):
        canvas = canvas_factory(8, 8)
        canvas.stamp_hline(5, 2, 1)
        assert canvas.touched_points() == {(x, 2) for x in range(1, 6)}

    def test_hline_clipped(self, canvas_factory):
        canvas = canvas_factory(8, 8)
        canvas.stamp_hline(-4, 0, 20)
        canvas.stamp_hline(0, 9, 3)
        assert canvas.touched().sum() == 8

    def test_clear(self, canvas_factory):
        canvas = canvas_factory(8, 8)
        canvas.stamp_hline(0, 0, 7)
        canvas.clear()
        assert not canvas.touched().any()
        assert canvas.stamp_count == 0

    def test_to_image(self, canvas_factory):
        canvas = canvas_factory(10, 6, ink=Ink.OPAQUE)
        canvas.stamp_point(2, 3)
        image = canvas.to_image()
        assert image.mode == 'L'
        assert image.size == (10, 6)
        assert image.getpixel((2, 3)) == 255
        assert image.getpixel((0, 0)) == 0


class TestRecordingSink:
    """Tests for RecordingSink."""

    def test_records_in_order(self, sink):
        sink.stamp_point(1, 2)
        sink.stamp_line(0, 0, 3, 3)
        sink.stamp_hline(0, 5, 4)
        assert sink.ops == [
            StampOp('point', (1, 2)),
            StampOp('line', (0, 0, 3, 3)),
            StampOp('hline', (0, 5, 4)),
        ]
        assert sink.count('line') == 1
        assert len(sink) == 3

    def test_clear(self):
        sink = RecordingSink()
        sink.stamp_point(0, 0)
        sink.clear()
        assert sink.count() == 0
