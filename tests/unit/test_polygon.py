"""Unit tests for polygon scan conversion (pixelstroke.algorithms.polygon)."""

import unittest

from pixelstroke.algorithms.polygon import fill_polygon, scanline_spans
from pixelstroke.domain.geometry import Point


class TestScanlineSpans(unittest.TestCase):
    """Tests for scanline_spans."""

    def test_rectangle_covers_every_row(self):
        spans = scanline_spans([(0, 0), (4, 0), (4, 2), (0, 2)])
        self.assertEqual(spans, [(0, 0, 4), (0, 1, 4), (0, 2, 4)])

    def test_accepts_point_objects(self):
        spans = scanline_spans([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        self.assertEqual(spans, [(0, 0, 2), (0, 1, 2), (0, 2, 2)])

    def test_triangle(self):
        spans = scanline_spans([(0, 0), (4, 4), (0, 4)])
        self.assertEqual(spans, [
            (0, 0, 0), (0, 1, 1), (0, 2, 2), (0, 3, 3), (0, 4, 4)])

    def test_diamond_rows_are_symmetric(self):
        spans = scanline_spans([(2, 0), (4, 2), (2, 4), (0, 2)])
        self.assertEqual(spans, [
            (2, 0, 2), (1, 1, 3), (0, 2, 4), (1, 3, 3), (2, 4, 2)])

    def test_concave_polygon_splits_row(self):
        # U shape: two prongs joined at the bottom
        u_shape = [(0, 0), (2, 0), (2, 3), (4, 3), (4, 0), (6, 0), (6, 5), (0, 5)]
        spans = scanline_spans(u_shape)
        row1 = [s for s in spans if s[1] == 1]
        self.assertEqual(row1, [(0, 1, 2), (4, 1, 6)])
        row4 = [s for s in spans if s[1] == 4]
        self.assertEqual(row4, [(0, 4, 6)])

    def test_spans_are_ordered(self):
        spans = scanline_spans([(0, 0), (9, 1), (5, 8), (1, 6)])
        keys = [(y, x1) for x1, y, _ in spans]
        self.assertEqual(keys, sorted(keys))
        self.assertTrue(all(x1 <= x2 for x1, _, x2 in spans))

    def test_degenerate_inputs(self):
        self.assertEqual(scanline_spans([]), [])
        self.assertEqual(scanline_spans([(1, 1), (4, 4)]), [])
        # All vertices on one row: no sloped edge
        self.assertEqual(scanline_spans([(0, 0), (3, 0), (5, 0)]), [])


class TestFillPolygon(unittest.TestCase):
    """Tests for fill_polygon."""

    def test_emits_spans_through_callback(self):
        calls = []
        fill_polygon([(1, 1), (3, 1), (3, 2), (1, 2)],
                     lambda x1, y, x2: calls.append((x1, y, x2)))
        self.assertEqual(calls, [(1, 1, 3), (1, 2, 3)])


if __name__ == '__main__':
    unittest.main()
