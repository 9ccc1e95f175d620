"""Rendering regression tests for the stroke strategies.

Small shapes are checked pixel for pixel against ASCII maps; larger
renders of every strategy are compared against golden PNG images.

Example:
    Run the regression tests::

        $ pytest tests/regression/test_rendering.py -v

    Update golden images after intentional changes::

        $ pytest tests/regression/test_rendering.py --update-golden
"""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from pixelstroke.api import StrokeSession, render_stroke
from pixelstroke.domain import Controller, ControllerKind, DrawingContext
from pixelstroke.render import Ink, RasterCanvas

GOLDEN_DIR = Path(__file__).parent.parent / "golden"


def ascii_mask(rows: str) -> np.ndarray:
    """Parse an ASCII pixel map ('#' set, '.' clear) into a boolean array."""
    lines = [line.strip() for line in rows.strip().splitlines()]
    return np.array([[ch == '#' for ch in line] for line in lines], dtype=bool)


def mask_to_ascii(mask: np.ndarray) -> str:
    return '\n'.join(''.join('#' if v else '.' for v in row) for row in mask)


def assert_pixels(canvas: RasterCanvas, rows: str) -> None:
    expected = ascii_mask(rows)
    assert canvas.touched().shape == expected.shape
    assert np.array_equal(canvas.touched(), expected), (
        "Rendered pixels differ:\n" + mask_to_ascii(canvas.touched()))


# ---------------------------------------------------------------------------
# Golden Image Management
# ---------------------------------------------------------------------------


def get_golden_path(name: str) -> Path:
    return GOLDEN_DIR / f"{name}.png"


def save_golden_image(image: Image.Image, name: str) -> Path:
    """Save an image as a golden reference."""
    GOLDEN_DIR.mkdir(parents=True, exist_ok=True)
    path = get_golden_path(name)
    image.save(path, format='PNG')
    return path


def load_golden_image(name: str) -> Image.Image | None:
    path = get_golden_path(name)
    if not path.exists():
        return None
    return Image.open(path)


@pytest.fixture
def update_golden(request):
    """True when run with --update-golden."""
    return request.config.getoption("--update-golden", default=False)


# ---------------------------------------------------------------------------
# Pixel maps
# ---------------------------------------------------------------------------


class TestPixelMaps:
    """Exact output of small shapes."""

    def test_rectangle_outline(self):
        canvas = render_stroke([(1, 1), (5, 4)], 'as_rectangles', width=7, height=6)
        assert_pixels(canvas, """
            .......
            .#####.
            .#...#.
            .#...#.
            .#####.
            .......
        """)

    def test_ellipse_outline(self):
        canvas = render_stroke([(1, 1), (5, 3)], 'as_ellipses', width=7, height=5)
        assert_pixels(canvas, """
            .......
            ..###..
            .#...#.
            ..###..
            .......
        """)

    def test_filled_ellipse(self):
        canvas = render_stroke([(1, 1), (5, 3)], 'as_ellipses', fill=True,
                               width=7, height=5)
        assert_pixels(canvas, """
            .......
            ..###..
            .#####.
            ..###..
            .......
        """)

    def test_lines_keep_corner(self):
        canvas = render_stroke([(0, 0), (3, 0), (3, 3)], 'as_lines',
                               width=5, height=5)
        assert_pixels(canvas, """
            ####.
            ...#.
            ...#.
            ...#.
            .....
        """)

    def test_pixel_perfect_drops_corner(self):
        canvas = render_stroke([(0, 0), (3, 0), (3, 3)], 'as_pixel_perfect',
                               width=5, height=5)
        assert_pixels(canvas, """
            ###..
            ...#.
            ...#.
            ...#.
            .....
        """)

    def test_scattered_points(self):
        canvas = render_stroke([(0, 0), (4, 2), (2, 4)], 'none', width=5, height=5)
        assert_pixels(canvas, """
            #....
            .....
            ....#
            .....
            ..#..
        """)


class TestIncrementalDrawing:
    """Freehand sessions driven frame by frame."""

    def test_freehand_lines_never_double_stamp(self):
        canvas = RasterCanvas(12, 12, ink=Ink.ACCUMULATE)
        ctx = DrawingContext(sink=canvas)
        session = StrokeSession('as_lines')
        session.begin()

        session.join(ctx, [(2, 2)])
        for a, b in [((2, 2), (9, 2)), ((9, 2), (9, 9)), ((9, 9), (2, 9))]:
            session.join(ctx, [a, b])
            session.join(ctx, [b, b])

        assert canvas.to_array().max() == 1
        assert canvas.touched().sum() == 8 + 7 + 7

    def test_confirmed_line_then_freehand(self):
        canvas = RasterCanvas(8, 4, ink=Ink.ACCUMULATE)
        ctx = DrawingContext(sink=canvas, controller=Controller(ControllerKind.LINE_FREEHAND))
        session = StrokeSession('as_lines')
        session.begin()

        session.join(ctx, [(0, 1)])
        session.join(ctx, [(0, 1), (3, 1)])
        session.join(ctx, [(3, 1), (6, 1)])

        assert_pixels(canvas, """
            ........
            #######.
            ........
            ........
        """)
        assert canvas.to_array().max() == 1


# ---------------------------------------------------------------------------
# Golden images
# ---------------------------------------------------------------------------


GOLDEN_CASES = {
    'lines_star': ('as_lines', [(4, 28), (16, 2), (28, 28), (2, 11), (30, 11), (4, 28)], False),
    'polygon_filled': ('as_lines', [(3, 3), (28, 6), (20, 29), (6, 20)], True),
    'rect_rotated': ('as_rectangles', [(6, 8), (26, 22)], False),
    'ellipse_rotated_filled': ('as_ellipses', [(4, 9), (28, 23)], True),
    'bezier_s_curve': ('as_bezier', [(2, 29), (2, 2), (30, 29), (30, 2)], False),
    'pixel_perfect_wave': ('as_pixel_perfect', [(1, 16), (8, 9), (15, 16), (22, 23), (30, 16)], False),
}


class TestGoldenImages:
    """Renders compared against stored golden PNGs."""

    @pytest.mark.slow
    @pytest.mark.parametrize("name", sorted(GOLDEN_CASES))
    def test_render_matches_golden(self, name, update_golden):
        strategy, points, fill = GOLDEN_CASES[name]
        angle = 0.4 if 'rotated' in name else 0.0
        controller = Controller(ControllerKind.POINT_BY_POINT, shape_angle=angle)
        image = render_stroke(points, strategy, fill=fill, width=32, height=32,
                              controller=controller).to_image()

        if update_golden:
            save_golden_image(image, name)
            pytest.skip(f"Updated golden image for '{name}'")

        golden = load_golden_image(name)
        if golden is None:
            save_golden_image(image, name)
            pytest.skip(f"Golden image for '{name}' did not exist, created it. "
                        "Run test again to verify.")

        assert np.array_equal(np.array(image), np.array(golden)), (
            f"Render of '{name}' does not match its golden image")

    def test_png_round_trip(self, tmp_path):
        canvas = render_stroke([(3, 3), (20, 12)], 'as_ellipses', width=24, height=16)
        path = tmp_path / "ellipse.png"
        canvas.save(path)

        with Image.open(path) as reloaded:
            assert reloaded.size == (24, 16)
            assert np.array_equal(np.array(reloaded), np.array(canvas.to_image()))
