"""
Tests for rectangles, paths, polygons and ellipses.
"""

import pytest

from planecanvas.buffer.draw import _round_div
from conftest import lit


def block(x1, y1, x2, y2):
    return {(x, y) for x in range(x1, x2 + 1) for y in range(y1, y2 + 1)}


# =============================================================================
# Rectangle
# =============================================================================

def test_rectangle_outline(fb):
    fb.rectangle(1, 1, 4, 3)
    assert set(lit(fb)) == block(1, 1, 4, 3) - block(2, 2, 3, 2)


def test_filled_rectangle_normalizes_corners(fb):
    fb.rectangle(4, 6, 1, 2, filled=True)
    assert set(lit(fb)) == block(1, 2, 4, 6)


def test_rect_uses_width_and_height(fb):
    fb.rect(2, 3, 4, 2, filled=True, color=1)
    assert set(lit(fb)) == block(2, 3, 5, 4)


@pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-2, 4)])
def test_rect_without_area_draws_nothing(fb, w, h):
    fb.rect(2, 2, w, h, filled=True)
    assert lit(fb) == {}


def test_filled_rectangle_clips(fb):
    fb.rectangle(-3, -3, 2, 2, filled=True)
    assert set(lit(fb)) == block(0, 0, 2, 2)


# =============================================================================
# Path
# =============================================================================

@pytest.mark.parametrize("points", [[], [(3, 3)]])
def test_short_path_is_noop(fb, points):
    fb.path(points)
    assert lit(fb) == {}


def test_path_is_not_closed(fb):
    fb.path([(0, 0), (3, 0), (3, 3)])
    assert set(lit(fb)) == {(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2), (3, 3)}


def test_path_accepts_any_iterable(fb):
    fb.path(iter([(0, 0), (0, 2)]))
    assert set(lit(fb)) == {(0, 0), (0, 1), (0, 2)}


# =============================================================================
# Polygon
# =============================================================================

def test_empty_polygon_is_noop(fb):
    fb.polygon([], filled=True)
    assert lit(fb) == {}


def test_filled_square_covers_block_exactly(fb):
    fb.polygon([(0, 0), (4, 0), (4, 4), (0, 4)], filled=True, color=1)
    assert set(lit(fb)) == block(0, 0, 4, 4)


def test_unfilled_polygon_is_closed_outline(fb):
    fb.polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert set(lit(fb)) == block(0, 0, 4, 4) - block(1, 1, 3, 3)


def test_filled_triangle(fb):
    fb.polygon([(0, 0), (6, 0), (0, 6)], filled=True)
    expected = {(x, y) for y in range(7) for x in range(7 - y)}
    assert set(lit(fb)) == expected


def test_triangle_helper_matches_polygon(fb, fb2):
    fb.triangle(1, 1, 9, 3, 4, 12, filled=True)
    fb2.polygon([(1, 1), (9, 3), (4, 12)], filled=True)
    assert lit(fb) == lit(fb2)


def test_concave_polygon_leaves_notch_empty(fb):
    # U shape: notch between x=3..5 above y=4
    points = [(0, 0), (2, 0), (2, 4), (6, 4), (6, 0), (8, 0), (8, 8), (0, 8)]
    fb.polygon(points, filled=True)
    pixels = lit(fb)
    assert (4, 1) not in pixels
    assert (4, 2) not in pixels
    assert (1, 2) in pixels
    assert (7, 2) in pixels
    assert (4, 6) in pixels


def test_filled_polygon_uses_color(fb2):
    fb2.polygon([(0, 0), (4, 0), (4, 4), (0, 4)], filled=True, color=2)
    assert set(lit(fb2).values()) == {2}


def test_polygon_partly_off_canvas_clips(fb):
    fb.polygon([(-5, -5), (30, -5), (30, 30)], filled=True)
    pixels = lit(fb)
    assert (15, 0) in pixels
    assert (15, 15) in pixels
    assert (0, 15) not in pixels


@pytest.mark.parametrize("num,den,expected", [
    (4, 2, 2),
    (5, 2, 3),
    (-5, 2, -3),
    (5, -2, -3),
    (1, 3, 0),
    (2, 3, 1),
    (-2, 3, -1),
    (0, 7, 0),
])
def test_intercepts_round_half_away_from_zero(num, den, expected):
    assert _round_div(num, den) == expected


# =============================================================================
# Ellipse
# =============================================================================

ELLIPSE_5_5_3_2 = {
    (2, 4), (2, 5), (2, 6), (8, 4), (8, 5), (8, 6),
    (3, 4), (3, 6), (7, 4), (7, 6),
    (4, 3), (4, 7), (6, 3), (6, 7),
    (5, 3), (5, 7),
}


def test_ellipse_outline_golden(fb):
    fb.ellipse(5, 5, 3, 2)
    assert set(lit(fb)) == ELLIPSE_5_5_3_2


def test_ellipse_outline_is_symmetric(fb):
    fb.ellipse(5, 5, 3, 2, filled=False)
    pixels = set(lit(fb))
    for x, y in pixels:
        assert (10 - x, y) in pixels
        assert (x, 10 - y) in pixels
        assert (10 - x, 10 - y) in pixels


def test_tall_ellipse_reaches_vertical_extremes(fb):
    fb.ellipse(5, 5, 1, 5)
    pixels = set(lit(fb))
    assert (5, 0) in pixels
    assert (5, 10) in pixels
    assert min(y for _, y in pixels) == 0
    assert max(y for _, y in pixels) == 10


def test_filled_ellipse_covers_outline_and_interior(fb):
    fb.ellipse(5, 5, 3, 2, filled=True)
    pixels = set(lit(fb))
    assert ELLIPSE_5_5_3_2 <= pixels
    assert block(2, 5, 8, 5) <= pixels
    assert pixels <= block(2, 3, 8, 7)


def test_zero_radius_ellipse_is_a_dot(fb):
    fb.ellipse(4, 4, 0, 0)
    assert lit(fb) == {(4, 4): 1}


def test_circle_is_round_ellipse(fb, fb2):
    fb.circle(7, 7, 4, filled=True)
    fb2.ellipse(7, 7, 4, 4, filled=True)
    assert lit(fb) == lit(fb2)


def test_ellipse_clips_at_edges(fb):
    fb.ellipse(0, 0, 5, 5)
    pixels = set(lit(fb))
    assert (5, 0) in pixels
    assert (0, 5) in pixels
