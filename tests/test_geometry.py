"""Tests for shared/geometry.py and shared/svg.py pure functions."""
import math
import pytest
from shared.types import BBox, MoveTo, LineTo, QuadTo, CubicTo, Close
from shared.geometry import (
    sub, add, length, dist, dot, angle_between, unit, off_pt, reflect,
    translate_pts, bounds, ZERO_LEN_EPS,
)
from shared.svg import (
    fmt_num, path_d, marker_url, fit_view, to_world, group_transform, W, H,
)


# --- vector arithmetic ---

def test_sub_add():
    assert sub((5, 7), (2, 3)) == (3, 4)
    assert add((5, 7), (2, 3)) == (7, 10)


def test_length_and_dist():
    assert abs(length((3, 4)) - 5.0) < 1e-12
    assert abs(dist((1, 1), (4, 5)) - 5.0) < 1e-12


def test_dot():
    assert dot((1, 2), (3, 4)) == 11


# --- angle_between ---

def test_angle_between_perpendicular():
    assert abs(angle_between((1, 0), (0, 5)) - math.pi/2) < 1e-12


def test_angle_between_opposite():
    assert abs(angle_between((1, 0), (-2, 0)) - math.pi) < 1e-12


def test_angle_between_zero_vector():
    assert angle_between((0, 0), (1, 0)) is None
    assert angle_between((1, 0), (0, 0)) is None


def test_angle_between_near_zero_vector():
    assert angle_between((1e-12, 0), (1, 0)) is None
    assert angle_between((1, 0), (0, ZERO_LEN_EPS)) is None
    assert angle_between((1e-6, 0), (0, 1)) is not None


def test_angle_between_clamps_rounding():
    # cosine of a vector with itself can round past 1.0
    a = angle_between((0.1, 0.3), (0.1, 0.3))
    assert a is not None
    assert 0.0 <= a < 1e-6


# --- unit / off_pt / reflect ---

def test_unit():
    u = unit((3, 4))
    assert abs(u[0] - 0.6) < 1e-12
    assert abs(u[1] - 0.8) < 1e-12


def test_unit_zero_sentinel():
    assert unit((0, 0)) == (0.0, 0.0)
    assert unit((1e-12, -1e-12)) == (0.0, 0.0)


def test_off_pt():
    p = off_pt((3, 4), (0, 1), 2.0)
    assert abs(p[0] - 3.0) < 1e-12
    assert abs(p[1] - 6.0) < 1e-12


def test_reflect():
    assert reflect((1, 2), (3, 3)) == (5, 4)


# --- point sequences ---

def test_translate_pts():
    assert translate_pts([(0, 0), (1, 2)], (10, -1)) == [(10, -1), (11, 1)]


def test_bounds():
    assert bounds([(3, -1), (0, 4), (2, 2)]) == BBox(0, -1, 3, 4)


# --- fmt_num / path_d ---

def test_fmt_num_trims_zeros():
    assert fmt_num(10.0) == "10"
    assert fmt_num(2.5) == "2.5"
    assert fmt_num(1/3) == "0.333"


def test_fmt_num_negative_zero():
    assert fmt_num(-0.0001) == "0"


def test_path_d_line():
    assert path_d([MoveTo((0, 0)), LineTo((10, 0))]) == "M 0 0 L 10 0"


def test_path_d_curves_and_close():
    cmds = [MoveTo((0, 0)), QuadTo((5, 5), (10, 0)),
            CubicTo((1, 2), (3, 4), (5, 6)), Close()]
    assert path_d(cmds) == "M 0 0 Q 5 5, 10 0 C 1 2, 3 4, 5 6 Z"


def test_path_d_empty():
    assert path_d([]) == ""


def test_path_d_rejects_non_command():
    with pytest.raises(TypeError, match="Not a path command"):
        path_d([(0, 0)])


def test_marker_url():
    assert marker_url(None) == "none"
    assert marker_url("marker-arrow-end") == "url(#marker-arrow-end)"


# --- view transform ---

def test_fit_view_centers_bbox():
    view = fit_view(BBox(0, 0, 100, 50), margin=36)
    assert abs(view.scale - 7.2) < 1e-12
    assert abs(view.offset[0] - 36.0) < 1e-9
    assert abs(view.offset[1] - 126.0) < 1e-9


def test_fit_view_single_point():
    view = fit_view(BBox(5, 5, 5, 5))
    assert view.scale == 1.0
    assert view.offset == (W/2 - 5, H/2 - 5)


def test_to_world_inverts_view():
    view = fit_view(BBox(0, 0, 100, 50), margin=36)
    x, y = to_world(view, 36.0, 126.0)
    assert abs(x) < 1e-9
    assert abs(y) < 1e-9


def test_group_transform():
    view = fit_view(BBox(0, 0, 100, 50), margin=36)
    assert group_transform(view) == "translate(36, 126) scale(7.2)"
