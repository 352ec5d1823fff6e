"""Tests for sketch/synth.py: annotation dispatch and marker lookup."""
import pytest
from shared.types import MoveTo, LineTo, QuadTo, CubicTo, Close
from sketch.annotation import Line, Polyline, Arc, Bezier, Style
from sketch.synth import generate_path, marker_ref, line_path, polyline_path


class TestLine:
    def test_two_points(self):
        ann = Line(((0, 0), (10, 0)))
        assert generate_path(ann) == [MoveTo((0, 0)), LineTo((10, 0))]

    def test_wrong_point_count_is_empty(self):
        assert generate_path(Line(((0, 0),))) == []
        assert generate_path(Line(())) == []
        assert line_path([(0, 0), (1, 1), (2, 2)]) == []


class TestPolyline:
    def test_unfilleted(self):
        ann = Polyline(((0, 0), (5, 5), (10, 0)), Style(fillet=0))
        assert generate_path(ann) == [MoveTo((0, 0)), LineTo((5, 5)), LineTo((10, 0))]

    def test_closed_ends_with_close(self):
        ann = Polyline(((0, 0), (5, 5), (10, 0)), closed=True)
        assert generate_path(ann)[-1] == Close()

    def test_filleted_delegates(self):
        ann = Polyline(((0, 0), (10, 0), (10, 10)), Style(fillet=2))
        cmds = generate_path(ann)
        assert [type(c) for c in cmds] == [MoveTo, LineTo, QuadTo, LineTo]

    def test_filleted_closed_ends_with_close(self):
        ann = Polyline(((0, 0), (10, 0), (10, 10), (0, 10)), Style(fillet=2), closed=True)
        cmds = generate_path(ann)
        assert cmds[-1] == Close()
        assert cmds[-2] == LineTo((0, 10))
        # closing corner at (0, 0) stays sharp
        assert sum(isinstance(c, QuadTo) for c in cmds) == 2

    def test_too_few_points(self):
        assert generate_path(Polyline(((0, 0),), closed=True)) == []
        assert generate_path(Polyline(((0, 0),), Style(fillet=5))) == []

    def test_polyline_path_helper(self):
        assert polyline_path([(0, 0), (1, 0)], closed=True) == [
            MoveTo((0, 0)), LineTo((1, 0)), Close(),
        ]


class TestArcAndBezier:
    def test_arc(self):
        ann = Arc(((0, 0), (5, 5), (10, 0)))
        assert generate_path(ann) == [MoveTo((0, 0)), QuadTo((5, 5), (10, 0))]

    def test_arc_too_few_points(self):
        assert generate_path(Arc(((0, 0), (5, 5)))) == []

    def test_bezier_single_node(self):
        ann = Bezier(((1, 1), (1, 1), (1, 1)))
        assert generate_path(ann) == [MoveTo((1, 1))]

    def test_bezier_two_nodes(self, two_node_pts):
        cmds = generate_path(Bezier(tuple(two_node_pts)))
        assert cmds == [MoveTo((0.0, 0.0)), CubicTo((30.0, 0.0), (70.0, 40.0), (100.0, 0.0))]

    def test_bezier_closed_segment_count(self, two_node_pts):
        cmds = generate_path(Bezier(tuple(two_node_pts), closed=True))
        assert sum(isinstance(c, CubicTo) for c in cmds) == 2
        assert cmds[-1] == Close()

    def test_bezier_too_few_points(self):
        assert generate_path(Bezier(((0, 0), (0, 0)))) == []


def test_generate_path_rejects_non_annotation():
    with pytest.raises(TypeError, match="Not an annotation"):
        generate_path(((0, 0), (1, 1)))


def test_generate_path_does_not_modify_annotation():
    ann = Polyline(((0, 0), (10, 0), (10, 10)), Style(fillet=3), closed=True)
    before = ann.points
    generate_path(ann)
    assert ann.points == before


# --- marker_ref ---

def test_marker_ref_named_cap():
    assert marker_ref("arrow", "start") == "marker-arrow-start"
    assert marker_ref("open-arrow", "end") == "marker-open-arrow-end"


def test_marker_ref_no_cap():
    assert marker_ref("none", "start") is None
    assert marker_ref(None, "end") is None
    assert marker_ref("", "end") is None
