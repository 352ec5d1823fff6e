"""Shared test fixtures for sketch path tests."""
import pytest
from sketch.pen import create_node, update_handle
from gen_sketch_svg import build_demo_sketch


@pytest.fixture
def right_angle_pts():
    """L-shaped open polyline with a 90 degree corner at (10, 0)."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]


@pytest.fixture
def two_node_pts():
    """Two smooth bezier nodes: (0,0) heading east, (100,0) arriving from the north-west."""
    pts = create_node((0.0, 0.0)) + create_node((100.0, 0.0))
    pts = update_handle(pts, 0, "out", (30.0, 0.0))
    pts = update_handle(pts, 3, "in", (70.0, 40.0))
    return pts


@pytest.fixture(scope="session")
def demo_sketch():
    """Annotations from gen_sketch_svg.build_demo_sketch."""
    return build_demo_sketch()
