"""Shared types, vector geometry, and SVG utilities."""

from .types import Point, BBox, MoveTo, LineTo, QuadTo, CubicTo, Close, PathCommand
from .geometry import (
    GeometryError,
    sub, add, length, dist, dot, angle_between, unit, off_pt, reflect,
    translate_pts, bounds,
)
from .svg import (
    fmt_num, path_d, marker_url,
    ViewTransform, fit_view, to_world, group_transform, W, H,
)
