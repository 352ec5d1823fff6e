"""Annotation -> path commands, and endpoint marker lookup."""
from typing import Literal

from shared.types import Point, PathCommand, MoveTo, LineTo, Close
from sketch.constants import CAP_NONE
from sketch.annotation import Annotation, Line, Polyline, Arc, Bezier
from sketch.fillet import fillet_polyline
from sketch.arc import arc_path
from sketch.bezier import bezier_path

EndpointRole = Literal["start", "end"]


def line_path(pts: list[Point]) -> list[PathCommand]:
    """Straight segment; a line needs exactly two points."""
    if len(pts) != 2:
        return []
    return [MoveTo(pts[0]), LineTo(pts[1])]


def polyline_path(pts: list[Point], closed: bool = False) -> list[PathCommand]:
    """Unrounded polyline through every point."""
    if len(pts) < 2:
        return []
    cmds: list[PathCommand] = [MoveTo(pts[0])]
    cmds.extend(LineTo(p) for p in pts[1:])
    if closed:
        cmds.append(Close())
    return cmds


def generate_path(ann: Annotation) -> list[PathCommand]:
    """Path commands for one annotation.

    Too few points for the kind gives an empty list. A filleted closed
    polyline rounds its interior corners only; the closing corner stays sharp.
    """
    if not isinstance(ann, (Line, Polyline, Arc, Bezier)):
        raise TypeError(f"Not an annotation: {ann!r}")
    pts = list(ann.points)
    if isinstance(ann, Line):
        return line_path(pts)
    if isinstance(ann, Polyline):
        if len(pts) < 2:
            return []
        if ann.style.fillet > 0:
            cmds = fillet_polyline(pts, ann.style.fillet)
            return cmds + [Close()] if ann.closed else cmds
        return polyline_path(pts, ann.closed)
    if isinstance(ann, Arc):
        return arc_path(pts)
    return bezier_path(pts, ann.closed)


def marker_ref(cap: str | None, role: EndpointRole) -> str | None:
    """Marker id for an endpoint cap, e.g. 'marker-arrow-end'; None for no cap."""
    if not cap or cap == CAP_NONE:
        return None
    return f"marker-{cap}-{role}"
