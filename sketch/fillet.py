"""Corner rounding for open polylines.

Each interior vertex is replaced by a straight run up to a tangent point on
the incoming side, then a quadratic curve whose control is the original
vertex and whose end is the matching tangent point on the outgoing side.
The tangent offset is clamped to half of each adjacent segment so
neighbouring corners never overlap.
"""
import math
from typing import NamedTuple

from shared.types import Point, PathCommand, MoveTo, LineTo, QuadTo
from shared.geometry import sub, length, angle_between, unit, off_pt


class FilletCorner(NamedTuple):
    """Tangent points of one rounded corner."""
    start: Point     # on the incoming segment
    ctrl: Point      # the original vertex
    end: Point       # on the outgoing segment
    offset: float    # distance from the vertex to either tangent point


def fillet_corner(p1: Point, p2: Point, p3: Point, radius: float) -> FilletCorner | None:
    """Rounded corner at p2 between neighbours p1 and p3.

    Returns None when the corner angle is undefined (p2 coincides with a
    neighbour); the caller then passes straight through the vertex.
    """
    v1 = sub(p1, p2); v2 = sub(p3, p2)
    theta = angle_between(v1, v2)
    if theta is None:
        return None
    half_tan = math.tan(theta/2)
    # theta == 0: the path folds back on itself; any offset is too large
    offset = radius/half_tan if half_tan > 0 else math.inf
    offset = min(offset, length(v1)/2, length(v2)/2)
    return FilletCorner(
        start=off_pt(p2, unit(v1), offset),
        ctrl=p2,
        end=off_pt(p2, unit(v2), offset),
        offset=offset,
    )


def fillet_polyline(pts: list[Point], radius: float) -> list[PathCommand]:
    """Open polyline path with every interior corner rounded to *radius*.

    The first and last points are kept exactly. A radius of 0 gives the
    plain polyline.
    """
    if len(pts) < 2:
        return []
    cmds: list[PathCommand] = [MoveTo(pts[0])]
    for i in range(1, len(pts)-1):
        corner = fillet_corner(pts[i-1], pts[i], pts[i+1], radius) if radius > 0 else None
        if corner is None:
            cmds.append(LineTo(pts[i]))
            continue
        cmds.append(LineTo(corner.start))
        cmds.append(QuadTo(corner.ctrl, corner.end))
    cmds.append(LineTo(pts[-1]))
    return cmds
