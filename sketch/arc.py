"""Three-point arc tool, drawn as a single quadratic curve."""
from shared.types import Point, PathCommand, MoveTo, QuadTo


def arc_path(pts: list[Point]) -> list[PathCommand]:
    """Quadratic from pts[0] to pts[2] with pts[1] as the control point.

    This approximates the arc; the curve does not pass through pts[1] and
    no circumcenter is computed. Collinear points give a flat curve.
    """
    if len(pts) < 3:
        return []
    start, through, end = pts[0], pts[1], pts[2]
    return [MoveTo(start), QuadTo(through, end)]
