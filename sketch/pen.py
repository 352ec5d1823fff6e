"""Pen tool: pure edits over a flat bezier point sequence.

Nodes are addressed by the flat index of their anchor (0, 3, 6, ...); the
node's handle-in and handle-out follow at anchor+1 and anchor+2. Every
function returns a new list and leaves its input untouched; the caller
keeps old sequences for undo.
"""
from typing import Literal

from shared.types import Point, PathCommand, LineTo
from shared.geometry import GeometryError, add, dist, reflect
from sketch.constants import NODE_SIZE, HIT_RADIUS, CLOSE_TOLERANCE
from sketch.bezier import node_count, bezier_path

HandleType = Literal["in", "out"]
HitKind = Literal["anchor", "in", "out"]


def _check_anchor(pts: list[Point], anchor_index: int) -> int:
    """Validate that *anchor_index* starts a complete node."""
    if anchor_index % NODE_SIZE != 0:
        raise GeometryError(f"Index {anchor_index} is not an anchor index")
    if not 0 <= anchor_index < node_count(pts)*NODE_SIZE:
        raise GeometryError(f"No node at {anchor_index}: sequence has {node_count(pts)} nodes")
    return anchor_index


def _check_point(pts: list[Point], point_index: int) -> None:
    if not 0 <= point_index < len(pts):
        raise GeometryError(f"No point {point_index}: sequence has {len(pts)} points")


# ============================================================
# Node creation and editing
# ============================================================
def create_node(pos: Point) -> list[Point]:
    """New node with both handles collapsed onto the anchor."""
    return [pos, pos, pos]


def append_node(pts: list[Point], pos: Point) -> list[Point]:
    return list(pts) + create_node(pos)


def update_handle(
    pts: list[Point], anchor_index: int, which: HandleType, new_pos: Point,
    break_symmetry: bool = False,
) -> list[Point]:
    """Move one handle of a node.

    Unless *break_symmetry* is set, the opposite handle is reflected through
    the anchor so the node stays smooth. With *break_symmetry* the opposite
    handle is left exactly as it was.
    """
    a = _check_anchor(pts, anchor_index)
    if which == "in":
        moved, other = a+1, a+2
    elif which == "out":
        moved, other = a+2, a+1
    else:
        raise GeometryError(f"Unknown handle: {which!r}")
    out = list(pts)
    out[moved] = new_pos
    if not break_symmetry:
        out[other] = reflect(new_pos, out[a])
    return out


def move_node(pts: list[Point], anchor_index: int, delta: Point) -> list[Point]:
    """Translate anchor and both handles of a node by *delta*."""
    a = _check_anchor(pts, anchor_index)
    out = list(pts)
    for j in range(a, a+NODE_SIZE):
        out[j] = add(out[j], delta)
    return out


def remove_node(pts: list[Point], point_index: int) -> list[Point]:
    """Drop the whole node containing flat index *point_index*."""
    a = _check_anchor(pts, point_index - point_index % NODE_SIZE)
    return list(pts[:a]) + list(pts[a+NODE_SIZE:])


def remove_point(pts: list[Point], point_index: int) -> list[Point]:
    """Drop one point (line, polyline and arc annotations)."""
    _check_point(pts, point_index)
    return list(pts[:point_index]) + list(pts[point_index+1:])


def move_point(pts: list[Point], point_index: int, pos: Point) -> list[Point]:
    """Place one point at *pos*; for a bezier this moves a lone anchor or handle."""
    _check_point(pts, point_index)
    out = list(pts)
    out[point_index] = pos
    return out


# ============================================================
# Interaction queries
# ============================================================
def hit_test(pts: list[Point], pos: Point,
             radius: float = HIT_RADIUS) -> tuple[int, HitKind] | None:
    """First node part within *radius* of *pos* as (anchor index, part).

    Parts are tried anchor, then handle-in, then handle-out, node by node.
    """
    for i in range(node_count(pts)):
        a = i*NODE_SIZE
        for kind, j in (("anchor", a), ("in", a+1), ("out", a+2)):
            if dist(pts[j], pos) < radius:
                return a, kind
    return None


def should_close(pts: list[Point], pos: Point, tolerance: float = CLOSE_TOLERANCE) -> bool:
    """True when a click at *pos* lands on the first anchor of a 2+ node path."""
    if node_count(pts) < 2:
        return False
    return dist(pts[0], pos) < tolerance


def preview_path(pts: list[Point], cursor: Point | None) -> list[PathCommand]:
    """Committed bezier plus a rubber-band line from the last anchor to *cursor*."""
    if node_count(pts) == 0:
        return []
    cmds = bezier_path(pts)
    if cursor is not None:
        cmds.append(LineTo(cursor))
    return cmds
