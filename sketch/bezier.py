"""Cubic bezier paths from flat node-triple point sequences.

Layout: [anchor0, in0, out0, anchor1, in1, out1, ...]. Segment i runs from
anchor i to anchor i+1 with controls (out_i, in_{i+1}).
"""
from typing import Iterator, NamedTuple

from shared.types import Point, PathCommand, MoveTo, CubicTo, Close
from sketch.constants import NODE_SIZE


class Node(NamedTuple):
    anchor: Point; handle_in: Point; handle_out: Point


def node_count(pts: list[Point]) -> int:
    """Number of complete nodes; a trailing partial node is not counted."""
    return len(pts)//NODE_SIZE


def nodes(pts: list[Point]) -> Iterator[Node]:
    for i in range(node_count(pts)):
        j = i*NODE_SIZE
        yield Node(pts[j], pts[j+1], pts[j+2])


def bezier_path(pts: list[Point], closed: bool = False) -> list[PathCommand]:
    """Cubic path through the anchors of every complete node.

    One node gives a bare MoveTo. When *closed*, a final cubic runs from
    the last node back to the first, followed by Close().
    """
    ns = list(nodes(pts))
    if not ns:
        return []
    cmds: list[PathCommand] = [MoveTo(ns[0].anchor)]
    for cur, nxt in zip(ns, ns[1:]):
        cmds.append(CubicTo(cur.handle_out, nxt.handle_in, nxt.anchor))
    if closed:
        cmds.append(CubicTo(ns[-1].handle_out, ns[0].handle_in, ns[0].anchor))
        cmds.append(Close())
    return cmds
