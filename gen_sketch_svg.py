"""Render a sketch of annotations to sketch.svg.

With no arguments a built-in demo sketch is drawn: a filleted room outline,
a closed bezier planter, a door-swing arc and a dimension line with arrow
caps. With one argument, annotations are loaded from that JSON file (a list
of annotation dicts in the editor's form).
"""
import os, sys, json
from collections import Counter

from shared.svg import path_d
from sketch.annotation import (
    Annotation, AnnotationKind, Style, make_annotation, annotation_from_dict,
)
from sketch.pen import create_node, update_handle
from sketch.synth import generate_path
from sketch.render import render_sketch_svg


def build_demo_sketch() -> list[Annotation]:
    """Small sketch using every annotation kind."""
    room = make_annotation(
        AnnotationKind.POLYLINE,
        [(0, 0), (400, 0), (400, 260), (240, 260), (240, 340), (0, 340)],
        Style(stroke="#1a237e", stroke_width=3, fillet=24), closed=True,
    )

    # planter: four smooth nodes around (120, 120)
    pts = []
    for pos in [(80, 120), (120, 80), (160, 120), (120, 160)]:
        pts += create_node(pos)
    pts = update_handle(pts, 0, "out", (80, 98))
    pts = update_handle(pts, 3, "out", (142, 80))
    pts = update_handle(pts, 6, "out", (160, 142))
    pts = update_handle(pts, 9, "out", (98, 160))
    planter = make_annotation(AnnotationKind.BEZIER, pts,
                              Style(stroke="#2e7d32", stroke_dash="5,5"), closed=True)

    door = make_annotation(AnnotationKind.ARC, [(320, 260), (390, 200), (400, 180)],
                           Style(stroke="#BF360C", stroke_width=1))
    dim = make_annotation(AnnotationKind.LINE, [(0, -30), (400, -30)],
                          Style(stroke="#555", stroke_width=1,
                                start_cap="arrow", end_cap="arrow"))
    return [room, planter, door, dim]


def load_sketch(path: str) -> list[Annotation]:
    """Annotations from a JSON list of editor dicts."""
    with open(path, encoding="utf-8") as f:
        return [annotation_from_dict(d) for d in json.load(f)]


def main(argv: list[str]) -> None:
    annotations = load_sketch(argv[1]) if len(argv) > 1 else build_demo_sketch()
    svg_content = render_sketch_svg(annotations)

    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sketch.svg")
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(svg_content)

    print(f"Sketch written to {svg_path}")
    print(f"Annotations: {len(annotations)}")
    for ann in annotations:
        cmds = generate_path(ann)
        kinds = Counter(type(c).__name__ for c in cmds)
        summary = ", ".join(f"{k}={n}" for k, n in kinds.items()) or "(empty)"
        print(f"  {ann.kind.value:<9s} {len(ann.points):3d} pts  {summary}")
        print(f"            d=\"{path_d(cmds)[:72]}\"")


if __name__ == "__main__":
    main(sys.argv)
