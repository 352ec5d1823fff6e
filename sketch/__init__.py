"""Sketch annotations: fillets, arcs, bezier paths, the pen tool, and SVG output."""

from .annotation import (
    AnnotationKind, Style, Line, Polyline, Arc, Bezier, Annotation,
    make_annotation, with_points, translate_annotation, is_closed,
    annotation_from_dict, annotation_to_dict,
)
from .fillet import FilletCorner, fillet_corner, fillet_polyline
from .arc import arc_path
from .bezier import Node, node_count, nodes, bezier_path
from .synth import line_path, polyline_path, generate_path, marker_ref
from .pen import (
    create_node, append_node, update_handle, move_node, remove_node, remove_point, move_point,
    hit_test, should_close, preview_path,
)
from .render import marker_defs, render_annotation, render_sketch_svg
