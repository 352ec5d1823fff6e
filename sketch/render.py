"""SVG rendering of annotations: marker definitions, path elements, full page."""
from shared.geometry import bounds
from shared.svg import (
    W, H, path_d, marker_url, ViewTransform, fit_view, group_transform, fmt_num,
)
from sketch.constants import CAP_KINDS, ENDPOINT_ROLES
from sketch.annotation import Annotation
from sketch.synth import generate_path, marker_ref

# ============================================================
# Marker shapes (12x12 arrows, 8x8 dots/squares, drawn in stroke color)
# ============================================================
_MARKER_SHAPES = {
    ("arrow", "start"): '<path d="M 11 1 L 6 6 L 11 11 z" fill="context-stroke" stroke="context-stroke"'
                        ' stroke-width="1" stroke-linecap="round" stroke-linejoin="round"/>',
    ("arrow", "end"): '<path d="M 1 1 L 6 6 L 1 11 z" fill="context-stroke" stroke="context-stroke"'
                      ' stroke-width="1" stroke-linecap="round" stroke-linejoin="round"/>',
    ("open-arrow", "start"): '<path d="M 11 1 L 6 6 L 11 11" fill="none" stroke="context-stroke"'
                             ' stroke-width="1" stroke-linecap="round" stroke-linejoin="round"/>',
    ("open-arrow", "end"): '<path d="M 1 1 L 6 6 L 1 11" fill="none" stroke="context-stroke"'
                           ' stroke-width="1" stroke-linecap="round" stroke-linejoin="round"/>',
    ("circle", "start"): '<circle cx="4" cy="4" r="3" fill="context-stroke"/>',
    ("circle", "end"): '<circle cx="4" cy="4" r="3" fill="context-stroke"/>',
    ("square", "start"): '<rect x="1" y="1" width="6" height="6" fill="context-stroke"/>',
    ("square", "end"): '<rect x="1" y="1" width="6" height="6" fill="context-stroke"/>',
}


def marker_defs(lines: list) -> None:
    """Append one <marker> per cap kind and endpoint role."""
    for cap in CAP_KINDS:
        for role in ENDPOINT_ROLES:
            size = 12 if "arrow" in cap else 8
            orient = ' orient="auto"' if "arrow" in cap else ""
            lines.append(f'<marker id="{marker_ref(cap, role)}" markerWidth="{size}"'
                         f' markerHeight="{size}" refX="{size//2}" refY="{size//2}"{orient}>')
            lines.append(f'  {_MARKER_SHAPES[(cap, role)]}')
            lines.append('</marker>')


def render_annotation(lines: list, ann: Annotation) -> None:
    """Append a <path> element for *ann*; nothing when its path is empty."""
    cmds = generate_path(ann)
    if not cmds:
        return
    st = ann.style
    dash = f' stroke-dasharray="{st.stroke_dash}"' if st.stroke_dash else ""
    lines.append(f'<path d="{path_d(cmds)}" stroke="{st.stroke}"'
                 f' stroke-width="{fmt_num(st.stroke_width)}"{dash} fill="none"'
                 f' stroke-linecap="round" stroke-linejoin="round"'
                 f' marker-start="{marker_url(marker_ref(st.start_cap, "start"))}"'
                 f' marker-end="{marker_url(marker_ref(st.end_cap, "end"))}"/>')


def render_sketch_svg(annotations: list[Annotation], view: ViewTransform | None = None) -> str:
    """Complete SVG page holding every annotation.

    When *view* is omitted the sketch is fitted to the page using the bounds
    of all annotation points (handles included).
    """
    if view is None:
        all_pts = [p for a in annotations for p in a.points]
        view = fit_view(bounds(all_pts)) if all_pts else ViewTransform((0.0, 0.0), 1.0)
    lines = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}"'
             f' viewBox="0 0 {W} {H}">']
    lines.append('<defs>')
    marker_defs(lines)
    lines.append('</defs>')
    lines.append(f'<rect width="{W}" height="{H}" fill="white"/>')
    lines.append(f'<g transform="{group_transform(view)}">')
    for ann in annotations:
        render_annotation(lines, ann)
    lines.append('</g>')
    lines.append('</svg>')
    return "\n".join(lines)
