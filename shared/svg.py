"""SVG path-data formatting, marker references, and view transforms."""
from typing import NamedTuple
from .types import Point, BBox, PathCommand, MoveTo, LineTo, QuadTo, CubicTo, Close

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612
FIT_MARGIN = 36.0  # 1/2" page margin when fitting a sketch to the page

# ============================================================
# Path Data
# ============================================================
def fmt_num(v: float) -> str:
    """Format a coordinate with at most 3 decimals and no trailing zeros."""
    s = f"{v:.3f}".rstrip('0').rstrip('.')
    return "0" if s == "-0" else s

def _xy(p: Point) -> str:
    return f"{fmt_num(p[0])} {fmt_num(p[1])}"

def path_d(commands: list[PathCommand]) -> str:
    """Render a command sequence as SVG path data, e.g. 'M 0 0 Q 5 5, 10 0'."""
    parts = []
    for c in commands:
        if isinstance(c, MoveTo):
            parts.append(f"M {_xy(c.to)}")
        elif isinstance(c, LineTo):
            parts.append(f"L {_xy(c.to)}")
        elif isinstance(c, QuadTo):
            parts.append(f"Q {_xy(c.ctrl)}, {_xy(c.to)}")
        elif isinstance(c, CubicTo):
            parts.append(f"C {_xy(c.ctrl1)}, {_xy(c.ctrl2)}, {_xy(c.to)}")
        elif isinstance(c, Close):
            parts.append("Z")
        else:
            raise TypeError(f"Not a path command: {c!r}")
    return " ".join(parts)

def marker_url(ref: str | None) -> str:
    """SVG marker attribute value for a marker id, or 'none'."""
    return "none" if ref is None else f"url(#{ref})"

# ============================================================
# View Transform
# ============================================================
class ViewTransform(NamedTuple):
    offset: Point   # page position of the world origin
    scale: float    # page units per world unit

def fit_view(bbox: BBox, margin: float = FIT_MARGIN) -> ViewTransform:
    """Uniform scale and offset that fit *bbox* inside the page with a margin."""
    bw = bbox.x1-bbox.x0; bh = bbox.y1-bbox.y0
    avail_w = W-2*margin; avail_h = H-2*margin
    if bw <= 0 and bh <= 0:
        s = 1.0
    elif bw <= 0:
        s = avail_h/bh
    elif bh <= 0:
        s = avail_w/bw
    else:
        s = min(avail_w/bw, avail_h/bh)
    # center the scaled box on the page
    ox = W/2-s*(bbox.x0+bbox.x1)/2
    oy = H/2-s*(bbox.y0+bbox.y1)/2
    return ViewTransform((ox, oy), s)

def to_world(view: ViewTransform, sx: float, sy: float) -> Point:
    """Page/screen coordinates back to world coordinates."""
    return ((sx-view.offset[0])/view.scale, (sy-view.offset[1])/view.scale)

def group_transform(view: ViewTransform) -> str:
    """SVG transform attribute placing world coordinates on the page."""
    return (f"translate({fmt_num(view.offset[0])}, {fmt_num(view.offset[1])})"
            f" scale({fmt_num(view.scale)})")
