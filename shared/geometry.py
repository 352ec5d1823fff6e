"""Pure vector functions over (x, y) tuples."""
import math
from .types import Point, BBox

# Vectors no longer than this are treated as zero-length (coincident points)
ZERO_LEN_EPS = 1e-9

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for invalid editing operations on a point sequence."""

# ============================================================
# Vector Arithmetic
# ============================================================
def sub(a: Point, b: Point) -> Point:
    """Vector a - b."""
    return (a[0]-b[0], a[1]-b[1])

def add(a: Point, b: Point) -> Point:
    """Vector a + b."""
    return (a[0]+b[0], a[1]+b[1])

def length(v: Point) -> float:
    """Euclidean norm of v."""
    return math.sqrt(v[0]**2+v[1]**2)

def dist(a: Point, b: Point) -> float:
    """Distance between two points."""
    return length(sub(a, b))

def dot(a: Point, b: Point) -> float:
    return a[0]*b[0]+a[1]*b[1]

def angle_between(a: Point, b: Point) -> float | None:
    """Angle between two vectors in radians, in [0, pi].

    Returns None when either vector is no longer than ZERO_LEN_EPS. The
    cosine is clamped to [-1, 1] so rounding error never reaches acos as a
    domain error.
    """
    La = length(a); Lb = length(b)
    if La <= ZERO_LEN_EPS or Lb <= ZERO_LEN_EPS:
        return None
    c = dot(a, b)/(La*Lb)
    return math.acos(max(-1.0, min(1.0, c)))

def unit(v: Point) -> Point:
    """Unit vector along v, or (0.0, 0.0) when v is effectively zero-length."""
    Ln = length(v)
    if Ln <= ZERO_LEN_EPS:
        return (0.0, 0.0)
    return (v[0]/Ln, v[1]/Ln)

def off_pt(p: Point, n: Point, d: float) -> Point:
    """Offset point p by distance d along unit direction n."""
    return (p[0]+d*n[0], p[1]+d*n[1])

def reflect(p: Point, about: Point) -> Point:
    """Reflection of p through the point *about*: about + (about - p)."""
    return (about[0]+(about[0]-p[0]), about[1]+(about[1]-p[1]))

# ============================================================
# Point Sequences
# ============================================================
def translate_pts(pts: list[Point], delta: Point) -> list[Point]:
    """Every point of pts moved by delta."""
    return [(p[0]+delta[0], p[1]+delta[1]) for p in pts]

def bounds(pts: list[Point]) -> BBox:
    """Axis-aligned bounding box of a non-empty point list."""
    xs = [p[0] for p in pts]; ys = [p[1] for p in pts]
    return BBox(min(xs), min(ys), max(xs), max(ys))
