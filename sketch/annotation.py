"""Annotation variants: the drawable unit handed to the path synthesizer.

Each kind is its own frozen dataclass so that ``closed`` only exists where
it means something (polylines and beziers). Points are stored as a tuple of
(x, y) tuples; every edit produces a new annotation.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, NamedTuple

from shared.types import Point
from shared.geometry import GeometryError, translate_pts
from sketch.constants import (
    CAP_NONE, DEFAULT_STROKE, DEFAULT_STROKE_WIDTH, DEFAULT_STROKE_DASH, DEFAULT_FILLET,
)


class AnnotationKind(Enum):
    LINE = "line"
    POLYLINE = "polyline"
    ARC = "arc"
    BEZIER = "bezier"


class Style(NamedTuple):
    """Stroke and endpoint styling for one annotation."""
    stroke: str = DEFAULT_STROKE
    stroke_width: float = DEFAULT_STROKE_WIDTH
    stroke_dash: str = DEFAULT_STROKE_DASH
    fillet: float = DEFAULT_FILLET       # corner radius, polylines only
    start_cap: str = CAP_NONE
    end_cap: str = CAP_NONE


@dataclass(frozen=True)
class Line:
    points: tuple[Point, ...]
    style: Style = field(default_factory=Style)
    kind = AnnotationKind.LINE


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    style: Style = field(default_factory=Style)
    closed: bool = False
    kind = AnnotationKind.POLYLINE


@dataclass(frozen=True)
class Arc:
    points: tuple[Point, ...]   # start, through-point, end
    style: Style = field(default_factory=Style)
    kind = AnnotationKind.ARC


@dataclass(frozen=True)
class Bezier:
    points: tuple[Point, ...]   # [anchor, handle_in, handle_out] * n
    style: Style = field(default_factory=Style)
    closed: bool = False
    kind = AnnotationKind.BEZIER


Annotation = Line | Polyline | Arc | Bezier

_VARIANTS = {
    AnnotationKind.LINE: Line,
    AnnotationKind.POLYLINE: Polyline,
    AnnotationKind.ARC: Arc,
    AnnotationKind.BEZIER: Bezier,
}

# Editor dict keys (camelCase) -> Style fields
_STYLE_KEYS = {
    "stroke": "stroke",
    "strokeWidth": "stroke_width",
    "strokeDash": "stroke_dash",
    "fillet": "fillet",
    "startCap": "start_cap",
    "endCap": "end_cap",
}


# ============================================================
# Construction and copies
# ============================================================
def make_annotation(kind: AnnotationKind, points, style: Style | None = None,
                    closed: bool = False) -> Annotation:
    """Build the variant for *kind*. *closed* is dropped for lines and arcs."""
    cls = _VARIANTS[kind]
    pts = tuple((float(x), float(y)) for x, y in points)
    style = style or Style()
    if cls in (Polyline, Bezier):
        return cls(pts, style, closed)
    return cls(pts, style)


def with_points(ann: Annotation, points) -> Annotation:
    """Copy of *ann* with its point sequence replaced."""
    return replace(ann, points=tuple(points))


def translate_annotation(ann: Annotation, delta: Point) -> Annotation:
    """Whole-annotation drag: every point moves by *delta*."""
    return with_points(ann, translate_pts(list(ann.points), delta))


def is_closed(ann: Annotation) -> bool:
    return getattr(ann, "closed", False)


# ============================================================
# Editor dict form
# ============================================================
def _parse_point(p: Any) -> Point:
    try:
        return (float(p["x"]), float(p["y"]))
    except (KeyError, TypeError, ValueError) as e:
        raise GeometryError(f"Malformed point: {p!r}") from e


def _parse_number(key: str, v: Any) -> float:
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise GeometryError(f"Style {key} is not a number: {v!r}") from e


def annotation_from_dict(d: dict) -> Annotation:
    """Build an annotation from the editor's loose dict form.

    Expected keys: ``type``, ``points`` (list of ``{"x", "y"}``), optional
    ``style`` (camelCase keys) and ``closed``. Unknown style keys are ignored;
    a missing or null ``points`` or ``style`` means empty or default. Any other
    malformed value raises GeometryError.
    """
    if not isinstance(d, dict):
        raise GeometryError(f"Annotation record is not a mapping: {d!r}")
    try:
        kind = AnnotationKind(d.get("type"))
    except (TypeError, ValueError):
        raise GeometryError(f"Unknown annotation kind: {d.get('type')!r}") from None
    raw_points = d.get("points")
    if raw_points is None:
        raw_points = []
    elif not isinstance(raw_points, (list, tuple)):
        raise GeometryError(f"Annotation points is not a list: {raw_points!r}")
    points = [_parse_point(p) for p in raw_points]
    raw_style = d.get("style")
    if raw_style is None:
        raw_style = {}
    elif not isinstance(raw_style, dict):
        raise GeometryError(f"Annotation style is not a mapping: {raw_style!r}")
    style_kw = {_STYLE_KEYS[k]: v for k, v in raw_style.items()
                if k in _STYLE_KEYS and v is not None}
    if "fillet" in style_kw:
        style_kw["fillet"] = _parse_number("fillet", style_kw["fillet"])
    if "stroke_width" in style_kw:
        style_kw["stroke_width"] = _parse_number("strokeWidth", style_kw["stroke_width"])
    return make_annotation(kind, points, Style(**style_kw), bool(d.get("closed", False)))


def annotation_to_dict(ann: Annotation) -> dict:
    """Inverse of annotation_from_dict."""
    d = {
        "type": ann.kind.value,
        "points": [{"x": x, "y": y} for x, y in ann.points],
        "style": {k: getattr(ann.style, f) for k, f in _STYLE_KEYS.items()},
    }
    if isinstance(ann, (Polyline, Bezier)):
        d["closed"] = ann.closed
    return d
