"""Shared type definitions for the sketch path engine."""
from dataclasses import dataclass
from typing import NamedTuple

Point = tuple[float, float]

class BBox(NamedTuple):
    x0: float; y0: float; x1: float; y1: float

# ============================================================
# Path Commands
# ============================================================
# Equality respects the command kind: MoveTo(p) != LineTo(p).

@dataclass(frozen=True)
class MoveTo:
    to: Point

@dataclass(frozen=True)
class LineTo:
    to: Point

@dataclass(frozen=True)
class QuadTo:
    ctrl: Point
    to: Point

@dataclass(frozen=True)
class CubicTo:
    ctrl1: Point
    ctrl2: Point
    to: Point

@dataclass(frozen=True)
class Close:
    pass

PathCommand = MoveTo | LineTo | QuadTo | CubicTo | Close
