"""Curveflat - Flatten curved path segments into polylines.

Curveflat converts cubic Bezier curves, rational quadratic (conic) Bezier
curves and circular arcs into straight line segments, or arcs into cubic
Bezier approximations, within a caller-specified tolerance.

Example:
    >>> from curveflat import CubicCurve, flatten_cubic
    >>> curve = CubicCurve.from_points([(0, 0), (0, 100), (100, 100), (100, 0)])
    >>> points = flatten_cubic(curve, tolerance=0.5)
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from curveflat.core import (
    decompose_arc,
    decompose_conic,
    decompose_cubic,
    flatten_arc,
    flatten_conic,
    flatten_cubic,
    flatten_quadratic,
)
from curveflat.domain import ArcDescriptor, ConicCurve, CubicCurve, LineSegment, Point, Vector

__all__ = [
    "ArcDescriptor",
    "ConicCurve",
    "CubicCurve",
    "LineSegment",
    "Point",
    "Vector",
    "__author__",
    "__version__",
    "decompose_arc",
    "decompose_conic",
    "decompose_cubic",
    "flatten_arc",
    "flatten_conic",
    "flatten_cubic",
    "flatten_quadratic",
]
