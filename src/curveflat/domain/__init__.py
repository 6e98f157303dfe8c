"""Domain models for curveflat.

This module contains the value types shared by all decomposers. All models
are immutable frozen dataclasses.

Key classes:
- Point: A 2D position
- Vector: A 2D direction
- CubicCurve: Cubic Bezier control points
- ConicCurve: Rational quadratic Bezier with a weighted control point
- ArcDescriptor: Circular arc
- LineSegment: One flattened segment with its parameter range
"""

from curveflat.domain.curve import ArcDescriptor, ConicCurve, CubicCurve, PointLike
from curveflat.domain.point import Point, Vector
from curveflat.domain.segment import LineSegment

__all__: list[str] = [
    # Primitives
    "Point",
    "PointLike",
    "Vector",
    # Curves
    "ArcDescriptor",
    "ConicCurve",
    "CubicCurve",
    # Output
    "LineSegment",
]
