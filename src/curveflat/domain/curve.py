"""Curve descriptors consumed by the decomposers.

This module defines:
- CubicCurve: A cubic Bezier given by four control points
- ConicCurve: A rational quadratic Bezier with a weighted control point
- ArcDescriptor: A circular arc given by center, radius and angles

All descriptors are immutable. The decomposers only read them.
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from curveflat.domain.point import Point
from curveflat.exceptions import InvalidCurveError

PointLike = Point | Sequence[float]


@dataclass(frozen=True, slots=True)
class CubicCurve:
    """A cubic Bezier curve.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p3

    @property
    def points(self) -> tuple[Point, Point, Point, Point]:
        """Control points as a 4-tuple."""
        return (self.p0, self.p1, self.p2, self.p3)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @classmethod
    def from_points(cls, points: Sequence[PointLike]) -> "CubicCurve":
        """Build a cubic from four points or (x, y) pairs.

        Raises:
            InvalidCurveError: If the sequence does not hold four points
        """
        if len(points) != 4:
            raise InvalidCurveError("cubic", f"expected 4 points, got {len(points)}")
        p0, p1, p2, p3 = (Point.coerce(p) for p in points)
        return cls(p0, p1, p2, p3)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CubicCurve":
        """Deserialize from dictionary."""
        return cls.from_points([Point.from_dict(p) for p in data["points"]])


@dataclass(frozen=True, slots=True)
class ConicCurve:
    """A rational quadratic Bezier curve.

    The curve is (P0 (1-t)^2 + 2 w P1 t (1-t) + P3 t^2) divided by
    ((1-t)^2 + 2 w t (1-t) + t^2). A weight of 1 gives a plain quadratic,
    weights below 1 give ellipse arcs and weights above 1 hyperbola arcs.

    For interchange the curve can also be packed into four points, with the
    weight stored in the x coordinate of the third point (see to_points).

    Attributes:
        start: Start point
        control: Control point
        weight: Weight of the control point, never negative
        end: End point
    """

    start: Point
    control: Point
    weight: float
    end: Point

    def __post_init__(self) -> None:
        if not self.weight >= 0:
            raise InvalidCurveError("conic", f"weight must be >= 0, got {self.weight}")

    @classmethod
    def from_points(cls, points: Sequence[PointLike]) -> "ConicCurve":
        """Unpack the 4-point representation (P0, P1, (w, _), P3).

        Raises:
            InvalidCurveError: If the sequence does not hold four points
                or the weight is negative
        """
        if len(points) != 4:
            raise InvalidCurveError("conic", f"expected 4 points, got {len(points)}")
        p0, p1, packed, p3 = (Point.coerce(p) for p in points)
        return cls(p0, p1, packed.x, p3)

    @classmethod
    def from_quadratic(cls, p0: PointLike, p1: PointLike, p2: PointLike) -> "ConicCurve":
        """Build the conic equivalent of a quadratic Bezier (weight 1)."""
        return cls(Point.coerce(p0), Point.coerce(p1), 1.0, Point.coerce(p2))

    def to_points(self) -> tuple[Point, Point, Point, Point]:
        """Pack into the 4-point representation.

        Returns:
            (start, control, Point(weight, 0.0), end)
        """
        return (self.start, self.control, Point(self.weight, 0.0), self.end)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "start": self.start.to_dict(),
            "control": self.control.to_dict(),
            "weight": self.weight,
            "end": self.end.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConicCurve":
        """Deserialize from dictionary."""
        return cls(
            start=Point.from_dict(data["start"]),
            control=Point.from_dict(data["control"]),
            weight=data["weight"],
            end=Point.from_dict(data["end"]),
        )


@dataclass(frozen=True, slots=True)
class ArcDescriptor:
    """A circular arc.

    Angles are in radians, signed, and not normalized to any range. The arc
    runs from start_angle to end_angle, counter-clockwise when end_angle is
    larger (in a y-up coordinate system).

    Attributes:
        center: Center of the circle
        radius: Circle radius
        start_angle: Angle of the arc's first point
        end_angle: Angle of the arc's last point
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        """Signed angular span of the arc."""
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2.0

    def point_at(self, angle: float) -> Point:
        """Point on the circle at the given angle."""
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def split(self) -> tuple["ArcDescriptor", "ArcDescriptor"]:
        """Split at the angular midpoint."""
        mid = self.mid_angle
        return (
            ArcDescriptor(self.center, self.radius, self.start_angle, mid),
            ArcDescriptor(self.center, self.radius, mid, self.end_angle),
        )
