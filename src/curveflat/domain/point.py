"""Core geometric primitives.

This module defines the two value types every decomposer works with:
- Point: A position in the plane
- Vector: A direction, used for curve tangents

Points are compared by exact equality. The decomposers rely on this to
detect duplicate emissions and to check that a decomposition ended on the
curve's final point.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def interpolate(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Args:
            other: Point reached at t=1
            t: Interpolation factor, not clamped

        Returns:
            The point self + (other - self) * t
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def vector_to(self, other: "Point") -> "Vector":
        """Return the vector from this point to another."""
        return Vector(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def coerce(cls, value: "Point | Sequence[float]") -> "Point":
        """Accept either a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


@dataclass(frozen=True, slots=True)
class Vector:
    """A 2D direction vector.

    Attributes:
        x: X component
        y: Y component
    """

    x: float
    y: float

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector":
        """Return the unit vector with the same direction.

        The zero vector has no direction and normalizes to itself.
        """
        length = self.length()
        if length == 0.0:
            return Vector(0.0, 0.0)
        return Vector(self.x / length, self.y / length)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)
