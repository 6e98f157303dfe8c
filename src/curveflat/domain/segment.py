"""Line segment records produced by flattening."""

from dataclasses import dataclass

from curveflat.domain.point import Point


@dataclass(frozen=True, slots=True)
class LineSegment:
    """One straight piece of a flattened curve.

    Attributes:
        start: First point of the segment
        end: Last point of the segment
        start_progress: Curve parameter at start, in [0, 1]
        end_progress: Curve parameter at end, in [0, 1]
    """

    start: Point
    end: Point
    start_progress: float
    end_progress: float

    @property
    def progress_span(self) -> float:
        """Parameter range covered by this segment."""
        return self.end_progress - self.start_progress

    def length(self) -> float:
        """Euclidean length of the segment."""
        return self.start.vector_to(self.end).length()
