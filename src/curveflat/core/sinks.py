"""Output sinks for the decomposers.

The decomposers never build result lists themselves. Cubic and conic
decomposition hand every flattened segment to a line sink; arc
decomposition hands every approximating cubic to a curve sink. Any
callable with the right signature works as a sink. The recorders here are
the ready-made collectors used by the flatten helpers and the tests.
"""

from dataclasses import dataclass, field
from typing import Protocol

from curveflat.domain import CubicCurve, LineSegment, Point


class LineSink(Protocol):
    """Receives flattened line segments.

    Called once per segment, in increasing progress order. Progress values
    of consecutive calls are contiguous and together cover [0, 1].
    """

    def __call__(
        self,
        start: Point,
        end: Point,
        start_progress: float,
        end_progress: float,
    ) -> None: ...


class CurveSink(Protocol):
    """Receives cubic approximations of arc pieces.

    Returns False to abort the remaining decomposition.
    """

    def __call__(self, curve: CubicCurve) -> bool: ...


@dataclass
class SegmentRecorder:
    """Line sink that records every segment it receives.

    Example:
        recorder = SegmentRecorder()
        decompose_cubic(curve, 0.5, recorder)
        points = recorder.polyline()
    """

    segments: list[LineSegment] = field(default_factory=list)

    def __call__(
        self,
        start: Point,
        end: Point,
        start_progress: float,
        end_progress: float,
    ) -> None:
        self.segments.append(LineSegment(start, end, start_progress, end_progress))

    def __len__(self) -> int:
        return len(self.segments)

    def polyline(self) -> list[Point]:
        """Return the recorded segments as a connected point list.

        Returns:
            The first segment's start followed by every segment's end.
            Empty if nothing was recorded.
        """
        if not self.segments:
            return []
        return [self.segments[0].start, *(s.end for s in self.segments)]

    def clear(self) -> None:
        """Forget all recorded segments."""
        self.segments.clear()


@dataclass
class CurveRecorder:
    """Curve sink that records every cubic it receives.

    Attributes:
        curves: Recorded cubics, in emission order
        limit: If set, the recorder refuses (returns False) any curve
            after this many have been accepted
    """

    curves: list[CubicCurve] = field(default_factory=list)
    limit: int | None = None

    def __call__(self, curve: CubicCurve) -> bool:
        if self.limit is not None and len(self.curves) >= self.limit:
            return False
        self.curves.append(curve)
        return True

    def __len__(self) -> int:
        return len(self.curves)
