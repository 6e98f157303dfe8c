"""Progress bookkeeping shared by the cubic and conic decomposers.

This is an internal module. Each decomposition call creates one
ProgressTracker, feeds it every segment end point and checks it once the
recursion is done.
"""

from curveflat.core.sinks import LineSink
from curveflat.domain import Point
from curveflat.exceptions import ProgressInvariantError

# Subdivision stops below this parameter span, whatever the flatness test
# says. Bounds recursion depth to 10 levels.
MIN_PROGRESS = 1.0 / 1024


class ProgressTracker:
    """Turns emitted end points into line segments with progress ranges.

    A point equal to the previous one never produces a segment. Its
    parameter span is not lost: it widens the segment before it, or the
    first segment if nothing was emitted yet. To allow widening, the most
    recent segment is held back and only reaches the sink when the next
    distinct point arrives or in finish().

    Attributes:
        last_point: End point of the most recent segment (the curve start
            before anything was emitted)
        last_progress: Progress at the end of the most recent segment
        segment_count: Number of segments handed to the sink
    """

    __slots__ = ("last_point", "last_progress", "segment_count", "_sink", "_held", "_pending")

    def __init__(self, start: Point, sink: LineSink) -> None:
        self.last_point = start
        self.last_progress = 0.0
        self.segment_count = 0
        self._sink = sink
        self._held: tuple[Point, Point, float] | None = None
        self._pending = 0.0

    def add_point(self, point: Point, progress: float) -> None:
        """Extend the outline to point.

        Args:
            point: New end point
            progress: Parameter span the step covers
        """
        if point == self.last_point:
            if self._held is None:
                self._pending += progress
            else:
                self.last_progress += progress
            return

        self._flush()
        self._held = (self.last_point, point, self.last_progress)
        self.last_point = point
        self.last_progress += self._pending + progress
        self._pending = 0.0

    def _flush(self) -> None:
        if self._held is None:
            return
        start, end, start_progress = self._held
        self._held = None
        self._sink(start, end, start_progress, self.last_progress)
        self.segment_count += 1

    def finish(self, end_point: Point) -> None:
        """Emit the held segment and check the decomposition is complete.

        A curve that never moved away from its start emits nothing and
        ends with progress 0.

        Raises:
            ProgressInvariantError: If the last emitted point is not
                end_point or the progress is neither 0 nor 1
        """
        self._flush()

        if self.last_point != end_point:
            raise ProgressInvariantError(
                f"Decomposition ended at {self.last_point}, expected {end_point}"
            )
        if self.last_progress not in (0.0, 1.0):
            raise ProgressInvariantError(
                f"Decomposition covered progress {self.last_progress}, expected 0 or 1"
            )
