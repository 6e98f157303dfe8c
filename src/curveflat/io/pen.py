"""fontTools pen adapter that flattens outlines on the fly.

FlatteningPen sits in front of any fontTools pen and replaces every curve
command with line commands produced by the decomposers. Drawing a glyph
into FlatteningPen(RecordingPen(), tolerance) records a polygonal outline.
"""

from typing import Any

from fontTools.pens.basePen import AbstractPen, BasePen

from curveflat.core.conic import decompose_conic
from curveflat.core.cubic import decompose_cubic
from curveflat.domain import ConicCurve, CubicCurve, Point

Coordinate = tuple[float, float]


class FlatteningPen(BasePen):
    """Pen that forwards outlines to another pen with curves flattened.

    Cubic segments (CFF outlines) go through the cubic decomposer and
    quadratic segments (TrueType outlines) through the conic decomposer
    with weight 1. Implied on-curve points of TrueType quadratic runs are
    resolved by BasePen before flattening.

    Example:
        recording = RecordingPen()
        pen = FlatteningPen(recording, tolerance=0.5, glyphSet=glyph_set)
        glyph_set["O"].draw(pen)
    """

    def __init__(
        self,
        out_pen: AbstractPen,
        tolerance: float,
        glyphSet: Any = None,  # noqa: N803
    ) -> None:
        """Initialize the pen.

        Args:
            out_pen: Pen receiving moveTo/lineTo/closePath/endPath calls
            tolerance: Flattening tolerance in font units
            glyphSet: Glyph set used to decompose components, if any
        """
        super().__init__(glyphSet)
        self.out_pen = out_pen
        self.tolerance = tolerance
        self.curve_count = 0
        self.segment_count = 0

    def _emit(self, _start: Point, end: Point, _start_progress: float, _end_progress: float) -> None:
        self.out_pen.lineTo(end.to_tuple())
        self.segment_count += 1

    def _moveTo(self, pt: Coordinate) -> None:
        self.out_pen.moveTo(pt)

    def _lineTo(self, pt: Coordinate) -> None:
        self.out_pen.lineTo(pt)
        self.segment_count += 1

    def _curveToOne(self, pt1: Coordinate, pt2: Coordinate, pt3: Coordinate) -> None:
        curve = CubicCurve.from_points([self._getCurrentPoint(), pt1, pt2, pt3])
        decompose_cubic(curve, self.tolerance, self._emit)
        self.curve_count += 1

    def _qCurveToOne(self, pt1: Coordinate, pt2: Coordinate) -> None:
        curve = ConicCurve.from_quadratic(self._getCurrentPoint(), pt1, pt2)
        decompose_conic(curve, self.tolerance, self._emit)
        self.curve_count += 1

    def _closePath(self) -> None:
        self.out_pen.closePath()

    def _endPath(self) -> None:
        self.out_pen.endPath()


def recording_to_polylines(recording: list[tuple[str, tuple[Any, ...]]]) -> list[list[Point]]:
    """Convert a flattened RecordingPen recording to point lists.

    The recording must only contain moveTo, lineTo, closePath and endPath
    commands, as produced through a FlatteningPen. Closed contours end with
    a copy of their first point.

    Args:
        recording: RecordingPen.value

    Returns:
        One point list per contour

    Raises:
        ValueError: If the recording still contains curve commands
    """
    polylines: list[list[Point]] = []
    current: list[Point] = []

    for command, args in recording:
        if command == "moveTo":
            if current:
                polylines.append(current)
            current = [Point.coerce(args[0])]

        elif command == "lineTo":
            current.append(Point.coerce(args[0]))

        elif command == "closePath":
            if current and current[-1] != current[0]:
                current.append(current[0])
            if current:
                polylines.append(current)
            current = []

        elif command == "endPath":
            if current:
                polylines.append(current)
            current = []

        else:
            raise ValueError(f"Unexpected command in flattened recording: {command}")

    if current:
        polylines.append(current)

    return polylines
