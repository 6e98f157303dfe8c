"""Polyline helpers built on the decomposers.

These wrap the sink-based decomposition API for callers that just want a
list of points. All functions are pure and stateless.
"""

from curveflat.core.arc import decompose_arc
from curveflat.core.conic import ConicLike, as_conic, decompose_conic
from curveflat.core.cubic import CubicLike, as_cubic, decompose_cubic
from curveflat.core.sinks import CurveRecorder, SegmentRecorder
from curveflat.domain import ConicCurve, CubicCurve, Point, PointLike


def flatten_cubic(curve: CubicLike, tolerance: float) -> list[Point]:
    """Convert a cubic Bezier curve to a polyline.

    Args:
        curve: CubicCurve or four control points
        tolerance: Maximum deviation from the true curve

    Returns:
        Points from the curve start to its end. A curve whose control
        points all coincide yields just its start point.

    Examples:
        >>> flatten_cubic([(0, 0), (1, 0), (2, 0), (3, 0)], 0.5)
        [Point(x=0.0, y=0.0), Point(x=3.0, y=0.0)]
    """
    curve = as_cubic(curve)
    recorder = SegmentRecorder()
    decompose_cubic(curve, tolerance, recorder)
    return recorder.polyline() or [curve.start]


def flatten_conic(curve: ConicLike, tolerance: float) -> list[Point]:
    """Convert a conic to a polyline.

    Args:
        curve: ConicCurve or packed 4-point conic
        tolerance: Maximum per-axis deviation at segment midpoints

    Returns:
        Points from the curve start to its end
    """
    curve = as_conic(curve)
    recorder = SegmentRecorder()
    decompose_conic(curve, tolerance, recorder)
    return recorder.polyline() or [curve.start]


def flatten_quadratic(
    p0: PointLike, p1: PointLike, p2: PointLike, tolerance: float
) -> list[Point]:
    """Convert a quadratic Bezier curve to a polyline.

    A quadratic is the conic with weight 1.
    """
    return flatten_conic(ConicCurve.from_quadratic(p0, p1, p2), tolerance)


def arc_to_cubics(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    tolerance: float,
) -> list[CubicCurve]:
    """Approximate a circular arc by cubic Bezier curves.

    Returns:
        The cubics in order; empty if the arc is narrower than tolerance
    """
    recorder = CurveRecorder()
    decompose_arc(center, radius, tolerance, start_angle, end_angle, recorder)
    return recorder.curves


def flatten_arc(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    tolerance: float,
) -> list[Point]:
    """Convert a circular arc to a polyline.

    The arc is first approximated by cubics, each of which is then
    flattened with the same tolerance.

    Returns:
        Points along the arc; empty if the arc is narrower than tolerance
    """
    points: list[Point] = []
    for curve in arc_to_cubics(center, radius, start_angle, end_angle, tolerance):
        recorder = SegmentRecorder()
        decompose_cubic(curve, tolerance, recorder)
        polyline = recorder.polyline()
        if points and polyline and points[-1] == polyline[0]:
            polyline = polyline[1:]
        points.extend(polyline)
    return points
