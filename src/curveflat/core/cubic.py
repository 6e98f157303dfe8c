"""Cubic Bezier evaluation, subdivision and flattening.

Flattening uses recursive midpoint subdivision with the flatness test from
Skia: a cubic is flat enough when its control points sit close to where
they would be on the straight chord.
"""

import logging
from collections.abc import Sequence

from curveflat.core._progress import MIN_PROGRESS, ProgressTracker
from curveflat.core.sinks import LineSink
from curveflat.domain import CubicCurve, Point, PointLike, Vector

logger = logging.getLogger(__name__)

CubicLike = CubicCurve | Sequence[PointLike]


def as_cubic(curve: CubicLike) -> CubicCurve:
    """Accept a CubicCurve or any sequence of four points."""
    if isinstance(curve, CubicCurve):
        return curve
    return CubicCurve.from_points(curve)


def cubic_coefficients(curve: CubicLike) -> tuple[Point, Point, Point, Point]:
    """Expand a cubic into power basis coefficients.

    The curve is then a*t^3 + b*t^2 + c*t + d, per axis.

    Returns:
        Tuple (a, b, c, d)
    """
    p0, p1, p2, p3 = as_cubic(curve).points
    a = Point(
        p3.x - 3.0 * p2.x + 3.0 * p1.x - p0.x,
        p3.y - 3.0 * p2.y + 3.0 * p1.y - p0.y,
    )
    b = Point(
        3.0 * p2.x - 6.0 * p1.x + 3.0 * p0.x,
        3.0 * p2.y - 6.0 * p1.y + 3.0 * p0.y,
    )
    c = Point(3.0 * p1.x - 3.0 * p0.x, 3.0 * p1.y - 3.0 * p0.y)
    return a, b, c, p0


def evaluate_cubic(curve: CubicLike, t: float) -> tuple[Point, Vector]:
    """Evaluate position and tangent of a cubic.

    Args:
        curve: The cubic
        t: Curve parameter, usually in [0, 1]

    Returns:
        Tuple of (position, unit_tangent). The tangent is the zero vector
        where the derivative vanishes.
    """
    a, b, c, d = cubic_coefficients(curve)

    position = Point(
        ((a.x * t + b.x) * t + c.x) * t + d.x,
        ((a.y * t + b.y) * t + c.y) * t + d.y,
    )
    tangent = Vector(
        (3.0 * a.x * t + 2.0 * b.x) * t + c.x,
        (3.0 * a.y * t + 2.0 * b.y) * t + c.y,
    )
    return position, tangent.normalized()


def split_cubic(curve: CubicLike, t: float) -> tuple[CubicCurve, CubicCurve]:
    """Split a cubic at parameter t using De Casteljau's algorithm.

    Args:
        curve: The cubic to split
        t: Split parameter; values outside [0, 1] extrapolate

    Returns:
        Tuple of (left, right) covering [0, t] and [t, 1]
    """
    p0, p1, p2, p3 = as_cubic(curve).points

    # First level
    ab = p0.interpolate(p1, t)
    bc = p1.interpolate(p2, t)
    cd = p2.interpolate(p3, t)

    # Second level
    abbc = ab.interpolate(bc, t)
    bccd = bc.interpolate(cd, t)

    # Third level (point on curve)
    final = abbc.interpolate(bccd, t)

    return CubicCurve(p0, ab, abbc, final), CubicCurve(final, bccd, cd, p3)


def cubic_too_curvy(curve: CubicLike, tolerance: float) -> bool:
    """Check whether a cubic deviates too far from its chord.

    Compares the control points with the chord points at 1/3 and 2/3 using
    Manhattan distance.

    Args:
        curve: The cubic to test
        tolerance: Maximum allowed deviation

    Returns:
        True if either control point is further than tolerance away
    """
    p0, p1, p2, p3 = as_cubic(curve).points

    p = p0.interpolate(p3, 1.0 / 3)
    if abs(p.x - p1.x) + abs(p.y - p1.y) > tolerance:
        return True

    p = p0.interpolate(p3, 2.0 / 3)
    if abs(p.x - p2.x) + abs(p.y - p2.y) > tolerance:
        return True

    return False


def _decompose(
    tracker: ProgressTracker,
    curve: CubicCurve,
    tolerance: float,
    progress: float,
) -> None:
    if progress < MIN_PROGRESS or not cubic_too_curvy(curve, tolerance):
        tracker.add_point(curve.p3, progress)
        return

    left, right = split_cubic(curve, 0.5)

    _decompose(tracker, left, tolerance, progress / 2)
    _decompose(tracker, right, tolerance, progress / 2)


def decompose_cubic(curve: CubicLike, tolerance: float, sink: LineSink) -> None:
    """Flatten a cubic into line segments.

    Segments are passed to sink in order, each with the parameter range it
    covers. Zero-length segments are never emitted, so a cubic whose four
    points coincide produces no segments at all.

    Args:
        curve: The cubic to flatten
        tolerance: Maximum deviation of the segments from the curve
        sink: Receives (start, end, start_progress, end_progress)

    Raises:
        ProgressInvariantError: If the emitted segments are inconsistent
            (internal bug)
    """
    curve = as_cubic(curve)
    tracker = ProgressTracker(curve.p0, sink)

    _decompose(tracker, curve, tolerance, 1.0)

    tracker.finish(curve.p3)
    logger.debug(
        "Cubic decomposed into %d segments (tolerance=%g)",
        tracker.segment_count,
        tolerance,
    )
