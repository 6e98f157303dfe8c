"""Circular arc approximation by cubic Bezier curves.

Each arc piece is replaced by the symmetric cubic that matches the arc's
end points and end tangents:

    (R cos A, R sin A)
    (R cos A - h R sin A, R sin A + h R cos A)
    (R cos B + h R sin B, R sin B - h R cos B)
    (R cos B, R sin B)

with h = 4/3 tan((B - A) / 4), as given in "Approximation of circular arcs
by cubic polynomials", Michael Goldapp, Computer Aided Geometric Design 8
(1991) 227-238.

The radial deviation of that cubic from the unit circle is bounded by

    error = 2/27 sin^6(angle / 4) / cos^2(angle / 4)

half the bound on x^2 + y^2 - 1 from "Good approximation of circles by
curvature-continuous Bezier curves", Tor Dokken and Morten Daehlen,
Computer Aided Geometric Design 8 (1990) 22-41. The number of pieces an arc
is cut into is chosen so that this error, scaled by the radius, stays
within the tolerance.
"""

import logging
import math

from curveflat.core.sinks import CurveSink
from curveflat.domain import ArcDescriptor, CubicCurve, Point, PointLike
from curveflat.exceptions import InvalidCurveError, InvalidToleranceError

logger = logging.getLogger(__name__)

# (max angle, error) pairs for angles pi/1 .. pi/11, errors from
# arc_error_normalized. Errors decrease down the table.
_ANGLE_ERROR_TABLE: tuple[tuple[float, float], ...] = (
    (math.pi / 1.0, 0.0185185185185185036127),
    (math.pi / 2.0, 0.000272567143730179811158),
    (math.pi / 3.0, 2.38647043651461047433e-05),
    (math.pi / 4.0, 4.2455377443222443279e-06),
    (math.pi / 5.0, 1.11281001494389081528e-06),
    (math.pi / 6.0, 3.72662000942734705475e-07),
    (math.pi / 7.0, 1.47783685574284411325e-07),
    (math.pi / 8.0, 6.63240432022601149057e-08),
    (math.pi / 9.0, 3.2715520137536980553e-08),
    (math.pi / 10.0, 1.73863223499021216974e-08),
    (math.pi / 11.0, 9.81410988043554039085e-09),
)


def arc_error_normalized(angle: float) -> float:
    """Maximum deviation of a unit-circle arc of the given angle from its cubic."""
    return 2.0 / 27.0 * math.sin(angle / 4) ** 6 / math.cos(angle / 4) ** 2


def arc_max_angle_for_tolerance_normalized(tolerance: float) -> float:
    """Largest angle pi/n whose cubic stays within tolerance on a unit circle.

    Args:
        tolerance: Allowed deviation for a circle of radius 1

    Returns:
        The angle, at most pi
    """
    for angle, error in _ANGLE_ERROR_TABLE:
        if error < tolerance:
            return angle

    # Table exhausted: keep dividing pi further
    divisor = len(_ANGLE_ERROR_TABLE) + 1
    while True:
        angle = math.pi / divisor
        if arc_error_normalized(angle) <= tolerance:
            return angle
        divisor += 1


def arc_segments_needed(angle: float, radius: float, tolerance: float) -> int:
    """Number of equal pieces an arc must be cut into.

    The error is amplified by at most the radius, so the unit-circle
    tolerance is tolerance / radius. A zero radius needs a single piece.

    Args:
        angle: Angular span of the arc
        radius: Circle radius
        tolerance: Allowed deviation in the same units as radius

    Returns:
        Piece count, at least 1
    """
    normalized = tolerance / abs(radius) if radius else math.inf
    max_angle = arc_max_angle_for_tolerance_normalized(normalized)
    return max(1, math.ceil(abs(angle) / max_angle))


def arc_segment(center: Point, radius: float, angle_a: float, angle_b: float) -> CubicCurve:
    """Cubic approximating the arc from angle_a to angle_b.

    Args:
        center: Circle center
        radius: Circle radius
        angle_a: Start angle in radians
        angle_b: End angle in radians

    Returns:
        The approximating cubic, starting and ending on the circle
    """
    r_sin_a = radius * math.sin(angle_a)
    r_cos_a = radius * math.cos(angle_a)
    r_sin_b = radius * math.sin(angle_b)
    r_cos_b = radius * math.cos(angle_b)

    h = 4.0 / 3.0 * math.tan((angle_b - angle_a) / 4.0)

    return CubicCurve(
        Point(center.x + r_cos_a, center.y + r_sin_a),
        Point(center.x + r_cos_a - h * r_sin_a, center.y + r_sin_a + h * r_cos_a),
        Point(center.x + r_cos_b + h * r_sin_b, center.y + r_sin_b - h * r_cos_b),
        Point(center.x + r_cos_b, center.y + r_sin_b),
    )


def _decompose(arc: ArcDescriptor, tolerance: float, sink: CurveSink) -> bool:
    step = arc.start_angle - arc.end_angle

    # A single cubic cannot follow more than half a turn
    if abs(step) > math.pi:
        first, second = arc.split()
        return _decompose(first, tolerance, sink) and _decompose(second, tolerance, sink)

    if abs(step) < tolerance:
        return True

    n_segments = arc_segments_needed(step, arc.radius, tolerance)
    step = arc.sweep / n_segments

    start_angle = arc.start_angle
    for _ in range(n_segments - 1):
        if not sink(arc_segment(arc.center, arc.radius, start_angle, start_angle + step)):
            return False
        start_angle += step

    return bool(sink(arc_segment(arc.center, arc.radius, start_angle, arc.end_angle)))


def decompose_arc(
    center: PointLike,
    radius: float,
    tolerance: float,
    start_angle: float,
    end_angle: float,
    sink: CurveSink,
) -> bool:
    """Approximate a circular arc by cubic Bezier curves.

    Arcs wider than pi are halved recursively. Arcs narrower than tolerance
    (compared directly, as an angle) emit nothing. Everything else is cut
    into equal pieces, each handed to sink as one cubic. The last piece
    ends exactly at end_angle.

    Args:
        center: Circle center
        radius: Circle radius
        tolerance: Allowed deviation from the true circle
        start_angle: Start angle in radians
        end_angle: End angle in radians
        sink: Receives each cubic; returning False aborts the decomposition

    Returns:
        True if every emitted cubic was accepted, False as soon as sink
        refused one

    Raises:
        InvalidToleranceError: If tolerance is not positive
        InvalidCurveError: If radius or an angle is infinite or NaN
    """
    if not tolerance > 0:
        raise InvalidToleranceError(tolerance, "arc tolerance must be positive")
    if not all(math.isfinite(v) for v in (radius, start_angle, end_angle)):
        raise InvalidCurveError(
            "arc", f"radius and angles must be finite, got {radius}, {start_angle}, {end_angle}"
        )

    arc = ArcDescriptor(Point.coerce(center), radius, start_angle, end_angle)
    ok = _decompose(arc, tolerance, sink)

    logger.debug(
        "Arc decomposed (sweep=%g, radius=%g, tolerance=%g, ok=%s)",
        arc.sweep,
        radius,
        tolerance,
        ok,
    )
    return ok
