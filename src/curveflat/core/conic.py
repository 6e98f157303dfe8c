"""Conic (rational quadratic Bezier) evaluation, subdivision and flattening.

A conic is a quotient of two quadratic polynomials. Flattening does not
re-split the curve geometrically; it bisects the parameter range directly
and evaluates the curve at each midpoint, using the midpoint test from
Skia to decide whether a parameter interval is flat enough.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from curveflat.core._progress import MIN_PROGRESS, ProgressTracker
from curveflat.core.sinks import LineSink
from curveflat.domain import ConicCurve, Point, PointLike, Vector

logger = logging.getLogger(__name__)

ConicLike = ConicCurve | Sequence[PointLike]


def as_conic(curve: ConicLike) -> ConicCurve:
    """Accept a ConicCurve or the packed 4-point representation."""
    if isinstance(curve, ConicCurve):
        return curve
    return ConicCurve.from_points(curve)


def _eval_quad(quad: tuple[Point, Point, Point], t: float) -> Point:
    a, b, c = quad
    return Point((a.x * t + b.x) * t + c.x, (a.y * t + b.y) * t + c.y)


@dataclass(frozen=True, slots=True)
class ConicCoefficients:
    """Numerator and denominator quadratics of a conic.

    Each tuple holds the t^2, t and constant coefficients. The denominator
    only depends on the weight and is the same for both axes.
    """

    num: tuple[Point, Point, Point]
    denom: tuple[Point, Point, Point]

    @classmethod
    def from_curve(cls, curve: ConicLike) -> "ConicCoefficients":
        curve = as_conic(curve)
        p0, p3, w = curve.start, curve.end, curve.weight
        pw = Point(w * curve.control.x, w * curve.control.y)

        num = (
            Point(p3.x - 2 * pw.x + p0.x, p3.y - 2 * pw.y + p0.y),
            Point(2 * (pw.x - p0.x), 2 * (pw.y - p0.y)),
            p0,
        )
        d = 2 * (w - 1)
        denom = (Point(-d, -d), Point(d, d), Point(1.0, 1.0))
        return cls(num=num, denom=denom)

    def evaluate(self, t: float) -> Point:
        """Position on the curve at parameter t."""
        num = _eval_quad(self.num, t)
        denom = _eval_quad(self.denom, t)
        return Point(num.x / denom.x, num.y / denom.y)


def evaluate_conic(curve: ConicLike, t: float) -> tuple[Point, Vector]:
    """Evaluate position and tangent of a conic.

    Args:
        curve: The conic, as ConicCurve or packed 4 points
        t: Curve parameter in [0, 1]

    Returns:
        Tuple of (position, unit_tangent)
    """
    curve = as_conic(curve)
    position = ConicCoefficients.from_curve(curve).evaluate(t)

    p0, p1, p3, w = curve.start, curve.control, curve.end, curve.weight

    # The derivative vanishes at an end point that coincides with the
    # control point. Fall back to the chord direction there.
    if (t <= 0.0 and p0 == p1) or (t >= 1.0 and p1 == p3):
        return position, p0.vector_to(p3).normalized()

    tmp = _eval_quad(
        (
            Point((w - 1) * (p3.x - p0.x), (w - 1) * (p3.y - p0.y)),
            Point(
                p3.x - p0.x - 2 * w * (p1.x - p0.x),
                p3.y - p0.y - 2 * w * (p1.y - p0.y),
            ),
            Point(w * (p1.x - p0.x), w * (p1.y - p0.y)),
        ),
        t,
    )
    return position, Vector(tmp.x, tmp.y).normalized()


def _homogeneous_to_conic(
    start: Point,
    control: tuple[float, float, float],
    start_weight: float,
    end_weight: float,
    end: Point,
) -> ConicCurve:
    cx, cy, cw = control
    if cw == 0.0:
        return ConicCurve(start, start, 0.0, end)
    return ConicCurve(start, Point(cx / cw, cy / cw), cw / math.sqrt(start_weight * end_weight), end)


def split_conic(curve: ConicLike, t: float) -> tuple[ConicCurve, ConicCurve]:
    """Split a conic at parameter t.

    Runs De Casteljau's algorithm on the homogeneous control points
    (P0, 1), (w P1, w), (P3, 1) and brings both halves back to standard
    form, with weight 1 at the end points.

    Args:
        curve: The conic to split
        t: Split parameter in [0, 1]

    Returns:
        Tuple of (left, right). The halves meet at the point on the curve
        at t; their own parametrization differs from the original's.

    Raises:
        ValueError: If t is outside [0, 1]
    """
    if not 0.0 <= t <= 1.0:
        raise ValueError(f"Conic split parameter must be in [0, 1], got {t}")

    curve = as_conic(curve)
    p0, p1, p3, w = curve.start, curve.control, curve.end, curve.weight

    h0 = (p0.x, p0.y, 1.0)
    h1 = (w * p1.x, w * p1.y, w)
    h2 = (p3.x, p3.y, 1.0)

    def lerp(a: tuple[float, float, float], b: tuple[float, float, float]) -> tuple[float, float, float]:
        return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t, a[2] + (b[2] - a[2]) * t)

    ab = lerp(h0, h1)
    bc = lerp(h1, h2)
    mid = lerp(ab, bc)

    if t == 0.0:
        mid_point = p0
    elif t == 1.0:
        mid_point = p3
    else:
        mid_point = Point(mid[0] / mid[2], mid[1] / mid[2])

    left = _homogeneous_to_conic(p0, ab, 1.0, mid[2], mid_point)
    right = _homogeneous_to_conic(mid_point, bc, mid[2], 1.0, p3)
    return left, right


def conic_too_curvy(start: Point, mid: Point, end: Point, tolerance: float) -> bool:
    """Check whether a curve midpoint strays too far from the chord midpoint.

    Args:
        start: Curve point at the interval start
        mid: Curve point at the interval's parameter midpoint
        end: Curve point at the interval end
        tolerance: Maximum allowed deviation per axis

    Returns:
        True if mid deviates by more than tolerance in either axis
    """
    return (
        abs((start.x + end.x) * 0.5 - mid.x) > tolerance
        or abs((start.y + end.y) * 0.5 - mid.y) > tolerance
    )


def _subdivide(
    tracker: ProgressTracker,
    coeffs: ConicCoefficients,
    tolerance: float,
    start: Point,
    start_progress: float,
    end: Point,
    end_progress: float,
) -> None:
    mid_progress = (start_progress + end_progress) / 2
    mid = coeffs.evaluate(mid_progress)

    if end_progress - start_progress < MIN_PROGRESS or not conic_too_curvy(
        start, mid, end, tolerance
    ):
        tracker.add_point(end, end_progress - start_progress)
        return

    _subdivide(tracker, coeffs, tolerance, start, start_progress, mid, mid_progress)
    _subdivide(tracker, coeffs, tolerance, mid, mid_progress, end, end_progress)


def decompose_conic(curve: ConicLike, tolerance: float, sink: LineSink) -> None:
    """Flatten a conic into line segments.

    Args:
        curve: The conic, as ConicCurve or packed 4 points
        tolerance: Maximum per-axis deviation of each segment's midpoint
        sink: Receives (start, end, start_progress, end_progress)

    Raises:
        ProgressInvariantError: If the emitted segments are inconsistent
            (internal bug)
    """
    curve = as_conic(curve)
    coeffs = ConicCoefficients.from_curve(curve)
    tracker = ProgressTracker(curve.start, sink)

    _subdivide(tracker, coeffs, tolerance, curve.start, 0.0, curve.end, 1.0)

    tracker.finish(curve.end)
    logger.debug(
        "Conic decomposed into %d segments (weight=%g, tolerance=%g)",
        tracker.segment_count,
        curve.weight,
        tolerance,
    )
