"""Unit tests for conic evaluation, splitting and flattening."""

import math

import pytest

from curveflat.core import (
    ConicCoefficients,
    SegmentRecorder,
    conic_too_curvy,
    decompose_conic,
    evaluate_conic,
    split_conic,
)
from curveflat.domain import ConicCurve, Point, Vector

HALF_SQRT2 = math.sqrt(2) / 2

# Quarter of the unit circle, scaled by 100
QUARTER_CIRCLE = ConicCurve(Point(100, 0), Point(100, 100), HALF_SQRT2, Point(0, 100))
PARABOLA = ConicCurve.from_quadratic((0, 0), (50, 100), (100, 0))
HYPERBOLA = ConicCurve(Point(0, 0), Point(50, 100), 3.0, Point(100, 0))


def quadratic_point(curve: ConicCurve, t: float) -> Point:
    p0, p1, p2 = curve.start, curve.control, curve.end
    mt = 1 - t
    return Point(
        mt * mt * p0.x + 2 * mt * t * p1.x + t * t * p2.x,
        mt * mt * p0.y + 2 * mt * t * p1.y + t * t * p2.y,
    )


def distance_to_segment(p: Point, a: Point, b: Point) -> float:
    dx, dy = b.x - a.x, b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(p.x - a.x, p.y - a.y)
    t = max(0.0, min(1.0, ((p.x - a.x) * dx + (p.y - a.y) * dy) / length_sq))
    return math.hypot(p.x - (a.x + t * dx), p.y - (a.y + t * dy))


class TestConicCoefficients:
    """Tests for ConicCoefficients."""

    def test_denominator_depends_on_weight_only(self) -> None:
        coeffs = ConicCoefficients.from_curve(HYPERBOLA)
        assert coeffs.denom == (Point(-4.0, -4.0), Point(4.0, 4.0), Point(1.0, 1.0))

    def test_quadratic_has_constant_denominator(self) -> None:
        coeffs = ConicCoefficients.from_curve(PARABOLA)
        assert coeffs.denom[0] == Point(0.0, 0.0)
        assert coeffs.denom[1] == Point(0.0, 0.0)
        assert coeffs.num == (Point(0.0, -200.0), Point(100.0, 200.0), Point(0.0, 0.0))


class TestEvaluateConic:
    """Tests for evaluate_conic."""

    @pytest.mark.parametrize("curve", [QUARTER_CIRCLE, PARABOLA, HYPERBOLA])
    def test_start_point(self, curve: ConicCurve) -> None:
        position, _ = evaluate_conic(curve, 0.0)
        assert position == curve.start

    @pytest.mark.parametrize("curve", [QUARTER_CIRCLE, PARABOLA, HYPERBOLA])
    def test_end_point(self, curve: ConicCurve) -> None:
        position, _ = evaluate_conic(curve, 1.0)
        assert position.x == pytest.approx(curve.end.x, abs=1e-9)
        assert position.y == pytest.approx(curve.end.y, abs=1e-9)

    @pytest.mark.parametrize("t", [0.1, 0.25, 0.5, 0.9])
    def test_weight_one_is_quadratic(self, t: float) -> None:
        position, _ = evaluate_conic(PARABOLA, t)
        expected = quadratic_point(PARABOLA, t)
        assert position.x == pytest.approx(expected.x)
        assert position.y == pytest.approx(expected.y)

    @pytest.mark.parametrize("t", [0.1, 0.3, 0.5, 0.7, 0.9])
    def test_circle_weight_traces_circle(self, t: float) -> None:
        position, tangent = evaluate_conic(QUARTER_CIRCLE, t)
        assert math.hypot(position.x, position.y) == pytest.approx(100.0)
        # Tangent of a circle is perpendicular to the radius
        assert position.x * tangent.x + position.y * tangent.y == pytest.approx(0.0, abs=1e-9)
        assert tangent.length() == pytest.approx(1.0)

    def test_start_tangent(self) -> None:
        _, tangent = evaluate_conic(QUARTER_CIRCLE, 0.0)
        assert tangent == Vector(0.0, 1.0)

    def test_degenerate_start_tangent_uses_chord(self) -> None:
        """Control point on the start point: tangent falls back to the chord."""
        curve = ConicCurve(Point(0, 0), Point(0, 0), 1.0, Point(3, 4))
        _, tangent = evaluate_conic(curve, 0.0)
        assert tangent.x == pytest.approx(0.6)
        assert tangent.y == pytest.approx(0.8)

    def test_degenerate_end_tangent_uses_chord(self) -> None:
        curve = ConicCurve(Point(0, 0), Point(3, 4), 2.0, Point(3, 4))
        _, tangent = evaluate_conic(curve, 1.0)
        assert tangent.x == pytest.approx(0.6)
        assert tangent.y == pytest.approx(0.8)

    def test_accepts_packed_points(self) -> None:
        packed = [(100, 0), (100, 100), (HALF_SQRT2, 0), (0, 100)]
        position, _ = evaluate_conic(packed, 0.5)
        expected, _ = evaluate_conic(QUARTER_CIRCLE, 0.5)
        assert position == expected


class TestSplitConic:
    """Tests for split_conic."""

    def test_split_quarter_circle(self) -> None:
        """Each half of a quarter circle is a 45 degree arc."""
        left, right = split_conic(QUARTER_CIRCLE, 0.5)

        assert left.start == QUARTER_CIRCLE.start
        assert right.end == QUARTER_CIRCLE.end
        assert left.end == right.start
        assert left.end.x == pytest.approx(100 * HALF_SQRT2)
        assert left.end.y == pytest.approx(100 * HALF_SQRT2)

        expected_weight = math.cos(math.pi / 8)
        assert left.weight == pytest.approx(expected_weight)
        assert right.weight == pytest.approx(expected_weight)

    @pytest.mark.parametrize("t", [0.2, 0.5, 0.75])
    def test_halves_stay_on_circle(self, t: float) -> None:
        left, right = split_conic(QUARTER_CIRCLE, t)
        for half in (left, right):
            for s in (0.25, 0.5, 0.75):
                position, _ = evaluate_conic(half, s)
                assert math.hypot(position.x, position.y) == pytest.approx(100.0)

    @pytest.mark.parametrize("t", [0.3, 0.5])
    def test_split_point_is_on_curve(self, t: float) -> None:
        left, _ = split_conic(HYPERBOLA, t)
        expected, _ = evaluate_conic(HYPERBOLA, t)
        assert left.end.x == pytest.approx(expected.x)
        assert left.end.y == pytest.approx(expected.y)

    def test_quadratic_halves_stay_quadratic(self) -> None:
        left, right = split_conic(PARABOLA, 0.5)
        assert left.weight == pytest.approx(1.0)
        assert right.weight == pytest.approx(1.0)
        assert left.control == Point(25.0, 50.0)
        assert right.control == Point(75.0, 50.0)

    def test_split_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="in \\[0, 1\\]"):
            split_conic(QUARTER_CIRCLE, 1.5)


class TestConicTooCurvy:
    """Tests for the midpoint flatness test."""

    def test_on_chord_is_flat(self) -> None:
        assert not conic_too_curvy(Point(0, 0), Point(5, 5), Point(10, 10), 0.1)

    def test_checks_each_axis(self) -> None:
        assert conic_too_curvy(Point(0, 0), Point(5, 5.2), Point(10, 10), 0.1)
        assert conic_too_curvy(Point(0, 0), Point(5.2, 5), Point(10, 10), 0.1)
        assert not conic_too_curvy(Point(0, 0), Point(5.05, 5.05), Point(10, 10), 0.1)


class TestDecomposeConic:
    """Tests for decompose_conic."""

    @pytest.mark.parametrize("curve", [QUARTER_CIRCLE, PARABOLA, HYPERBOLA])
    @pytest.mark.parametrize("tolerance", [0.05, 0.5, 5.0])
    def test_progress_tiles_unit_interval(self, curve: ConicCurve, tolerance: float) -> None:
        recorder = SegmentRecorder()
        decompose_conic(curve, tolerance, recorder)

        segments = recorder.segments
        assert segments[0].start == curve.start
        assert segments[-1].end == curve.end
        assert segments[0].start_progress == 0.0
        assert segments[-1].end_progress == 1.0
        for prev, cur in zip(segments, segments[1:]):
            assert prev.end_progress == cur.start_progress
            assert prev.end == cur.start

    @pytest.mark.parametrize("curve", [QUARTER_CIRCLE, PARABOLA, HYPERBOLA])
    @pytest.mark.parametrize("tolerance", [0.1, 1.0])
    def test_deviation_within_tolerance(self, curve: ConicCurve, tolerance: float) -> None:
        recorder = SegmentRecorder()
        decompose_conic(curve, tolerance, recorder)

        for segment in recorder.segments:
            for i in range(1, 10):
                t = segment.start_progress + segment.progress_span * i / 10
                on_curve, _ = evaluate_conic(curve, t)
                assert distance_to_segment(on_curve, segment.start, segment.end) <= 2 * tolerance

    def test_quadratic_polyline_matches_direct_evaluation(self) -> None:
        """With weight 1 every vertex is the quadratic at its progress value."""
        recorder = SegmentRecorder()
        decompose_conic(PARABOLA, 0.25, recorder)

        assert len(recorder) > 1
        for segment in recorder.segments:
            expected = quadratic_point(PARABOLA, segment.end_progress)
            assert segment.end.x == pytest.approx(expected.x, abs=1e-9)
            assert segment.end.y == pytest.approx(expected.y, abs=1e-9)

    def test_straight_conic_single_segment(self) -> None:
        recorder = SegmentRecorder()
        decompose_conic(ConicCurve.from_quadratic((0, 0), (5, 0), (10, 0)), 0.1, recorder)
        assert len(recorder) == 1

    def test_degenerate_conic_emits_nothing(self) -> None:
        recorder = SegmentRecorder()
        decompose_conic(ConicCurve(Point(2, 2), Point(2, 2), 0.5, Point(2, 2)), 0.1, recorder)
        assert len(recorder) == 0

    def test_minimum_progress_floor(self) -> None:
        recorder = SegmentRecorder()
        decompose_conic(QUARTER_CIRCLE, 0.0, recorder)
        assert len(recorder) <= 2048
        assert recorder.segments[-1].end_progress == 1.0

    def test_accepts_packed_points(self) -> None:
        recorder = SegmentRecorder()
        decompose_conic([(0, 0), (50, 100), (1.0, 0.0), (100, 0)], 0.5, recorder)

        expected = SegmentRecorder()
        decompose_conic(PARABOLA, 0.5, expected)
        assert recorder.segments == expected.segments
