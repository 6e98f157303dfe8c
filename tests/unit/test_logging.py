"""Unit tests for run statistics."""

import structlog

from curveflat.utils import FlattenLogger, FlattenStats


class TestFlattenLogger:
    """Tests for FlattenLogger statistics."""

    def test_curves_and_glyphs_counted_separately(self) -> None:
        flatten_logger = FlattenLogger(structlog.get_logger("curveflat.tests"))

        flatten_logger.log_curve_flattened("cubic", 12, 0.25)
        flatten_logger.log_glyph_flattened("O", contours=2, points=40)

        stats = flatten_logger.stats
        assert stats.curves_flattened == 1
        assert stats.glyphs_flattened == 1
        assert stats.segments_emitted == 12 + 38

    def test_arcs_and_errors(self) -> None:
        flatten_logger = FlattenLogger(structlog.get_logger("curveflat.tests"))

        flatten_logger.log_arc_decomposed(4, completed=True)
        flatten_logger.log_error("O", ValueError("bad outline"))

        stats = flatten_logger.stats
        assert stats.arcs_decomposed == 1
        assert stats.curves_flattened == 0
        assert stats.error_count == 1
        assert stats.errors == [("O", "bad outline")]

    def test_duration(self) -> None:
        stats = FlattenStats(start_time=10.0, end_time=10.5)
        assert stats.duration_seconds == 0.5
        assert FlattenStats().duration_seconds == 0.0
