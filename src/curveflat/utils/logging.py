"""Logging utilities for Curveflat."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "curveflat"


@dataclass
class FlattenStats:
    """Statistics from a flattening run."""

    curves_flattened: int = 0
    glyphs_flattened: int = 0
    arcs_decomposed: int = 0
    segments_emitted: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for the CLI.

    Library modules log through the standard logging module; this routes
    those records and the CLI's structlog events to the console and,
    optionally, a file. Calling it again replaces the handlers it installed
    before.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("curveflat")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class FlattenLogger:
    """Logger for tracking flattening progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = FlattenStats()

    def log_curve_flattened(self, kind: str, segments: int, tolerance: float) -> None:
        """Log a flattened cubic or conic."""
        self._logger.info(
            "Curve flattened",
            kind=kind,
            segments=segments,
            tolerance=tolerance,
        )
        self._stats.curves_flattened += 1
        self._stats.segments_emitted += segments

    def log_arc_decomposed(self, curves: int, completed: bool) -> None:
        """Log an arc decomposition."""
        self._logger.info("Arc decomposed", curves=curves, completed=completed)
        self._stats.arcs_decomposed += 1

    def log_glyph_flattened(self, glyph_name: str, contours: int, points: int) -> None:
        """Log a flattened glyph."""
        self._logger.info(
            "Glyph flattened",
            glyph=glyph_name,
            contours=contours,
            points=points,
        )
        self._stats.glyphs_flattened += 1
        self._stats.segments_emitted += max(points - contours, 0)

    def log_error(self, subject: str, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Flattening failed",
            subject=subject,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((subject, str(error)))

    @property
    def stats(self) -> FlattenStats:
        """Get current statistics."""
        return self._stats
