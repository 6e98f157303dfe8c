"""CLI application entry point for curveflat.

This module provides the main CLI interface using Typer.
"""

import math
import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from curveflat import __version__
from curveflat.cli.output import (
    console,
    print_curves,
    print_error,
    print_header,
    print_polylines,
    print_segments,
    print_step,
    print_success,
)
from curveflat.config import CurveflatSettings, FlattenConfig, LoggingConfig
from curveflat.core import CurveRecorder, SegmentRecorder, decompose_arc, decompose_conic, decompose_cubic
from curveflat.domain import ConicCurve, CubicCurve, Point
from curveflat.exceptions import CurveflatError, FontLoadError
from curveflat.io import FontReader
from curveflat.utils import FlattenLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="curveflat",
    help=(
        "Flatten cubic, conic and arc segments into polylines. "
        "Put '--' before negative coordinates."
    ),
    add_completion=False,
    no_args_is_help=True,
)

ToleranceOption = Annotated[
    float | None,
    typer.Option(
        "--tolerance",
        "-t",
        help="Maximum deviation from the true curve (default from settings)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only print the result summary"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Curveflat[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Flatten curved path segments within a tolerance."""


def _build_settings(
    tolerance: float | None,
    arc: bool,
    log_file: Path | None,
    log_level: str,
) -> CurveflatSettings:
    """Create settings from CLI arguments, exiting on invalid values."""
    flatten_kwargs: dict[str, float] = {}
    if tolerance is not None:
        flatten_kwargs["arc_tolerance" if arc else "tolerance"] = tolerance

    try:
        return CurveflatSettings(
            flatten=FlattenConfig(**flatten_kwargs),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        first = e.errors()[0]
        print_error(
            f"Invalid setting: {'.'.join(str(p) for p in first['loc'])}",
            details=first["msg"],
        )
        raise typer.Exit(code=1) from None


def _start_logging(settings: CurveflatSettings, quiet: bool) -> FlattenLogger:
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    flatten_logger = FlattenLogger(logger)
    flatten_logger.stats.start_time = time.time()
    return flatten_logger


def _finish(flatten_logger: FlattenLogger, message: str) -> None:
    flatten_logger.stats.end_time = time.time()
    print_success(message, flatten_logger.stats.duration_seconds)


@app.command()
def cubic(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    tolerance: ToleranceOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Flatten a cubic Bezier curve given by four control points."""
    settings = _build_settings(tolerance, False, log_file, log_level)
    flatten_logger = _start_logging(settings, quiet)
    tol = settings.flatten.tolerance

    if not quiet:
        print_header(__version__)
        print_step(f"Flattening cubic (tolerance {tol:g})")

    curve = CubicCurve(Point(x0, y0), Point(x1, y1), Point(x2, y2), Point(x3, y3))
    recorder = SegmentRecorder()
    try:
        decompose_cubic(curve, tol, recorder)
    except CurveflatError as e:
        flatten_logger.log_error("cubic", e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    flatten_logger.log_curve_flattened("cubic", len(recorder), tol)
    if not quiet:
        print_segments(recorder.segments)
    _finish(flatten_logger, f"{len(recorder)} segments")


@app.command()
def conic(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    weight: float,
    x3: float,
    y3: float,
    tolerance: ToleranceOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Flatten a conic given by start, control point, weight and end."""
    settings = _build_settings(tolerance, False, log_file, log_level)
    flatten_logger = _start_logging(settings, quiet)
    tol = settings.flatten.tolerance

    if not quiet:
        print_header(__version__)
        print_step(f"Flattening conic (weight {weight:g}, tolerance {tol:g})")

    recorder = SegmentRecorder()
    try:
        curve = ConicCurve(Point(x0, y0), Point(x1, y1), weight, Point(x3, y3))
        decompose_conic(curve, tol, recorder)
    except CurveflatError as e:
        flatten_logger.log_error("conic", e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    flatten_logger.log_curve_flattened("conic", len(recorder), tol)
    if not quiet:
        print_segments(recorder.segments)
    _finish(flatten_logger, f"{len(recorder)} segments")


@app.command()
def arc(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    degrees: Annotated[
        bool,
        typer.Option("--degrees", "-d", help="Angles are given in degrees"),
    ] = False,
    tolerance: ToleranceOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Approximate a circular arc by cubic Bezier curves."""
    settings = _build_settings(tolerance, True, log_file, log_level)
    flatten_logger = _start_logging(settings, quiet)
    tol = settings.flatten.arc_tolerance

    if degrees:
        start_angle = math.radians(start_angle)
        end_angle = math.radians(end_angle)

    if not quiet:
        print_header(__version__)
        print_step(f"Approximating arc (radius {radius:g}, tolerance {tol:g})")

    recorder = CurveRecorder()
    try:
        completed = decompose_arc(Point(cx, cy), radius, tol, start_angle, end_angle, recorder)
    except CurveflatError as e:
        flatten_logger.log_error("arc", e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    flatten_logger.log_arc_decomposed(len(recorder), completed)
    if not quiet:
        print_curves(recorder.curves)
    _finish(flatten_logger, f"{len(recorder)} cubics")


@app.command()
def glyph(
    font: Annotated[
        Path,
        typer.Argument(help="Path to input TTF/OTF font file", show_default=False),
    ],
    name: Annotated[
        str,
        typer.Argument(help="Glyph name, e.g. 'O' or 'ampersand'", show_default=False),
    ],
    points: Annotated[
        bool,
        typer.Option("--points", "-p", help="List every flattened point"),
    ] = False,
    tolerance: ToleranceOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Flatten a glyph outline from a font.

    The tolerance is given at 1000 UPM and scaled to the font's UPM.
    """
    if not font.is_file():
        print_error(
            f"Input file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(tolerance, False, log_file, log_level)
    flatten_logger = _start_logging(settings, quiet)

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        with FontReader(font) as reader:
            tol = settings.flatten.get_tolerance(reader.units_per_em)
            if not quiet:
                console.print(f"  {font} ({reader.format}) {reader.units_per_em} UPM")
                print_step(f"Flattening {name} (tolerance {tol:g})")
            polylines = reader.flatten_glyph(name, tol)
    except FontLoadError as e:
        flatten_logger.log_error(str(font), e)
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from None
    except CurveflatError as e:
        flatten_logger.log_error(name, e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    point_count = sum(len(p) for p in polylines)
    flatten_logger.log_glyph_flattened(name, len(polylines), point_count)
    if not quiet:
        print_polylines(name, polylines, points)
    _finish(flatten_logger, f"{len(polylines)} contours, {point_count} points")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
