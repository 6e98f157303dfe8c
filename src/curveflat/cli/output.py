"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from curveflat.domain import CubicCurve, LineSegment, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _fmt(point: Point) -> str:
    return f"({point.x:.4g}, {point.y:.4g})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Curveflat[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_segments(segments: list[LineSegment]) -> None:
    """Print flattened line segments as a table.

    Args:
        segments: Segments in emission order
    """
    table = Table(box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("start")
    table.add_column("end")
    table.add_column("progress", justify="right")

    for i, segment in enumerate(segments):
        table.add_row(
            str(i),
            _fmt(segment.start),
            _fmt(segment.end),
            f"{segment.start_progress:.6g}–{segment.end_progress:.6g}",
        )
    console.print(table)


def print_curves(curves: list[CubicCurve]) -> None:
    """Print approximating cubics as a table.

    Args:
        curves: Cubics in emission order
    """
    table = Table(box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    for label in ("p0", "p1", "p2", "p3"):
        table.add_column(label)

    for i, curve in enumerate(curves):
        table.add_row(str(i), *(_fmt(p) for p in curve.points))
    console.print(table)


def print_polylines(glyph_name: str, polylines: list[list[Point]], show_points: bool) -> None:
    """Print flattened glyph contours.

    Args:
        glyph_name: Name of the glyph
        polylines: One point list per contour
        show_points: Whether to list every point
    """
    line = Text("  ")
    line.append(glyph_name, style="bold")
    line.append(f" {SYM_DOT} {len(polylines)} contours")
    console.print(line)

    for i, polyline in enumerate(polylines):
        console.print(f"  contour {i}: {len(polyline)} points")
        if show_points:
            console.print("    " + " ".join(_fmt(p) for p in polyline), soft_wrap=True)


def print_success(message: str, duration_s: float) -> None:
    """Print success message with timing.

    Args:
        message: Summary of what was produced
        duration_s: Elapsed time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green] in {duration_s * 1000:.1f}ms")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
