"""Command-line interface for curveflat.

This module provides the CLI using Typer with rich output:

- cubic / conic: Flatten a single curve and list its segments
- arc: Approximate a circular arc by cubics
- glyph: Flatten a glyph outline from a TTF/OTF font
"""

from curveflat.cli.app import cli, main

__all__ = ["cli", "main"]
