"""Utility functions for curveflat.

This module provides logging setup and run statistics.
"""

from curveflat.utils.logging import (
    FlattenLogger,
    FlattenStats,
    configure_logging,
)

__all__ = [
    "FlattenLogger",
    "FlattenStats",
    "configure_logging",
]
