"""Configuration management for curveflat.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlattenConfig: Tolerance settings
- LoggingConfig: Logging settings
- CurveflatSettings: Main application settings
"""

from curveflat.config.settings import (
    CurveflatSettings,
    FlattenConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "CurveflatSettings",
    "FlattenConfig",
    "LoggingConfig",
    "get_default_settings",
]
