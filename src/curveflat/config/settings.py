"""Configuration settings for Curveflat."""

from pathlib import Path

from pydantic import BaseModel, Field


class FlattenConfig(BaseModel):
    """Configuration for curve flattening with scale-relative tolerances.

    Tolerances are given in output units. For glyph outlines they are
    specified at a reference UPM of 1000 and scaled proportionally for fonts
    with different UPM values.
    """

    reference_upm: int = Field(
        default=1000,
        gt=0,
        description="Reference UPM for tolerance values",
    )
    tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=100.0,
        description="Maximum deviation of flattened segments from cubic and conic curves",
    )
    arc_tolerance: float = Field(
        default=0.1,
        gt=0.0,
        le=100.0,
        description="Maximum deviation of approximating cubics from circular arcs",
    )

    def scale_tolerance(self, base_value: float, upm: int) -> float:
        """Scale a tolerance value for the given UPM.

        Args:
            base_value: The tolerance value at reference UPM
            upm: The actual UPM of the font

        Returns:
            Scaled tolerance value
        """
        return base_value * (upm / self.reference_upm)

    def get_tolerance(self, upm: int) -> float:
        """Get curve flattening tolerance scaled for UPM."""
        return self.scale_tolerance(self.tolerance, upm)

    def get_arc_tolerance(self, upm: int) -> float:
        """Get arc approximation tolerance scaled for UPM."""
        return self.scale_tolerance(self.arc_tolerance, upm)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CurveflatSettings(BaseModel):
    """Main application settings."""

    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CurveflatSettings:
    """Get default application settings."""
    return CurveflatSettings()
