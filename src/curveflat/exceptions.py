"""Exception hierarchy for Curveflat."""


class CurveflatError(Exception):
    """Base exception for all Curveflat errors."""

    pass


class GeometryError(CurveflatError):
    """Errors in geometric input."""

    pass


class InvalidCurveError(GeometryError):
    """Curve control data cannot describe a valid curve."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind} curve: {reason}")


class InvalidToleranceError(GeometryError):
    """Tolerance value cannot be used for decomposition."""

    def __init__(self, tolerance: float, reason: str) -> None:
        self.tolerance = tolerance
        self.reason = reason
        super().__init__(f"Invalid tolerance {tolerance!r}: {reason}")


class ProgressInvariantError(CurveflatError, AssertionError):
    """Decomposition finished with inconsistent progress.

    Raised by the progress tracker when the emitted segments do not end on
    the curve's final point or do not cover the whole parameter range. This
    signals a bug in the decomposition itself and is never caught inside
    the package.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FontError(CurveflatError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
