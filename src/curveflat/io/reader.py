"""Font reader for flattening glyph outlines from TTF/OTF fonts.

This module provides the FontReader class for loading font files and
turning named glyphs into polylines.
"""

from pathlib import Path

from fontTools.pens.recordingPen import RecordingPen
from fontTools.ttLib import TTFont

from curveflat.domain import Point
from curveflat.exceptions import FontLoadError, GlyphNotFoundError
from curveflat.io.pen import FlatteningPen, recording_to_polylines


class FontReader:
    """Loads TTF/OTF fonts and flattens their glyphs.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            contours = reader.flatten_glyph("O", tolerance=0.5)
    """

    def __init__(self, font_path: Path) -> None:
        """Create a reader; the file is opened by load().

        Args:
            font_path: TTF or OTF file to read outlines from
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Open and parse the font.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If font file cannot be parsed
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf-based fonts, 'OpenType' for CFF-based fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Units per em, from the head table.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Number of glyphs, from the maxp table.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    def glyph_names(self) -> list[str]:
        """Return glyph names in font order."""
        return list(self._require_font().getGlyphOrder())

    def flatten_glyph(self, name: str, tolerance: float) -> list[list[Point]]:
        """Flatten a glyph outline into polylines.

        Components are decomposed; quadratic and cubic segments are
        flattened with the given tolerance.

        Args:
            name: Glyph name
            tolerance: Flattening tolerance in font units

        Returns:
            One point list per contour, closed contours ending on their
            first point

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no glyph with that name
        """
        glyph_set = self._require_font().getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        recording = RecordingPen()
        pen = FlatteningPen(recording, tolerance, glyphSet=glyph_set)
        glyph_set[name].draw(pen)

        return recording_to_polylines(recording.value)

    def close(self) -> None:
        """Release the underlying TTFont."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
