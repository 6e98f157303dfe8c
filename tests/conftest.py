"""Shared fixtures: small fonts built on the fly with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

ADVANCE_WIDTH = 600


def _draw_bar(pen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((200, 700))
    pen.lineTo((200, 0))
    pen.closePath()


def _draw_quadratic_ring(pen) -> None:
    pen.moveTo((300, 0))
    pen.qCurveTo((600, 0), (600, 350))
    pen.qCurveTo((600, 700), (300, 700))
    pen.qCurveTo((0, 700), (0, 350))
    pen.qCurveTo((0, 0), (300, 0))
    pen.closePath()

    pen.moveTo((300, 100))
    pen.qCurveTo((100, 100), (100, 350))
    pen.qCurveTo((100, 600), (300, 600))
    pen.qCurveTo((500, 600), (500, 350))
    pen.qCurveTo((500, 100), (300, 100))
    pen.closePath()


def _draw_cubic_oval(pen) -> None:
    pen.moveTo((300, 0))
    pen.curveTo((465, 0), (600, 157), (600, 350))
    pen.curveTo((600, 543), (465, 700), (300, 700))
    pen.curveTo((135, 700), (0, 543), (0, 350))
    pen.curveTo((0, 157), (135, 0), (300, 0))
    pen.closePath()


def _finish_font(fb: FontBuilder, lsb: dict[str, int], path: Path) -> Path:
    fb.setupHorizontalMetrics({name: (ADVANCE_WIDTH, value) for name, value in lsb.items()})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Curveflat Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


def build_truetype_font(path: Path, units_per_em: int = 1000) -> Path:
    """Write a TrueType font with glyphs I (bar), O (quadratic ring) and II (composite)."""
    fb = FontBuilder(units_per_em, isTTF=True)
    glyph_order = [".notdef", "I", "O", "II"]
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("I"): "I", ord("O"): "O"})

    glyphs = {".notdef": TTGlyphPen(None).glyph()}

    pen = TTGlyphPen(None)
    _draw_bar(pen)
    glyphs["I"] = pen.glyph()

    pen = TTGlyphPen(None)
    _draw_quadratic_ring(pen)
    glyphs["O"] = pen.glyph()

    pen = TTGlyphPen(glyphs)
    pen.addComponent("I", (1, 0, 0, 1, 0, 0))
    pen.addComponent("I", (1, 0, 0, 1, 300, 0))
    glyphs["II"] = pen.glyph()

    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    lsb = {name: getattr(glyf[name], "xMin", 0) for name in glyph_order}
    return _finish_font(fb, lsb, path)


def build_cff_font(path: Path) -> Path:
    """Write a CFF-flavored OpenType font whose O is drawn with cubics."""
    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder([".notdef", "O"])
    fb.setupCharacterMap({ord("O"): "O"})

    charstrings = {}
    pen = T2CharStringPen(ADVANCE_WIDTH, None)
    _draw_bar(pen)
    charstrings[".notdef"] = pen.getCharString()

    pen = T2CharStringPen(ADVANCE_WIDTH, None)
    _draw_cubic_oval(pen)
    charstrings["O"] = pen.getCharString()

    fb.setupCFF("CurveflatTest-Regular", {"FullName": "Curveflat Test"}, charstrings, {})
    lsb = {name: cs.calcBounds(None)[0] for name, cs in charstrings.items()}
    return _finish_font(fb, lsb, path)


@pytest.fixture
def ttf_font(tmp_path: Path) -> Path:
    """Path to a freshly built TrueType test font at 1000 UPM."""
    return build_truetype_font(tmp_path / "CurveflatTest.ttf")


@pytest.fixture
def ttf_font_2048(tmp_path: Path) -> Path:
    """Same outlines as ttf_font, at 2048 UPM."""
    return build_truetype_font(tmp_path / "CurveflatTest-2048.ttf", units_per_em=2048)


@pytest.fixture
def cff_font(tmp_path: Path) -> Path:
    """Path to a freshly built CFF test font."""
    return build_cff_font(tmp_path / "CurveflatTest.otf")
