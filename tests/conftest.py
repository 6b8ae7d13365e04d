"""Shared fixtures: small TrueType fonts built with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200

ADVANCES = {
    ".notdef": 500,
    "space": 250,
    "A": 500,
    "B": 600,
    "O": 700,
}


def _notdef():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def _quad_a():
    # On, off, on: a single quadratic arch
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((250, 700), (500, 0))
    pen.closePath()
    return pen.glyph()


def _square_b():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 600))
    pen.lineTo((600, 600))
    pen.lineTo((600, 0))
    pen.closePath()
    return pen.glyph()


def _all_off_o():
    # Contour made only of off-curve points
    pen = TTGlyphPen(None)
    pen.qCurveTo((0, 0), (100, 0), (100, 100), (0, 100), None)
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Build a TrueType font with quadratic, linear and off-curve-only glyphs."""
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    glyph_order = list(ADVANCES)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(" "): "space", ord("A"): "A", ord("B"): "B", ord("O"): "O"})

    glyphs = {
        ".notdef": _notdef(),
        "space": TTGlyphPen(None).glyph(),
        "A": _quad_a(),
        "B": _square_b(),
        "O": _all_off_o(),
    }
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (advance, 0) for name, advance in ADVANCES.items()})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=abs(DESCENT),
    )
    fb.setupNameTable({"familyName": "Glyphsvg Test", "styleName": "Regular"})
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_test_font(tmp_path / "GlyphsvgTest-Regular.ttf")
