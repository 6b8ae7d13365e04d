"""Font I/O layer for glyphsvg.

This module handles reading fonts with fonttools, shaping text with
HarfBuzz and writing SVG documents. It provides a clean abstraction layer
between those libraries and the domain models.

Key responsibilities:
- Load TrueType fonts, optionally instancing variable fonts
- Convert glyf point data to domain contours
- Shape text into positioned glyph instances
- Serialize render documents as SVG

Key classes:
- FontReader: Load fonts and extract contours and metrics
- TextShaper: Shape text with uharfbuzz
- SvgWriter: Write render documents
"""

from glyphsvg.io.reader import FontReader
from glyphsvg.io.shaper import (
    ShapedGlyph,
    TextShaper,
    layout_instances,
    parse_features,
    parse_variations,
)
from glyphsvg.io.writer import SvgWriter

__all__ = [
    "FontReader",
    "ShapedGlyph",
    "SvgWriter",
    "TextShaper",
    "layout_instances",
    "parse_features",
    "parse_variations",
]
