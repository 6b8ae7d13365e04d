"""Font reader for loading TrueType fonts.

This module provides the FontReader class for loading font files and
extracting glyph points and metrics into domain models.
"""

from pathlib import Path

from fontTools.ttLib import TTFont
from fontTools.varLib import instancer

from glyphsvg.domain.contour import Contour
from glyphsvg.domain.glyph import FontMetrics
from glyphsvg.exceptions import FontFormatError, GlyphNotFoundError
from glyphsvg.io.converter import fonttools_glyph_to_contours
from glyphsvg.utils import get_logger


class FontReader:
    """Loads TrueType fonts and extracts glyph data.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load(variations={"wght": 700})
        contours = reader.glyph_contours("a")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._logger = get_logger()

    def load(self, variations: dict[str, float] | None = None) -> None:
        """Load the font file.

        Args:
            variations: Axis tag to value; applied to variable fonts by
                instancing, ignored for static fonts

        Raises:
            FileNotFoundError: If font file does not exist
            FontFormatError: If the font has no quadratic glyf outlines
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

        if "glyf" not in self._font:
            raise FontFormatError(
                str(self._font_path), "no 'glyf' table (only TrueType outlines are supported)"
            )

        if variations:
            self._apply_variations(variations)

    def _apply_variations(self, variations: dict[str, float]) -> None:
        font = self._require_font()
        if "fvar" not in font:
            self._logger.warning(
                "Ignoring variations for static font",
                font=str(self._font_path),
                variations=variations,
            )
            return

        axis_tags = {axis.axisTag for axis in font["fvar"].axes}  # type: ignore[attr-defined]
        unknown = sorted(set(variations) - axis_tags)
        if unknown:
            self._logger.warning("Ignoring unknown variation axes", axes=unknown)

        location = {tag: value for tag, value in variations.items() if tag in axis_tags}
        if location:
            self._font = instancer.instantiateVariableFont(font, location)
            self._logger.debug("Instanced variable font", location=location)

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def font_path(self) -> Path:
        return self._font_path

    @property
    def format(self) -> str:
        """Return a short description of the outline format.

        Only glyf fonts get past ``load``, so this distinguishes static from
        variable TrueType.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if "fvar" in self._require_font():
            return "TrueType (variable)"
        return "TrueType"

    @property
    def units_per_em(self) -> int | None:
        """Return font's units per em, or None without a head table."""
        font = self._require_font()
        if "head" not in font:
            return None
        return font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def metrics(self) -> FontMetrics:
        """Return font-wide vertical metrics from the hhea table.

        Fields the font lacks are None.
        """
        font = self._require_font()
        ascender = descender = None
        if "hhea" in font:
            hhea = font["hhea"]
            ascender = hhea.ascent  # type: ignore[attr-defined]
            descender = hhea.descent  # type: ignore[attr-defined]
        return FontMetrics(
            units_per_em=self.units_per_em,
            ascender=ascender,
            descender=descender,
        )

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return len(self._require_font().getGlyphOrder())

    def glyph_name(self, index: int) -> str | None:
        """Return the name of the glyph at a glyph index, or None if out of range."""
        glyph_order = self._require_font().getGlyphOrder()
        if 0 <= index < len(glyph_order):
            return glyph_order[index]
        return None

    def glyph_contours(self, name: str) -> list[Contour]:
        """Get the contours of a glyph in font units.

        Raises:
            GlyphNotFoundError: If the glyph does not exist
        """
        font = self._require_font()
        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)
        return fonttools_glyph_to_contours(name, font)

    def close(self) -> None:
        """Close the font file and free resources."""
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
