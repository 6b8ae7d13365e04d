"""Text shaping with HarfBuzz.

Shaping maps text to glyph indices and positions (cmap, GSUB and GPOS).
Positions are in font units because the HarfBuzz font keeps its default
scale of one unit per em unit.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import uharfbuzz as hb

from glyphsvg.domain.glyph import GlyphInstance
from glyphsvg.exceptions import InvalidVariationError


@dataclass(frozen=True)
class ShapedGlyph:
    """One glyph of a shaped run, in font units.

    Attributes:
        index: Glyph index in the font
        x_advance: Horizontal pen advance
        x_offset: Horizontal offset from the pen position
        y_offset: Vertical offset from the baseline
        cluster: Index of the source character cluster
    """

    index: int
    x_advance: int
    x_offset: int = 0
    y_offset: int = 0
    cluster: int = 0


def parse_variations(settings: list[str]) -> dict[str, float]:
    """Parse ``TAG=VALUE`` strings into a variation mapping.

    Example:
        >>> parse_variations(["wght=700", "wdth=75.5"])
        {'wght': 700.0, 'wdth': 75.5}

    Raises:
        InvalidVariationError: If a setting is malformed
    """
    variations: dict[str, float] = {}
    for setting in settings:
        tag, sep, value = setting.partition("=")
        tag = tag.strip()
        if not sep or not tag or len(tag) > 4:
            raise InvalidVariationError(setting)
        try:
            variations[tag] = float(value)
        except ValueError:
            raise InvalidVariationError(setting) from None
    return variations


def parse_features(settings: list[str]) -> dict[str, bool | int]:
    """Parse feature settings: ``liga``, ``-liga`` or ``salt=2``.

    Example:
        >>> parse_features(["-liga", "salt=2"])
        {'liga': False, 'salt': 2}
    """
    features: dict[str, bool | int] = {}
    for setting in settings:
        tag, sep, value = setting.partition("=")
        if sep:
            features[tag.strip()] = int(value)
        elif tag.startswith("-"):
            features[tag[1:]] = False
        else:
            features[tag.lstrip("+")] = True
    return features


class TextShaper:
    """Shapes text runs with a HarfBuzz font.

    Example:
        shaper = TextShaper(Path("font.ttf"), variations={"wght": 700})
        glyphs = shaper.shape("Hello")
    """

    def __init__(
        self,
        font_path: Path,
        variations: dict[str, float] | None = None,
    ) -> None:
        blob = hb.Blob.from_file_path(str(font_path))
        face = hb.Face(blob)
        self._font = hb.Font(face)
        if variations:
            self._font.set_variations(variations)

    def shape(
        self,
        text: str,
        features: dict[str, bool | int] | None = None,
    ) -> list[ShapedGlyph]:
        """Shape a run of text.

        Args:
            text: Text to shape
            features: OpenType feature tag to value

        Returns:
            Shaped glyphs in visual order
        """
        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        hb.shape(self._font, buf, features or {})

        return [
            ShapedGlyph(
                index=info.codepoint,
                x_advance=pos.x_advance,
                x_offset=pos.x_offset,
                y_offset=pos.y_offset,
                cluster=info.cluster,
            )
            for info, pos in zip(buf.glyph_infos, buf.glyph_positions)
        ]


def layout_instances(
    shaped: list[ShapedGlyph],
    identifier_for: Callable[[int], str],
) -> list[GlyphInstance]:
    """Turn a shaped run into placed glyph instances.

    Each glyph's origin is the running pen position plus its offset; the pen
    then moves by the glyph's advance.

    Args:
        shaped: Shaped glyphs in visual order
        identifier_for: Maps a glyph index to its stable identifier

    Returns:
        Glyph instances in placement order
    """
    instances: list[GlyphInstance] = []
    pen_x = 0
    for glyph in shaped:
        instances.append(
            GlyphInstance(
                glyph_id=identifier_for(glyph.index),
                origin_x=pen_x + glyph.x_offset,
                origin_y=glyph.y_offset,
                advance_width=glyph.x_advance,
            )
        )
        pen_x += glyph.x_advance
    return instances
