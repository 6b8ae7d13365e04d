"""Glyph instance composition.

The compositor owns the per-render glyph cache. Each distinct glyph
identifier is decoded and normalized once, in first-seen order; every
placement is recorded in call order. Identity is by identifier only: two
glyphs sharing an identifier within one render are assumed to share an
outline.
"""

import re
from collections.abc import Callable, Sequence
from typing import Any

from glyphsvg.core.decoder import decode_glyph
from glyphsvg.core.layout import BoundsAccumulator
from glyphsvg.core.normalizer import DEFAULT_CLOSE_TOLERANCE, normalize_commands
from glyphsvg.domain import (
    Contour,
    GlyphInstance,
    GlyphOutline,
    Placement,
    RenderDocument,
    scale_commands,
)
from glyphsvg.exceptions import MalformedContourError
from glyphsvg.utils import RenderLogger

# Names fontTools and harfbuzz synthesize for glyphs without a post table name
PLACEHOLDER_NAME = re.compile(r"(?:glyph|gid)\d+")


def resolve_identifier(name: str | None, index: int) -> str:
    """Stable identifier for a glyph.

    Uses the glyph name unless it is missing or a generic numbered
    placeholder, in which case ``gid<index>`` is used.

    Example:
        >>> resolve_identifier("uni0936", 12)
        'uni0936'
        >>> resolve_identifier("glyph00012", 12)
        'gid12'
    """
    if name and not PLACEHOLDER_NAME.fullmatch(name):
        return name
    return f"gid{index}"


def build_outline(
    glyph_id: str,
    contours: Sequence[Contour],
    scale: float = 1.0,
    tolerance: float = DEFAULT_CLOSE_TOLERANCE,
) -> GlyphOutline:
    """Decode, scale and normalize the contours of one glyph.

    Args:
        glyph_id: Identifier used for the definition and error context
        contours: Contours in font units
        scale: Factor from font units to normalized units
        tolerance: Degenerate-close tolerance in normalized units

    Returns:
        GlyphOutline with one normalized command group per contour

    Raises:
        MalformedContourError: If any contour cannot be decoded
    """
    groups = decode_glyph(contours, glyph_name=glyph_id)
    return GlyphOutline(
        glyph_id=glyph_id,
        contours=[
            normalize_commands(scale_commands(group, scale), tolerance)
            for group in groups
        ],
    )


def build_outline_from_dict(
    glyph_id: str,
    contour_dicts: list[dict[str, Any]],
    scale: float,
    tolerance: float,
) -> dict[str, Any]:
    """Build an outline from serialized contours.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor.
    """
    contours = [Contour.from_dict(c) for c in contour_dicts]
    return build_outline(glyph_id, contours, scale, tolerance).to_dict()


class GlyphCompositor:
    """Per-render context deduplicating glyph outlines.

    Example:
        compositor = GlyphCompositor(contours_for=glyph_contours.__getitem__)
        compositor.place("a", 0, 0, 500)
        compositor.place("a", 500, 0, 500)
        document = compositor.document  # one definition, two placements
    """

    def __init__(
        self,
        contours_for: Callable[[str], Sequence[Contour]],
        scale: float = 1.0,
        tolerance: float = DEFAULT_CLOSE_TOLERANCE,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the compositor.

        Args:
            contours_for: Returns the contours (font units) of a glyph identifier;
                only called on the first occurrence of each identifier
            scale: Factor from font units to normalized units
            tolerance: Degenerate-close tolerance in normalized units
            render_logger: Logger collecting render statistics
        """
        self._contours_for = contours_for
        self._scale = scale
        self._tolerance = tolerance
        self._logger = render_logger if render_logger is not None else RenderLogger()
        self._document = RenderDocument()
        self._bounds = BoundsAccumulator()
        self._placed: set[str] = set()

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def document(self) -> RenderDocument:
        """The document built so far."""
        return self._document

    @property
    def bounds(self) -> BoundsAccumulator:
        """Rightmost extent of all placements, in font units."""
        return self._bounds

    def is_defined(self, glyph_id: str) -> bool:
        """Check if an outline is already defined for the identifier."""
        return glyph_id in self._document.definitions

    def define(self, outline: GlyphOutline) -> bool:
        """Add a prebuilt outline unless the identifier is already defined.

        Returns:
            True if the outline was added
        """
        if self.is_defined(outline.glyph_id):
            return False
        self._document.definitions[outline.glyph_id] = outline
        self._logger.log_glyph_defined(
            outline.glyph_id, len(outline.contours), len(outline.commands)
        )
        return True

    def place(self, glyph_id: str, x: float, y: float, advance_width: float) -> None:
        """Place a glyph at a pen position given in font units.

        Decodes the glyph on its first occurrence, then records a placement.

        Raises:
            MalformedContourError: If the glyph's outline cannot be decoded
        """
        reused = glyph_id in self._placed
        if not self.is_defined(glyph_id):
            try:
                outline = build_outline(
                    glyph_id,
                    self._contours_for(glyph_id),
                    self._scale,
                    self._tolerance,
                )
            except MalformedContourError as e:
                self._logger.log_glyph_error(glyph_id, e)
                raise
            self.define(outline)

        placement = Placement(glyph_id, x * self._scale, y * self._scale)
        self._document.placements.append(placement)
        self._bounds.add(GlyphInstance(glyph_id, x, y, advance_width))
        self._placed.add(glyph_id)
        self._logger.log_glyph_placed(glyph_id, placement.x, placement.y, reused)

    def place_instance(self, instance: GlyphInstance) -> None:
        """Place a ``GlyphInstance``."""
        self.place(
            instance.glyph_id,
            instance.origin_x,
            instance.origin_y,
            instance.advance_width,
        )
