"""Render document types.

The document is the externally observable result of one render: outline
definitions in first-seen order and placements in call order.
"""

from dataclasses import dataclass, field

from glyphsvg.domain.glyph import GlyphOutline


@dataclass(frozen=True)
class Placement:
    """A positioned reference to a defined glyph outline."""

    glyph_id: str
    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    """Document coordinate viewport in normalized units."""

    min_x: int
    min_y: int
    width: int
    height: int

    def to_view_box(self) -> str:
        """Format as an SVG ``viewBox`` attribute value."""
        return f"{self.min_x} {self.min_y} {self.width} {self.height}"


@dataclass
class RenderDocument:
    """Deduplicated glyph definitions plus ordered placements.

    ``definitions`` relies on dict insertion order for first-seen order.

    Attributes:
        definitions: Glyph identifier to decoded outline
        placements: Placement references in call order
    """

    definitions: dict[str, GlyphOutline] = field(default_factory=dict)
    placements: list[Placement] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if nothing was placed."""
        return not self.placements
