"""Glyph representation and font-wide metrics.

This module defines the glyph-level domain models handed between the font
collaborator and the rendering core:
- GlyphInstance: one glyph placed at a pen position
- GlyphOutline: decoded and normalized path commands for one glyph
- FontMetrics: font-wide vertical metrics used for the viewport
"""

from dataclasses import dataclass, field
from typing import Any

from glyphsvg.domain.path import PathCommand, command_from_dict, command_to_dict


@dataclass(frozen=True)
class GlyphInstance:
    """A glyph placed once in reading order.

    Attributes:
        glyph_id: Stable glyph identifier (see ``resolve_identifier``)
        origin_x: Pen X position in font units
        origin_y: Pen Y position in font units
        advance_width: Horizontal advance in font units
    """

    glyph_id: str
    origin_x: float
    origin_y: float
    advance_width: float


@dataclass
class GlyphOutline:
    """Decoded outline of one glyph, one command group per contour.

    Attributes:
        glyph_id: Identifier the outline is defined under
        contours: Command groups, each MoveTo ... Close
    """

    glyph_id: str
    contours: list[list[PathCommand]] = field(default_factory=list)

    @property
    def commands(self) -> list[PathCommand]:
        """All commands of the outline, contours concatenated."""
        return [command for group in self.contours for command in group]

    def is_empty(self) -> bool:
        """Check if the outline draws nothing (e.g. a space)."""
        return len(self.contours) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "glyph_id": self.glyph_id,
            "contours": [
                [command_to_dict(c) for c in group] for group in self.contours
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphOutline":
        """Deserialize from dictionary."""
        return cls(
            glyph_id=data["glyph_id"],
            contours=[
                [command_from_dict(c) for c in group] for group in data["contours"]
            ],
        )


@dataclass(frozen=True)
class FontMetrics:
    """Font-wide metrics in font units.

    Any field may be None when the font does not provide it; the viewport
    calculation rejects such metrics with ``MissingMetricsError``.

    Attributes:
        units_per_em: Font design grid size
        ascender: Distance from baseline to the top of the line
        descender: Distance from baseline to the bottom (usually negative)
    """

    units_per_em: int | None
    ascender: float | None
    descender: float | None

    def missing_fields(self) -> list[str]:
        """Names of metrics that are absent or unusable."""
        missing = []
        if not self.units_per_em:
            missing.append("units_per_em")
        if self.ascender is None:
            missing.append("ascender")
        if self.descender is None:
            missing.append("descender")
        return missing

    def scale_to(self, target_upm: int) -> float:
        """Factor converting font units to a target units-per-em grid."""
        if not self.units_per_em:
            return 1.0
        return target_upm / self.units_per_em
