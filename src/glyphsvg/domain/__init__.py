"""Domain models for glyphsvg.

This module contains the domain models representing glyph points, decoded
path commands, placed glyph instances and the render document. All models
are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel decoding)
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point with on/off-curve metadata
- Contour: A closed loop of points
- MoveTo, LineTo, QuadCurveTo, Close: Path commands
- GlyphInstance: A glyph placed at a pen position
- GlyphOutline: Decoded commands for one glyph
- RenderDocument: Definitions and placements of one render
"""

from glyphsvg.domain.contour import Contour, Point, PointType, off_point, on_point
from glyphsvg.domain.document import Placement, RenderDocument, Viewport
from glyphsvg.domain.glyph import FontMetrics, GlyphInstance, GlyphOutline
from glyphsvg.domain.path import (
    Close,
    LineTo,
    MoveTo,
    PathCommand,
    QuadCurveTo,
    scale_commands,
)

__all__: list[str] = [
    # Enums
    "PointType",
    # Point types
    "Point",
    "Contour",
    "off_point",
    "on_point",
    # Path commands
    "Close",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadCurveTo",
    "scale_commands",
    # Glyph and document types
    "FontMetrics",
    "GlyphInstance",
    "GlyphOutline",
    "Placement",
    "RenderDocument",
    "Viewport",
]
