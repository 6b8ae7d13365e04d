"""Core rendering algorithms for glyphsvg.

This module contains the core algorithms for:

- Outline decoding (on/off-curve points to path commands)
- Path normalization (degenerate closes, canonical path text)
- Glyph composition (identifier resolution, deduplicated definitions)
- Layout (viewport from advances and font metrics)

All functions are pure computations over in-memory data. The render
orchestrator lives in ``glyphsvg.core.renderer`` because it depends on the
I/O layer.

Key functions:
- decode_contour: Decode one contour into path commands
- decode_glyph: Decode all contours of a glyph
- drop_degenerate_closes: Geometric normalization pass
- normalize_path_text: Textual normalization pass
- resolve_identifier: Stable glyph identifier from name and index
- compute_viewport: Viewport from placements and metrics

Key classes:
- GlyphCompositor: Per-render glyph cache and placement list
- BoundsAccumulator: Rightmost extent tracking
"""

from glyphsvg.core.compositor import (
    GlyphCompositor,
    build_outline,
    resolve_identifier,
)
from glyphsvg.core.decoder import NO_PENDING, Pending, decode_contour, decode_glyph
from glyphsvg.core.layout import BoundsAccumulator, compute_viewport, round_half_up
from glyphsvg.core.normalizer import (
    drop_degenerate_closes,
    format_number,
    normalize,
    normalize_commands,
    normalize_path_text,
    serialize_commands,
    to_path_data,
)

__all__ = [
    # Layout
    "BoundsAccumulator",
    # Compositor
    "GlyphCompositor",
    # Decoder states
    "NO_PENDING",
    "Pending",
    "build_outline",
    "compute_viewport",
    # Decoder functions
    "decode_contour",
    "decode_glyph",
    # Normalizer functions
    "drop_degenerate_closes",
    "format_number",
    "normalize",
    "normalize_commands",
    "normalize_path_text",
    "resolve_identifier",
    "round_half_up",
    "serialize_commands",
    "to_path_data",
]
