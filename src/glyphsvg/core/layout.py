"""Viewport calculation from glyph advances and font metrics."""

import math
from collections.abc import Iterable

from glyphsvg.domain import FontMetrics, GlyphInstance, Viewport
from glyphsvg.exceptions import MissingMetricsError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Matches the reference renderer; Python's ``round`` rounds halves to even.
    """
    return math.floor(value + 0.5)


def compute_viewport(
    instances: Iterable[GlyphInstance],
    ascender: float | None,
    descender: float | None,
    scale: float,
) -> Viewport:
    """Compute the document viewport in normalized units.

    Args:
        instances: Placed glyphs with origins and advances in font units
        ascender: Font ascender in font units
        descender: Font descender in font units (usually negative)
        scale: Factor from font units to normalized units

    Returns:
        Viewport with min_x 0, min_y at the scaled descender, width at the
        rightmost advance and height spanning descender to ascender

    Raises:
        MissingMetricsError: If ascender or descender is None
    """
    accumulator = BoundsAccumulator()
    for instance in instances:
        accumulator.add(instance)
    return accumulator.viewport(ascender, descender, scale)


class BoundsAccumulator:
    """Tracks the rightmost extent of placed glyphs in font units."""

    def __init__(self) -> None:
        self._right: float | None = None

    @property
    def right_extent(self) -> float | None:
        """Largest ``origin_x + advance_width`` seen, or None if empty."""
        return self._right

    def add(self, instance: GlyphInstance) -> None:
        extent = instance.origin_x + instance.advance_width
        if self._right is None or extent > self._right:
            self._right = extent

    def viewport(
        self,
        ascender: float | None,
        descender: float | None,
        scale: float,
    ) -> Viewport:
        missing = [
            name
            for name, value in (("ascender", ascender), ("descender", descender))
            if value is None
        ]
        if missing:
            raise MissingMetricsError(missing)

        width = 0 if self._right is None else round_half_up(self._right * scale)
        return Viewport(
            min_x=0,
            min_y=round_half_up(descender * scale),
            width=width,
            height=round_half_up((ascender - descender) * scale),
        )

    def viewport_for(self, metrics: FontMetrics, target_upm: int) -> Viewport:
        """Viewport for a font's metrics, scaled to ``target_upm``.

        Raises:
            MissingMetricsError: If any font-wide metric is absent
        """
        missing = metrics.missing_fields()
        if missing:
            raise MissingMetricsError(missing)
        return self.viewport(
            metrics.ascender, metrics.descender, metrics.scale_to(target_upm)
        )
