"""Converters between fonttools and domain models.

This module handles the conversion between fonttools ``glyf`` point data
and our domain models (Contour, Point).
"""

from collections.abc import Iterable, Sequence
from typing import Any

from fontTools.ttLib import TTFont

from glyphsvg.domain.contour import Contour, Point, PointType

# Bit 0 of a glyf point flag marks an on-curve point
FLAG_ON_CURVE = 0x01


def glyf_to_contours(
    coordinates: Iterable[tuple[float, float]],
    end_points: Sequence[int],
    flags: Sequence[int],
) -> list[Contour]:
    """Split flat glyf point data into contours.

    Args:
        coordinates: All point coordinates of the glyph, in order
        end_points: Index of the last point of each contour
        flags: Per-point flags; bit 0 set means on-curve

    Returns:
        List of Contour objects, in contour order
    """
    points = [
        Point(x, y, PointType.ON_CURVE if flag & FLAG_ON_CURVE else PointType.OFF_CURVE_QUAD)
        for (x, y), flag in zip(coordinates, flags)
    ]

    contours: list[Contour] = []
    start = 0
    for end in end_points:
        contours.append(Contour(points=points[start : end + 1]))
        start = end + 1

    return contours


def fonttools_glyph_to_contours(name: str, font: TTFont) -> list[Contour]:
    """Extract the contours of a glyf glyph, resolving composites.

    Args:
        name: Glyph name
        font: TTFont with a ``glyf`` table

    Returns:
        List of Contour objects in font units; empty for glyphs without outline
    """
    glyf_table: Any = font["glyf"]
    glyph = glyf_table[name]

    if glyph.numberOfContours == 0:
        return []

    coordinates, end_points, flags = glyph.getCoordinates(glyf_table)
    return glyf_to_contours(coordinates, end_points, flags)
