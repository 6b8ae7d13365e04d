"""Core point types for contour representation.

This module defines the point-level types produced by the font collaborator:
- PointType: Enum for point type on a curve
- Point: A 2D point with curve type information
- Contour: A closed contour as ordered points
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class PointType(Enum):
    """Point type on a contour.

    Points can be:
    - ON_CURVE: Point on the actual outline
    - OFF_CURVE_QUAD: Quadratic Bezier control point (TrueType)
    - OFF_CURVE_CUBIC: Cubic Bezier control point (PostScript/CFF)

    Only the first two occur in glyf outlines. Cubic control points are kept
    so that foreign data is rejected by the decoder instead of misread.
    """

    ON_CURVE = auto()
    OFF_CURVE_QUAD = auto()
    OFF_CURVE_CUBIC = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with curve metadata.

    Immutable and hashable. The decoder synthesizes new points (implied
    midpoints) but never changes the tag of a point it was given.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        point_type: Type of point (on-curve or control point)
    """

    x: float
    y: float
    point_type: PointType = PointType.ON_CURVE

    @property
    def on_curve(self) -> bool:
        """Whether the point lies on the outline."""
        return self.point_type == PointType.ON_CURVE

    def midpoint(self, other: "Point") -> "Point":
        """Return the on-curve point halfway between this point and another."""
        return Point(
            (self.x + other.x) / 2,
            (self.y + other.y) / 2,
            PointType.ON_CURVE,
        )

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x, y, and type fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "type": self.point_type.value
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, and type fields

        Returns:
            Point instance
        """
        return cls(
            x=data["x"],
            y=data["y"],
            point_type=PointType(data["type"])
        )


def on_point(x: float, y: float) -> Point:
    """Shorthand for an on-curve point."""
    return Point(x, y, PointType.ON_CURVE)


def off_point(x: float, y: float) -> Point:
    """Shorthand for a quadratic off-curve control point."""
    return Point(x, y, PointType.OFF_CURVE_QUAD)


@dataclass(frozen=True)
class Contour:
    """A closed contour: one loop of a glyph outline.

    The last point implicitly connects back to the first. A contour made only
    of off-curve points is legal and resolves through implied midpoints.

    Attributes:
        points: Points forming the contour, in drawing order
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary."""
        return cls(points=[Point.from_dict(p) for p in data["points"]])
