"""Quadratic outline decoding.

Turns the compact TrueType point encoding into explicit path commands.
On-curve points are segment endpoints, off-curve points are quadratic
control points, and two consecutive off-curve points imply an on-curve
point halfway between them.

Decoding threads a two-state machine through the contour:

- ``NO_PENDING``: the last emitted position is on the outline
- ``Pending(control)``: a control point is waiting for its endpoint

Each (previous point, current point) pair selects exactly one transition.
Anything else means the data is not a quadratic outline and decoding fails
with ``MalformedContourError``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from glyphsvg.domain import (
    Close,
    Contour,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    PointType,
    QuadCurveTo,
)
from glyphsvg.exceptions import MalformedContourError


class NoPending:
    """No control point is waiting."""

    _instance: "NoPending | None" = None

    def __new__(cls) -> "NoPending":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_PENDING"


NO_PENDING = NoPending()


@dataclass(frozen=True, slots=True)
class Pending:
    """A control point waiting for the on-curve point that ends its curve."""

    control: Point


DecoderState = NoPending | Pending


def _check_point(point: Point, contour_index: int | None, glyph_name: str | None) -> None:
    if point.point_type == PointType.OFF_CURVE_CUBIC:
        raise MalformedContourError(
            f"cubic control point at ({point.x}, {point.y}) in a quadratic outline",
            glyph_name=glyph_name,
            contour_index=contour_index,
        )


def _start_state(points: Sequence[Point]) -> tuple[Point, int]:
    """Pick the on-curve start point and the first index to walk.

    When the first point is on-curve it is the start and the walk begins at
    index 1. Otherwise the start is the last point (if on-curve) or the
    midpoint of the first and last points, and the walk begins at index 0
    so that the first point becomes the pending control.
    """
    first = points[0]
    if first.on_curve:
        return first, 1

    last = points[-1]
    if last.on_curve:
        return last, 0
    return first.midpoint(last), 0


def step(
    state: DecoderState,
    prev: Point,
    point: Point,
) -> tuple[DecoderState, PathCommand | None]:
    """Advance the decoder by one point.

    Args:
        state: Current pending-control state
        prev: Previous point (possibly synthesized)
        point: Point being consumed

    Returns:
        Tuple of (new state, command to emit or None)

    Raises:
        MalformedContourError: If the transition cannot occur in valid data
    """
    if prev.on_curve and point.on_curve:
        return state, LineTo(point.x, point.y)

    if prev.on_curve and not point.on_curve:
        return Pending(point), None

    if not prev.on_curve and not point.on_curve:
        mid = prev.midpoint(point)
        return Pending(point), QuadCurveTo(prev.x, prev.y, mid.x, mid.y)

    if isinstance(state, Pending):
        return NO_PENDING, QuadCurveTo(state.control.x, state.control.y, point.x, point.y)

    raise MalformedContourError(
        f"on-curve point at ({point.x}, {point.y}) follows an off-curve point "
        "with no pending control point"
    )


def decode_contour(
    contour: Contour,
    glyph_name: str | None = None,
    contour_index: int | None = None,
) -> list[PathCommand]:
    """Decode one contour into path commands.

    Args:
        contour: Contour in font units
        glyph_name: Glyph identifier for error context
        contour_index: Index of the contour within the glyph, for error context

    Returns:
        Commands starting with MoveTo and ending with Close

    Raises:
        MalformedContourError: If the contour is empty or not quadratic
    """
    points = contour.points
    if not points:
        raise MalformedContourError(
            "contour has no points",
            glyph_name=glyph_name,
            contour_index=contour_index,
        )

    for point in points:
        _check_point(point, contour_index, glyph_name)

    start, first_index = _start_state(points)
    commands: list[PathCommand] = [MoveTo(start.x, start.y)]
    state: DecoderState = NO_PENDING

    for i in range(first_index, len(points)):
        prev = start if i == 0 else points[i - 1]
        try:
            state, command = step(state, prev, points[i])
        except MalformedContourError as e:
            raise MalformedContourError(
                f"{e.reason} (point {i})",
                glyph_name=glyph_name,
                contour_index=contour_index,
            ) from e
        if command is not None:
            commands.append(command)

    if isinstance(state, Pending):
        commands.append(QuadCurveTo(state.control.x, state.control.y, start.x, start.y))

    commands.append(Close())
    return commands


def decode_glyph(
    contours: Sequence[Contour],
    glyph_name: str | None = None,
) -> list[list[PathCommand]]:
    """Decode every contour of a glyph.

    Returns:
        One command group per contour, in contour order
    """
    return [
        decode_contour(contour, glyph_name=glyph_name, contour_index=idx)
        for idx, contour in enumerate(contours)
    ]
