"""Path normalization.

Two independent passes make decoded outlines comparable with a reference
renderer:

- The geometric pass drops a closing ``LineTo`` that lands back on the
  contour start, which the reference renderer never emits.
- The textual pass canonicalizes the serialized ``d`` string so that token
  separation and number formatting match byte for byte.

Both passes are pure and idempotent.
"""

import math
import re
from collections.abc import Sequence

from glyphsvg.domain import Close, LineTo, MoveTo, PathCommand

DEFAULT_CLOSE_TOLERANCE = 1.0

# Serialized numbers keep at most this many decimals before the textual pass
SERIALIZE_PRECISION = 2

# Applied in order; each rule assumes the token shape left by the previous one.
_TEXT_RULES: list[tuple[re.Pattern[str], str]] = [
    # "1.5.5" -> "1.5 .5"
    (re.compile(r"(\.\d+)(?=\.\d)"), r"\1 "),
    # "10-5" -> "10 -5"
    (re.compile(r"(\d)-"), r"\1 -"),
    # "0L" -> "0 L"
    (re.compile(r"(\d)([A-Za-z])"), r"\1 \2"),
    # "ZM" -> "Z M"
    (re.compile(r"([Zz])(?=\S)"), r"\1 "),
]

_FRACTION = re.compile(r"(\d*)\.\d+")


def _closes_on_start(
    command: PathCommand,
    start: MoveTo | None,
    tolerance: float,
) -> bool:
    if not isinstance(command, LineTo) or start is None:
        return False
    return math.hypot(command.x - start.x, command.y - start.y) <= tolerance


def drop_degenerate_closes(
    commands: Sequence[PathCommand],
    tolerance: float = DEFAULT_CLOSE_TOLERANCE,
) -> list[PathCommand]:
    """Remove redundant closing line segments.

    A ``LineTo`` directly before ``Close`` is dropped when its target lies
    within ``tolerance`` of the current contour's ``MoveTo`` point. Dropping
    repeats while the new last segment qualifies too, so the result is
    already normalized.

    Args:
        commands: Commands of one or more contours
        tolerance: Maximum distance to the contour start, in the units of
            the commands

    Returns:
        New command list; the input is not modified
    """
    result: list[PathCommand] = []
    start: MoveTo | None = None

    for command in commands:
        if isinstance(command, MoveTo):
            start = command
        elif isinstance(command, Close):
            while result and _closes_on_start(result[-1], start, tolerance):
                result.pop()
        result.append(command)

    return result


def format_number(value: float, precision: int = SERIALIZE_PRECISION) -> str:
    """Format a coordinate without exponent notation or trailing zeros.

    Example:
        >>> format_number(12.0)
        '12'
        >>> format_number(-0.5)
        '-0.5'
    """
    rounded = round(value, precision)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{precision}f}".rstrip("0").rstrip(".")


def serialize_commands(commands: Sequence[PathCommand]) -> str:
    """Serialize commands in compact form, e.g. ``M0 0L10 0Z``."""
    return "".join(
        command.letter + " ".join(format_number(arg) for arg in command.args)
        for command in commands
    )


def _strip_fraction(match: re.Match[str]) -> str:
    return match.group(1) or "0"


def normalize_path_text(text: str) -> str:
    """Canonicalize a serialized path string.

    Separates adjacent numbers, splits a minus sign from a preceding digit,
    separates digits from command letters and ``Z`` from whatever follows it,
    then drops fractional parts of all numbers.
    """
    for pattern, replacement in _TEXT_RULES:
        text = pattern.sub(replacement, text)
    return _FRACTION.sub(_strip_fraction, text)


def normalize_commands(
    commands: Sequence[PathCommand],
    tolerance: float = DEFAULT_CLOSE_TOLERANCE,
) -> list[PathCommand]:
    """Geometric pass over a command sequence."""
    return drop_degenerate_closes(commands, tolerance)


def normalize(
    value: "str | Sequence[PathCommand]",
    tolerance: float = DEFAULT_CLOSE_TOLERANCE,
) -> "str | list[PathCommand]":
    """Normalize either serialized path text or a command sequence.

    Strings go through the textual pass, command sequences through the
    geometric pass.
    """
    if isinstance(value, str):
        return normalize_path_text(value)
    return normalize_commands(value, tolerance)


def to_path_data(
    commands: Sequence[PathCommand],
    tolerance: float = DEFAULT_CLOSE_TOLERANCE,
) -> str:
    """Run both passes and return the final ``d`` attribute value."""
    return normalize_path_text(serialize_commands(normalize_commands(commands, tolerance)))
