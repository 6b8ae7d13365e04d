"""Path command types.

A decoded contour is a sequence of commands that starts with ``MoveTo``,
continues with any number of ``LineTo``/``QuadCurveTo`` and ends with
``Close``. Commands are immutable; scaling returns new commands.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new contour at (x, y)."""

    x: float
    y: float

    letter = "M"

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x, self.y)

    def scaled(self, factor: float) -> "MoveTo":
        return MoveTo(self.x * factor, self.y * factor)


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment to (x, y)."""

    x: float
    y: float

    letter = "L"

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x, self.y)

    def scaled(self, factor: float) -> "LineTo":
        return LineTo(self.x * factor, self.y * factor)


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier segment through control (cx, cy) to (x, y)."""

    cx: float
    cy: float
    x: float
    y: float

    letter = "Q"

    @property
    def args(self) -> tuple[float, ...]:
        return (self.cx, self.cy, self.x, self.y)

    def scaled(self, factor: float) -> "QuadCurveTo":
        return QuadCurveTo(
            self.cx * factor, self.cy * factor, self.x * factor, self.y * factor
        )


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current contour back to its start."""

    letter = "Z"

    @property
    def args(self) -> tuple[float, ...]:
        return ()

    def scaled(self, factor: float) -> "Close":  # noqa: ARG002
        return self


PathCommand = Union[MoveTo, LineTo, QuadCurveTo, Close]

_COMMAND_TYPES: dict[str, type] = {
    "M": MoveTo,
    "L": LineTo,
    "Q": QuadCurveTo,
    "Z": Close,
}


def scale_commands(commands: list[PathCommand], factor: float) -> list[PathCommand]:
    """Scale every coordinate of a command sequence by a uniform factor."""
    if factor == 1:
        return list(commands)
    return [command.scaled(factor) for command in commands]


def command_to_dict(command: PathCommand) -> dict[str, Any]:
    """Serialize a command to a dictionary for IPC."""
    return {"op": command.letter, "args": list(command.args)}


def command_from_dict(data: dict[str, Any]) -> PathCommand:
    """Deserialize a command produced by ``command_to_dict``."""
    command_type = _COMMAND_TYPES[data["op"]]
    return command_type(*data["args"])
