"""Commands that move, show, hide and style the terminal cursor.

The top left cell is ``(0, 0)``. Commands do nothing until they are queued
or executed on a writer.
"""

from __future__ import annotations

from abc import ABCMeta
from dataclasses import dataclass
from enum import Enum, EnumMeta

from vtermkit.command import Command

__all__ = [
    "MoveTo",
    "MoveToNextLine",
    "MoveToPreviousLine",
    "MoveToColumn",
    "MoveToRow",
    "MoveUp",
    "MoveRight",
    "MoveDown",
    "MoveLeft",
    "SavePosition",
    "RestorePosition",
    "Hide",
    "Show",
    "EnableBlinking",
    "DisableBlinking",
    "SetCursorStyle",
]

_CSI = "\x1b["
_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int, *, upper: int = _U16_MAX) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")


@dataclass(frozen=True)
class MoveTo(Command):
    """Move the cursor to ``(column, row)``, both 0-based."""

    column: int
    row: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column, upper=_U16_MAX - 1)
        _check_u16("row", self.row, upper=_U16_MAX - 1)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.row + 1};{self.column + 1}H"


@dataclass(frozen=True)
class MoveToNextLine(Command):
    """Move the cursor down ``count`` lines, to the first column."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.count}E"


@dataclass(frozen=True)
class MoveToPreviousLine(Command):
    """Move the cursor up ``count`` lines, to the first column."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.count}F"


@dataclass(frozen=True)
class MoveToColumn(Command):
    """Move the cursor to a 0-based column on the current row."""

    column: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column, upper=_U16_MAX - 1)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.column + 1}G"


@dataclass(frozen=True)
class MoveToRow(Command):
    """Move the cursor to a 0-based row on the current column."""

    row: int

    def __post_init__(self) -> None:
        _check_u16("row", self.row, upper=_U16_MAX - 1)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.row + 1}d"


@dataclass(frozen=True)
class MoveUp(Command):
    """Move the cursor up ``count`` rows."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.count}A"


@dataclass(frozen=True)
class MoveRight(Command):
    """Move the cursor right ``count`` columns."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.count}C"


@dataclass(frozen=True)
class MoveDown(Command):
    """Move the cursor down ``count`` rows."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.count}B"


@dataclass(frozen=True)
class MoveLeft(Command):
    """Move the cursor left ``count`` columns."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self) -> str:
        return f"{_CSI}{self.count}D"


@dataclass(frozen=True)
class SavePosition(Command):
    """Save the current cursor position; the terminal keeps one slot."""

    def write_ansi(self) -> str:
        return "\x1b7"


@dataclass(frozen=True)
class RestorePosition(Command):
    """Restore the cursor position saved by :class:`SavePosition`."""

    def write_ansi(self) -> str:
        return "\x1b8"


@dataclass(frozen=True)
class Hide(Command):
    """Hide the cursor."""

    def write_ansi(self) -> str:
        return f"{_CSI}?25l"


@dataclass(frozen=True)
class Show(Command):
    """Show the cursor."""

    def write_ansi(self) -> str:
        return f"{_CSI}?25h"


@dataclass(frozen=True)
class EnableBlinking(Command):
    """Make the cursor blink (not honoured by every terminal)."""

    def write_ansi(self) -> str:
        return f"{_CSI}?12h"


@dataclass(frozen=True)
class DisableBlinking(Command):
    """Stop the cursor from blinking (not honoured by every terminal)."""

    def write_ansi(self) -> str:
        return f"{_CSI}?12l"


class _CommandEnumMeta(ABCMeta, EnumMeta):
    """Metaclass letting an enumeration also be a :class:`Command`."""


class SetCursorStyle(Command, Enum, metaclass=_CommandEnumMeta):
    """Set the shape of the cursor and whether it blinks."""

    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDER_SCORE = 3
    STEADY_UNDER_SCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6

    def write_ansi(self) -> str:
        return f"{_CSI}{self.value} q"