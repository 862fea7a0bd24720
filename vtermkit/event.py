"""Terminal events and the commands that turn event reporting on and off.

Public events (:class:`Event` and its subclasses) are what a reader hands to
callers. :class:`CursorPosition`, :class:`KeyboardEnhancementFlagsResponse` and
:class:`PrimaryDeviceAttributes` are replies to queries that the terminal
sends on the same input stream; they are not :class:`Event` instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from vtermkit.command import Command
from vtermkit.keys import (
    CharKey,
    FunctionKey,
    KeyboardEnhancementFlags,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MediaKey,
    ModifierKey,
)

__all__ = [
    "MouseButton",
    "MouseEventKind",
    "MouseEvent",
    "Event",
    "FocusGained",
    "FocusLost",
    "Key",
    "Mouse",
    "Paste",
    "Resize",
    "CursorPosition",
    "KeyboardEnhancementFlagsResponse",
    "PrimaryDeviceAttributes",
    "EnableMouseCapture",
    "DisableMouseCapture",
    "EnableFocusChange",
    "DisableFocusChange",
    "EnableBracketedPaste",
    "DisableBracketedPaste",
    "PushKeyboardEnhancementFlags",
    "PopKeyboardEnhancementFlags",
]

_CSI = "\x1b["
_U16_MAX = 0xFFFF
_KEY_CODE_TYPES = (KeyCode, CharKey, FunctionKey, MediaKey, ModifierKey)


def _check_u16(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be between 0 and {_U16_MAX}, got {value}")


class MouseButton(Enum):
    """A mouse button."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


_BUTTON_ACTIONS = frozenset({"down", "up", "drag"})
_PLAIN_ACTIONS = frozenset({"moved", "scroll_down", "scroll_up"})


@dataclass(frozen=True)
class MouseEventKind:
    """What a mouse did: a button action, a move, or a scroll.

    Build button actions with :meth:`down`, :meth:`up` and :meth:`drag`; the
    others are :attr:`MOVED`, :attr:`SCROLL_DOWN` and :attr:`SCROLL_UP`.
    Some terminals do not report the button of up and drag events; the left
    button is used then.
    """

    action: str
    button: Optional[MouseButton] = None

    MOVED: ClassVar[MouseEventKind]
    SCROLL_DOWN: ClassVar[MouseEventKind]
    SCROLL_UP: ClassVar[MouseEventKind]

    def __post_init__(self) -> None:
        if self.action in _BUTTON_ACTIONS:
            if not isinstance(self.button, MouseButton):
                raise TypeError(f"a {self.action!r} event needs a MouseButton")
        elif self.action in _PLAIN_ACTIONS:
            if self.button is not None:
                raise ValueError(f"a {self.action!r} event takes no button")
        else:
            raise ValueError(f"unknown mouse action {self.action!r}")

    @classmethod
    def down(cls, button: MouseButton) -> MouseEventKind:
        """A button was pressed."""
        return cls("down", button)

    @classmethod
    def up(cls, button: MouseButton) -> MouseEventKind:
        """A button was released."""
        return cls("up", button)

    @classmethod
    def drag(cls, button: MouseButton) -> MouseEventKind:
        """The mouse moved while a button was held."""
        return cls("drag", button)


MouseEventKind.MOVED = MouseEventKind("moved")
MouseEventKind.SCROLL_DOWN = MouseEventKind("scroll_down")
MouseEventKind.SCROLL_UP = MouseEventKind("scroll_up")


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a 0-based cell, with the modifiers held."""

    kind: MouseEventKind
    column: int
    row: int
    modifiers: KeyModifiers = field(default=KeyModifiers.NONE)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MouseEventKind):
            raise TypeError("kind must be a MouseEventKind")
        _check_u16("column", self.column)
        _check_u16("row", self.row)
        if not isinstance(self.modifiers, KeyModifiers):
            raise TypeError("modifiers must be KeyModifiers")


class Event:
    """Base class of the events a reader returns."""

    __slots__ = ()


@dataclass(frozen=True)
class FocusGained(Event):
    """The terminal gained focus."""


@dataclass(frozen=True)
class FocusLost(Event):
    """The terminal lost focus."""


@dataclass(frozen=True)
class Key(Event):
    """A key event. A bare key code is taken as a plain press of that key."""

    event: KeyEvent

    def __post_init__(self) -> None:
        if isinstance(self.event, _KEY_CODE_TYPES):
            object.__setattr__(self, "event", KeyEvent.from_code(self.event))
        elif not isinstance(self.event, KeyEvent):
            raise TypeError("event must be a KeyEvent or a key code")


@dataclass(frozen=True)
class Mouse(Event):
    """A mouse event."""

    event: MouseEvent

    def __post_init__(self) -> None:
        if not isinstance(self.event, MouseEvent):
            raise TypeError("event must be a MouseEvent")


@dataclass(frozen=True)
class Paste(Event):
    """Text pasted while bracketed paste was enabled."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("text must be a str")


@dataclass(frozen=True)
class Resize(Event):
    """The terminal was resized to ``columns`` by ``rows``.

    Resize events can arrive in batches.
    """

    columns: int
    rows: int

    def __post_init__(self) -> None:
        _check_u16("columns", self.columns)
        _check_u16("rows", self.rows)


@dataclass(frozen=True)
class CursorPosition:
    """A cursor position report, 0-based ``(column, row)``."""

    column: int
    row: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column)
        _check_u16("row", self.row)


@dataclass(frozen=True)
class KeyboardEnhancementFlagsResponse:
    """The keyboard enhancement flags the terminal reports as enabled."""

    flags: KeyboardEnhancementFlags

    def __post_init__(self) -> None:
        if not isinstance(self.flags, KeyboardEnhancementFlags):
            raise TypeError("flags must be KeyboardEnhancementFlags")


@dataclass(frozen=True)
class PrimaryDeviceAttributes:
    """The terminal answered a primary device attributes query."""


@dataclass(frozen=True)
class EnableMouseCapture(Command):
    """Turn on mouse event reporting."""

    def write_ansi(self) -> str:
        return (
            f"{_CSI}?1000h"  # normal tracking: press and release
            f"{_CSI}?1002h"  # button-event tracking: dragging
            f"{_CSI}?1003h"  # any-event tracking: all motion
            f"{_CSI}?1015h"  # RXVT mode: coordinates above 223
            f"{_CSI}?1006h"  # SGR mode: preferred over RXVT
        )


@dataclass(frozen=True)
class DisableMouseCapture(Command):
    """Turn off mouse event reporting."""

    def write_ansi(self) -> str:
        return (
            f"{_CSI}?1006l"
            f"{_CSI}?1015l"
            f"{_CSI}?1003l"
            f"{_CSI}?1002l"
            f"{_CSI}?1000l"
        )


@dataclass(frozen=True)
class EnableFocusChange(Command):
    """Turn on focus gained/lost reporting."""

    def write_ansi(self) -> str:
        return f"{_CSI}?1004h"


@dataclass(frozen=True)
class DisableFocusChange(Command):
    """Turn off focus gained/lost reporting."""

    def write_ansi(self) -> str:
        return f"{_CSI}?1004l"


@dataclass(frozen=True)
class EnableBracketedPaste(Command):
    """Turn on bracketed paste mode."""

    def write_ansi(self) -> str:
        return f"{_CSI}?2004h"


@dataclass(frozen=True)
class DisableBracketedPaste(Command):
    """Turn off bracketed paste mode."""

    def write_ansi(self) -> str:
        return f"{_CSI}?2004l"


@dataclass(frozen=True)
class PushKeyboardEnhancementFlags(Command):
    """Push a level of keyboard enhancement flags (kitty keyboard protocol)."""

    flags: KeyboardEnhancementFlags

    def __post_init__(self) -> None:
        if not isinstance(self.flags, KeyboardEnhancementFlags):
            raise TypeError("flags must be KeyboardEnhancementFlags")

    def write_ansi(self) -> str:
        return f"{_CSI}>{self.flags.value}u"


@dataclass(frozen=True)
class PopKeyboardEnhancementFlags(Command):
    """Pop one level of keyboard enhancement flags."""

    def write_ansi(self) -> str:
        return f"{_CSI}<1u"