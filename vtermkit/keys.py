"""Keyboard types: key codes, modifiers, key event kinds and states, key events."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag
from typing import Union

__all__ = [
    "KeyboardEnhancementFlags",
    "KeyModifiers",
    "KeyEventState",
    "KeyEventKind",
    "MediaKeyCode",
    "ModifierKeyCode",
    "KeyCode",
    "CharKey",
    "FunctionKey",
    "MediaKey",
    "ModifierKey",
    "KeyEvent",
]


class KeyboardEnhancementFlags(Flag):
    """Flags asking a compatible terminal to add detail to keyboard events."""

    NONE = 0
    DISAMBIGUATE_ESCAPE_CODES = 0b0000_0001
    REPORT_EVENT_TYPES = 0b0000_0010
    REPORT_ALTERNATE_KEYS = 0b0000_0100
    REPORT_ALL_KEYS_AS_ESCAPE_CODES = 0b0000_1000


class KeyModifiers(Flag):
    """Modifier keys held during an event."""

    NONE = 0
    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000


class KeyEventState(Flag):
    """Extra state reported with a key event.

    ``NUM_LOCK`` shares its bit with ``CAPS_LOCK`` and is therefore an alias.
    """

    NONE = 0
    KEYPAD = 0b0000_0001
    CAPS_LOCK = 0b0000_1000
    NUM_LOCK = 0b0000_1000


class KeyEventKind(Enum):
    """Whether a key was pressed, auto-repeated or released."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


class MediaKeyCode(Enum):
    """A media key."""

    PLAY = "play"
    PAUSE = "pause"
    PLAY_PAUSE = "play_pause"
    REVERSE = "reverse"
    STOP = "stop"
    FAST_FORWARD = "fast_forward"
    REWIND = "rewind"
    TRACK_NEXT = "track_next"
    TRACK_PREVIOUS = "track_previous"
    RECORD = "record"
    LOWER_VOLUME = "lower_volume"
    RAISE_VOLUME = "raise_volume"
    MUTE_VOLUME = "mute_volume"


class ModifierKeyCode(Enum):
    """A modifier key pressed on its own."""

    LEFT_SHIFT = "left_shift"
    LEFT_CONTROL = "left_control"
    LEFT_ALT = "left_alt"
    LEFT_SUPER = "left_super"
    LEFT_HYPER = "left_hyper"
    LEFT_META = "left_meta"
    RIGHT_SHIFT = "right_shift"
    RIGHT_CONTROL = "right_control"
    RIGHT_ALT = "right_alt"
    RIGHT_SUPER = "right_super"
    RIGHT_HYPER = "right_hyper"
    RIGHT_META = "right_meta"
    ISO_LEVEL3_SHIFT = "iso_level3_shift"
    ISO_LEVEL5_SHIFT = "iso_level5_shift"


class KeyCode(Enum):
    """A key without a payload.

    Characters, function keys, media keys and modifier keys are represented
    by :class:`CharKey`, :class:`FunctionKey`, :class:`MediaKey` and
    :class:`ModifierKey`.
    """

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    NULL = "null"
    ESC = "esc"
    CAPS_LOCK = "caps_lock"
    SCROLL_LOCK = "scroll_lock"
    NUM_LOCK = "num_lock"
    PRINT_SCREEN = "print_screen"
    PAUSE = "pause"
    MENU = "menu"
    KEYPAD_BEGIN = "keypad_begin"


@dataclass(frozen=True)
class CharKey:
    """A key that produces a single character."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"char must be a single character, got {self.char!r}")


@dataclass(frozen=True)
class FunctionKey:
    """A function key; ``FunctionKey(1)`` is F1."""

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError(f"number must be an int, got {type(self.number).__name__}")
        if not 0 <= self.number <= 0xFF:
            raise ValueError(f"number must be between 0 and 255, got {self.number}")


@dataclass(frozen=True)
class MediaKey:
    """A media key."""

    code: MediaKeyCode

    def __post_init__(self) -> None:
        if not isinstance(self.code, MediaKeyCode):
            raise TypeError("code must be a MediaKeyCode")


@dataclass(frozen=True)
class ModifierKey:
    """A modifier key reported as a key of its own."""

    code: ModifierKeyCode

    def __post_init__(self) -> None:
        if not isinstance(self.code, ModifierKeyCode):
            raise TypeError("code must be a ModifierKeyCode")


_AnyKeyCode = Union[KeyCode, CharKey, FunctionKey, MediaKey, ModifierKey]


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _to_ascii_upper(c: str) -> str:
    return c.upper() if "a" <= c <= "z" else c


@dataclass(frozen=True, eq=False)
class KeyEvent:
    """A key event with its modifiers, kind and state.

    Two events compare equal after case normalisation: ``SHIFT`` is present
    exactly when the character is an ASCII uppercase letter.
    """

    code: _AnyKeyCode
    modifiers: KeyModifiers = field(default=KeyModifiers.NONE)
    kind: KeyEventKind = field(default=KeyEventKind.PRESS)
    state: KeyEventState = field(default=KeyEventState.NONE)

    @classmethod
    def from_code(cls, code: _AnyKeyCode) -> KeyEvent:
        """A plain key press of ``code`` with no modifiers."""
        return cls(code)

    def normalize_case(self) -> KeyEvent:
        """Return an event where SHIFT is set iff an uppercase letter is present."""
        if not isinstance(self.code, CharKey):
            return self
        c = self.code.char
        if _is_ascii_upper(c):
            return replace(self, modifiers=self.modifiers | KeyModifiers.SHIFT)
        if KeyModifiers.SHIFT in self.modifiers:
            return replace(self, code=CharKey(_to_ascii_upper(c)))
        return self

    def _key(self) -> tuple:
        n = self.normalize_case()
        return (n.code, n.modifiers, n.kind, n.state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())