# vtermkit

Build terminal control sequences as small command objects, describe keyboard,
mouse and focus input as plain Python values, and read events through a
filtering reader. The package has no dependencies beyond the standard library.

## Installing

```
pip install vtermkit
```

## Commands

Every command is a `vtermkit.command.Command` with a `write_ansi()` method
that returns its escape sequence; `str(command)` gives the same text.

`queue(writer, *commands)` writes the sequences to the writer without
flushing. `execute(writer, *commands)` writes them and then calls
`writer.flush()`. Both return the writer. The writer may take `str` or, if it
refuses `str`, UTF-8 `bytes`. Passing anything that is not a `Command` raises
`TypeError`.

```python
import sys

from vtermkit.command import execute, queue
from vtermkit.cursor import Hide, MoveTo, SetCursorStyle, Show

queue(sys.stdout, Hide(), MoveTo(10, 5))
sys.stdout.write("hello")
execute(sys.stdout, Show(), SetCursorStyle.BLINKING_BAR)

print(repr(MoveTo(0, 0).write_ansi()))   # '\x1b[1;1H'
```

### Cursor commands (`vtermkit.cursor`)

- `MoveTo(column, row)`, `MoveToColumn(column)`, `MoveToRow(row)`: absolute
  moves, zero based (`MoveTo(0, 0)` is the top left cell).
- `MoveUp`, `MoveDown`, `MoveLeft`, `MoveRight`, `MoveToNextLine`,
  `MoveToPreviousLine`: relative moves taking a count; most terminals treat a
  count of 0 as 1.
- `SavePosition`, `RestorePosition`, `Hide`, `Show`, `EnableBlinking`,
  `DisableBlinking`.
- `SetCursorStyle`: an enumeration, itself a command, with
  `DEFAULT_USER_SHAPE`, `BLINKING_BLOCK`, `STEADY_BLOCK`,
  `BLINKING_UNDER_SCORE`, `STEADY_UNDER_SCORE`, `BLINKING_BAR`, `STEADY_BAR`.

Arguments must be integers in the 16-bit unsigned range; others raise
`TypeError` or `ValueError`.

### Input mode commands (`vtermkit.event`)

```python
from vtermkit.event import (
    DisableBracketedPaste, DisableMouseCapture, EnableBracketedPaste,
    EnableMouseCapture, PopKeyboardEnhancementFlags, PushKeyboardEnhancementFlags,
)
from vtermkit.keys import KeyboardEnhancementFlags

execute(
    sys.stdout,
    EnableMouseCapture(),
    EnableBracketedPaste(),
    PushKeyboardEnhancementFlags(KeyboardEnhancementFlags.DISAMBIGUATE_ESCAPE_CODES),
)
# ...
execute(sys.stdout, PopKeyboardEnhancementFlags(), DisableBracketedPaste(), DisableMouseCapture())
```

`EnableFocusChange` and `DisableFocusChange` turn focus reporting on and off.

## Keys (`vtermkit.keys`)

- `KeyCode`: keys without a payload (`ENTER`, `ESC`, `LEFT`, `F`-less keys …).
- `CharKey(char)`, `FunctionKey(number)`, `MediaKey(MediaKeyCode)`,
  `ModifierKey(ModifierKeyCode)`: keys that carry a value.
- `KeyModifiers`, `KeyEventState`, `KeyboardEnhancementFlags`: flag sets.
- `KeyEventKind`: `PRESS`, `REPEAT`, `RELEASE`.
- `KeyEvent(code, modifiers=NONE, kind=PRESS, state=NONE)`, and
  `KeyEvent.from_code(code)` for a plain press.

Key events compare and hash after case normalisation: `SHIFT` counts as
present exactly when the character is an ASCII uppercase letter.

```python
from vtermkit.keys import CharKey, KeyCode, KeyEvent, KeyModifiers

assert KeyEvent(CharKey("d"), KeyModifiers.SHIFT) == KeyEvent(CharKey("D"))
assert KeyEvent(CharKey("D")).normalize_case().modifiers == KeyModifiers.SHIFT
```

## Events (`vtermkit.event`)

Public events derive from `Event`: `FocusGained()`, `FocusLost()`,
`Key(event)`, `Mouse(event)`, `Paste(text)` and `Resize(columns, rows)`.
`Key` also accepts a bare key code and turns it into a plain press. Mouse
events are `MouseEvent(kind, column, row, modifiers)` with kinds built by
`MouseEventKind.down/up/drag(MouseButton.…)` or taken from
`MouseEventKind.MOVED`, `SCROLL_DOWN` and `SCROLL_UP`.

Replies to terminal queries are kept apart from `Event`: `CursorPosition`,
`KeyboardEnhancementFlagsResponse` and `PrimaryDeviceAttributes`.

```python
from vtermkit.event import Key, Resize
from vtermkit.keys import CharKey, KeyCode, KeyEvent, KeyModifiers

assert Key(KeyCode.ESC) == Key(KeyEvent.from_code(KeyCode.ESC))

match Key(KeyEvent(CharKey("z"), KeyModifiers.CONTROL)):
    case Key(KeyEvent(code=code, modifiers=KeyModifiers.CONTROL)):
        print("Control +", code)
    case Resize(columns, rows):
        print("resized to", columns, rows)
```

## Reading events (`vtermkit.reader`, `vtermkit.filter`)

`InternalEventReader(source, events=None)` pulls events from an
`EventSource` and hands back those a filter accepts, keeping the rest queued
in order for later reads. A source implements `try_read(timeout)`: it returns
one event, or `None` when the timeout (seconds, or `None` to wait without
limit) runs out. If it raises `InterruptedError`, `poll` returns `False`;
other errors pass through. Polling a reader with no source and no matching
queued event raises `OSError`.

Filters are plain predicates: `event_filter`, `internal_event_filter`,
`cursor_position_filter`, `keyboard_enhancement_flags_filter` (flag reports
or device attribute replies) and `primary_device_attributes_filter`.

```python
from collections import deque

from vtermkit.event import CursorPosition, Resize
from vtermkit.filter import cursor_position_filter, event_filter
from vtermkit.reader import EventSource, InternalEventReader


class ListSource(EventSource):
    def __init__(self, events):
        self._events = deque(events)

    def try_read(self, timeout):
        return self._events.popleft() if self._events else None


reader = InternalEventReader(ListSource([Resize(80, 24), CursorPosition(3, 7)]))
reader.read(cursor_position_filter)   # CursorPosition(column=3, row=7)
reader.read(event_filter)             # Resize(columns=80, rows=24)
reader.poll(0, event_filter)          # False
```

## What the package does not do

vtermkit does not talk to a terminal by itself. It has no event source for
standard input, does not parse incoming escape sequences into events, does
not switch the terminal into raw mode, and cannot query the cursor position
or terminal size. You supply an `EventSource` that produces events, and a
writer that carries commands to the terminal.

## Running the tests

```
pip install "vtermkit[test]"
pytest
```