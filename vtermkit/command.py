"""Terminal commands and the functions that queue or execute them on a writer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

__all__ = ["Command", "queue", "execute"]

W = TypeVar("W")


class Command(ABC):
    """An action on the terminal, expressed as an ANSI escape sequence."""

    @abstractmethod
    def write_ansi(self) -> str:
        """Return the ANSI representation of this command."""

    def __str__(self) -> str:
        return self.write_ansi()


def _write_text(writer: Any, text: str) -> None:
    """Write ``text`` to a text or binary writer, whichever it accepts."""
    try:
        writer.write(text)
    except TypeError:
        writer.write(text.encode("utf-8"))


def queue(writer: W, *args: Command) -> W:
    """Write the ANSI form of each command to ``writer`` without flushing.

    The commands take effect when the writer is flushed. Returns the writer
    so that calls can be chained.
    """
    for command in args:
        if not isinstance(command, Command):
            raise TypeError(
                f"expected a Command, got {type(command).__name__}"
            )
        _write_text(writer, command.write_ansi())
    return writer


def execute(writer: W, *args: Command) -> W:
    """Write the ANSI form of each command to ``writer`` and flush it.

    Returns the writer so that calls can be chained.
    """
    queue(writer, *args)
    writer.flush()  # type: ignore[attr-defined]
    return writer