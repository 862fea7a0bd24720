"""Reading internal events from a source, with filtering and buffering."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Iterable, Optional

__all__ = ["EventSource", "InternalEventReader"]

EventPredicate = Callable[[object], bool]


class EventSource(ABC):
    """Something that yields internal events, waiting up to a timeout."""

    @abstractmethod
    def try_read(self, timeout: Optional[float]) -> Optional[object]:
        """Read one internal event.

        ``timeout`` is in seconds; ``None`` waits until an event arrives.
        Returns ``None`` when the timeout expires with no event. Raises
        :class:`OSError` on failure and :class:`InterruptedError` when the
        wait was interrupted.
        """


class _Deadline:
    """Tracks how much of an optional timeout is left."""

    def __init__(self, timeout: Optional[float]) -> None:
        self._timeout = timeout
        self._start = time.monotonic()

    def elapsed(self) -> bool:
        if self._timeout is None:
            return False
        return time.monotonic() - self._start >= self._timeout

    def leftover(self) -> Optional[float]:
        if self._timeout is None:
            return None
        return max(0.0, self._timeout - (time.monotonic() - self._start))


class InternalEventReader:
    """Reads internal events, keeping those a filter passes over for later."""

    def __init__(
        self,
        source: Optional[EventSource] = None,
        events: Optional[Iterable[object]] = None,
    ) -> None:
        self._source = source
        self._events: deque[object] = deque(events or ())
        self._skipped: list[object] = []

    def poll(self, timeout: Optional[float], filter: EventPredicate) -> bool:
        """Report whether an event accepted by ``filter`` is available.

        ``timeout`` is in seconds, or ``None`` to wait indefinitely. A true
        result guarantees that :meth:`read` with the same filter will not
        block. An interrupted wait returns ``False``.
        """
        if any(filter(event) for event in self._events):
            return True

        if self._source is None:
            raise OSError("Failed to initialize input reader")

        deadline = _Deadline(timeout)
        while True:
            try:
                event = self._source.try_read(deadline.leftover())
            except InterruptedError:
                return False

            accepted = None
            if event is not None:
                if filter(event):
                    accepted = event
                else:
                    self._skipped.append(event)

            if accepted is not None or deadline.elapsed():
                self._events.extend(self._skipped)
                self._skipped.clear()
                if accepted is not None:
                    self._events.appendleft(accepted)
                    return True
                return False

    def read(self, filter: EventPredicate) -> object:
        """Return the next event accepted by ``filter``, blocking if needed.

        Events the filter rejects stay queued, in order, for later reads.
        """
        skipped: deque[object] = deque()
        try:
            while True:
                while self._events:
                    event = self._events.popleft()
                    if filter(event):
                        self._events.extend(skipped)
                        skipped.clear()
                        return event
                    # Held aside so that poll() is not satisfied by them again.
                    skipped.append(event)
                self.poll(None, filter)
        finally:
            if skipped:
                self._events.extendleft(reversed(skipped))