"""Predicates that pick out kinds of internal events.

An internal event is either a public :class:`~vtermkit.event.Event` or one of
the terminal's replies to a query: :class:`~vtermkit.event.CursorPosition`,
:class:`~vtermkit.event.KeyboardEnhancementFlagsResponse` or
:class:`~vtermkit.event.PrimaryDeviceAttributes`.
"""

from __future__ import annotations

from vtermkit.event import (
    CursorPosition,
    Event,
    KeyboardEnhancementFlagsResponse,
    PrimaryDeviceAttributes,
)

__all__ = [
    "cursor_position_filter",
    "keyboard_enhancement_flags_filter",
    "primary_device_attributes_filter",
    "event_filter",
    "internal_event_filter",
]


def cursor_position_filter(event: object) -> bool:
    """Accept cursor position reports."""
    return isinstance(event, CursorPosition)


def keyboard_enhancement_flags_filter(event: object) -> bool:
    """Accept keyboard enhancement flag reports and device attribute replies.

    A device attributes reply without a flags report means the terminal does
    not support progressive keyboard enhancement.
    """
    return isinstance(event, (KeyboardEnhancementFlagsResponse, PrimaryDeviceAttributes))


def primary_device_attributes_filter(event: object) -> bool:
    """Accept primary device attribute replies."""
    return isinstance(event, PrimaryDeviceAttributes)


def event_filter(event: object) -> bool:
    """Accept public events only."""
    return isinstance(event, Event)


def internal_event_filter(event: object) -> bool:
    """Accept every internal event."""
    return True