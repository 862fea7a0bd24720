"""Terminal control sequences, key, mouse and event types, and a filtering event reader."""

__version__ = "0.1.0"
__all__ = ["command", "cursor", "keys", "event", "filter", "reader"]