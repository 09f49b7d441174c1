"""Lifecycle event channel for pack, ingest, export, and merge runs.

This module provides an explicit observer that callers thread through
top-level operations instead of sharing a process-wide emitter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from core.errors import RespackEventError

EventListener = Callable[[str, Mapping[str, object]], None]

PACK_START = "pack:start"
PACK_BEFORE_FILE = "pack:before-file"
PACK_AFTER_FILE = "pack:after-file"
PACK_UNMATCHED_FILE = "pack:unmatched-file"
PACK_COMPLETE = "pack:complete"
UNPACK_START = "unpack:start"
UNPACK_INVALID_ENTRY = "unpack:invalid-entry"
UNPACK_UNKNOWN_MODULE = "unpack:unknown-module"
UNPACK_AMBIGUOUS_MODULE = "unpack:ambiguous-module"
UNPACK_BEFORE_PARSE_ENTRY = "unpack:before-parse-entry"
UNPACK_AFTER_PARSE_ENTRY = "unpack:after-parse-entry"
UNPACK_INVALID_LOCALE = "unpack:invalid-locale"
UNPACK_COMPLETE = "unpack:complete"
EXPORT_START = "export:start"
EXPORT_COMPLETE = "export:complete"
IMPORT_BEFORE_MODULE = "import:before-module"
IMPORT_AFTER_MODULE = "import:after-module"
IMPORT_BEFORE_FILE = "import:before-file"
IMPORT_AFTER_FILE = "import:after-file"


@dataclass(frozen=True)
class EventChannel:
    """Ordered set of listeners receiving named lifecycle events."""

    listeners: tuple[EventListener, ...] = ()

    def with_listener(self, listener: EventListener) -> "EventChannel":
        """Return a new channel that also notifies ``listener``."""
        return EventChannel(listeners=(*self.listeners, listener))

    def emit(self, event: str, **payload: object) -> None:
        """Notify every listener of one event.

        Args:
            event: Event name, e.g. ``pack:start``.
            **payload: Event fields relevant to the boundary.

        Raises:
            RespackEventError: If a listener raises.
        """
        for listener in self.listeners:
            try:
                listener(event, payload)
            except Exception as error:
                raise RespackEventError(
                    f"Listener for event '{event}' failed: {error}. "
                    "Fix the listener or detach it from the channel."
                ) from error


NULL_CHANNEL = EventChannel()


def resolve_channel(events: EventChannel | None) -> EventChannel:
    """Return ``events`` or the listener-free channel."""
    return events if events is not None else NULL_CHANNEL
