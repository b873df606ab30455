"""Utilities for serializing UI events, parsing commands, and preserving sticky state."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from contracts.ui_protocol import (
    COMMANDS,
    FRAME_COMMAND,
    STICKY_EVENT_ORDER,
    STICKY_EVENT_TYPES,
)


class CommandFrameError(ValueError):
    """Raised when an inbound websocket frame is not a valid command."""


def make_event(
    event_type: str,
    *,
    now_fn: Callable[[], datetime] | None = None,
    **payload: Any,
) -> str:
    """Serialize an event payload with type and timestamp for websocket delivery."""
    now = now_fn() if now_fn is not None else datetime.now(timezone.utc)
    return json.dumps(
        {
            "type": event_type,
            "timestamp": now.isoformat(),
            **payload,
        }
    )


def parse_command(raw: str | bytes) -> Optional[str]:
    """Return the command name carried by a UI frame.

    Frames of other types are ignored (None). Malformed command frames raise
    CommandFrameError.
    """
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError) as error:
        raise CommandFrameError(f"Invalid JSON frame: {error}") from error

    if not isinstance(decoded, dict):
        raise CommandFrameError("Frame must be a JSON object.")
    if decoded.get("type") != FRAME_COMMAND:
        return None

    command = decoded.get("command")
    if not isinstance(command, str) or not command.strip():
        raise CommandFrameError("Command frame requires a 'command' string.")

    name = command.strip().lower()
    if name not in COMMANDS:
        raise CommandFrameError(f"Unsupported command: {name}")
    return name


class StickyEventStore:
    """Thread-safe cache of sticky events replayed to new websocket clients."""
    def __init__(self):
        self._events: dict[str, str] = {}
        self._lock = threading.Lock()

    def remember(self, event_type: str, message: str) -> None:
        if event_type not in STICKY_EVENT_TYPES:
            return
        with self._lock:
            self._events[event_type] = message

    def snapshot(self) -> list[str]:
        with self._lock:
            return [self._events[key] for key in STICKY_EVENT_ORDER if key in self._events]
