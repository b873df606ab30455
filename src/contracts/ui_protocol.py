"""Web UI websocket event, state, and command constants."""

from __future__ import annotations

# Websocket event types
EVENT_HELLO = "hello"
EVENT_STATE_UPDATE = "state_update"
EVENT_TIMER = "timer"
EVENT_NOTIFICATION = "notification"
EVENT_ERROR = "error"

# Inbound frame type sent by the UI shell
FRAME_COMMAND = "command"

# UI runtime states
STATE_IDLE = "idle"
STATE_RUNNING = "running"
STATE_PAUSED = "paused"
STATE_REJECTED = "rejected"
STATE_ERROR = "error"

# Control commands accepted from the UI shell
COMMAND_START_FOCUS = "start_focus"
COMMAND_START = "start"
COMMAND_RESUME = "resume"
COMMAND_PAUSE = "pause"
COMMAND_RESET = "reset"
COMMAND_SKIP_BREAK = "skip_break"

COMMANDS: frozenset[str] = frozenset(
    {
        COMMAND_START_FOCUS,
        COMMAND_START,
        COMMAND_RESUME,
        COMMAND_PAUSE,
        COMMAND_RESET,
        COMMAND_SKIP_BREAK,
    }
)

STICKY_EVENT_TYPES: frozenset[str] = frozenset(
    {
        EVENT_STATE_UPDATE,
        EVENT_TIMER,
        EVENT_ERROR,
    }
)

STICKY_EVENT_ORDER: tuple[str, ...] = (
    EVENT_TIMER,
    EVENT_ERROR,
    EVENT_STATE_UPDATE,
)
