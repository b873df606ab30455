"""Phase, action, and reason constants used by the phase timer."""

from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    FOCUS = "focus"
    BREAK = "break"


DEFAULT_FOCUS_SECONDS = 25 * 60
DEFAULT_BREAK_SECONDS = 5 * 60
TICK_INTERVAL_MS = 1000

ACTION_START_FOCUS = "start_focus"
ACTION_START = "start"
ACTION_PAUSE = "pause"
ACTION_RESET = "reset"
ACTION_SKIP_BREAK = "skip_break"

ACTION_SYNC = "sync"
ACTION_TICK = "tick"
ACTION_PHASE_STARTED = "phase_started"

REASON_STARTED = "started"
REASON_RESUMED = "resumed"
REASON_PAUSED = "paused"
REASON_NOT_RUNNING = "not_running"
REASON_RESET = "reset"
REASON_SKIPPED = "skipped"
REASON_NOT_IN_BREAK = "not_in_break"
REASON_UNSUPPORTED_ACTION = "unsupported_action"
REASON_NO_TIMER = "no_timer"

REASON_TICK = "tick"
REASON_STARTUP = "startup"
