"""Status text builders for timer state updates."""

from __future__ import annotations

from contracts.ui_protocol import STATE_PAUSED, STATE_RUNNING
from pomodoro import Phase, TimerState
from pomodoro.constants import REASON_NO_TIMER, REASON_NOT_IN_BREAK, REASON_NOT_RUNNING

_PHASE_LABELS = {
    Phase.FOCUS: "Focus",
    Phase.BREAK: "Break",
}


def runtime_state(state: TimerState) -> str:
    return STATE_RUNNING if state.is_running else STATE_PAUSED


def timer_status_message(state: TimerState) -> str:
    """Build status text for the current timer snapshot."""
    label = _PHASE_LABELS.get(state.phase, "Focus")
    if state.is_running:
        return f"{label} running ({state.display} remaining)"
    return f"{label} paused ({state.display} remaining)"


def rejection_text(action: str, reason: str) -> str:
    """Return user-facing text for a control operation the timer declined."""
    if reason == REASON_NOT_RUNNING:
        return "The timer is not running."
    if reason == REASON_NOT_IN_BREAK:
        return "There is no break to skip."
    if reason == REASON_NO_TIMER:
        return "No timer is available."
    return f"Cannot {action.replace('_', ' ')} right now."
