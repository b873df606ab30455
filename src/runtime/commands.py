"""Dispatcher that applies UI control commands to the phase timer."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from contracts.ui_protocol import (
    COMMAND_PAUSE,
    COMMAND_RESET,
    COMMAND_RESUME,
    COMMAND_SKIP_BREAK,
    COMMAND_START,
    COMMAND_START_FOCUS,
    EVENT_ERROR,
    STATE_ERROR,
    STATE_REJECTED,
)
from pomodoro import PhaseTimer, TimerActionResult
from pomodoro.constants import REASON_NO_TIMER, REASON_UNSUPPORTED_ACTION

from .messages import rejection_text
from .ui import RuntimeUIPublisher

_COMMAND_TO_OPERATION: dict[str, Callable[[PhaseTimer], TimerActionResult]] = {
    COMMAND_START_FOCUS: PhaseTimer.start_focus_session,
    COMMAND_START: PhaseTimer.start_timer,
    COMMAND_RESUME: PhaseTimer.start_timer,
    COMMAND_PAUSE: PhaseTimer.pause_timer,
    COMMAND_RESET: PhaseTimer.reset_timer,
    COMMAND_SKIP_BREAK: PhaseTimer.skip_break,
}


class RuntimeCommandDispatcher:
    """Routes UI commands to the one timer instance the runtime owns."""
    def __init__(
        self,
        *,
        timer: Optional[PhaseTimer],
        ui: RuntimeUIPublisher,
        logger: logging.Logger,
    ):
        self._timer = timer
        self._ui = ui
        self._logger = logger

    def handle_command(self, command: str) -> Optional[TimerActionResult]:
        operation = _COMMAND_TO_OPERATION.get(command)
        if operation is None:
            self._logger.warning("Unsupported command: %s", command)
            self._ui.publish(
                EVENT_ERROR,
                state=STATE_ERROR,
                message=rejection_text(command, REASON_UNSUPPORTED_ACTION),
            )
            return None

        timer = self._timer
        if timer is None:
            self._logger.info("Ignoring %s: %s", command, REASON_NO_TIMER)
            self._ui.publish_state(
                STATE_REJECTED,
                message=rejection_text(command, REASON_NO_TIMER),
            )
            return None

        result = operation(timer)
        self._logger.debug(
            "Command %s -> accepted=%s reason=%s",
            command,
            result.accepted,
            result.reason,
        )
        # Accepted operations reach the UI through the timer observer.
        if not result.accepted:
            self._ui.publish_state(
                STATE_REJECTED,
                message=rejection_text(result.action, result.reason),
            )
        return result
