"""Timer observer that mirrors published updates to the UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pomodoro import TimerActionResult
from pomodoro.constants import ACTION_PHASE_STARTED

from .messages import runtime_state, timer_status_message
from .ui import RuntimeUIPublisher


@dataclass(frozen=True)
class TickDependencies:
    """Dependencies required for processing timer state updates."""
    logger: logging.Logger
    ui: RuntimeUIPublisher


class TickProcessor:
    """Publishes every timer update and a status line for the UI shell."""
    def __init__(self, dependencies: TickDependencies):
        self._dependencies = dependencies

    def handle_update(self, update: TimerActionResult) -> None:
        deps = self._dependencies
        state = update.state
        if update.action == ACTION_PHASE_STARTED:
            deps.logger.debug("Phase started: %s", state.phase.value)

        deps.ui.publish_timer_update(
            state,
            action=update.action,
            accepted=update.accepted,
            reason=update.reason,
        )
        deps.ui.publish_state(
            runtime_state(state),
            message=timer_status_message(state),
        )
