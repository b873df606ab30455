"""Runtime orchestration loop for UI commands and timer updates."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from queue import Empty, Queue
from typing import Callable, Optional

from app_config import AppConfig
from contracts.ui_protocol import STATE_IDLE
from pomodoro import (
    CountdownScheduler,
    PhaseDurations,
    PhaseTimer,
    ThreadedCountdownScheduler,
)
from pomodoro.constants import ACTION_SYNC, REASON_STARTUP
from server import UIServer

from .commands import RuntimeCommandDispatcher
from .messages import timer_status_message
from .notifications import UINotificationSink
from .ticks import TickDependencies, TickProcessor
from .ui import RuntimeUIPublisher


@dataclass(frozen=True)
class RuntimeHooks:
    """Injectable lifecycle hooks used by runtime startup and shutdown flow."""
    setup_signal_handlers: Callable[["RuntimeEngine"], None]


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    app_config: AppConfig
    ui_server: Optional[UIServer]
    hooks: RuntimeHooks
    scheduler: Optional[CountdownScheduler] = None


@dataclass
class RuntimeResources:
    """Mutable runtime resources created for the event loop lifecycle."""
    command_queue: Queue[str]
    stop_requested: threading.Event = field(default_factory=threading.Event)


class RuntimeEngine:
    """Main runtime loop that serializes UI commands onto one thread."""
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        app_config = bootstrap.app_config

        self._ui = RuntimeUIPublisher(bootstrap.ui_server)
        notification_sink = UINotificationSink(
            self._ui,
            permission_check=lambda: app_config.notifications.enabled,
            sound_enabled=app_config.notifications.sound,
            logger=logging.getLogger("notifications"),
        )
        self._timer = PhaseTimer(
            bootstrap.scheduler or ThreadedCountdownScheduler(),
            notification_sink,
            durations=PhaseDurations(
                focus_seconds=app_config.timer.focus_seconds,
                break_seconds=app_config.timer.break_seconds,
            ),
            logger=logging.getLogger("pomodoro"),
        )
        self._tick_processor = TickProcessor(
            TickDependencies(logger=self._logger, ui=self._ui)
        )
        self._unsubscribe = self._timer.subscribe(self._tick_processor.handle_update)
        self._dispatcher = RuntimeCommandDispatcher(
            timer=self._timer,
            ui=self._ui,
            logger=self._logger,
        )
        self._resources = RuntimeResources(command_queue=Queue())

        if bootstrap.ui_server is not None:
            bootstrap.ui_server.set_command_handler(self.submit_command)

    @property
    def timer(self) -> PhaseTimer:
        return self._timer

    def submit_command(self, command: str) -> None:
        """Queue a command for the runtime thread; safe to call from any thread."""
        self._resources.command_queue.put(command)

    def request_stop(self) -> None:
        self._resources.stop_requested.set()

    def run(self) -> int:
        self._publish_startup_sync()

        try:
            self._bootstrap.hooks.setup_signal_handlers(self)
            self._logger.info("Ready! Waiting for commands ...")

            while not self._resources.stop_requested.is_set():
                command = self._poll_command()
                if command is None:
                    continue
                self._dispatcher.handle_command(command)

            self._logger.info("Stop requested.")
            return 0

        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1
        finally:
            self._shutdown()

    def _publish_startup_sync(self) -> None:
        state = self._timer.snapshot()
        self._ui.publish_timer_update(
            state,
            action=ACTION_SYNC,
            accepted=True,
            reason=REASON_STARTUP,
        )
        self._ui.publish_state(STATE_IDLE, message=timer_status_message(state))

    def _poll_command(self) -> Optional[str]:
        try:
            return self._resources.command_queue.get(timeout=0.25)
        except Empty:
            return None

    def _shutdown(self) -> None:
        self._logger.info("Stopping timer...")
        self._unsubscribe()
        self._timer.close()

        ui_server = self._bootstrap.ui_server
        if ui_server is not None:
            self._logger.info("Stopping UI server...")
            try:
                ui_server.stop(timeout_seconds=5.0)
            except Exception as error:
                self._logger.error("Error stopping UI server: %s", error, exc_info=True)
