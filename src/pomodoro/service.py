"""Thread-safe in-memory focus/break phase timer."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .constants import (
    ACTION_PAUSE,
    ACTION_PHASE_STARTED,
    ACTION_RESET,
    ACTION_SKIP_BREAK,
    ACTION_START,
    ACTION_START_FOCUS,
    ACTION_TICK,
    DEFAULT_BREAK_SECONDS,
    DEFAULT_FOCUS_SECONDS,
    TICK_INTERVAL_MS,
    Phase,
    REASON_NOT_IN_BREAK,
    REASON_NOT_RUNNING,
    REASON_PAUSED,
    REASON_RESET,
    REASON_RESUMED,
    REASON_SKIPPED,
    REASON_STARTED,
    REASON_TICK,
)
from .messages import NotificationRequest, build_notification_request, format_remaining
from .scheduler import CountdownHandle, CountdownScheduler


class NotificationSink(Protocol):
    def notify(self, request: NotificationRequest) -> None:
        ...


TimerObserver = Callable[["TimerActionResult"], None]


@dataclass(frozen=True)
class PhaseDurations:
    """Immutable per-phase default durations."""
    focus_seconds: int = DEFAULT_FOCUS_SECONDS
    break_seconds: int = DEFAULT_BREAK_SECONDS

    def __post_init__(self) -> None:
        if self.focus_seconds <= 0:
            raise ValueError("focus_seconds must be greater than zero")
        if self.break_seconds <= 0:
            raise ValueError("break_seconds must be greater than zero")

    def for_phase(self, phase: Phase) -> int:
        """Return the default duration of `phase` in milliseconds."""
        if phase == Phase.BREAK:
            return self.break_seconds * 1000
        return self.focus_seconds * 1000


@dataclass(frozen=True)
class TimerState:
    """Immutable timer snapshot exposed to UI observers."""
    phase: Phase
    remaining_millis: int
    is_running: bool
    skip_visible: bool

    @property
    def display(self) -> str:
        return format_remaining(self.remaining_millis)

    @property
    def remaining_seconds(self) -> int:
        return self.remaining_millis // 1000


@dataclass(frozen=True)
class TimerActionResult:
    """Result envelope returned after applying a control operation."""
    action: str
    accepted: bool
    reason: str
    state: TimerState


class PhaseTimer:
    """Focus/break state machine driven by a cancellable countdown.

    Control operations and countdown callbacks are serialized by a re-entrant
    lock, and every new countdown cancels the previous one first, so at most
    one driver can decrement the remaining time.
    """

    def __init__(
        self,
        scheduler: CountdownScheduler,
        notification_sink: Optional[NotificationSink] = None,
        *,
        durations: Optional[PhaseDurations] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._scheduler = scheduler
        self._notification_sink = notification_sink
        self._durations = durations or PhaseDurations()
        self._rng = rng if rng is not None else random.Random()
        self._logger = logger or logging.getLogger("pomodoro")
        self._lock = threading.RLock()
        self._observers: list[TimerObserver] = []

        self._driver: Optional[CountdownHandle] = None
        self._phase = Phase.FOCUS
        self._remaining_millis = self._durations.for_phase(Phase.FOCUS)
        self._is_running = False
        self._skip_visible = False

    @property
    def durations(self) -> PhaseDurations:
        return self._durations

    @property
    def has_active_driver(self) -> bool:
        with self._lock:
            return self._driver is not None

    def snapshot(self) -> TimerState:
        with self._lock:
            return self._snapshot_locked()

    def subscribe(self, observer: TimerObserver) -> Callable[[], None]:
        """Register an observer for published updates; returns an unsubscribe callable.

        Each update carries the action that changed the timer (an operation name,
        `tick`, or `phase_started` for an automatic phase switch) and the new state.
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def start_focus_session(self) -> TimerActionResult:
        with self._lock:
            self._start_focus_locked(ACTION_START_FOCUS, REASON_STARTED)
            return self._result_locked(ACTION_START_FOCUS, True, REASON_STARTED)

    def start_timer(self) -> TimerActionResult:
        with self._lock:
            self._start_countdown_locked()
            self._logger.info(
                "Timer resumed: phase=%s remaining=%s",
                self._phase.value,
                format_remaining(self._remaining_millis),
            )
            self._publish_locked(ACTION_START, REASON_RESUMED)
            return self._result_locked(ACTION_START, True, REASON_RESUMED)

    resume = start_timer

    def pause_timer(self) -> TimerActionResult:
        with self._lock:
            was_running = self._is_running
            self._cancel_driver_locked()
            self._is_running = False
            if not was_running:
                return self._result_locked(ACTION_PAUSE, False, REASON_NOT_RUNNING)

            self._logger.info(
                "Timer paused: phase=%s remaining=%s",
                self._phase.value,
                format_remaining(self._remaining_millis),
            )
            self._publish_locked(ACTION_PAUSE, REASON_PAUSED)
            return self._result_locked(ACTION_PAUSE, True, REASON_PAUSED)

    def reset_timer(self) -> TimerActionResult:
        with self._lock:
            self._cancel_driver_locked()
            self._is_running = False
            self._phase = Phase.FOCUS
            self._remaining_millis = self._durations.for_phase(Phase.FOCUS)
            self._skip_visible = False
            self._logger.info("Timer reset")
            self._publish_locked(ACTION_RESET, REASON_RESET)
            return self._result_locked(ACTION_RESET, True, REASON_RESET)

    def skip_break(self) -> TimerActionResult:
        with self._lock:
            if self._phase != Phase.BREAK:
                return self._result_locked(ACTION_SKIP_BREAK, False, REASON_NOT_IN_BREAK)

            self._logger.info(
                "Break skipped with %s remaining",
                format_remaining(self._remaining_millis),
            )
            self._start_focus_locked(ACTION_SKIP_BREAK, REASON_SKIPPED)
            return self._result_locked(ACTION_SKIP_BREAK, True, REASON_SKIPPED)

    def close(self) -> None:
        with self._lock:
            self._cancel_driver_locked()
            self._is_running = False

    def _start_focus_locked(self, action: str, reason: str) -> None:
        self._cancel_driver_locked()
        self._phase = Phase.FOCUS
        self._remaining_millis = self._durations.for_phase(Phase.FOCUS)
        self._skip_visible = False
        self._logger.info("Focus session started: %s", format_remaining(self._remaining_millis))
        self._notify_locked()
        self._start_countdown_locked()
        self._publish_locked(action, reason)

    def _start_break_locked(self, action: str, reason: str) -> None:
        self._cancel_driver_locked()
        self._phase = Phase.BREAK
        self._remaining_millis = self._durations.for_phase(Phase.BREAK)
        self._skip_visible = True
        self._logger.info("Break session started: %s", format_remaining(self._remaining_millis))
        self._notify_locked()
        self._start_countdown_locked()
        self._publish_locked(action, reason)

    def _start_countdown_locked(self) -> None:
        self._cancel_driver_locked()
        self._is_running = True

        handle: Optional[CountdownHandle] = None

        def on_tick(remaining_millis: int) -> None:
            self._on_tick(handle, remaining_millis)

        def on_finish() -> None:
            self._on_finish(handle)

        handle = self._scheduler.schedule(
            self._remaining_millis,
            on_tick=on_tick,
            on_finish=on_finish,
            interval_ms=TICK_INTERVAL_MS,
        )
        self._driver = handle

    def _cancel_driver_locked(self) -> None:
        driver = self._driver
        self._driver = None
        if driver is not None:
            driver.cancel()

    def _on_tick(self, handle: Optional[CountdownHandle], remaining_millis: int) -> None:
        with self._lock:
            if handle is None or handle is not self._driver:
                return

            default = self._durations.for_phase(self._phase)
            self._remaining_millis = max(0, min(default, int(remaining_millis)))
            self._publish_locked(ACTION_TICK, REASON_TICK)

    def _on_finish(self, handle: Optional[CountdownHandle]) -> None:
        with self._lock:
            if handle is None or handle is not self._driver:
                return

            self._driver = None
            self._remaining_millis = 0
            self._is_running = False
            self._logger.info("Phase completed: %s", self._phase.value)
            # Next phase is armed before anything is published.
            if self._phase == Phase.FOCUS:
                self._start_break_locked(ACTION_PHASE_STARTED, REASON_STARTED)
            else:
                self._start_focus_locked(ACTION_PHASE_STARTED, REASON_STARTED)

    def _notify_locked(self) -> None:
        request = build_notification_request(self._phase, self._rng)
        sink = self._notification_sink
        if sink is None:
            return
        try:
            sink.notify(request)
        except Exception as error:
            self._logger.warning("Notification delivery failed: %s", error)

    def _publish_locked(self, action: str, reason: str) -> None:
        update = self._result_locked(action, True, reason)
        for observer in tuple(self._observers):
            try:
                observer(update)
            except Exception as error:
                self._logger.error("Timer observer failed: %s", error, exc_info=True)

    def _result_locked(self, action: str, accepted: bool, reason: str) -> TimerActionResult:
        return TimerActionResult(
            action=action,
            accepted=accepted,
            reason=reason,
            state=self._snapshot_locked(),
        )

    def _snapshot_locked(self) -> TimerState:
        return TimerState(
            phase=self._phase,
            remaining_millis=self._remaining_millis,
            is_running=self._is_running,
            skip_visible=self._skip_visible,
        )
