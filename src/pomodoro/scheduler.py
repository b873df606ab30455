"""Cancellable one-second countdown drivers."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Protocol

from .constants import TICK_INTERVAL_MS

TickCallback = Callable[[int], None]
FinishCallback = Callable[[], None]


class CountdownHandle:
    """Cancellation token for one armed countdown."""

    def __init__(self):
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def wait(self, timeout: float) -> bool:
        """Sleep up to `timeout` seconds; True if cancelled meanwhile."""
        return self._cancelled.wait(timeout)


class CountdownScheduler(Protocol):
    def schedule(
        self,
        duration_ms: int,
        *,
        on_tick: TickCallback,
        on_finish: FinishCallback,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> CountdownHandle:
        ...


class ThreadedCountdownScheduler:
    """Runs each countdown on its own daemon thread with monotonic deadlines."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("pomodoro.scheduler")
        self._counter = 0

    def schedule(
        self,
        duration_ms: int,
        *,
        on_tick: TickCallback,
        on_finish: FinishCallback,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> CountdownHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be greater than zero")

        handle = CountdownHandle()
        self._counter += 1
        thread = threading.Thread(
            target=self._run,
            args=(handle, int(duration_ms), int(interval_ms), on_tick, on_finish),
            daemon=True,
            name=f"countdown-{self._counter}",
        )
        thread.start()
        return handle

    def _run(
        self,
        handle: CountdownHandle,
        duration_ms: int,
        interval_ms: int,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ) -> None:
        remaining = max(0, duration_ms)
        interval_seconds = interval_ms / 1000.0
        deadline = time.monotonic()

        try:
            while True:
                deadline += interval_seconds
                if handle.wait(max(0.0, deadline - time.monotonic())):
                    return

                remaining = max(0, remaining - interval_ms)
                if remaining == 0:
                    on_finish()
                    return
                on_tick(remaining)
        except Exception as error:
            self._logger.error("Countdown callback failed: %s", error, exc_info=True)
