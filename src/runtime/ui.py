from __future__ import annotations

from typing import Any, Optional, Protocol

from contracts.ui_protocol import EVENT_TIMER
from pomodoro import TimerState


class UIServerLike(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...

    def publish_state(
        self,
        state: str,
        *,
        message: Optional[str] = None,
        **payload: Any,
    ) -> None:
        ...


class RuntimeUIPublisher:
    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_state(
        self,
        state: str,
        *,
        message: Optional[str] = None,
        **payload: Any,
    ) -> None:
        if self._ui_server:
            self._ui_server.publish_state(state, message=message, **payload)

    def publish_timer_update(
        self,
        state: TimerState,
        *,
        action: str,
        accepted: Optional[bool] = None,
        reason: str = "",
    ) -> None:
        payload: dict[str, Any] = {
            "action": action,
            "phase": state.phase.value,
            "display": state.display,
            "remaining_millis": state.remaining_millis,
            "remaining_seconds": state.remaining_seconds,
            "is_running": state.is_running,
            "skip_visible": state.skip_visible,
        }
        if accepted is not None:
            payload["accepted"] = accepted
        if reason:
            payload["reason"] = reason
        self.publish(EVENT_TIMER, **payload)
