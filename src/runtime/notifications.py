"""Notification sink that turns phase-start requests into UI alerts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from contracts.ui_protocol import EVENT_NOTIFICATION
from pomodoro import NotificationRequest, Phase

from .ui import RuntimeUIPublisher

PermissionCheck = Callable[[], bool]

SOUND_ALARM = "alarm"
SOUND_NOTIFICATION = "notification"


@dataclass(frozen=True)
class NotificationStyle:
    icon: str
    color: str
    sound: str


DEFAULT_STYLE = NotificationStyle(icon="ic_default", color="#00FF00", sound=SOUND_NOTIFICATION)

PHASE_STYLES: dict[Phase, NotificationStyle] = {
    Phase.FOCUS: NotificationStyle(icon="ic_focus", color="#FF0000", sound=SOUND_ALARM),
    Phase.BREAK: NotificationStyle(icon="ic_break", color="#00FF00", sound=SOUND_NOTIFICATION),
}


def style_for_phase(phase: Optional[Phase]) -> NotificationStyle:
    if phase is None:
        return DEFAULT_STYLE
    return PHASE_STYLES.get(phase, DEFAULT_STYLE)


class UINotificationSink:
    """Delivers alerts as websocket events when notification permission is held.

    Requests without permission are dropped silently; delivery never raises
    back into the timer.
    """

    def __init__(
        self,
        ui: RuntimeUIPublisher,
        *,
        permission_check: PermissionCheck,
        sound_enabled: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        self._ui = ui
        self._permission_check = permission_check
        self._sound_enabled = sound_enabled
        self._logger = logger or logging.getLogger("notifications")

    def notify(self, request: NotificationRequest) -> None:
        if not self._permission_check():
            self._logger.debug("Notification permission missing; dropped %r", request.title)
            return

        style = style_for_phase(request.phase)
        payload = {
            "title": request.title,
            "message": request.message,
            "phase": request.phase.value,
            "icon": style.icon,
            "color": style.color,
            "priority": "high",
            "auto_cancel": True,
        }
        if self._sound_enabled:
            payload["sound"] = style.sound

        self._logger.info("Notification: %s - %s", request.title, request.message)
        self._ui.publish(EVENT_NOTIFICATION, **payload)
