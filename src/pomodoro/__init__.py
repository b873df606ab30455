from .constants import DEFAULT_BREAK_SECONDS, DEFAULT_FOCUS_SECONDS, Phase
from .messages import NotificationRequest, build_notification_request, format_remaining
from .scheduler import CountdownHandle, CountdownScheduler, ThreadedCountdownScheduler
from .service import (
    NotificationSink,
    PhaseDurations,
    PhaseTimer,
    TimerActionResult,
    TimerState,
)

__all__ = [
    "CountdownHandle",
    "CountdownScheduler",
    "DEFAULT_BREAK_SECONDS",
    "DEFAULT_FOCUS_SECONDS",
    "NotificationRequest",
    "NotificationSink",
    "Phase",
    "PhaseDurations",
    "PhaseTimer",
    "ThreadedCountdownScheduler",
    "TimerActionResult",
    "TimerState",
    "build_notification_request",
    "format_remaining",
]
