"""Display formatting and phase-start notification requests."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import Phase

FOCUS_TITLE = "Focus Start"
BREAK_TITLE = "Break Start"

FOCUS_MESSAGES: tuple[str, ...] = (
    "Come on, just 25 minutes to reach your goals!",
    "Time to focus, success is waiting for you!",
    "Focus is the road to success. Go for it!",
    "Don't stop now, every second counts.",
)

BREAK_MESSAGES: tuple[str, ...] = (
    "Well done! Relax, you've earned this break.",
    "Take a breather and enjoy this calm moment.",
    "Recharge your energy! A productive break is key.",
    "Breathe deeply and relax. Your mind needs it!",
)


@dataclass(frozen=True)
class NotificationRequest:
    """Alert emitted once per phase start and handed to the notification sink."""
    title: str
    message: str
    phase: Phase


def format_remaining(remaining_millis: int) -> str:
    """Format remaining milliseconds as `MM:SS`."""
    total_seconds = max(0, int(remaining_millis)) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def choose_message(messages: Sequence[str], rng: Optional[random.Random]) -> str:
    """Pick one message uniformly, falling back to the first one without entropy."""
    if rng is None:
        return messages[0]
    try:
        return messages[rng.randrange(len(messages))]
    except (OSError, NotImplementedError):
        return messages[0]


def build_notification_request(
    phase: Phase,
    rng: Optional[random.Random] = None,
) -> NotificationRequest:
    if phase == Phase.BREAK:
        return NotificationRequest(
            title=BREAK_TITLE,
            message=choose_message(BREAK_MESSAGES, rng),
            phase=phase,
        )
    return NotificationRequest(
        title=FOCUS_TITLE,
        message=choose_message(FOCUS_MESSAGES, rng),
        phase=Phase.FOCUS,
    )
