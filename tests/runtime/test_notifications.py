import logging
import unittest

from pomodoro import NotificationRequest, Phase
from runtime.notifications import DEFAULT_STYLE, UINotificationSink, style_for_phase
from runtime.ui import RuntimeUIPublisher


class _UIServerStub:
    def __init__(self):
        self.events: list[tuple[str, dict[str, object]]] = []

    def publish(self, event_type: str, **payload):
        self.events.append((event_type, payload))

    def publish_state(self, state: str, *, message=None, **payload):
        pass


class NotificationStyleTests(unittest.TestCase):
    def test_focus_and_break_styles(self) -> None:
        focus = style_for_phase(Phase.FOCUS)
        self.assertEqual(("ic_focus", "#FF0000", "alarm"), (focus.icon, focus.color, focus.sound))

        rest = style_for_phase(Phase.BREAK)
        self.assertEqual(("ic_break", "#00FF00", "notification"), (rest.icon, rest.color, rest.sound))

    def test_unknown_phase_uses_default_icon(self) -> None:
        self.assertEqual(DEFAULT_STYLE, style_for_phase(None))
        self.assertEqual("ic_default", DEFAULT_STYLE.icon)
        self.assertEqual("#00FF00", DEFAULT_STYLE.color)


class UINotificationSinkTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ui_server = _UIServerStub()
        self.permission = True

    def _sink(self, *, sound_enabled: bool = True) -> UINotificationSink:
        return UINotificationSink(
            RuntimeUIPublisher(self.ui_server),
            permission_check=lambda: self.permission,
            sound_enabled=sound_enabled,
            logger=logging.getLogger("test"),
        )

    def test_publishes_styled_notification(self) -> None:
        self._sink().notify(NotificationRequest("Break Start", "Take a breather.", Phase.BREAK))

        self.assertEqual(1, len(self.ui_server.events))
        kind, payload = self.ui_server.events[0]
        self.assertEqual("notification", kind)
        self.assertEqual("Break Start", payload["title"])
        self.assertEqual("Take a breather.", payload["message"])
        self.assertEqual("break", payload["phase"])
        self.assertEqual("ic_break", payload["icon"])
        self.assertEqual("#00FF00", payload["color"])
        self.assertEqual("notification", payload["sound"])
        self.assertEqual("high", payload["priority"])
        self.assertTrue(payload["auto_cancel"])

    def test_sound_can_be_disabled(self) -> None:
        self._sink(sound_enabled=False).notify(
            NotificationRequest("Focus Start", "Go!", Phase.FOCUS)
        )

        self.assertNotIn("sound", self.ui_server.events[0][1])

    def test_missing_permission_drops_silently(self) -> None:
        sink = self._sink()
        self.permission = False

        sink.notify(NotificationRequest("Focus Start", "Go!", Phase.FOCUS))

        self.assertEqual([], self.ui_server.events)

    def test_permission_is_checked_per_request(self) -> None:
        sink = self._sink()
        self.permission = False
        sink.notify(NotificationRequest("Focus Start", "Go!", Phase.FOCUS))
        self.permission = True
        sink.notify(NotificationRequest("Break Start", "Rest.", Phase.BREAK))

        self.assertEqual(["Break Start"], [payload["title"] for _, payload in self.ui_server.events])


if __name__ == "__main__":
    unittest.main()
