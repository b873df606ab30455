import random
import unittest

from pomodoro import Phase, build_notification_request, format_remaining
from pomodoro.messages import BREAK_MESSAGES, FOCUS_MESSAGES, choose_message


class _BrokenRandom(random.Random):
    def randrange(self, *args, **kwargs):
        raise NotImplementedError("entropy source unavailable")


class FormatRemainingTests(unittest.TestCase):
    def test_formats_minutes_and_seconds(self) -> None:
        self.assertEqual("02:05", format_remaining(125_000))
        self.assertEqual("00:00", format_remaining(0))
        self.assertEqual("25:00", format_remaining(1_500_000))
        self.assertEqual("05:00", format_remaining(300_000))

    def test_truncates_partial_seconds(self) -> None:
        self.assertEqual("00:01", format_remaining(1_999))

    def test_negative_values_clamp_to_zero(self) -> None:
        self.assertEqual("00:00", format_remaining(-4_000))


class NotificationRequestTests(unittest.TestCase):
    def test_focus_request_uses_focus_title_and_message(self) -> None:
        request = build_notification_request(Phase.FOCUS, random.Random(1))
        self.assertEqual("Focus Start", request.title)
        self.assertIn(request.message, FOCUS_MESSAGES)
        self.assertEqual(Phase.FOCUS, request.phase)

    def test_break_request_uses_break_title_and_message(self) -> None:
        request = build_notification_request(Phase.BREAK, random.Random(1))
        self.assertEqual("Break Start", request.title)
        self.assertIn(request.message, BREAK_MESSAGES)
        self.assertEqual(Phase.BREAK, request.phase)

    def test_selection_covers_whole_message_set(self) -> None:
        rng = random.Random(42)
        picked = {choose_message(FOCUS_MESSAGES, rng) for _ in range(200)}
        self.assertEqual(set(FOCUS_MESSAGES), picked)

    def test_falls_back_when_randomness_unavailable(self) -> None:
        self.assertEqual(FOCUS_MESSAGES[0], choose_message(FOCUS_MESSAGES, _BrokenRandom()))
        self.assertEqual(BREAK_MESSAGES[0], choose_message(BREAK_MESSAGES, None))


if __name__ == "__main__":
    unittest.main()
