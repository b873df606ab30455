import threading
import time
import unittest

from pomodoro import CountdownHandle, ThreadedCountdownScheduler


class CountdownHandleTests(unittest.TestCase):
    def test_cancel_is_idempotent(self) -> None:
        handle = CountdownHandle()
        self.assertFalse(handle.cancelled)
        handle.cancel()
        handle.cancel()
        self.assertTrue(handle.cancelled)
        self.assertTrue(handle.wait(0))


class ThreadedCountdownSchedulerTests(unittest.TestCase):
    def test_ticks_remaining_then_finishes(self) -> None:
        scheduler = ThreadedCountdownScheduler()
        ticks: list[int] = []
        finished = threading.Event()

        scheduler.schedule(
            40,
            on_tick=ticks.append,
            on_finish=finished.set,
            interval_ms=10,
        )

        self.assertTrue(finished.wait(2.0))
        self.assertEqual([30, 20, 10], ticks)

    def test_cancel_stops_further_callbacks(self) -> None:
        scheduler = ThreadedCountdownScheduler()
        ticks: list[int] = []
        finished = threading.Event()

        handle = scheduler.schedule(
            500,
            on_tick=ticks.append,
            on_finish=finished.set,
            interval_ms=100,
        )
        handle.cancel()
        time.sleep(0.25)

        self.assertEqual([], ticks)
        self.assertFalse(finished.is_set())

    def test_callback_errors_end_the_driver(self) -> None:
        scheduler = ThreadedCountdownScheduler()
        calls: list[int] = []
        finished = threading.Event()

        def failing_tick(remaining: int) -> None:
            calls.append(remaining)
            raise RuntimeError("observer exploded")

        scheduler.schedule(50, on_tick=failing_tick, on_finish=finished.set, interval_ms=10)
        time.sleep(0.2)

        self.assertEqual([40], calls)
        self.assertFalse(finished.is_set())

    def test_rejects_non_positive_interval(self) -> None:
        scheduler = ThreadedCountdownScheduler()
        with self.assertRaises(ValueError):
            scheduler.schedule(1000, on_tick=lambda _: None, on_finish=lambda: None, interval_ms=0)


if __name__ == "__main__":
    unittest.main()
