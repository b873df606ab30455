import logging
import threading
import time
import unittest
from dataclasses import replace

from app_config import NotificationSettings, default_app_config
from pomodoro import CountdownHandle, Phase
from runtime import RuntimeBootstrap, RuntimeEngine, RuntimeHooks


class _UIServerStub:
    def __init__(self):
        self.events: list[tuple[str, dict[str, object]]] = []
        self.states: list[tuple[str, str | None, dict[str, object]]] = []
        self.command_handler = None
        self.stopped = False

    def set_command_handler(self, handler) -> None:
        self.command_handler = handler

    def publish(self, event_type: str, **payload):
        self.events.append((event_type, payload))

    def publish_state(self, state: str, *, message=None, **payload):
        self.states.append((state, message, payload))

    def stop(self, timeout_seconds: float = 5.0) -> None:
        self.stopped = True


class _SchedulerStub:
    def __init__(self):
        self.handles: list[CountdownHandle] = []

    def schedule(self, duration_ms, *, on_tick, on_finish, interval_ms=1000):
        handle = CountdownHandle()
        self.handles.append(handle)
        return handle


def _wait_until(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class RuntimeEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ui_server = _UIServerStub()
        self.scheduler = _SchedulerStub()
        self.engine = RuntimeEngine(
            RuntimeBootstrap(
                logger=logging.getLogger("test"),
                app_config=default_app_config(),
                ui_server=self.ui_server,
                hooks=RuntimeHooks(setup_signal_handlers=lambda engine: None),
                scheduler=self.scheduler,
            )
        )

    def test_registers_command_handler_on_ui_server(self) -> None:
        self.assertEqual(self.engine.submit_command, self.ui_server.command_handler)

    def test_run_processes_commands_until_stopped(self) -> None:
        exit_codes: list[int] = []
        worker = threading.Thread(target=lambda: exit_codes.append(self.engine.run()))
        worker.start()

        self.ui_server.command_handler("start_focus")
        self.assertTrue(_wait_until(lambda: self.engine.timer.snapshot().is_running))

        self.engine.request_stop()
        worker.join(timeout=2.0)

        self.assertFalse(worker.is_alive())
        self.assertEqual([0], exit_codes)
        self.assertTrue(self.ui_server.stopped)
        self.assertFalse(self.engine.timer.snapshot().is_running)
        self.assertTrue(all(handle.cancelled for handle in self.scheduler.handles))

        sync = self.ui_server.events[0]
        self.assertEqual("timer", sync[0])
        self.assertEqual("sync", sync[1]["action"])
        self.assertEqual("startup", sync[1]["reason"])
        self.assertEqual(Phase.FOCUS.value, sync[1]["phase"])

        notifications = [payload for kind, payload in self.ui_server.events if kind == "notification"]
        self.assertEqual(["Focus Start"], [payload["title"] for payload in notifications])

    def test_disabled_notifications_are_dropped(self) -> None:
        config = replace(
            default_app_config(),
            notifications=NotificationSettings(enabled=False, sound=True),
        )
        ui_server = _UIServerStub()
        engine = RuntimeEngine(
            RuntimeBootstrap(
                logger=logging.getLogger("test"),
                app_config=config,
                ui_server=ui_server,
                hooks=RuntimeHooks(setup_signal_handlers=lambda engine: None),
                scheduler=_SchedulerStub(),
            )
        )

        engine.timer.start_focus_session()

        self.assertTrue(engine.timer.snapshot().is_running)
        self.assertNotIn("notification", [kind for kind, _ in ui_server.events])


if __name__ == "__main__":
    unittest.main()
