"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro.constants import DEFAULT_BREAK_SECONDS, DEFAULT_FOCUS_SECONDS

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSettings:
    """Phase durations loaded from `[timer]`."""
    focus_seconds: int = DEFAULT_FOCUS_SECONDS
    break_seconds: int = DEFAULT_BREAK_SECONDS


@dataclass(frozen=True)
class NotificationSettings:
    """Phase-start alert delivery settings from `[notifications]`."""
    enabled: bool = True
    sound: bool = True


@dataclass(frozen=True)
class UIServerSettings:
    """Websocket UI server bind and asset settings from `[ui_server]`."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = ""


@dataclass(frozen=True)
class LoggingSettings:
    """Root logger settings from `[logging]`."""
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Top-level immutable app config assembled from all TOML sections."""
    timer: TimerSettings
    notifications: NotificationSettings
    ui_server: UIServerSettings
    logging: LoggingSettings
    source_file: str
