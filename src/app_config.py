from __future__ import annotations

import os
import sys
import tomllib
from pathlib import Path
from typing import Mapping

from app_config_parser import log_level, parse_app_config
from app_config_schema import (
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    LoggingSettings,
    NotificationSettings,
    TimerSettings,
    UIServerSettings,
)

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "LoggingSettings",
    "NotificationSettings",
    "TimerSettings",
    "UIServerSettings",
    "default_app_config",
    "load_app_config",
    "log_level",
    "resolve_config_path",
]


def resolve_config_path(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Path:
    env = environ if environ is not None else os.environ
    env_path = env.get("APP_CONFIG_FILE") or None
    raw = config_path or env_path or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    if path.exists():
        return path

    # Frozen builds: look next to the executable when no explicit path is provided.
    if config_path is None and env_path is None and getattr(sys, "frozen", False):
        executable_path = Path(sys.executable).resolve().parent / DEFAULT_CONFIG_FILE
        if executable_path.exists():
            return executable_path

    return path


def default_app_config(source_file: str = "") -> AppConfig:
    return parse_app_config({}, base_dir=Path.cwd(), source_file=source_file)


def load_app_config(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load config.toml; a missing default file falls back to built-in defaults."""
    env = environ if environ is not None else os.environ
    explicit = config_path is not None or bool(env.get("APP_CONFIG_FILE"))
    path = resolve_config_path(config_path, environ=env)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return default_app_config()
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))
