"""Configuration model for the websocket UI server."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ServerConfigurationError(Exception):
    """Raised when UI server configuration is invalid."""


WEBSOCKET_PATH = "/ws"
ROOT_PATH = "/"
INDEX_PATH = "/index.html"
HEALTHZ_PATH = "/healthz"
DEFAULT_INDEX_FILE = Path(__file__).resolve().parent / "web_ui" / "index.html"


def _check_index_file(index_file: str) -> None:
    if not index_file:
        raise ServerConfigurationError("ui_server.index_file cannot be empty")
    index_path = Path(index_file)
    if not index_path.is_file():
        problem = "is not a file" if index_path.exists() else "was not found"
        raise ServerConfigurationError(f"UI index file {problem}: {index_path}")


@dataclass(frozen=True)
class UIServerConfig:
    """Validated UI server settings; the index file is only checked when enabled."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = str(DEFAULT_INDEX_FILE)

    def __post_init__(self) -> None:
        if not self.host.strip():
            raise ServerConfigurationError("ui_server.host cannot be empty")
        if not 1 <= self.port <= 65535:
            raise ServerConfigurationError(
                f"ui_server.port must be in [1, 65535], got: {self.port}"
            )
        if self.enabled:
            _check_index_file(self.index_file)

    @property
    def websocket_path(self) -> str:
        return WEBSOCKET_PATH

    @property
    def ui_root(self) -> Path:
        """Directory the index page lives in; static assets are served from here."""
        return Path(self.index_file).resolve().parent

    @classmethod
    def from_settings(cls, settings) -> "UIServerConfig":
        index_file = (settings.index_file or "").strip() or str(DEFAULT_INDEX_FILE)
        return cls(
            enabled=bool(settings.enabled),
            host=settings.host,
            port=settings.port,
            index_file=index_file,
        )
