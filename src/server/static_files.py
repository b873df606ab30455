"""Static asset lookup for files shipped beside the UI shell's index page."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

_TEXT_MIME_TYPES = frozenset(
    {
        "application/javascript",
        "application/json",
        "application/manifest+json",
        "image/svg+xml",
    }
)


def resolve_static_file(ui_root: Path, request_path: str) -> Optional[Path]:
    """Map a request path to a visible file under `ui_root`, or None."""
    relative = request_path.lstrip("/") if request_path else ""
    if not relative:
        return None

    # Dotfiles (and anything inside dot-directories) are never served.
    if any(part.startswith(".") for part in Path(relative).parts):
        return None

    root = ui_root.resolve()
    candidate = (root / relative).resolve()
    if root not in candidate.parents or not candidate.is_file():
        return None
    return candidate


def guess_content_type(path: Path) -> str:
    """Content type for an asset; text-like payloads are served as UTF-8."""
    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None:
        return "application/octet-stream"
    if mime_type.startswith("text/") or mime_type in _TEXT_MIME_TYPES:
        return f"{mime_type}; charset=utf-8"
    return mime_type
