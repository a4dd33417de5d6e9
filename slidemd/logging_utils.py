"""JSONL run log for conversions.

Each line records one pipeline event. Logging is opt-in: every helper is a
no-op when no log path is configured.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .errors import SlideMarkdownError

PARSE_DONE = "PARSE_DONE"
VALIDATE_DONE = "VALIDATE_DONE"
RENDER_DONE = "RENDER_DONE"
CONVERT_FAILED = "CONVERT_FAILED"
ASSET_CACHE_HIT = "ASSET_CACHE_HIT"
ASSET_DOWNLOADED = "ASSET_DOWNLOADED"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def log_event(log_path: Optional[Path], event_type: str, payload: Dict[str, Any]) -> None:
    if log_path is None:
        return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    line = json.dumps(
        {"timestamp": _utc_now(), "event_type": event_type, "payload": payload},
        ensure_ascii=True,
        default=str,
    )
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")


def log_failure(log_path: Optional[Path], error: "SlideMarkdownError") -> None:
    """Record a fatal conversion error with its kind and context."""
    log_event(log_path, CONVERT_FAILED, error.to_dict())
