"""
JSONL event logging.

- One JSON object per line on stdout, flushed immediately
- `log_event` is the raw writer; it never raises
- `EventLog` is the per-app handle: it carries the on/off switch from
  AppConfig and stamps `ts_ms` on events that lack one

Usage example:

    event_log = EventLog(enabled=config.enable_json_logs)
    event_log.emit({"event_type": "MP3_FRAMES_COUNTED", "frame_count": 12})
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass
from typing import Any, Mapping, Callable


# ------------------------------------------------------------------
# Explicit output sink (patchable in tests)
# ------------------------------------------------------------------

def _stdout_print(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()

_print: Callable[[str], None] = _stdout_print


def _now_ms() -> int:
    return int(time.time() * 1000)


def log_event(event: Mapping[str, Any]) -> None:
    """
    Serialize `event` and write it as exactly one line.

    A non-serializable event is replaced by a LOGGER_SERIALIZATION_ERROR
    record carrying its repr, so a bad payload never fails a request.
    """
    try:
        line = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        fallback: dict[str, Any] = {
            "ts_ms": event.get("ts_ms"),
            "event_type": "LOGGER_SERIALIZATION_ERROR",
            "error": str(e),
            "original_event_repr": repr(event),
        }
        line = json.dumps(fallback, ensure_ascii=False, separators=(",", ":"))

    _print(line)


@dataclass(frozen=True)
class EventLog:
    """
    Event emitter owned by one FastAPI app (stored on app.state).

    enabled:
        False drops every event; other apps in the process are unaffected.
    """
    enabled: bool = True

    def emit(self, event: Mapping[str, Any]) -> None:
        """Write `event`, adding `ts_ms` (wall clock) when missing."""
        if not self.enabled:
            return

        if "ts_ms" not in event:
            event = {"ts_ms": _now_ms(), **event}

        log_event(event)
