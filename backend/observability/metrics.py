"""
Metrics and timing helpers for observability.

Responsibilities:
- Measure durations using monotonic time (immune to clock changes)
- Emit metrics as JSONL events via observability.logger
- Never aggregate: one metric = one log event
- Provide safe APIs that prevent timer leaks

Design notes:
- Durations use monotonic time
- Event timestamps (ts_ms) use wall-clock time for human readability
- Prefer the `timed()` context manager to avoid leaked timers
"""

from __future__ import annotations

import time
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping

from observability.logger import log_event


# -----------------------------------------------------------------------------
# Internal timer storage
# -----------------------------------------------------------------------------
# timer_id -> (metric_name, start_time_ns)
_active_timers: dict[str, tuple[str, int]] = {}


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def start_timer(name: str) -> str:
    """
    Start a monotonic timer.

    Returns:
        timer_id (str): Opaque ID required to stop the timer later.

    IMPORTANT:
        Callers MUST call stop_timer() in a finally block
        unless using the `timed()` context manager.
    """
    timer_id = f"timer_{uuid.uuid4().hex[:12]}"
    _active_timers[timer_id] = (name, time.monotonic_ns())
    return timer_id


def stop_timer(
    timer_id: str,
    *,
    request_id: str | None = None,
    details: dict[str, Any] | None = None,
    sink: Callable[[Mapping[str, Any]], None] = log_event,
) -> int | None:
    """
    Stop a previously started timer and emit a metric event.

    Args:
        timer_id: ID returned by start_timer()
        request_id: Optional request identifier for log correlation
        details: Optional structured metadata
        sink: Where the METRIC_TIMER event goes (e.g. EventLog.emit)

    Returns:
        duration_ms if the timer existed, else None
    """
    entry = _active_timers.pop(timer_id, None)
    if entry is None:
        return None

    name, start_ns = entry
    duration_ms = (time.monotonic_ns() - start_ns) // 1_000_000

    sink({
        "ts_ms": int(time.time() * 1000),
        "event_type": "METRIC_TIMER",
        "metric": name,
        "value_ms": duration_ms,
        "request_id": request_id,
        "details": details or {},
    })

    return duration_ms


# -----------------------------------------------------------------------------
# Safe API: context manager
# -----------------------------------------------------------------------------

@contextmanager
def timed(
    name: str,
    *,
    request_id: str | None = None,
    details: dict[str, Any] | None = None,
    sink: Callable[[Mapping[str, Any]], None] = log_event,
) -> Iterator[None]:
    """
    Context manager for measuring durations safely.

    Guarantees:
    - Timer is ALWAYS stopped (no leaks)
    - Metric is emitted exactly once
    - Exceptions inside the block are not suppressed

    Usage:
        with timed("mp3_frame_count", request_id=request_id):
            count_mp3_frames(data)
    """
    timer_id = start_timer(name)
    try:
        yield
    finally:
        stop_timer(
            timer_id,
            request_id=request_id,
            details=details,
            sink=sink,
        )
