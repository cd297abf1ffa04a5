"""Millisecond clock helpers."""

from __future__ import annotations

import time

_MAX_NAP_MS = 1


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def wait_until(start_time: int) -> None:
    """Block until the clock reaches start_time (in milliseconds)."""
    while (remaining := start_time - now_ms()) > 0:
        time.sleep(min(remaining, _MAX_NAP_MS) / 1000)