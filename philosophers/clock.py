"""Millisecond wall clock and an interruptible sleep."""

from __future__ import annotations

import time
from collections.abc import Callable

_POLL_SECONDS = 0.0004


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(duration: int, should_stop: Callable[[], bool]) -> bool:
    """Sleep for ``duration`` milliseconds unless ``should_stop`` turns true.

    Returns True when the full duration elapsed, False when stopped early.
    """
    start = now_ms()
    while not should_stop():
        if now_ms() - start >= duration:
            return True
        time.sleep(_POLL_SECONDS)
    return False