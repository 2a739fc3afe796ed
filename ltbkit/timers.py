"""A monotonic stopwatch and a context manager that reports elapsed time."""

from __future__ import annotations

import time
from types import TracebackType
from typing import Any, Callable, Optional

from ltbkit.duration import Duration

__all__ = ["Timer", "ScopedTimer"]


class Timer:
    """Measures time elapsed since it was created or last started."""

    def __init__(self) -> None:
        self._start_time = time.monotonic_ns()

    def start(self) -> None:
        """Restart the timer from now."""
        self._start_time = time.monotonic_ns()

    def duration_since_start(self) -> Duration:
        """Return the nanoseconds elapsed since the timer was started."""
        return time.monotonic_ns() - self._start_time


class ScopedTimer:
    """Times a ``with`` block and hands the elapsed duration to a callback."""

    def __init__(self, callback: Optional[Callable[[Duration], Any]]) -> None:
        self._callback = callback
        self._timer = Timer()

    def __enter__(self) -> ScopedTimer:
        self._timer.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        if self._callback:
            self._callback(self._timer.duration_since_start())
        return False