"""A millisecond stopwatch used to bound the search."""

from __future__ import annotations

import time

_NS_PER_MS = 1_000_000


class Timer:
    """Measures whole milliseconds since the last start."""

    def __init__(self) -> None:
        self._started_ns = time.perf_counter_ns()

    def start(self) -> None:
        """Restart the measurement from now."""
        self._started_ns = time.perf_counter_ns()

    def elapsed_ms(self) -> int:
        """Return whole milliseconds since the last start."""
        return (time.perf_counter_ns() - self._started_ns) // _NS_PER_MS