"""High-precision stopwatch over the monotonic performance counter."""

from __future__ import annotations

import time

from linbench.units import Nanoseconds


class Stopwatch:
    """A monotonic stopwatch with nanosecond resolution.

    ``elapsed()`` is never negative and never decreases between calls on
    the same instance until ``reset()`` restarts it.
    """

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    @classmethod
    def start(cls) -> Stopwatch:
        return cls()

    def elapsed(self) -> Nanoseconds:
        """Return the nanoseconds since construction or the last reset."""
        return Nanoseconds(max(0, time.perf_counter_ns() - self._start))

    def reset(self) -> None:
        self._start = time.perf_counter_ns()

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self.elapsed().value}ns)"
