"""
Benchmark configuration.

``Options`` is an immutable value.  Each ``with_*`` method returns a new
instance, so a shared default can be specialised per benchmark without
affecting other callers::

    opts = Options().with_time_budget(1.5).with_memory_budget(Bytes.mib(64))

Defaults:
    growth_factor  1.01     iteration count grows 1% per round
    time_budget    5 s      total wall time for one benchmark's sampling
    memory_budget  512 MiB  ceiling for values held live at once by the
                            drop-excluded and setup-excluded strategies
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any, Union

from linbench.units import Bytes, Nanoseconds

DEFAULT_GROWTH_FACTOR = 1.01
DEFAULT_TIME_BUDGET = Nanoseconds.from_seconds(5)
DEFAULT_MEMORY_BUDGET = Bytes.mib(512)

TimeLike = Union[Nanoseconds, timedelta, int, float]
SizeLike = Union[Bytes, int]


def _coerce_time(value: Any) -> Nanoseconds:
    """Accept Nanoseconds, a timedelta, or a number of seconds."""
    if isinstance(value, Nanoseconds):
        return value
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise ValueError(f"time_budget must be non-negative, got: {value}")
        return Nanoseconds.from_timedelta(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"time_budget must be Nanoseconds, timedelta or seconds, "
            f"got: {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise ValueError(f"time_budget must be finite, got: {value}")
    return Nanoseconds.from_seconds(value)


def _coerce_size(value: Any) -> Bytes:
    """Accept Bytes or a plain byte count."""
    if isinstance(value, Bytes):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"memory_budget must be Bytes or int, got: {type(value).__name__}"
        )
    return Bytes(value)


@dataclass(frozen=True)
class Options:
    """Sampling configuration shared by every benchmark variant."""

    growth_factor: float = DEFAULT_GROWTH_FACTOR
    time_budget: Nanoseconds = field(default=DEFAULT_TIME_BUDGET)
    memory_budget: Bytes = field(default=DEFAULT_MEMORY_BUDGET)

    def __post_init__(self) -> None:
        factor = self.growth_factor
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise TypeError(
                f"growth_factor must be a number, got: {type(factor).__name__}"
            )
        if not math.isfinite(factor) or factor <= 1.0:
            raise ValueError(f"growth_factor must be finite and > 1.0, got: {factor}")

        # Since frozen=True, use object.__setattr__ for normalization
        object.__setattr__(self, "growth_factor", float(factor))
        object.__setattr__(self, "time_budget", _coerce_time(self.time_budget))
        object.__setattr__(self, "memory_budget", _coerce_size(self.memory_budget))

    def with_growth_factor(self, factor: float) -> Options:
        return replace(self, growth_factor=factor)

    def with_time_budget(self, budget: TimeLike) -> Options:
        return replace(self, time_budget=budget)

    def with_memory_budget(self, budget: SizeLike) -> Options:
        return replace(self, memory_budget=budget)

    def to_dict(self) -> dict[str, Any]:
        return {
            "growth_factor": self.growth_factor,
            "time_budget_ns": self.time_budget.value,
            "memory_budget_bytes": self.memory_budget.value,
        }


DEFAULT_OPTIONS = Options()
