"""
Shared benchmark helpers: options presets, a repeated-trial baseline,
and JSON-friendly result assembly.

The baseline (``batch_trials``) is the classic "run a fixed batch N times,
divide by the batch size" approach.  It exists so the regression estimate
from linbench can be put side by side with what a plain loop reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from linbench import Options, Stopwatch, mean, retain

# Full runs use the library defaults; quick runs are for smoke checks
FULL_OPTIONS = Options()
QUICK_OPTIONS = Options().with_time_budget(0.5)

DEFAULT_TRIALS = 30
DEFAULT_BATCH = 1000


@dataclass
class BatchStats:
    """Per-call nanoseconds from fixed-size batches."""

    mean_ns: float
    min_ns: float
    max_ns: float
    n: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "mean_ns": round(self.mean_ns, 3),
            "min_ns": round(self.min_ns, 3),
            "max_ns": round(self.max_ns, 3),
            "n_trials": self.n,
        }


def batch_trials(
    fn: Callable[[], Any],
    batch: int = DEFAULT_BATCH,
    n: int = DEFAULT_TRIALS,
    warmup: int = 3,
) -> BatchStats:
    """Time *n* batches of *batch* calls, reporting per-call cost."""
    for _ in range(warmup):
        fn()

    per_call: list[float] = []
    for _ in range(n):
        stopwatch = Stopwatch()
        for _ in range(batch):
            retain(fn())
        per_call.append(stopwatch.elapsed().value / batch)

    return BatchStats(
        mean_ns=mean(per_call),
        min_ns=min(per_call),
        max_ns=max(per_call),
        n=n,
    )


def options_for(quick: bool) -> Options:
    return QUICK_OPTIONS if quick else FULL_OPTIONS
