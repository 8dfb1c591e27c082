"""
Benchmark entry points.

Each ``bench*`` function collects samples for one named benchmark, fits
the linear model, and hands the outcome to a reporting sink (by default
one line on stdout)::

    from linbench import Options, bench, bench_setup

    opts = Options().with_time_budget(2.0)
    bench(opts, "sum_1k", lambda: sum(range(1000)))
    bench_setup(opts, "sort_1k", lambda: random_list(1000), sorted)

Insufficient data policy
------------------------
A result is trustworthy only when at least two samples were taken and the
fitted slope is non-negative.  Anything else is reported as
"not enough samples" and carries ``analysis=None``.  A NaN slope (every
sample at the same iteration count) is not caught by the sign test and is
reported as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TypeVar

from linbench.clock import Stopwatch
from linbench.collector import (
    Measurement,
    Sample,
    collect,
    drop_excluded,
    plain,
    setup_excluded,
)
from linbench.options import Options
from linbench.report import print_result
from linbench.statistics import Analysis, regression
from linbench.units import Nanoseconds

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Minimum number of samples for a meaningful fit
MIN_SAMPLES = 2


@dataclass(frozen=True)
class BenchResult:
    """Outcome of one benchmark.

    Attributes:
        name:     Benchmark label.
        elapsed:  Wall time of the whole collection phase.
        samples:  Every accepted sample, in collection order.
        analysis: Fitted model, or ``None`` when data was insufficient.
    """

    name: str
    elapsed: Nanoseconds
    samples: tuple[Sample, ...]
    analysis: Optional[Analysis]

    @property
    def sufficient(self) -> bool:
        return self.analysis is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "elapsed_ns": self.elapsed.value,
            "n_samples": len(self.samples),
            "max_iterations": self.samples[-1].iterations if self.samples else 0,
            "analysis": self.analysis.to_dict() if self.analysis is not None else None,
        }


Sink = Callable[[BenchResult], Any]


def analyze(samples: Sequence[Sample]) -> Optional[Analysis]:
    """Fit *samples*, or return ``None`` if the data cannot be trusted."""
    if len(samples) < MIN_SAMPLES:
        return None
    analysis = regression([s.as_point() for s in samples])
    if analysis.slope < 0:
        return None
    return analysis


def run(
    options: Options,
    name: str,
    measure: Measurement,
    *,
    sink: Optional[Sink] = print_result,
) -> BenchResult:
    """Collect with *measure*, analyze, report, and return the result."""
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got: {type(name).__name__}")

    stopwatch = Stopwatch()
    samples = collect(options, measure)
    elapsed = stopwatch.elapsed()

    result = BenchResult(
        name=name,
        elapsed=elapsed,
        samples=tuple(samples),
        analysis=analyze(samples),
    )
    logger.debug(
        "benchmark %r finished: %d samples in %s (sufficient=%s)",
        name,
        len(samples),
        elapsed,
        result.sufficient,
    )
    if sink is not None:
        sink(result)
    return result


def bench(
    options: Options,
    name: str,
    fn: Callable[[], Any],
    *,
    sink: Optional[Sink] = print_result,
) -> BenchResult:
    """Benchmark *fn* including the cost of discarding its result."""
    return run(options, name, plain(fn), sink=sink)


def bench_drop(
    options: Options,
    name: str,
    fn: Callable[[], Any],
    *,
    sink: Optional[Sink] = print_result,
) -> BenchResult:
    """Benchmark *fn*, excluding the cost of releasing its results."""
    return run(options, name, drop_excluded(options, fn), sink=sink)


def bench_setup(
    options: Options,
    name: str,
    setup: Callable[[], T],
    fn: Callable[[T], Any],
    *,
    sink: Optional[Sink] = print_result,
) -> BenchResult:
    """Benchmark ``fn(setup())``, excluding the cost of ``setup()``."""
    return run(options, name, setup_excluded(options, setup, fn), sink=sink)
