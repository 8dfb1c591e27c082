"""
Benchmark: linbench measuring small, well-understood workloads.

Sections:
  C1: Iterative Fibonacci at a few input sizes (plain)
  C2: Summation: builtin sum vs math.fsum vs kahan_sum (plain)
  C3: Sorting with input construction excluded (setup-excluded)
  C4: Allocation with teardown excluded (drop-excluded)
  C5: Regression estimate vs fixed-batch baseline

Every result is reported as a line on stdout and returned as a dict.
"""

from __future__ import annotations

import math
import random
import sys
from typing import Any

from linbench import (
    BenchResult,
    Options,
    bench,
    bench_drop,
    bench_setup,
    kahan_sum,
)

from bench_utils import batch_trials, options_for


def iterative_fib(n: int) -> int:
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def _collect(results: list[BenchResult]) -> dict[str, Any]:
    return {r.name: r.to_dict() for r in results}


# ═══════════════════════════════════════════════════════════════════
# C1–C4
# ═══════════════════════════════════════════════════════════════════


def bench_fibonacci(opts: Options, sizes: tuple[int, ...] = (1, 4, 16)) -> dict[str, Any]:
    return _collect([
        bench(opts, f"iterative_{n}", lambda n=n: iterative_fib(n))
        for n in sizes
    ])


def bench_summation(opts: Options, size: int = 1000) -> dict[str, Any]:
    rng = random.Random(42)
    values = [rng.uniform(-1e6, 1e6) for _ in range(size)]
    return _collect([
        bench(opts, f"sum_{size}", lambda: sum(values)),
        bench(opts, f"fsum_{size}", lambda: math.fsum(values)),
        bench(opts, f"kahan_sum_{size}", lambda: kahan_sum(values)),
    ])


def bench_sorting(opts: Options, size: int = 256) -> dict[str, Any]:
    rng = random.Random(42)

    def shuffled() -> list[float]:
        return [rng.random() for _ in range(size)]

    return _collect([
        bench_setup(opts, f"sorted_{size}", shuffled, sorted),
        bench_setup(opts, f"list_sort_{size}", shuffled, list.sort),
    ])


def bench_allocation(opts: Options, size: int = 64) -> dict[str, Any]:
    return _collect([
        bench(opts, f"alloc_list_{size}", lambda: [0] * size),
        bench_drop(opts, f"alloc_list_{size}_drop", lambda: [0] * size),
        bench_drop(opts, f"alloc_dict_{size}_drop", lambda: dict.fromkeys(range(size))),
    ])


# ═══════════════════════════════════════════════════════════════════
# C5: Baseline comparison
# ═══════════════════════════════════════════════════════════════════


def bench_vs_baseline(opts: Options) -> dict[str, Any]:
    """Compare the fitted slope against the fixed-batch mean."""
    fn = lambda: iterative_fib(16)  # noqa: E731
    result = bench(opts, "iterative_16_vs_batch", fn)
    baseline = batch_trials(fn)
    return {
        "linbench": result.to_dict(),
        "batch": baseline.to_dict(),
        "ratio": (
            round(result.analysis.slope / baseline.mean_ns, 4)
            if result.analysis is not None and baseline.mean_ns > 0
            else None
        ),
    }


def run_all(quick: bool = False) -> dict[str, Any]:
    opts = options_for(quick)
    return {
        "fibonacci": bench_fibonacci(opts),
        "summation": bench_summation(opts),
        "sorting": bench_sorting(opts),
        "allocation": bench_allocation(opts),
        "baseline": bench_vs_baseline(opts),
    }


if __name__ == "__main__":
    run_all(quick="--quick" in sys.argv[1:])
