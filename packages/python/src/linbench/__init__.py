"""
linbench: micro-benchmarks by linear regression.

Runs a callable at a geometrically growing number of iterations, times
each batch with a nanosecond stopwatch, and fits elapsed time against
iteration count.  The slope is the per-call cost; R² says how well a
straight line explains the samples.
"""

import logging

__version__ = "0.3.0"

from linbench.units import Bytes, Nanoseconds
from linbench.clock import Stopwatch
from linbench.sequence import GeometricSequence
from linbench.statistics import Analysis, kahan_sum, mean, sum_and_mean, regression
from linbench.barrier import retain
from linbench.options import Options, DEFAULT_OPTIONS
from linbench.collector import (
    MAX_ITERATIONS,
    Sample,
    collect,
    plain,
    drop_excluded,
    setup_excluded,
    size_of,
    required_memory,
)
from linbench.driver import BenchResult, analyze, run, bench, bench_drop, bench_setup
from linbench.report import format_number, format_result, print_result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Units
    "Bytes",
    "Nanoseconds",
    # Timing primitives
    "Stopwatch",
    "GeometricSequence",
    "retain",
    # Statistics
    "Analysis",
    "kahan_sum",
    "mean",
    "sum_and_mean",
    "regression",
    # Configuration
    "Options",
    "DEFAULT_OPTIONS",
    # Sample collection
    "MAX_ITERATIONS",
    "Sample",
    "collect",
    "plain",
    "drop_excluded",
    "setup_excluded",
    "size_of",
    "required_memory",
    # Benchmark driver
    "BenchResult",
    "analyze",
    "run",
    "bench",
    "bench_drop",
    "bench_setup",
    # Reporting
    "format_number",
    "format_result",
    "print_result",
]
