"""
Adaptive sample collection.

``collect()`` walks a geometric sequence of iteration counts (1, 2, 3, ...
growing by ``options.growth_factor``) and asks a measurement strategy to
time each count.  It stops at the first of:

    - the iteration count passing ``MAX_ITERATIONS``
    - the total collection time passing ``options.time_budget``
    - the strategy returning ``None`` (memory budget exceeded)

A round that would exceed a budget is never retried at a smaller count:
counts only grow, so every later round would exceed it too.

Measurement strategies
----------------------
A strategy is any ``Callable[[int], Optional[Nanoseconds]]``.  Three are
built in, differing only in what the stopwatch sees:

``plain(fn)``
    ``fn()`` called *n* times back to back; each result passes through
    :func:`~linbench.barrier.retain` and is dropped immediately.

``drop_excluded(options, fn)``
    The *n* results are collected into a list inside the timed region.
    The list is released after the stopwatch stops, so the cost of
    tearing results down is not attributed to ``fn``.

``setup_excluded(options, setup, fn)``
    *n* inputs are built by ``setup()`` before the stopwatch starts; only
    ``fn(input)`` for each input is timed.

The last two hold *n* values live at once, so they refuse any round whose
``n × element_size`` exceeds ``options.memory_budget``.  The check runs
before anything is allocated.
"""

from __future__ import annotations

import logging
import struct
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from linbench.barrier import release, retain
from linbench.clock import Stopwatch
from linbench.options import Options
from linbench.sequence import GeometricSequence
from linbench.units import Bytes, Nanoseconds

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Safety bound against runaway iteration counts
MAX_ITERATIONS = 10 ** 15

# One list slot per buffered value
POINTER_SIZE = Bytes(struct.calcsize("P"))

Measurement = Callable[[int], Optional[Nanoseconds]]


@dataclass(frozen=True)
class Sample:
    """One timed round: *iterations* calls took *elapsed* nanoseconds."""

    iterations: int
    elapsed: Nanoseconds

    def __post_init__(self) -> None:
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise TypeError(
                f"iterations must be an int, got: {type(self.iterations).__name__}"
            )
        if self.iterations < 1:
            raise ValueError(f"iterations must be positive, got: {self.iterations}")
        if not isinstance(self.elapsed, Nanoseconds):
            raise TypeError(
                f"elapsed must be Nanoseconds, got: {type(self.elapsed).__name__}"
            )

    def as_point(self) -> tuple[float, float]:
        """Return ``(iterations, elapsed_ns)`` as floats for regression."""
        return float(self.iterations), float(self.elapsed.value)


# ═══════════════════════════════════════════════════════════════════
# Memory accounting
# ═══════════════════════════════════════════════════════════════════


def size_of(value: Any) -> Bytes:
    """Estimate the bytes one buffered *value* keeps alive.

    Shallow ``sys.getsizeof`` of the object plus the list slot that
    references it.  Containers are not traversed.
    """
    return Bytes(sys.getsizeof(value)) + POINTER_SIZE


def required_memory(iterations: int, element_size: Bytes) -> Bytes:
    """Bytes needed to hold *iterations* elements, at least one byte each."""
    return max(Bytes(1), element_size) * iterations


def _resolve_element_size(element_size: Optional[Bytes], probe: Callable[[], Any]) -> Bytes:
    if element_size is not None:
        if not isinstance(element_size, Bytes):
            raise TypeError(
                f"element_size must be Bytes, got: {type(element_size).__name__}"
            )
        return element_size
    # One untimed call to learn what a single value costs to hold.
    return size_of(probe())


# ═══════════════════════════════════════════════════════════════════
# Strategies
# ═══════════════════════════════════════════════════════════════════


def plain(fn: Callable[[], Any]) -> Measurement:
    """Time *n* consecutive calls of *fn*."""

    def measure(iterations: int) -> Optional[Nanoseconds]:
        stopwatch = Stopwatch()
        for _ in range(iterations):
            retain(fn())
        return stopwatch.elapsed()

    return measure


def drop_excluded(
    options: Options,
    fn: Callable[[], T],
    element_size: Optional[Bytes] = None,
) -> Measurement:
    """Time building *n* results of *fn*; release them off the clock.

    *element_size* defaults to :func:`size_of` one probe result of *fn*.
    """
    size = _resolve_element_size(element_size, fn)
    budget = options.memory_budget

    def measure(iterations: int) -> Optional[Nanoseconds]:
        if required_memory(iterations, size) > budget:
            return None
        stopwatch = Stopwatch()
        results = [fn() for _ in range(iterations)]
        elapsed = stopwatch.elapsed()
        del results
        return elapsed

    return measure


def setup_excluded(
    options: Options,
    setup: Callable[[], T],
    fn: Callable[[T], Any],
    element_size: Optional[Bytes] = None,
) -> Measurement:
    """Build *n* inputs with *setup* off the clock; time ``fn`` on each.

    *element_size* defaults to :func:`size_of` one probe result of *setup*.
    """
    size = _resolve_element_size(element_size, setup)
    budget = options.memory_budget

    def measure(iterations: int) -> Optional[Nanoseconds]:
        if required_memory(iterations, size) > budget:
            return None
        inputs = retain([setup() for _ in range(iterations)])
        stopwatch = Stopwatch()
        for value in inputs:
            retain(fn(value))
        elapsed = stopwatch.elapsed()
        del inputs
        return elapsed

    return measure


# ═══════════════════════════════════════════════════════════════════
# Sampling loop
# ═══════════════════════════════════════════════════════════════════


def collect(options: Options, measure: Measurement) -> list[Sample]:
    """Run *measure* at growing iteration counts until a budget is hit.

    Returns the samples in the order they were taken (strictly
    increasing iteration counts).  May be empty.
    """
    stopwatch = Stopwatch()
    samples: list[Sample] = []
    try:
        for iterations in GeometricSequence(1, options.growth_factor):
            if iterations > MAX_ITERATIONS:
                logger.debug("stopping at iteration ceiling after %d samples", len(samples))
                break
            if stopwatch.elapsed() > options.time_budget:
                logger.debug(
                    "time budget %s exhausted after %d samples",
                    options.time_budget,
                    len(samples),
                )
                break
            elapsed = measure(iterations)
            if elapsed is None:
                logger.debug(
                    "memory budget %s exceeded at %d iterations after %d samples",
                    options.memory_budget,
                    iterations,
                    len(samples),
                )
                break
            samples.append(Sample(iterations, elapsed))
    finally:
        release()
    return samples
