"""
Optimization barrier for benchmarked values.

``retain(value)`` hands its argument back unchanged after publishing it to
a module-level slot, so the computation that produced it is observable
from outside the benchmark loop.  The slot holds at most one value;
``collect()`` calls :func:`release` when it returns so the last result of
a run is not kept alive afterwards.

CPython never elides a call whose result is unused, so the barrier only
matters on interpreters with a tracing JIT (PyPy, GraalPy).  Whether
those treat a global store as "observed" is up to the interpreter;
results there may still be skewed by dead-code elimination.
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")

_sink: Any = None


def retain(value: T) -> T:
    """Return *value* unchanged, forcing it to be materialized."""
    global _sink
    _sink = value
    return _sink


def release() -> None:
    """Drop the reference held by the last :func:`retain` call."""
    global _sink
    _sink = None
