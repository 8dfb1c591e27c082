"""
Unit-safe integer quantities: byte counts and nanosecond durations.

Both types wrap a non-negative ``int`` and only interoperate with
themselves, so a byte budget can never be compared against a duration or
a bare iteration count by accident::

    Bytes.mib(512) < Bytes(1024)          # fine
    Bytes(10) < Nanoseconds(10)           # TypeError
    Nanoseconds(5) + 3                    # TypeError

Scaling by a plain ``int`` is allowed (``Bytes(8) * iterations``) because
that is how per-element sizes become buffer sizes.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

NANOS_PER_SECOND = 1_000_000_000


def _validate_count(value: Any, name: str) -> int:
    """Validate a raw unit value."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got: bool")
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got: {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got: {value}")
    return value


def _is_scalar(other: Any) -> bool:
    return isinstance(other, int) and not isinstance(other, bool)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class _Quantity:
    value: int

    def __post_init__(self) -> None:
        _validate_count(self.value, type(self).__name__)

    # ── Comparison (same unit only) ────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    # ── Arithmetic ─────────────────────────────────────────────────

    def __add__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __mul__(self, other: Any):
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self.value * other)

    __rmul__ = __mul__

    def __floordiv__(self, other: Any):
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self.value // other)

    def __int__(self) -> int:
        return self.value


class Bytes(_Quantity):
    """A number of bytes."""

    @classmethod
    def kib(cls, n: int) -> Bytes:
        return cls(_validate_count(n, "kib") * 1024)

    @classmethod
    def mib(cls, n: int) -> Bytes:
        return cls(_validate_count(n, "mib") * 1024 ** 2)

    @classmethod
    def gib(cls, n: int) -> Bytes:
        return cls(_validate_count(n, "gib") * 1024 ** 3)

    def __str__(self) -> str:
        return f"{self.value} B"


class Nanoseconds(_Quantity):
    """A number of nanoseconds.

    ``str()`` renders the duration as seconds with one decimal place
    (``5.0s``), which is the form used in benchmark report lines.
    """

    @classmethod
    def from_seconds(cls, seconds: float) -> Nanoseconds:
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise TypeError(
                f"seconds must be a number, got: {type(seconds).__name__}"
            )
        if not math.isfinite(seconds) or seconds < 0:
            raise ValueError(f"seconds must be finite and non-negative, got: {seconds}")
        return cls(round(seconds * NANOS_PER_SECOND))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Nanoseconds:
        # Integer arithmetic: timedelta carries microsecond resolution.
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls(micros * 1_000)

    def seconds(self) -> float:
        return self.value / NANOS_PER_SECOND

    def __str__(self) -> str:
        return f"{self.seconds():.1f}s"
