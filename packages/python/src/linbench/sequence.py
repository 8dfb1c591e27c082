"""
Strictly increasing integer steps along a geometric sequence.

The sampling loop wants iteration counts that grow by a small factor
(1% by default).  Multiplying a real-valued accumulator and truncating
gives 1, 1, 1, 1, ... for a long time when the factor is close to one,
so each step advances the accumulator until the truncated value changes.
For factors very close to one the run of repeats is skipped in closed
form rather than one multiplication at a time::

    >>> from itertools import islice
    >>> list(islice(GeometricSequence(1, 1.5), 6))
    [1, 2, 3, 5, 7, 11]

The sequence is infinite and lazy.  It cannot be rewound; build a new one
to start over.
"""

from __future__ import annotations

import math
from typing import Iterator


class GeometricSequence:
    """Unique, strictly increasing ``int`` values from ``start * factor**k``.

    Args:
        start:  First value emitted (int >= 1).
        factor: Growth per step (finite, > 1.0).
    """

    __slots__ = ("current", "factor")

    def __init__(self, start: int, factor: float) -> None:
        if isinstance(start, bool) or not isinstance(start, int):
            raise TypeError(f"start must be an int, got: {type(start).__name__}")
        if start < 1:
            raise ValueError(f"start must be >= 1, got: {start}")
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise TypeError(f"factor must be a number, got: {type(factor).__name__}")
        if not math.isfinite(factor) or factor <= 1.0:
            raise ValueError(f"factor must be finite and > 1.0, got: {factor}")
        self.current = float(start)
        self.factor = float(factor)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        value = int(self.current)
        # Skip ahead to just below the next integer in one multiplication.
        steps = math.ceil(
            math.log((value + 1) / self.current) / math.log1p(self.factor - 1.0)
        )
        if steps > 1:
            self.current *= self.factor ** (steps - 1)
        while int(self.current) == value:
            self.current *= self.factor
        return value

    def __repr__(self) -> str:
        return f"GeometricSequence(current={self.current!r}, factor={self.factor!r})"
