"""
Numerically stable reductions and least-squares regression.

Every reduction in this module goes through Kahan (compensated) summation.
Timing samples span many orders of magnitude, from a handful of
nanoseconds to several seconds, and a plain running sum loses the small
terms once the accumulator is large.

Regression model:
    Given pairs (xᵢ, yᵢ) with x = iteration count and y = elapsed ns:
        β = Σ(xᵢ − x̄)(yᵢ − ȳ) / Σ(xᵢ − x̄)²
        α = ȳ − β·x̄
        R² = Σ(ŷᵢ − ȳ)² / Σ(yᵢ − ȳ)²      where ŷᵢ = β·xᵢ + α

    R² is the explained-over-total variance ratio.  It agrees with
    1 − SSres/SStot for an exact least-squares fit but is reproduced in
    this form on purpose, so unusual inputs can land outside [0, 1].

Nothing here raises on degenerate data: identical x values give a zero
denominator and the result carries NaN or infinity instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence


def kahan_sum(values: Iterable[float]) -> float:
    """Sum *values* with Kahan compensated summation.

    >>> kahan_sum([10000.0, 3.14159, 2.71828])
    10005.85987
    """
    total = 0.0
    correction = 0.0
    for v in values:
        y = v - correction
        t = total + y
        correction = (t - total) - y
        total = t
    return total


def sum_and_mean(values: Iterable[float]) -> tuple[float, float]:
    """Return ``(kahan_sum, mean)`` in a single pass.

    The mean of an empty input is NaN.
    """
    total = 0.0
    correction = 0.0
    count = 0
    for v in values:
        y = v - correction
        t = total + y
        correction = (t - total) - y
        total = t
        count += 1
    if count == 0:
        return total, math.nan
    return total, total / count


def mean(values: Iterable[float]) -> float:
    return sum_and_mean(values)[1]


@dataclass(frozen=True)
class Analysis:
    """Linear model fitted to (iterations, elapsed ns) samples.

    Attributes:
        intercept: α, fixed overhead per measurement round in ns.
        slope:     β, estimated cost of one iteration in ns.
        r_squared: Goodness of fit (explained / total variance).
    """

    intercept: float
    slope: float
    r_squared: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "intercept_ns": self.intercept,
            "slope_ns": self.slope,
            "r_squared": self.r_squared,
        }


def regression(data: Sequence[tuple[float, float]]) -> Analysis:
    """Fit y = α + β·x to *data* by ordinary least squares."""
    xmean = mean(x for x, _ in data)
    ymean = mean(y for _, y in data)

    numerator = kahan_sum((x - xmean) * (y - ymean) for x, y in data)
    denominator = kahan_sum((x - xmean) * (x - xmean) for x, _ in data)
    beta = _divide(numerator, denominator)
    alpha = ymean - beta * xmean

    fitted = [(beta * x + alpha) - ymean for x, _ in data]
    explained = kahan_sum(d * d for d in fitted)
    total = kahan_sum((y - ymean) * (y - ymean) for _, y in data)
    r2 = _divide(explained, total)

    return Analysis(intercept=alpha, slope=beta, r_squared=r2)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: x/0 is ±inf, 0/0 (or NaN operands) is NaN."""
    if denominator == 0.0:
        if math.isnan(numerator) or numerator == 0.0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
