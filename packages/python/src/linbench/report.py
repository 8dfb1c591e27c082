"""Human-readable benchmark report lines."""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from linbench.driver import BenchResult

INSUFFICIENT = "not enough samples"

# Column widths for the right-aligned estimate
_ESTIMATE_WIDTH = 32
_INSUFFICIENT_WIDTH = 31


def format_number(number: float, precision: int = 3, separator: str = ",") -> str:
    """Format *number* with a thousands-separated integral part.

    >>> format_number(1234567.891)
    '1,234,567.891'
    >>> format_number(281.7333)
    '281.733'

    NaN and infinities are rendered by ``str()`` unchanged.
    """
    if not math.isfinite(number):
        return str(number)
    rendered = f"{abs(number):,.{precision}f}"
    if separator != ",":
        rendered = rendered.replace(",", separator)
    if number < 0 and rendered.strip("0.,") != "":
        rendered = "-" + rendered
    return rendered


def format_result(result: BenchResult) -> str:
    """Render one report line for *result*.

    ``iterative_16 (5.0s) ...                  281.733 ns/iter (0.998 R²)``
    """
    prefix = f"{result.name} ({result.elapsed}) ..."
    analysis = result.analysis
    if analysis is None:
        return f"{prefix} {INSUFFICIENT:>{_INSUFFICIENT_WIDTH}}"
    estimate = f"{format_number(analysis.slope)} ns/iter"
    return f"{prefix} {estimate:>{_ESTIMATE_WIDTH}} ({analysis.r_squared:.3f} R²)"


def print_result(result: BenchResult, file: Optional[TextIO] = None) -> None:
    """Write :func:`format_result` for *result* as one line."""
    print(format_result(result), file=file if file is not None else sys.stdout)
