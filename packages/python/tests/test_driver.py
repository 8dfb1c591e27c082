"""Tests for the benchmark driver and its insufficient-data policy."""

import math
import time

import pytest

from linbench.collector import Sample
from linbench.driver import (
    BenchResult,
    analyze,
    bench,
    bench_drop,
    bench_setup,
    run,
)
from linbench.options import Options
from linbench.units import Bytes, Nanoseconds

FAST = Options().with_time_budget(0.05)


def _samples(points):
    return [Sample(n, Nanoseconds(ns)) for n, ns in points]


# ═══════════════════════════════════════════════════════════════════
# analyze(): the single trustworthy-vs-insufficient decision point
# ═══════════════════════════════════════════════════════════════════


class TestAnalyze:

    def test_no_samples(self):
        assert analyze([]) is None

    def test_one_sample(self):
        assert analyze(_samples([(1, 100)])) is None

    def test_two_samples(self):
        analysis = analyze(_samples([(1, 100), (2, 200)]))
        assert analysis.slope == pytest.approx(100.0)

    def test_negative_slope_rejected(self):
        assert analyze(_samples([(1, 300), (2, 200), (3, 100)])) is None

    def test_zero_slope_accepted(self):
        analysis = analyze(_samples([(1, 50), (2, 50), (3, 50)]))
        assert analysis is not None
        assert analysis.slope == 0.0

    def test_nan_slope_passes_through(self):
        # Sample iteration counts are strictly increasing in practice; a
        # hand-built set at one count yields NaN, which the sign test misses.
        analysis = analyze(_samples([(4, 10), (4, 20)]))
        assert analysis is not None
        assert math.isnan(analysis.slope)

    def test_linear_data(self):
        points = [(n, 42 * n + 1000) for n in range(1, 100)]
        analysis = analyze(_samples(points))
        assert analysis.slope == pytest.approx(42.0)
        assert analysis.intercept == pytest.approx(1000.0)
        assert analysis.r_squared == pytest.approx(1.0)


# ═══════════════════════════════════════════════════════════════════
# run() / bench*()
# ═══════════════════════════════════════════════════════════════════


class TestRun:

    def test_result_fields(self):
        result = run(FAST, "linear", lambda n: Nanoseconds(10 * n), sink=None)
        assert isinstance(result, BenchResult)
        assert result.name == "linear"
        assert result.sufficient
        assert result.analysis.slope == pytest.approx(10.0)
        assert isinstance(result.samples, tuple)

    def test_elapsed_covers_collection(self):
        def measure(n):
            time.sleep(0.005)
            return Nanoseconds(n)

        result = run(FAST, "t", measure, sink=None)
        assert result.elapsed >= FAST.time_budget

    def test_sink_receives_result(self):
        received = []
        result = run(FAST, "x", lambda n: Nanoseconds(n), sink=received.append)
        assert received == [result]

    def test_default_sink_prints(self, capsys):
        run(Options(), "refused", lambda n: None)
        assert capsys.readouterr().out.strip().endswith("not enough samples")

    def test_insufficient_when_budget_hit_immediately(self):
        result = run(Options(), "none", lambda n: None, sink=None)
        assert not result.sufficient
        assert result.samples == ()

    def test_name_must_be_str(self):
        with pytest.raises(TypeError, match="name"):
            run(FAST, 3, lambda n: Nanoseconds(n), sink=None)

    def test_to_dict(self):
        result = run(Options(), "d", lambda n: Nanoseconds(n) if n < 4 else None, sink=None)
        d = result.to_dict()
        assert d["name"] == "d"
        assert d["n_samples"] == 3
        assert d["max_iterations"] == 3
        assert d["analysis"]["slope_ns"] == pytest.approx(1.0)

    def test_to_dict_insufficient(self):
        d = run(Options(), "d", lambda n: None, sink=None).to_dict()
        assert d["analysis"] is None
        assert d["max_iterations"] == 0

    def test_user_exception_propagates(self):
        def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            bench(FAST, "boom", boom, sink=None)


class TestVariants:

    def test_bench(self):
        result = bench(FAST, "sum", lambda: sum(range(10)), sink=None)
        assert result.sufficient
        assert result.analysis.slope > 0

    def test_bench_drop(self):
        result = bench_drop(FAST, "list", lambda: [0] * 8, sink=None)
        assert len(result.samples) >= 2

    def test_bench_drop_memory_bound(self):
        opts = FAST.with_memory_budget(Bytes(1))
        result = bench_drop(opts, "list", lambda: [0] * 8, sink=None)
        assert result.samples == ()
        assert not result.sufficient

    def test_bench_setup(self):
        result = bench_setup(FAST, "sort", lambda: [3, 1, 2], sorted, sink=None)
        assert len(result.samples) >= 2

    def test_bench_setup_memory_bound(self):
        opts = FAST.with_memory_budget(Bytes(1))
        result = bench_setup(opts, "sort", lambda: [3, 1, 2], sorted, sink=None)
        assert not result.sufficient

    def test_reports_through_sink(self, capsys):
        bench(FAST, "noop", lambda: None)
        out = capsys.readouterr().out
        assert out.startswith("noop (")
        assert out.count("\n") == 1
