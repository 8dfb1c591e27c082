"""Tests for the immutable Options configuration value."""

import dataclasses
from datetime import timedelta

import pytest

from linbench.options import DEFAULT_OPTIONS, Options
from linbench.units import Bytes, Nanoseconds


class TestDefaults:

    def test_growth_factor(self):
        assert Options().growth_factor == 1.01

    def test_time_budget(self):
        assert Options().time_budget == Nanoseconds(5_000_000_000)

    def test_memory_budget(self):
        assert Options().memory_budget == Bytes(512 * 1024 * 1024)

    def test_module_default(self):
        assert DEFAULT_OPTIONS == Options()


class TestBuilder:

    def test_with_methods_return_new_values(self):
        base = Options()
        changed = base.with_growth_factor(1.5)
        assert changed.growth_factor == 1.5
        assert base.growth_factor == 1.01

    def test_chaining_overrides_independently(self):
        opts = (
            Options()
            .with_growth_factor(1.1)
            .with_time_budget(Nanoseconds(1_000))
            .with_memory_budget(Bytes.kib(4))
        )
        assert opts == Options(1.1, Nanoseconds(1_000), Bytes(4096))

    def test_time_budget_seconds(self):
        assert Options().with_time_budget(0.5).time_budget == Nanoseconds(500_000_000)

    def test_time_budget_timedelta(self):
        opts = Options().with_time_budget(timedelta(milliseconds=20))
        assert opts.time_budget == Nanoseconds(20_000_000)

    def test_memory_budget_int(self):
        assert Options().with_memory_budget(100).memory_budget == Bytes(100)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Options().growth_factor = 2.0

    def test_integral_factor_normalized(self):
        opts = Options(growth_factor=2)
        assert isinstance(opts.growth_factor, float)

    def test_to_dict(self):
        assert Options().to_dict() == {
            "growth_factor": 1.01,
            "time_budget_ns": 5_000_000_000,
            "memory_budget_bytes": 512 * 1024 * 1024,
        }


class TestValidation:

    @pytest.mark.parametrize("factor", [1.0, 0.99, 0.0, -1.0, float("inf"), float("nan")])
    def test_bad_growth_factor(self, factor):
        with pytest.raises(ValueError, match="growth_factor"):
            Options(growth_factor=factor)

    def test_growth_factor_type(self):
        with pytest.raises(TypeError, match="growth_factor"):
            Options(growth_factor="1.5")

    def test_negative_time_budget(self):
        with pytest.raises(ValueError):
            Options().with_time_budget(-1.0)

    def test_negative_timedelta(self):
        with pytest.raises(ValueError, match="time_budget"):
            Options().with_time_budget(timedelta(seconds=-1))

    def test_time_budget_type(self):
        with pytest.raises(TypeError, match="time_budget"):
            Options().with_time_budget("5s")

    def test_infinite_time_budget(self):
        with pytest.raises(ValueError, match="finite"):
            Options().with_time_budget(float("inf"))

    def test_memory_budget_type(self):
        with pytest.raises(TypeError, match="memory_budget"):
            Options().with_memory_budget(Nanoseconds(5))

    def test_negative_memory_budget(self):
        with pytest.raises(ValueError):
            Options().with_memory_budget(-1)
