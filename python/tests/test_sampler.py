"""Tests for domain sampling (_sampler.py)."""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from eqgraph._config import MAX_SAMPLES
from eqgraph._errors import ConfigurationError, EvaluationError
from eqgraph._evaluator import Evaluator, FunctionEvaluator
from eqgraph._sampler import Domain, Sample, sample_domain, snap_zero
from eqgraph._trace import NullTrace


class _Identity(Evaluator):
    def __init__(self):
        self.calls = []

    def evaluate(self, equation, x):
        self.calls.append(x)
        return x


class _Reciprocal(Evaluator):
    def evaluate(self, equation, x):
        if x == 0:
            raise EvaluationError(equation, x, "division by zero")
        return 1.0 / x


class _ListTrace(NullTrace):
    def __init__(self):
        self.samples = []

    def sample(self, x, y):
        self.samples.append((x, y))


# ─── Domain ──────────────────────────────────────────────────────────────────

class TestDomain:
    def test_reversed_bounds_are_swapped(self):
        d = Domain.create(5, -5, 1)
        assert d.x_low == -5.0
        assert d.x_high == 5.0

    def test_negative_step_uses_abs(self):
        assert Domain.create(0, 1, -0.25).x_step == 0.25

    def test_sample_count_integral(self):
        assert Domain.create(-5, 5, 1).sample_count == 11

    def test_sample_count_fractional_step(self):
        # 0.1 does not divide 1.0 exactly in binary
        assert Domain.create(0, 1, 0.1).sample_count == 11

    def test_sample_count_non_dividing_step(self):
        assert Domain.create(0, 1, 0.3).sample_count == 4

    def test_xs_have_no_drift(self):
        xs = Domain.create(0, 1, 0.1).xs()
        assert xs[-1] == pytest.approx(1.0)
        assert xs[5] == pytest.approx(0.5)

    def test_zero_step_rejected(self):
        with pytest.raises(ConfigurationError):
            Domain.create(0, 1, 0)

    def test_empty_domain_rejected(self):
        with pytest.raises(ConfigurationError):
            Domain.create(2, 2, 0.1)

    def test_non_finite_rejected(self):
        with pytest.raises(ConfigurationError):
            Domain.create(0, math.inf, 1)
        with pytest.raises(ConfigurationError):
            Domain.create(0, 1, math.nan)

    def test_too_many_samples_rejected(self):
        with pytest.raises(ConfigurationError):
            Domain.create(0, MAX_SAMPLES, 0.5)

    def test_step_too_small_for_float_rejected(self):
        with pytest.raises(ConfigurationError):
            Domain.create(0, 1, 5e-324)

    def test_span_out_of_float_range_rejected(self):
        with pytest.raises(ConfigurationError):
            Domain.create(-1e308, 1e308, 1e300)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            Domain.create(1, 1, 1)


# ─── snap_zero ───────────────────────────────────────────────────────────────

class TestSnapZero:
    def test_tiny_negative(self):
        assert snap_zero(-1e-12) == 0.0
        assert math.copysign(1.0, snap_zero(-1e-12)) == 1.0

    def test_tiny_positive(self):
        assert snap_zero(2e-4) == 0.0

    def test_visible_values_unchanged(self):
        assert snap_zero(-0.001) == -0.001
        assert snap_zero(0.5) == 0.5


# ─── sample_domain ───────────────────────────────────────────────────────────

class TestSampleDomain:
    def test_count_and_order(self):
        s = sample_domain("x", Domain.create(-5, 5, 1), _Identity())
        assert len(s) == 11
        assert [smp.x for smp in s] == [float(v) for v in range(-5, 6)]

    def test_tracks_min_max(self):
        s = sample_domain("x", Domain.create(-2, 3, 0.5), FunctionEvaluator(lambda x: x * x))
        assert s.y_min == 0.0
        assert s.y_max == 9.0

    def test_no_tracking_when_disabled(self):
        s = sample_domain("x", Domain.create(-2, 3, 0.5), _Identity(), track_range=False)
        assert s.y_min is None
        assert s.y_max is None

    def test_evaluation_error_marks_sample_undefined(self):
        s = sample_domain("1/x", Domain.create(-2, 2, 0.5), _Reciprocal())
        assert len(s) == 9
        assert s.samples[4] == Sample(0.0, None)
        assert not s.samples[4].defined
        assert s.undefined_count == 1
        assert s.y_min == -2.0
        assert s.y_max == 2.0

    def test_non_finite_marks_sample_undefined(self):
        ev = FunctionEvaluator(lambda x: math.inf if x > 0 else x)
        s = sample_domain("f", Domain.create(-1, 1, 1), ev)
        assert [smp.y for smp in s] == [-1.0, 0.0, None]
        assert s.y_max == 0.0

    def test_all_undefined(self):
        ev = FunctionEvaluator(lambda x: math.sqrt(-1 - x * x))
        s = sample_domain("f", Domain.create(0, 1, 0.5), ev)
        assert s.undefined_count == 3
        assert s.y_min is None

    def test_near_zero_x_evaluated_as_zero(self):
        ev = _Identity()
        sample_domain("x", Domain.create(-0.3, 0.3, 0.1), ev)
        assert 0.0 in ev.calls
        assert all(x == 0.0 or abs(x) > 0.05 for x in ev.calls)

    def test_trace_receives_every_sample(self):
        trace = _ListTrace()
        sample_domain("1/x", Domain.create(-1, 1, 1), _Reciprocal(), trace=trace)
        assert trace.samples == [(-1.0, -1.0), (0.0, None), (1.0, 1.0)]

    def test_ys_array_uses_nan(self):
        s = sample_domain("1/x", Domain.create(-1, 1, 1), _Reciprocal())
        ys = s.ys()
        assert math.isnan(ys[1])
        assert ys[2] == 1.0
