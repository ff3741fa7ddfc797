"""Tests for range resolution (_viewport.py) and tick planning (_ticks.py)."""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from eqgraph._config import AutoRange, FixedRange, MAX_LINES, Y_MARGIN
from eqgraph._errors import ConfigurationError
from eqgraph._sampler import Domain, Sample, SampleSet
from eqgraph._ticks import axis_jump, plan_ticks, tick_positions
from eqgraph._viewport import Scale, Viewport, resolve_viewport


def _set(ys, y_min=None, y_max=None):
    samples = tuple(Sample(float(i), y) for i, y in enumerate(ys))
    return SampleSet(samples, y_min, y_max, sum(1 for y in ys if y is None))


# ─── resolve_viewport ────────────────────────────────────────────────────────

class TestResolveViewport:
    def test_auto_range_widened_by_margin(self):
        domain = Domain.create(-5, 5, 1)
        vp, scale, raw = resolve_viewport(domain, _set([-5, 5], -5.0, 5.0), AutoRange(), 640, 480)
        assert raw == (-5.0, 5.0)
        assert vp.y_low == pytest.approx(-5.0 - Y_MARGIN)
        assert vp.y_high == pytest.approx(5.0 + Y_MARGIN)
        assert (vp.x_low, vp.x_high) == (-5.0, 5.0)

    def test_scale_from_widened_viewport(self):
        domain = Domain.create(-5, 5, 1)
        vp, scale, _ = resolve_viewport(domain, _set([-5, 5], -5.0, 5.0), AutoRange(), 640, 480)
        assert scale.x_scale == pytest.approx(64.0)
        assert scale.y_scale == pytest.approx(480 / 10.02)

    def test_fixed_range_used_verbatim(self):
        domain = Domain.create(0, 10, 1)
        vp, _, raw = resolve_viewport(domain, _set([100.0], 100.0, 100.0), FixedRange(-1, 1), 640, 480)
        assert raw == (-1.0, 1.0)
        assert vp.y_low == pytest.approx(-1.01)
        assert vp.y_high == pytest.approx(1.01)

    def test_constant_function_rejected(self):
        domain = Domain.create(0, 10, 1)
        with pytest.raises(ConfigurationError):
            resolve_viewport(domain, _set([3.0, 3.0], 3.0, 3.0), AutoRange(), 640, 480)

    def test_no_defined_samples_rejected(self):
        domain = Domain.create(0, 1, 1)
        with pytest.raises(ConfigurationError):
            resolve_viewport(domain, _set([None, None]), AutoRange(), 640, 480)

    def test_inverted_fixed_range_rejected(self):
        domain = Domain.create(0, 1, 1)
        with pytest.raises(ConfigurationError):
            resolve_viewport(domain, _set([0.0]), FixedRange(2, 1), 640, 480)

    def test_infinite_fixed_range_rejected(self):
        domain = Domain.create(0, 1, 0.5)
        with pytest.raises(ConfigurationError):
            resolve_viewport(domain, _set([0.0]), FixedRange(0, math.inf), 640, 480)

    def test_overflowing_auto_span_rejected(self):
        domain = Domain.create(0, 1, 1)
        huge = 1.79e308
        with pytest.raises(ConfigurationError):
            resolve_viewport(domain, _set([-huge, huge], -huge, huge), AutoRange(), 640, 480)


class TestScale:
    def test_of(self):
        s = Scale.of(Viewport(0, 10, 0, 4), 100, 200)
        assert s == Scale(10.0, 50.0)

    def test_zero_x_span_rejected(self):
        with pytest.raises(ConfigurationError):
            Scale.of(Viewport(1, 1, 0, 1), 100, 100)

    def test_zero_y_span_rejected(self):
        with pytest.raises(ConfigurationError):
            Scale.of(Viewport(0, 1, 2, 2), 100, 100)


# ─── Tick planning ───────────────────────────────────────────────────────────

class TestAxisJump:
    def test_small_span_is_one(self):
        assert axis_jump(-5, 5) == 1

    def test_span_equal_to_max_is_one(self):
        assert axis_jump(0, MAX_LINES) == 1

    def test_sub_unit_span_is_one(self):
        assert axis_jump(0.1, 0.4) == 1

    def test_large_span(self):
        assert axis_jump(0, 31) == 2
        assert axis_jump(-100, 100) == 7

    @pytest.mark.parametrize("low,high", [(0, 31), (-100, 100), (-1e4, 3.5e4), (0, 61)])
    def test_line_count_bounded(self, low, high):
        jump = axis_jump(low, high)
        assert (high - low) / jump <= MAX_LINES

    def test_plan_ticks(self):
        plan = plan_ticks(-100, 100, -5, 5)
        assert plan.x_jump == 7
        assert plan.y_jump == 1


class TestTickPositions:
    def test_integers_inside(self):
        assert tick_positions(-5.01, 5.01, 1) == list(range(-5, 6))

    def test_jump(self):
        assert tick_positions(0, 10, 3) == [0, 3, 6, 9]

    def test_fractional_domain_has_no_ticks(self):
        assert tick_positions(0.1, 0.9, 1) == []

    def test_bad_jump(self):
        with pytest.raises(ValueError):
            tick_positions(0, 1, 0)
