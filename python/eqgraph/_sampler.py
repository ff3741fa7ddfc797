"""Domain sampling: walk the x-domain and evaluate the equation at each step."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ._config import MAX_SAMPLES
from ._errors import ConfigurationError, EvaluationError
from ._evaluator import Evaluator
from ._trace import NULL_TRACE, NullTrace

# Absorbs float error in span / step so 10 / 1 always yields 11 samples
_COUNT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Domain:
    """x bounds and step. Use :meth:`create` to get a validated instance."""

    x_low: float
    x_high: float
    x_step: float

    @classmethod
    def create(cls, x_low: float, x_high: float, x_step: float) -> "Domain":
        """Validate, swap reversed bounds, and take ``abs`` of the step."""
        x_low, x_high, x_step = float(x_low), float(x_high), abs(float(x_step))
        if not all(math.isfinite(v) for v in (x_low, x_high, x_step)):
            raise ConfigurationError(
                f"domain must be finite, got [{x_low}, {x_high}] step {x_step}"
            )
        domain = cls(x_low, x_high, x_step).normalized()
        if domain.x_high == domain.x_low:
            raise ConfigurationError(f"empty x-domain: x_low == x_high == {x_low}")
        if x_step <= 0:
            raise ConfigurationError("x_step must be non-zero")
        if not math.isfinite(domain.span / x_step):
            raise ConfigurationError(
                f"x-domain [{domain.x_low}, {domain.x_high}] step {x_step} is out of float range"
            )
        if domain.sample_count > MAX_SAMPLES:
            raise ConfigurationError(
                f"x_step {x_step} needs {domain.sample_count} samples (limit {MAX_SAMPLES})"
            )
        return domain

    def normalized(self) -> "Domain":
        if self.x_low > self.x_high:
            return Domain(self.x_high, self.x_low, self.x_step)
        return self

    @property
    def span(self) -> float:
        return self.x_high - self.x_low

    @property
    def sample_count(self) -> int:
        return int(math.floor(self.span / self.x_step + _COUNT_TOLERANCE)) + 1

    def xs(self) -> np.ndarray:
        """All x positions, computed as ``x_low + k * x_step``."""
        return self.x_low + np.arange(self.sample_count, dtype=np.float64) * self.x_step


@dataclass(frozen=True)
class Sample:
    x: float
    y: Optional[float]

    @property
    def defined(self) -> bool:
        return self.y is not None


@dataclass(frozen=True)
class SampleSet:
    """Samples in x order, with the y min/max of the defined ones if tracked."""

    samples: Tuple[Sample, ...]
    y_min: Optional[float] = None
    y_max: Optional[float] = None
    undefined_count: int = 0

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def ys(self) -> np.ndarray:
        """y values as floats, with NaN for undefined samples."""
        return np.array(
            [math.nan if s.y is None else s.y for s in self.samples], dtype=np.float64
        )

    def x_values(self) -> np.ndarray:
        return np.array([s.x for s in self.samples], dtype=np.float64)


def snap_zero(x: float) -> float:
    """Return exactly 0.0 for values that print as zero at 3 decimals."""
    if "%.3f" % x in ("-0.000", "0.000"):
        return 0.0
    return x


def sample_domain(
    equation: str,
    domain: Domain,
    evaluator: Evaluator,
    *,
    track_range: bool = True,
    trace: NullTrace = NULL_TRACE,
) -> SampleSet:
    """Evaluate *equation* at every step of *domain*.

    Evaluation failures and non-finite results become undefined samples; they
    never abort sampling. With *track_range*, the returned set carries the
    min/max over the defined y values.
    """
    samples = []
    y_min: Optional[float] = None
    y_max: Optional[float] = None
    undefined = 0

    for raw_x in domain.xs():
        x = snap_zero(float(raw_x))
        try:
            y: Optional[float] = evaluator.evaluate(equation, x)
        except EvaluationError:
            y = None
        if y is not None and not math.isfinite(y):
            y = None
        trace.sample(x, y)

        if y is None:
            undefined += 1
        elif track_range:
            y_min = y if y_min is None or y < y_min else y_min
            y_max = y if y_max is None or y > y_max else y_max
        samples.append(Sample(x, y))

    return SampleSet(tuple(samples), y_min, y_max, undefined)
