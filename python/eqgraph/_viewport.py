"""Range resolution: final viewing window and pixel scale."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ._config import AutoRange, Y_MARGIN, YRange
from ._errors import ConfigurationError
from ._log import log
from ._sampler import Domain, SampleSet


@dataclass(frozen=True)
class Viewport:
    """Math-space rectangle shown on the canvas."""

    x_low: float
    x_high: float
    y_low: float
    y_high: float

    def contains_x(self, x: float) -> bool:
        return self.x_low <= x <= self.x_high

    def contains_y(self, y: float) -> bool:
        return self.y_low <= y <= self.y_high


@dataclass(frozen=True)
class Scale:
    """Pixels per math unit along each axis."""

    x_scale: float
    y_scale: float

    @classmethod
    def of(cls, viewport: Viewport, width: int, height: int) -> "Scale":
        x_span = viewport.x_high - viewport.x_low
        y_span = viewport.y_high - viewport.y_low
        if x_span <= 0:
            raise ConfigurationError(f"x-span must be positive, got {x_span}")
        if y_span <= 0:
            raise ConfigurationError(f"y-span must be positive, got {y_span}")
        return cls(width / x_span, height / y_span)


def _raw_y_bounds(sample_set: SampleSet, y_range: YRange) -> Tuple[float, float]:
    if isinstance(y_range, AutoRange):
        if sample_set.y_min is None or sample_set.y_max is None:
            raise ConfigurationError("no defined samples; cannot infer the y-range")
        return sample_set.y_min, sample_set.y_max
    return float(y_range.low), float(y_range.high)


def resolve_viewport(
    domain: Domain,
    sample_set: SampleSet,
    y_range: YRange,
    width: int,
    height: int,
) -> Tuple[Viewport, Scale, Tuple[float, float]]:
    """Finalize the viewport.

    Returns the widened viewport, its scale, and the raw (unwidened) y bounds
    that tick planning works from.

    Raises:
        ConfigurationError: if either span is empty, inverted or not finite.
    """
    y_low, y_high = _raw_y_bounds(sample_set, y_range)
    if not (math.isfinite(y_low) and math.isfinite(y_high)):
        raise ConfigurationError(f"y-range [{y_low}, {y_high}] must be finite")
    if not y_high > y_low:
        raise ConfigurationError(
            f"degenerate y-range [{y_low}, {y_high}]; "
            "pass a FixedRange for constant functions"
        )

    if not math.isfinite((y_high + Y_MARGIN) - (y_low - Y_MARGIN)):
        raise ConfigurationError(f"y-range [{y_low}, {y_high}] is too wide to scale")

    viewport = Viewport(domain.x_low, domain.x_high, y_low - Y_MARGIN, y_high + Y_MARGIN)
    scale = Scale.of(viewport, width, height)
    log.debug("viewport %s scale %s", viewport, scale)
    return viewport, scale, (y_low, y_high)
