"""Render configuration and defaults.

Canvas size is resolved in priority order:

1. Explicit ``width=`` / ``height=`` argument
2. ``$EQGRAPH_WIDTH`` / ``$EQGRAPH_HEIGHT`` environment variables
3. 640x480
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ._errors import ConfigurationError

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480

# At most this many grid/tick lines per axis
MAX_LINES = 30

# Added above and below the y-range so boundary values stay on the canvas
Y_MARGIN = 0.01

# Upper bound on evaluator calls per render
MAX_SAMPLES = 1_000_000


@dataclass(frozen=True)
class AutoRange:
    """Infer the y-range from the min/max of the sampled values."""


@dataclass(frozen=True)
class FixedRange:
    """Use caller-supplied y bounds as-is."""

    low: float
    high: float


YRange = Union[AutoRange, FixedRange]
YRangeLike = Union[AutoRange, FixedRange, Tuple[float, float], None]


def coerce_y_range(value: YRangeLike) -> YRange:
    """Accept None (auto), AutoRange, FixedRange, or a (low, high) pair."""
    if value is None:
        return AutoRange()
    if isinstance(value, (AutoRange, FixedRange)):
        return value
    try:
        low, high = value
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"y_range must be AutoRange, FixedRange or a (low, high) pair, got {value!r}"
        ) from None
    return FixedRange(float(low), float(high))


@dataclass(frozen=True)
class RenderConfig:
    """Per-render drawing options."""

    draw_grid: bool = False
    label_axes: bool = True
    y_range: YRange = field(default_factory=AutoRange)

    @property
    def auto_range_y(self) -> bool:
        return isinstance(self.y_range, AutoRange)


def _size_from(name: str, explicit: Optional[int], default: int) -> int:
    if explicit is not None:
        value = explicit
    else:
        env = os.environ.get(name, "").strip()
        if not env:
            return default
        try:
            value = int(env)
        except ValueError:
            raise ConfigurationError(f"${name} must be an integer, got {env!r}") from None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"canvas size must be a positive integer, got {value!r}")
    return value


def resolve_canvas_size(width: Optional[int] = None, height: Optional[int] = None) -> Tuple[int, int]:
    """Resolve the canvas size from arguments, environment, or defaults."""
    return (
        _size_from("EQGRAPH_WIDTH", width, DEFAULT_WIDTH),
        _size_from("EQGRAPH_HEIGHT", height, DEFAULT_HEIGHT),
    )
