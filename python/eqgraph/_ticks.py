"""Tick planning: how far apart grid lines and axis ticks are drawn."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from ._config import MAX_LINES


@dataclass(frozen=True)
class TickPlan:
    x_jump: int
    y_jump: int


def axis_jump(low: float, high: float, max_lines: int = MAX_LINES) -> int:
    """Integer tick spacing so at most *max_lines* ticks cover [low, high].

    Spans of *max_lines* or less always get a spacing of 1, so sub-unit spans
    get at most one tick per integer.
    """
    span = high - low
    if span > max_lines:
        return int(math.ceil(span / max_lines))
    return 1


def plan_ticks(
    x_low: float,
    x_high: float,
    y_low: float,
    y_high: float,
    max_lines: int = MAX_LINES,
) -> TickPlan:
    return TickPlan(
        x_jump=axis_jump(x_low, x_high, max_lines),
        y_jump=axis_jump(y_low, y_high, max_lines),
    )


def tick_positions(low: float, high: float, jump: int) -> List[int]:
    """Integers from ceil(low) to floor(high), every *jump*."""
    if jump < 1:
        raise ValueError(f"jump must be >= 1, got {jump}")
    return list(range(math.ceil(low), math.floor(high) + 1, jump))
