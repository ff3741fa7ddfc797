"""Scene rendering: grid, axes and curve drawn through the Canvas port."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ._canvas import Canvas
from ._config import RenderConfig
from ._sampler import SampleSet
from ._ticks import TickPlan, tick_positions
from ._trace import NULL_TRACE, NullTrace
from ._viewport import Scale, Viewport

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (150, 150, 150)

# Half-length of an axis tick mark, in pixels
TICK_HALF = 3


@dataclass
class SceneStats:
    """What :meth:`SceneRenderer.draw` actually put on the canvas."""

    grid_lines: int = 0
    y_axis: bool = False
    x_axis: bool = False
    segments: int = 0
    clipped_segments: int = 0


class SceneRenderer:
    """Draws one scene onto *canvas*.

    Pixel x grows right from ``viewport.x_low``; pixel y grows down from
    ``viewport.y_high``. Coordinates are truncated to ints.
    """

    def __init__(
        self,
        canvas: Canvas,
        viewport: Viewport,
        scale: Scale,
        ticks: TickPlan,
        config: RenderConfig,
        trace: NullTrace = NULL_TRACE,
    ) -> None:
        self._canvas = canvas
        self._vp = viewport
        self._scale = scale
        self._ticks = ticks
        self._config = config
        self._trace = trace
        self._stats = SceneStats()
        # Background first: the canvas fills with the first allocated color
        self._bg = canvas.allocate_color(*WHITE)
        self._fg = canvas.allocate_color(*BLACK)
        self._grid = canvas.allocate_color(*GREY)

    # ─── Transform ────────────────────────────────────────────────────────

    def px(self, x: float) -> int:
        return int(abs(self._vp.x_low - x) * self._scale.x_scale)

    def py(self, y: float) -> int:
        return int(abs(self._vp.y_high - y) * self._scale.y_scale)

    def _x_ticks(self):
        return tick_positions(self._vp.x_low, self._vp.x_high, self._ticks.x_jump)

    def _y_ticks(self):
        return tick_positions(self._vp.y_low, self._vp.y_high, self._ticks.y_jump)

    # ─── Layers ───────────────────────────────────────────────────────────

    def draw(self, sample_set: SampleSet) -> SceneStats:
        if self._config.draw_grid:
            self.draw_grid()
        self.draw_axes()
        self.draw_curve(sample_set)
        return self._stats

    def draw_grid(self) -> None:
        self._trace.note("Drawing Grid")
        c = self._canvas
        for tick in self._y_ticks():
            row = self.py(tick)
            c.line(0, row, c.width, row, self._grid)
            c.text(2, row + 2, str(tick), self._grid)
            self._stats.grid_lines += 1
        for tick in self._x_ticks():
            col = self.px(tick)
            c.line(col, 0, col, c.height, self._grid)
            c.text(col + 2, 2, str(tick), self._grid)
            self._stats.grid_lines += 1

    def draw_axes(self) -> None:
        c = self._canvas
        label = self._config.label_axes

        if self._vp.contains_x(0):
            x0 = self.px(0)
            c.line(x0, 0, x0, c.height, self._fg)
            for tick in self._y_ticks():
                row = self.py(tick)
                c.line(x0 - TICK_HALF, row, x0 + TICK_HALF, row, self._fg)
                if label:
                    c.text(x0 + 2, row + 1, str(tick), self._fg)
            self._stats.y_axis = True

        if self._vp.contains_y(0):
            y0 = self.py(0)
            c.line(0, y0, c.width, y0, self._fg)
            for tick in self._x_ticks():
                col = self.px(tick)
                c.line(col, y0 - TICK_HALF, col, y0 + TICK_HALF, self._fg)
                if label:
                    c.text(col + 2, y0 + 1, str(tick), self._fg)
            self._stats.x_axis = True

    def draw_curve(self, sample_set: SampleSet) -> None:
        """Connect consecutive on-canvas samples with line segments.

        A sample is off-canvas when its y is undefined or outside the
        viewport; no segment touches an off-canvas sample.
        """
        if len(sample_set) < 2:
            return
        xs = sample_set.x_values()
        ys = sample_set.ys()
        with np.errstate(invalid="ignore"):
            on = np.isfinite(ys) & (ys >= self._vp.y_low) & (ys <= self._vp.y_high)
        cols = (np.abs(self._vp.x_low - xs) * self._scale.x_scale).astype(np.int64)
        rows = np.where(on, np.abs(self._vp.y_high - np.where(on, ys, 0.0)) * self._scale.y_scale, -1)
        rows = rows.astype(np.int64)

        for i in range(1, len(xs)):
            if on[i - 1] and on[i]:
                self._canvas.line(
                    int(cols[i - 1]), int(rows[i - 1]), int(cols[i]), int(rows[i]), self._fg
                )
                self._stats.segments += 1
            else:
                self._stats.clipped_segments += 1
