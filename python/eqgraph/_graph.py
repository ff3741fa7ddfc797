"""The render pipeline: sample, resolve range, plan ticks, draw.

Usage::

    import eqgraph

    result = eqgraph.graph("sin(x)", -10, 10, draw_grid=True)
    result.save("sin.png")

    # Reusable defaults (size, labels, evaluator)
    g = eqgraph.Graph(width=800, height=600, label_axes=False)
    png = g.graph("x^2", -3, 3, y_range=(-1, 10)).to_png()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any, Optional, Union

from ._canvas import Canvas, CanvasFactory, PillowCanvas
from ._codec import ImageFormat
from ._config import RenderConfig, YRangeLike, coerce_y_range, resolve_canvas_size
from ._errors import ConfigurationError
from ._evaluator import Evaluator, SympyEvaluator
from ._log import log
from ._renderer import SceneRenderer, SceneStats
from ._sampler import Domain, sample_domain
from ._ticks import TickPlan, plan_ticks
from ._trace import NullTrace, debug_trace
from ._viewport import Scale, Viewport, resolve_viewport


@dataclass(frozen=True)
class RenderContext:
    """Everything one render call needs; never shared between calls."""

    equation: str
    domain: Domain
    width: int
    height: int
    config: RenderConfig
    evaluator: Evaluator
    canvas_factory: CanvasFactory
    trace: NullTrace


@dataclass
class RenderResult:
    """A finished graph plus what went into it."""

    canvas: Canvas
    viewport: Viewport
    scale: Scale
    ticks: TickPlan
    sample_count: int
    undefined_count: int
    stats: SceneStats

    @property
    def image(self) -> Any:
        """Raw image handle (a ``PIL.Image.Image`` for the default canvas)."""
        return self.canvas.raw

    def get_image(self) -> Any:
        return self.image

    def encode(self, fmt: Union[ImageFormat, str] = ImageFormat.PNG) -> bytes:
        return self.canvas.encode(fmt)

    def to_png(self) -> bytes:
        return self.encode(ImageFormat.PNG)

    def to_jpeg(self) -> bytes:
        return self.encode(ImageFormat.JPEG)

    def write(self, stream: IO[bytes], fmt: Union[ImageFormat, str] = ImageFormat.PNG) -> str:
        """Write the encoded image to *stream*; return its content type."""
        fmt = ImageFormat.parse(fmt)
        stream.write(self.encode(fmt))
        return fmt.content_type

    def save(self, path: str, fmt: Union[ImageFormat, str, None] = None) -> None:
        """Save to *path*. The format defaults to the file extension."""
        fmt = ImageFormat.from_path(path) if fmt is None else ImageFormat.parse(fmt)
        data = self.encode(fmt)
        with open(path, "wb") as f:
            f.write(data)


def render(ctx: RenderContext) -> RenderResult:
    """Run the four stages for *ctx*.

    Configuration problems are raised before the canvas is created.
    """
    trace = ctx.trace
    log.debug(
        "graph %r over [%g, %g] step %g (%dx%d)",
        ctx.equation, ctx.domain.x_low, ctx.domain.x_high, ctx.domain.x_step,
        ctx.width, ctx.height,
    )
    try:
        trace.begin(ctx.equation)
        sample_set = sample_domain(
            ctx.equation,
            ctx.domain,
            ctx.evaluator,
            track_range=ctx.config.auto_range_y,
            trace=trace,
        )
        if sample_set.undefined_count:
            log.info(
                "%d of %d samples of %r are undefined",
                sample_set.undefined_count, len(sample_set), ctx.equation,
            )

        try:
            viewport, scale, (raw_low, raw_high) = resolve_viewport(
                ctx.domain, sample_set, ctx.config.y_range, ctx.width, ctx.height
            )
        except ConfigurationError as exc:
            log.warning("cannot graph %r: %s", ctx.equation, exc)
            raise
        trace.bounds(viewport.y_low, viewport.y_high)

        ticks = plan_ticks(ctx.domain.x_low, ctx.domain.x_high, raw_low, raw_high)
        canvas = ctx.canvas_factory(ctx.width, ctx.height)
        stats = SceneRenderer(canvas, viewport, scale, ticks, ctx.config, trace).draw(sample_set)
    finally:
        trace.close()

    return RenderResult(
        canvas=canvas,
        viewport=viewport,
        scale=scale,
        ticks=ticks,
        sample_count=len(sample_set),
        undefined_count=sample_set.undefined_count,
        stats=stats,
    )


class Graph:
    """Holds render defaults; each :meth:`graph` call is independent."""

    __slots__ = ("_width", "_height", "_label_axes", "_evaluator", "_canvas_factory")

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        label_axes: bool = True,
        evaluator: Optional[Evaluator] = None,
        canvas_factory: Optional[CanvasFactory] = None,
    ) -> None:
        self._width, self._height = resolve_canvas_size(width, height)
        self._label_axes = label_axes
        self._evaluator = evaluator or SympyEvaluator()
        self._canvas_factory = canvas_factory or PillowCanvas

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def label_axes(self) -> bool:
        return self._label_axes

    def context(
        self,
        equation: str,
        x_low: float,
        x_high: float,
        x_step: Optional[float] = None,
        *,
        draw_grid: bool = False,
        y_range: YRangeLike = None,
        label_axes: Optional[bool] = None,
        trace: Optional[NullTrace] = None,
    ) -> RenderContext:
        """Validate a render request and build its context."""
        if not x_step:
            x_step = (float(x_high) - float(x_low)) / self._width
        try:
            domain = Domain.create(x_low, x_high, x_step)
        except ConfigurationError as exc:
            log.warning("cannot graph %r: %s", equation, exc)
            raise
        config = RenderConfig(
            draw_grid=draw_grid,
            label_axes=self._label_axes if label_axes is None else label_axes,
            y_range=coerce_y_range(y_range),
        )
        return RenderContext(
            equation=equation,
            domain=domain,
            width=self._width,
            height=self._height,
            config=config,
            evaluator=self._evaluator,
            canvas_factory=self._canvas_factory,
            trace=debug_trace() if trace is None else trace,
        )

    def graph(
        self,
        equation: str,
        x_low: float,
        x_high: float,
        x_step: Optional[float] = None,
        *,
        draw_grid: bool = False,
        y_range: YRangeLike = None,
        label_axes: Optional[bool] = None,
        trace: Optional[NullTrace] = None,
    ) -> RenderResult:
        """Render *equation* over ``[x_low, x_high]``.

        Args:
            equation: Expression in x, handed verbatim to the evaluator.
            x_low: Lower x bound (bounds may be given in either order).
            x_high: Upper x bound.
            x_step: Sampling step; defaults to one sample per pixel column.
            draw_grid: Draw grey grid lines with labels.
            y_range: None or AutoRange() to fit the curve, or FixedRange /
                a (low, high) pair for explicit bounds.
            label_axes: Override the instance default for axis tick labels.
            trace: Trace sink; defaults to a file trace when $EQGRAPH_DEBUG
                is set, else nothing.

        Raises:
            ConfigurationError: degenerate domain, range or step.
        """
        ctx = self.context(
            equation, x_low, x_high, x_step,
            draw_grid=draw_grid, y_range=y_range, label_axes=label_axes, trace=trace,
        )
        return render(ctx)


def graph(
    equation: str,
    x_low: float,
    x_high: float,
    x_step: Optional[float] = None,
    *,
    draw_grid: bool = False,
    y_range: YRangeLike = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    label_axes: bool = True,
    evaluator: Optional[Evaluator] = None,
    trace: Optional[NullTrace] = None,
    canvas_factory: Optional[CanvasFactory] = None,
) -> RenderResult:
    """One-call render. See :meth:`Graph.graph` for the arguments."""
    g = Graph(
        width,
        height,
        label_axes=label_axes,
        evaluator=evaluator,
        canvas_factory=canvas_factory,
    )
    return g.graph(equation, x_low, x_high, x_step, draw_grid=draw_grid, y_range=y_range, trace=trace)
