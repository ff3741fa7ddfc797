"""eqgraph — render y = f(x) to a raster image.

One call to graph an equation::

    import eqgraph

    eqgraph.graph("x^2 - 4", -5, 5).save("parabola.png")
    eqgraph.graph("1/x", -2, 2, 0.01, draw_grid=True).to_jpeg()
    eqgraph.graph("sin(x)", 0, 10, y_range=(-2, 2))   # fixed y bounds

Reusable defaults::

    g = eqgraph.Graph(width=800, height=600, label_axes=False)
    result = g.graph("tan(x)", -3, 3, y_range=eqgraph.FixedRange(-10, 10))
    result.undefined_count   # samples the evaluator could not compute
    result.image             # PIL.Image.Image

Custom collaborators::

    eqgraph.graph("f", 0, 1, evaluator=eqgraph.FunctionEvaluator(math.sqrt))
    with eqgraph.FileTrace("eqgraph.txt") as t:
        eqgraph.graph("x^3", -2, 2, trace=t)
"""

from ._graph import Graph, RenderContext, RenderResult, graph, render
from ._config import (
    AutoRange,
    FixedRange,
    RenderConfig,
    resolve_canvas_size,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    MAX_LINES,
    MAX_SAMPLES,
    Y_MARGIN,
)
from ._errors import (
    EqGraphError,
    EvaluationError,
    ConfigurationError,
    EncodingError,
)
from ._evaluator import Evaluator, SympyEvaluator, FunctionEvaluator
from ._canvas import Canvas, PillowCanvas
from ._codec import ImageFormat
from ._sampler import Domain, Sample, SampleSet, sample_domain
from ._viewport import Viewport, Scale, resolve_viewport
from ._ticks import TickPlan, plan_ticks, tick_positions
from ._renderer import SceneRenderer, SceneStats
from ._trace import NullTrace, LogTrace, FileTrace, NULL_TRACE

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("eqgraph")
except Exception:
    __version__ = "0.1.0"

__all__ = [
    # One-call API
    "graph",
    "Graph",
    "render",
    "RenderContext",
    "RenderResult",
    # Configuration
    "AutoRange",
    "FixedRange",
    "RenderConfig",
    "resolve_canvas_size",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "MAX_LINES",
    "MAX_SAMPLES",
    "Y_MARGIN",
    # Errors
    "EqGraphError",
    "EvaluationError",
    "ConfigurationError",
    "EncodingError",
    # Ports and adapters
    "Evaluator",
    "SympyEvaluator",
    "FunctionEvaluator",
    "Canvas",
    "PillowCanvas",
    "ImageFormat",
    "NullTrace",
    "LogTrace",
    "FileTrace",
    "NULL_TRACE",
    # Pipeline stages
    "Domain",
    "Sample",
    "SampleSet",
    "sample_domain",
    "Viewport",
    "Scale",
    "resolve_viewport",
    "TickPlan",
    "plan_ticks",
    "tick_positions",
    "SceneRenderer",
    "SceneStats",
]
