#!/usr/bin/env python3
"""Basic graph example: a parabola and a reciprocal with a grid.

Usage:
    python examples/basic_graph.py

Writes parabola.png and reciprocal.jpg to the current directory.
"""

import os
import sys

# Allow running from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import eqgraph

# Auto range: the y bounds come from the sampled values
result = eqgraph.graph("x^2 - 4", -5, 5, 0.05)
result.save("parabola.png")
print(f"parabola: {result.sample_count} samples, y in "
      f"[{result.viewport.y_low:.2f}, {result.viewport.y_high:.2f}]")

# Fixed range and grid: the curve breaks at the asymptote instead of
# drawing a vertical line across the canvas
result = eqgraph.graph("1/x", -4, 4, 0.01, draw_grid=True, y_range=(-10, 10))
result.save("reciprocal.jpg")
print(f"reciprocal: {result.undefined_count} undefined, "
      f"{result.stats.clipped_segments} clipped segments")
