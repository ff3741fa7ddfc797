"""Shared fixtures: a Canvas that records draw calls instead of rasterizing."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from eqgraph._canvas import Canvas
from eqgraph._codec import ImageFormat


class RecordingCanvas(Canvas):
    """Canvas fake: keeps every call in lists for assertions."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.colors = []
        self.lines = []
        self.texts = []

    def allocate_color(self, r, g, b):
        self.colors.append((r, g, b))
        return (r, g, b)

    def line(self, x1, y1, x2, y2, color):
        self.lines.append((x1, y1, x2, y2, color))

    def text(self, x, y, text, color):
        self.texts.append((x, y, text, color))

    def encode(self, fmt):
        return ImageFormat.parse(fmt).value.encode()

    @property
    def raw(self):
        return self

    def lines_in(self, color):
        return [ln for ln in self.lines if ln[4] == color]


@pytest.fixture
def canvases():
    """List that collects every RecordingCanvas created via ``canvases.factory``."""

    class _Canvases(list):
        def factory(self, width, height):
            c = RecordingCanvas(width, height)
            self.append(c)
            return c

    return _Canvases()
