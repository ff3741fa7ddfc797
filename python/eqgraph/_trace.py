"""Sample tracing: an injectable sink for per-render debug output.

The default is :data:`NULL_TRACE`, which discards everything. Pass a
:class:`LogTrace` to route samples through ``logging``, or a
:class:`FileTrace` to write the classic ``eqgraph.txt`` listing::

    with FileTrace("eqgraph.txt") as trace:
        eqgraph.graph("x^2", -3, 3, trace=trace)
"""

from __future__ import annotations

import logging
import os
from typing import IO, Optional

_TRUTHY = {"1", "true", "yes", "on"}


class NullTrace:
    """Trace sink that does nothing."""

    def begin(self, equation: str) -> None:
        pass

    def sample(self, x: float, y: Optional[float]) -> None:
        pass

    def bounds(self, y_low: float, y_high: float) -> None:
        pass

    def note(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass


NULL_TRACE = NullTrace()


class LogTrace(NullTrace):
    """Emit every trace event at DEBUG on the ``eqgraph.trace`` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or logging.getLogger("eqgraph.trace")

    def begin(self, equation: str) -> None:
        self._log.debug("equation %r", equation)

    def sample(self, x: float, y: Optional[float]) -> None:
        self._log.debug("y(%.3f) = %s", x, "undefined" if y is None else f"{y:.3f}")

    def bounds(self, y_low: float, y_high: float) -> None:
        self._log.debug("y bounds %s -- %s", y_low, y_high)

    def note(self, message: str) -> None:
        self._log.debug("%s", message)


class FileTrace(NullTrace):
    """Write trace events to a text file, one line per event.

    The file is opened lazily on :meth:`begin` and truncated, so one trace
    file holds exactly one render.
    """

    def __init__(self, path: str = "eqgraph.txt") -> None:
        self.path = path
        self._fh: Optional[IO[str]] = None

    def _write(self, line: str) -> None:
        if self._fh is None:
            self._fh = open(self.path, "w", encoding="utf-8")
        self._fh.write(line + "\n")

    def begin(self, equation: str) -> None:
        self.close()
        self._write(equation)

    def sample(self, x: float, y: Optional[float]) -> None:
        value = "undefined" if y is None else "%10.3f" % y
        self._write("y(%5.3f) = %s" % (x, value))

    def bounds(self, y_low: float, y_high: float) -> None:
        self._write(f"{y_low} -- {y_high}")

    def note(self, message: str) -> None:
        self._write(message)

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "FileTrace":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def debug_trace(path: str = "eqgraph.txt") -> NullTrace:
    """Return a FileTrace when ``$EQGRAPH_DEBUG`` is truthy, else NULL_TRACE."""
    if os.environ.get("EQGRAPH_DEBUG", "").strip().lower() in _TRUTHY:
        return FileTrace(path)
    return NULL_TRACE
