"""eqgraph logger.

Usage from any module::

    from ._log import log

    log.debug("sampling %r over [%g, %g]", equation, x_low, x_high)
    log.info("%d undefined samples", count)

Enable via environment variable::

    EQGRAPH_LOG=DEBUG python my_script.py   # all messages
    EQGRAPH_LOG=INFO  python my_script.py   # info and above
    EQGRAPH_LOG=1     python my_script.py   # alias for DEBUG

Or programmatically::

    import logging
    logging.getLogger("eqgraph").setLevel(logging.DEBUG)
"""

import logging
import os

log = logging.getLogger("eqgraph")

# ANSI color codes
_COLORS = {
    "DEBUG": "\033[36m",    # Cyan
    "INFO": "\033[32m",     # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",    # Red
    "RESET": "\033[0m",     # Reset
}

_ALIASES = {"1": "DEBUG", "0": "WARNING", "TRUE": "DEBUG", "FALSE": "WARNING"}


class ColoredFormatter(logging.Formatter):
    """Add colors to log levels when output is a TTY."""

    def __init__(self, fmt=None, datefmt=None, stream=None):
        super().__init__(fmt, datefmt)
        self.stream = stream

    def format(self, record):
        stream = self.stream
        if stream is not None and hasattr(stream, "isatty") and stream.isatty():
            color = _COLORS.get(record.levelname, "")
            reset = _COLORS["RESET"]
            # Copy so other handlers don't see the escape codes
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{reset}"
        return super().format(record)


def level_from_env(value: str):
    """Map an EQGRAPH_LOG value to a logging level, or None if unrecognised."""
    level_str = value.strip().upper()
    if not level_str:
        return None
    level_str = _ALIASES.get(level_str, level_str)
    level = getattr(logging, level_str, None)
    return level if isinstance(level, int) else None


def configure_from_env() -> None:
    """Configure the package logger from EQGRAPH_LOG if set."""
    level = level_from_env(os.environ.get("EQGRAPH_LOG", ""))
    if level is None:
        return
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter(
            "[eqgraph %(levelname)s] %(message)s (%(filename)s:%(lineno)d)",
            stream=handler.stream,
        ))
        log.addHandler(handler)


configure_from_env()
