"""Exception hierarchy for eqgraph."""


class EqGraphError(Exception):
    """Base exception for all eqgraph errors."""
    pass


class EvaluationError(EqGraphError):
    """The evaluator could not produce a value for one x.

    Raised per sample (bad syntax, undefined operation, domain error). The
    sampler absorbs it and records the sample as undefined.
    """

    def __init__(self, equation: str, x: float, reason: str = ""):
        self.equation = equation
        self.x = x
        self.reason = reason
        msg = f"Cannot evaluate {equation!r} at x={x!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ConfigurationError(EqGraphError, ValueError):
    """Degenerate domain, range, step or canvas size. Raised before drawing."""
    pass


class EncodingError(EqGraphError):
    """The canvas could not encode the image (unknown format or codec failure)."""
    pass
