"""Evaluator port and its adapters.

The core only ever calls :meth:`Evaluator.evaluate`. Anything that turns an
equation string and an x value into a float (or raises
:class:`EvaluationError`) can be plugged in.
"""

from __future__ import annotations

import abc
import functools
from tokenize import TokenError
from typing import Callable, Optional, Tuple

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from ._errors import EvaluationError

_TRANSFORMS = standard_transformations + (implicit_multiplication_application, convert_xor)
_X = sp.Symbol("x")

# Failures raised by compiled math-module code for bad inputs
_NUMERIC_ERRORS = (ArithmeticError, ValueError, TypeError)


class Evaluator(abc.ABC):
    """Turns an equation and an x value into a y value."""

    @abc.abstractmethod
    def evaluate(self, equation: str, x: float) -> float:
        """Return f(x), or raise EvaluationError."""


@functools.lru_cache(maxsize=128)
def _compile(equation: str) -> Tuple[Optional[Callable[[float], object]], str]:
    """Parse and lambdify *equation*; every free symbol is read as x.

    Returns ``(func, "")`` or ``(None, reason)`` so that parse failures are
    cached too.
    """
    try:
        expr = parse_expr(equation, transformations=_TRANSFORMS)
    except (SyntaxError, TokenError, TypeError, ValueError, AttributeError, sp.SympifyError) as exc:
        return None, f"invalid expression: {exc}"
    if not isinstance(expr, sp.Expr):
        return None, "not an expression"
    expr = expr.subs({sym: _X for sym in expr.free_symbols if sym != _X})
    return sp.lambdify(_X, expr, modules="math"), ""


class SympyEvaluator(Evaluator):
    """Evaluate equations with SymPy.

    ``^`` is exponentiation and implicit multiplication is allowed, so
    ``"2x^2 + sin x"`` works. All variables are interpreted as ``x``.
    Compiled equations are cached per process.
    """

    def evaluate(self, equation: str, x: float) -> float:
        func, reason = _compile(equation)
        if func is None:
            raise EvaluationError(equation, x, reason)
        try:
            value = func(x)
        except ZeroDivisionError as exc:
            raise EvaluationError(equation, x, "division by zero") from exc
        except _NUMERIC_ERRORS as exc:
            raise EvaluationError(equation, x, str(exc)) from exc
        return _to_real(equation, x, value)


class FunctionEvaluator(Evaluator):
    """Adapt a plain ``f(x) -> float`` callable; the equation string is ignored."""

    def __init__(self, func: Callable[[float], float]) -> None:
        self._func = func

    def evaluate(self, equation: str, x: float) -> float:
        try:
            value = self._func(x)
        except _NUMERIC_ERRORS as exc:
            raise EvaluationError(equation, x, str(exc)) from exc
        return _to_real(equation, x, value)


def _to_real(equation: str, x: float, value: object) -> float:
    if isinstance(value, complex):
        if value.imag != 0:
            raise EvaluationError(equation, x, "complex result")
        value = value.real
    try:
        return float(value)
    except OverflowError as exc:
        raise EvaluationError(equation, x, "result out of float range") from exc
    except (TypeError, ValueError) as exc:
        raise EvaluationError(equation, x, f"non-numeric result {value!r}") from exc
