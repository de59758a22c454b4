"""Arithmetic on a small number type, directly and through expression trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from yapexpr.expression import Expression, as_expr, is_expr, left, make_terminal, right
from yapexpr.kinds import ExprKind
from yapexpr.transform import evaluate, transform


@dataclass(frozen=True)
class Number:
    """A float wrapper supporting only + and *."""

    value: float

    def __add__(self, other: Any) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self.value + other.value)

    def __mul__(self, other: Any) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self.value * other.value)


def naxpy(a: Number, x: Number, y: Number) -> Number:
    """Return ``a * x + y`` in one step."""
    return Number(a.value * x.value + y.value)


class NaxpyTransform:
    """Transform replacing ``a * x + y`` subexpressions by naxpy() results.

    ``fused`` counts the replacements made.
    """

    def __init__(self) -> None:
        self.fused = 0

    def _value(self, item: Any) -> Any:
        return evaluate(transform(as_expr(item), self))

    def plus(self, lhs: Any, rhs: Any) -> Any:
        if not is_expr(lhs) or lhs.kind is not ExprKind.MULTIPLIES:
            return NotImplemented
        result = naxpy(self._value(left(lhs)), self._value(right(lhs)), self._value(rhs))
        self.fused += 1
        return make_terminal(result)


def _terminals(a: Number, x: Number, y: Number) -> tuple[Expression, Expression, Expression]:
    return make_terminal(a), make_terminal(x), make_terminal(y)


def _build_1x(a: Any, x: Any, y: Any) -> Any:
    return (a * x + y) * (a * x + y) + (a * x + y)


def _build_4x(a: Any, x: Any, y: Any) -> Any:
    return (
        (a * x + y) * (a * x + y) + (a * x + y)
        + (a * x + y) * (a * x + y) + (a * x + y)
        + (a * x + y) * (a * x + y) + (a * x + y)
        + (a * x + y) * (a * x + y) + (a * x + y)
    )


def eval_as_expr(a: Number, x: Number, y: Number) -> Number:
    """Evaluate ``(a*x+y)*(a*x+y) + (a*x+y)`` through an expression tree."""
    return evaluate(_build_1x(*_terminals(a, x, y)))


def eval_as_expr_4x(a: Number, x: Number, y: Number) -> Number:
    """Evaluate four copies of the expression, summed, through an expression tree."""
    return evaluate(_build_4x(*_terminals(a, x, y)))


def eval_as_native(a: Number, x: Number, y: Number) -> Number:
    """Compute ``(a*x+y)*(a*x+y) + (a*x+y)`` directly."""
    return _build_1x(a, x, y)


def eval_as_native_4x(a: Number, x: Number, y: Number) -> Number:
    """Compute four copies of the expression, summed, directly."""
    return _build_4x(a, x, y)


def eval_with_naxpy(a: Number, x: Number, y: Number) -> Number:
    """Evaluate the expression with ``a * x + y`` fused into naxpy()."""
    expr = _build_1x(*_terminals(a, x, y))
    return evaluate(transform(expr, NaxpyTransform()))