"""Elementwise expressions over lists, assigned without temporary lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from yapexpr.expression import Expression, as_expr, make_terminal
from yapexpr.transform import evaluate, transform


def _truncating_divide(a: Any, b: Any) -> Any:
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient
    return a / b


def _truncating_modulus(a: Any, b: Any) -> Any:
    if isinstance(a, int) and isinstance(b, int):
        return a - b * _truncating_divide(a, b)
    return math.fmod(a, b)


def _coerce(old: Any, new: Any) -> Any:
    """Convert ``new`` to the numeric type of the element it replaces."""
    if isinstance(new, (int, float)):
        if type(old) is float:
            return float(new)
        if type(old) is int:
            return int(new)
    return new


@dataclass(frozen=True)
class _TakeNth:
    """Replaces each list terminal by its element ``n``.

    Division and remainder of integers truncate towards zero.
    """

    n: int

    def terminal(self, item: Any) -> Any:
        if not isinstance(item, list):
            return NotImplemented
        return make_terminal(item[self.n])

    def divides(self, lhs: Any, rhs: Any) -> Expression:
        return self._fused(_truncating_divide, lhs, rhs)

    def modulus(self, lhs: Any, rhs: Any) -> Expression:
        return self._fused(_truncating_modulus, lhs, rhs)

    def _fused(self, function: Callable[[Any, Any], Any], lhs: Any, rhs: Any) -> Expression:
        return make_terminal(function)(
            transform(as_expr(lhs), self), transform(as_expr(rhs), self)
        )


class _SizeCheck:
    def __init__(self, size: int) -> None:
        self.size = size
        self.matches = True

    def terminal(self, item: Any) -> Any:
        if not isinstance(item, list):
            return NotImplemented
        if len(item) != self.size:
            self.matches = False
        return 0


def vec(values: list) -> Expression:
    """Wrap a list as a terminal, so that operators on it build expressions."""
    if not isinstance(values, list):
        raise TypeError(f"vec() takes a list, got {type(values).__name__}")
    return make_terminal(values)


def equal_sizes(size: int, expr: Any) -> bool:
    """Tell whether every list in ``expr`` has ``size`` elements."""
    check = _SizeCheck(size)
    transform(as_expr(expr), check)
    return check.matches


def _prepare(values: Any, expr: Any, what: str) -> Expression:
    if not isinstance(values, list):
        raise TypeError(f"{what}() assigns to a list, got {type(values).__name__}")
    expr = as_expr(expr)
    if not equal_sizes(len(values), expr):
        raise ValueError(f"{what}(): every list in the expression needs {len(values)} elements")
    return expr


def _nth(expr: Expression, n: int) -> Any:
    return evaluate(transform(expr, _TakeNth(n)))


def assign_to(values: list, expr: Any) -> list:
    """Evaluate ``expr`` elementwise into ``values``; return ``values``."""
    expr = _prepare(values, expr, "assign_to")
    for index, old in enumerate(values):
        values[index] = _coerce(old, _nth(expr, index))
    return values


def plus_assign(values: list, expr: Any) -> list:
    """Add ``expr``, evaluated elementwise, into ``values``; return ``values``."""
    expr = _prepare(values, expr, "plus_assign")
    for index, old in enumerate(values):
        values[index] = _coerce(old, old + _nth(expr, index))
    return values