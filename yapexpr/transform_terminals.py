"""Replacing the terminals of an expression with consecutive integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from yapexpr.expression import Expression, as_expr, make_expression, make_terminal
from yapexpr.kinds import ExprKind
from yapexpr.transform import transform


@dataclass
class IotaTerminalTransform:
    """Transform replacing terminals by ``index``, ``index + 1``, and so on.

    The callable of a call expression is kept; only its arguments are
    replaced, and they are visited from the last one to the first.
    """

    index: int = 0

    def terminal(self, item: Any) -> Expression:
        result = make_terminal(self.index)
        self.index += 1
        return result

    def call(self, function: Any, *args: Any) -> Expression:
        replaced = [transform(as_expr(arg), self) for arg in reversed(args)]
        replaced.reverse()
        return make_expression(ExprKind.CALL, as_expr(function), *replaced)


def sum_ints(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b