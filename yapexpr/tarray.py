"""Three-element integer arrays whose arithmetic is evaluated elementwise."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

from yapexpr.expression import (
    Expression,
    as_expr,
    deref,
    is_expr,
    left,
    make_terminal,
    right,
)
from yapexpr.kinds import ExprKind, op_string
from yapexpr.transform import evaluate, transform

_SIZE = 3


def _is_int(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def _supported_terminal(item: Any) -> bool:
    if _is_int(item):
        return True
    return isinstance(item, list) and len(item) == _SIZE and all(map(_is_int, item))


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@dataclass(frozen=True)
class TakeNth:
    """Transform replacing each array terminal by its element ``n``."""

    n: int

    def terminal(self, item: Any) -> Any:
        if not isinstance(item, list):
            return NotImplemented
        return _TArrayExpr(ExprKind.TERMINAL, (item[self.n],))

    def divides(self, lhs: Any, rhs: Any) -> Expression:
        # Integer division truncates towards zero.
        return make_terminal(_truncating_divide)(
            transform(as_expr(lhs), self), transform(as_expr(rhs), self)
        )


def _nth(expr: Expression, n: int) -> int:
    result = evaluate(transform(expr, TakeNth(n)))
    if not _is_int(result):
        raise TypeError(f"array expressions evaluate to integers, got {result!r}")
    return result


class _TArrayExpr(Expression):
    """Node of an array expression; supports only + - * / and eager indexing.

    Every other operator is switched off by setting its special method to
    None, which makes Python raise TypeError; comparisons fall back to the
    plain object behaviour.
    """

    def __init__(self, kind: ExprKind, elements) -> None:
        super().__init__(kind, elements)
        if self.kind is ExprKind.TERMINAL and not _supported_terminal(self.elements[0]):
            raise TypeError(
                f"unsupported terminal value {self.elements[0]!r}: "
                "only integers and three-integer arrays"
            )

    def __getitem__(self, index: int) -> int:
        return _nth(self, index)

    __lshift__ = __rlshift__ = __rshift__ = __rrshift__ = None
    __mod__ = __rmod__ = __and__ = __rand__ = __or__ = __ror__ = None
    __xor__ = __rxor__ = None
    __pos__ = __neg__ = __invert__ = None
    __call__ = None

    __lt__ = object.__lt__
    __gt__ = object.__gt__
    __le__ = object.__le__
    __ge__ = object.__ge__
    __eq__ = object.__eq__
    __ne__ = object.__ne__
    __hash__ = object.__hash__


class TArray(_TArrayExpr):
    """A terminal holding three integers."""

    expr_template = _TArrayExpr

    def __init__(self, i: int = 0, j: int = 0, k: int = 0) -> None:
        super().__init__(ExprKind.TERMINAL, ([i, j, k],))

    def __getitem__(self, index: int) -> int:
        return self.elements[0][index]

    def __setitem__(self, index: int, item: int) -> None:
        if not _is_int(item):
            raise TypeError(f"array elements are integers, got {item!r}")
        self.elements[0][index] = item

    def copy(self) -> TArray:
        """Return an independent array with the same elements."""
        return TArray(*self.elements[0])

    def assign(self, value: Any) -> TArray:
        """Evaluate ``value`` elementwise and store the results."""
        expr = value if is_expr(value) else _TArrayExpr(ExprKind.TERMINAL, (value,))
        self.elements[0][:] = [_nth(expr, n) for n in range(_SIZE)]
        return self

    def print_assign(self, expr: Any, stream: TextIO | None = None) -> TArray:
        """Assign ``expr``, then write "result = expression" to ``stream``."""
        self.assign(expr)
        out = sys.stdout if stream is None else stream
        out.write(f"{format_tarray_expr(self)} = {format_tarray_expr(expr)}\n")
        return self


def format_tarray_expr(expr: Any) -> str:
    """Render an array expression in infix form; sums and differences get parentheses."""
    if not is_expr(expr):
        return str(expr)
    node = expr
    while node.kind is ExprKind.EXPR_REF:
        node = deref(node)
    if node.kind is ExprKind.TERMINAL:
        item = node.elements[0]
        if isinstance(item, list):
            return "{" + ", ".join(map(str, item)) + "}"
        return "{" + str(item) + "}"
    text = (
        f"{format_tarray_expr(left(node))} {op_string(node.kind)} "
        f"{format_tarray_expr(right(node))}"
    )
    if node.kind in (ExprKind.PLUS, ExprKind.MINUS):
        return f"({text})"
    return text