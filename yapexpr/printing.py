"""Indented, line-per-node text rendering of expression trees."""

from __future__ import annotations

from typing import Any, Iterator, TextIO

from yapexpr.expression import Expression, ExpressionError, Placeholder
from yapexpr.kinds import ExprKind, op_string

UNPRINTABLE = "<<unprintable-value>>"
_INDENT = "    "
_REF_SUFFIX = " &"


def _type_text(item: Any) -> str:
    if isinstance(item, Placeholder):
        return f"placeholder<{item.index}>"
    return type(item).__name__


def _value_text(item: Any) -> str:
    if isinstance(item, Placeholder):
        return str(item.index)
    cls = type(item)
    if cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__:
        return UNPRINTABLE
    if isinstance(item, float):
        return format(item, "g")
    return str(item)


def _terminal_line(item: Any, indent: str, suffix: str) -> str:
    return f"{indent}term<{_type_text(item)}>[={_value_text(item)}]{suffix}"


def _lines(item: Any, depth: int, suffix: str) -> Iterator[str]:
    indent = _INDENT * depth
    if not isinstance(item, Expression):
        yield _terminal_line(item, indent, suffix)
        return
    if item.kind is ExprKind.EXPR_REF:
        yield from _lines(item.elements[0], depth, _REF_SUFFIX)
        return
    if item.kind is ExprKind.TERMINAL:
        yield _terminal_line(item.elements[0], indent, suffix)
        return
    yield f"{indent}expr<{op_string(item.kind)}>{suffix}"
    for element in item.elements:
        yield from _lines(element, depth + 1, "")


def format_expr(expr: Expression) -> str:
    """Render ``expr`` one node per line; referenced operands end in " &"."""
    if not isinstance(expr, Expression):
        raise ExpressionError("format_expr() is only defined for expressions")
    return "".join(f"{line}\n" for line in _lines(expr, 0, ""))


def print_expr(expr: Expression, stream: TextIO) -> TextIO:
    """Write the rendering of ``expr`` to ``stream`` and return the stream."""
    stream.write(format_expr(expr))
    return stream