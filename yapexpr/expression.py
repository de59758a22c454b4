"""Expression trees built from Python operators, and access to their parts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from yapexpr.kinds import ExprArity, ExprKind, arity_of

_FIXED_ARITY = {ExprArity.ONE: 1, ExprArity.TWO: 2, ExprArity.THREE: 3}


class ExpressionError(TypeError):
    """Raised when an expression does not have the shape an operation needs."""


@dataclass(frozen=True)
class Placeholder:
    """The value of a placeholder terminal; indices start at 1."""

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or self.index < 1:
            raise ValueError(f"placeholder index must be a positive integer, got {self.index!r}")


def _check_elements(kind: ExprKind, elements: tuple) -> None:
    arity = arity_of(kind)
    count = len(elements)
    if arity is ExprArity.N:
        valid = count >= 1
        wanted = "at least 1"
    else:
        wanted = _FIXED_ARITY[arity]
        valid = count == wanted
    if not valid:
        raise ExpressionError(
            f"a {kind.value} expression takes {wanted} element(s), got {count}"
        )
    if kind is ExprKind.EXPR_REF and not isinstance(elements[0], Expression):
        raise ExpressionError("an expr_ref expression must refer to an expression")


def _template_of(expr: Expression) -> type[Expression]:
    cls = type(expr)
    return cls.expr_template or cls


def _operand(template: type[Expression], item: Any) -> Expression:
    """Hold expressions by reference and wrap anything else as a terminal."""
    if isinstance(item, Expression):
        if item.kind is ExprKind.EXPR_REF:
            return item
        return template(ExprKind.EXPR_REF, (item,))
    return template(ExprKind.TERMINAL, (item,))


def _build(kind: ExprKind, operands: tuple) -> Expression:
    template = next(
        (_template_of(item) for item in operands if isinstance(item, Expression)),
        None,
    )
    if template is None:
        raise ExpressionError(
            f"building a {kind.value} expression needs at least one expression operand"
        )
    return template(kind, tuple(_operand(template, item) for item in operands))


def _binary(kind: ExprKind):
    def forward(self, other):
        return _build(kind, (self, other))

    def reflected(self, other):
        return _build(kind, (other, self))

    return forward, reflected


def _unary(kind: ExprKind):
    def method(self):
        return _build(kind, (self,))

    return method


def _referent(expr: Expression) -> Expression:
    while expr.kind is ExprKind.EXPR_REF:
        expr = expr.elements[0]
    return expr


class Expression:
    """A node of an expression tree: a kind and a tuple of elements.

    A terminal holds one arbitrary value; every other node holds its
    operands, which are normally expressions.  Operators on expressions
    build new nodes instead of computing anything.  Expression operands are
    held through expr_ref nodes; other operands become terminals.

    Subclasses whose constructor does not take ``(kind, elements)`` set
    ``expr_template`` to the class used for the nodes they produce.

    Python reflects comparisons, so ``3 < expr`` builds ``expr > 3``.
    """

    expr_template: ClassVar[type[Expression] | None] = None

    def __init__(self, kind: ExprKind, elements) -> None:
        if not isinstance(kind, ExprKind):
            raise ExpressionError(f"unknown expression kind {kind!r}")
        elements = tuple(elements)
        _check_elements(kind, elements)
        self.kind = kind
        self.elements = elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind}, {self.elements!r})"

    def __bool__(self) -> bool:
        """Equality nodes compare their operands by identity; others have no truth value.

        This keeps containers working (``expr in items``) while refusing to
        guess the truth of any other unevaluated expression.
        """
        if self.kind in (ExprKind.EQUAL_TO, ExprKind.NOT_EQUAL_TO):
            lhs, rhs = (_referent(element) for element in self.elements)
            same = lhs is rhs
            return same if self.kind is ExprKind.EQUAL_TO else not same
        raise TypeError("an expression has no truth value; evaluate it first")

    __iter__ = None

    def __call__(self, *args) -> Expression:
        return _build(ExprKind.CALL, (self, *args))

    def __getitem__(self, index) -> Expression:
        return _build(ExprKind.SUBSCRIPT, (self, index))

    __pos__ = _unary(ExprKind.UNARY_PLUS)
    __neg__ = _unary(ExprKind.NEGATE)
    __invert__ = _unary(ExprKind.COMPLEMENT)

    __lshift__, __rlshift__ = _binary(ExprKind.SHIFT_LEFT)
    __rshift__, __rrshift__ = _binary(ExprKind.SHIFT_RIGHT)
    __mul__, __rmul__ = _binary(ExprKind.MULTIPLIES)
    __truediv__, __rtruediv__ = _binary(ExprKind.DIVIDES)
    __mod__, __rmod__ = _binary(ExprKind.MODULUS)
    __add__, __radd__ = _binary(ExprKind.PLUS)
    __sub__, __rsub__ = _binary(ExprKind.MINUS)
    __and__, __rand__ = _binary(ExprKind.BITWISE_AND)
    __or__, __ror__ = _binary(ExprKind.BITWISE_OR)
    __xor__, __rxor__ = _binary(ExprKind.BITWISE_XOR)

    __lt__ = _binary(ExprKind.LESS)[0]
    __gt__ = _binary(ExprKind.GREATER)[0]
    __le__ = _binary(ExprKind.LESS_EQUAL)[0]
    __ge__ = _binary(ExprKind.GREATER_EQUAL)[0]
    __eq__ = _binary(ExprKind.EQUAL_TO)[0]
    __ne__ = _binary(ExprKind.NOT_EQUAL_TO)[0]

    __hash__ = object.__hash__


def is_expr(obj: Any) -> bool:
    """Tell whether ``obj`` is an expression."""
    return isinstance(obj, Expression)


def make_terminal(value: Any) -> Expression:
    """Wrap a non-expression value in a terminal."""
    if isinstance(value, Expression):
        raise ExpressionError("make_terminal() is only defined for non-expressions")
    return Expression(ExprKind.TERMINAL, (value,))


def as_expr(value: Any) -> Expression:
    """Pass expressions through; wrap anything else as a terminal."""
    return value if isinstance(value, Expression) else make_terminal(value)


def make_expression(kind: ExprKind, *args) -> Expression:
    """Build an expression of ``kind`` from ``args``."""
    if not isinstance(kind, ExprKind):
        raise ExpressionError(f"unknown expression kind {kind!r}")
    if kind is ExprKind.TERMINAL:
        if len(args) != 1:
            raise ExpressionError("a terminal takes exactly one value")
        return make_terminal(args[0])
    if kind is ExprKind.EXPR_REF:
        if len(args) != 1 or not isinstance(args[0], Expression):
            raise ExpressionError("an expr_ref needs exactly one expression")
        return _operand(Expression, args[0])
    return Expression(kind, tuple(_operand(Expression, item) for item in args))


def placeholder(index: int) -> Expression:
    """Return a terminal holding the placeholder ``index``."""
    return make_terminal(Placeholder(index))


def _resolve(expr: Any, what: str) -> Expression:
    if not isinstance(expr, Expression):
        raise ExpressionError(f"{what}() is only defined for expressions")
    return _referent(expr)


def _require(expr: Any, what: str, kind: ExprKind) -> Expression:
    resolved = _resolve(expr, what)
    if resolved.kind is not kind:
        raise ExpressionError(
            f"{what}() is only defined for {kind.value} expressions, "
            f"not {resolved.kind.value}"
        )
    return resolved


def _check_index(index: Any, size: int, what: str) -> None:
    if not isinstance(index, int):
        raise TypeError(f"{what}() index must be an integer")
    if not 0 <= index < size:
        raise IndexError(f"{what}() index {index} out of range 0..{size - 1}")


def deref(expr: Any) -> Expression:
    """Return the expression an expr_ref refers to."""
    if not isinstance(expr, Expression) or expr.kind is not ExprKind.EXPR_REF:
        raise ExpressionError("deref() is only defined for expr_ref expressions")
    return expr.elements[0]


def value(expr: Any) -> Any:
    """Return a terminal's value or a unary expression's operand.

    Non-expressions are returned unchanged.
    """
    if not isinstance(expr, Expression):
        return expr
    resolved = _resolve(expr, "value")
    if arity_of(resolved.kind) is not ExprArity.ONE:
        raise ExpressionError(
            f"value() is only defined for unary expressions, not {resolved.kind.value}"
        )
    return resolved.elements[0]


def left(expr: Any) -> Any:
    """Return the left operand of a binary expression."""
    resolved = _resolve(expr, "left")
    if arity_of(resolved.kind) is not ExprArity.TWO:
        raise ExpressionError("left() is only defined for binary expressions")
    return resolved.elements[0]


def right(expr: Any) -> Any:
    """Return the right operand of a binary expression."""
    resolved = _resolve(expr, "right")
    if arity_of(resolved.kind) is not ExprArity.TWO:
        raise ExpressionError("right() is only defined for binary expressions")
    return resolved.elements[1]


def cond(expr: Any) -> Any:
    """Return the condition of an if_else expression."""
    return _require(expr, "cond", ExprKind.IF_ELSE).elements[0]


def then(expr: Any) -> Any:
    """Return the then-branch of an if_else expression."""
    return _require(expr, "then", ExprKind.IF_ELSE).elements[1]


def else_(expr: Any) -> Any:
    """Return the else-branch of an if_else expression."""
    return _require(expr, "else_", ExprKind.IF_ELSE).elements[2]


def callee(expr: Any) -> Any:
    """Return the callable of a call expression."""
    return _require(expr, "callee", ExprKind.CALL).elements[0]


def argument(expr: Any, index: int) -> Any:
    """Return argument ``index`` (from 0) of a call expression."""
    resolved = _require(expr, "argument", ExprKind.CALL)
    _check_index(index, len(resolved.elements) - 1, "argument")
    return resolved.elements[index + 1]


def get(expr: Any, index: int) -> Any:
    """Return element ``index`` of an expression."""
    resolved = _resolve(expr, "get")
    _check_index(index, len(resolved.elements), "get")
    return resolved.elements[index]


def if_else(condition: Any, then_value: Any, else_value: Any) -> Expression:
    """Build a conditional expression."""
    return _build(ExprKind.IF_ELSE, (condition, then_value, else_value))


def comma(lhs: Any, rhs: Any) -> Expression:
    """Build a comma (sequence) expression."""
    return _build(ExprKind.COMMA, (lhs, rhs))


def logical_and(lhs: Any, rhs: Any) -> Expression:
    """Build a logical-and expression."""
    return _build(ExprKind.LOGICAL_AND, (lhs, rhs))


def logical_or(lhs: Any, rhs: Any) -> Expression:
    """Build a logical-or expression."""
    return _build(ExprKind.LOGICAL_OR, (lhs, rhs))


def logical_not(operand: Any) -> Expression:
    """Build a logical-not expression."""
    return _build(ExprKind.LOGICAL_NOT, (operand,))


def assign(lhs: Any, rhs: Any) -> Expression:
    """Build an assignment expression; the target must be an expression."""
    if not isinstance(lhs, Expression):
        raise ExpressionError("the target of assign() must be an expression")
    return _build(ExprKind.ASSIGN, (lhs, rhs))