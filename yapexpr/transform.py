"""Transforming expression trees, and evaluating them."""

from __future__ import annotations

import operator
from typing import Any, Callable

from yapexpr.expression import (
    Expression,
    ExpressionError,
    Placeholder,
    as_expr,
)
from yapexpr.kinds import ExprKind

_K = ExprKind


class StrictTransformError(ExpressionError):
    """Raised when no transform given to transform_strict() matches."""


def _deref(item: Any) -> Any:
    while isinstance(item, Expression) and item.kind is _K.EXPR_REF:
        item = item.elements[0]
    return item


def _terminal_value(item: Any) -> Any:
    """Unwrap terminals to their values; other expressions are dereferenced."""
    node = _deref(item)
    if isinstance(node, Expression) and node.kind is _K.TERMINAL:
        return node.elements[0]
    return node


def _tag_args(node: Expression) -> tuple:
    if node.kind is _K.TERMINAL:
        return (node.elements[0],)
    return tuple(_terminal_value(element) for element in node.elements)


def _rebuild(node: Expression, transforms: tuple) -> Expression:
    template = type(node).expr_template or type(node)
    elements = tuple(
        _apply(element, transforms, False) if isinstance(element, Expression) else element
        for element in node.elements
    )
    return template(node.kind, elements)


def _apply(item: Expression, transforms: tuple, strict: bool) -> Any:
    node = _deref(item)
    for xform in transforms:
        handler = getattr(xform, node.kind.value, None)
        if callable(handler):
            result = handler(*_tag_args(node))
            if result is not NotImplemented:
                return result
        if callable(xform):
            result = xform(node)
            if result is not NotImplemented:
                return result
    if strict:
        raise StrictTransformError(
            f"no transform matches the {node.kind.value} expression"
        )
    if node.kind is _K.TERMINAL:
        return node
    return _rebuild(node, transforms)


def _check_arguments(expr: Any, transforms: tuple, what: str) -> None:
    if not isinstance(expr, Expression):
        raise ExpressionError(f"{what}() is only defined for expressions")
    if not transforms:
        raise TypeError(f"{what}() needs at least one transform")
    for xform in transforms:
        if isinstance(xform, Expression):
            raise TypeError(f"an expression cannot be used as a transform in {what}()")


def transform(expr: Expression, *args: Any) -> Any:
    """Apply the transforms ``args`` to ``expr``, top down.

    For each node, each transform is tried in turn.  A transform matches by
    tag when it has a method named after the node's kind (``terminal``,
    ``plus``, ``call``, ...); the method receives the node's operands, with
    terminals unwrapped to their values.  Otherwise a callable transform is
    called with the node itself.  A result of ``NotImplemented`` means "no
    match".  When nothing matches, a terminal is returned unchanged and any
    other node is rebuilt from its transformed operands.
    """
    _check_arguments(expr, args, "transform")
    return _apply(expr, args, False)


def transform_strict(expr: Expression, *args: Any) -> Any:
    """Like transform(), but raise when no transform matches ``expr``."""
    _check_arguments(expr, args, "transform_strict")
    return _apply(expr, args, True)


class _PlaceholderReplacement:
    def __init__(self, values: tuple) -> None:
        self._values = values

    def terminal(self, item: Any) -> Any:
        if not isinstance(item, Placeholder):
            return NotImplemented
        if item.index > len(self._values):
            raise IndexError(
                f"placeholder {item.index} out of range: {len(self._values)} value(s) given"
            )
        return as_expr(self._values[item.index - 1])


def replace_placeholders(expr: Expression, *args: Any) -> Any:
    """Replace each placeholder terminal N in ``expr`` by ``args[N - 1]``."""
    _check_arguments(expr, (_PlaceholderReplacement(args),), "replace_placeholders")
    return _apply(expr, (_PlaceholderReplacement(args),), False)


_UNARY_OPS: dict[ExprKind, Callable[[Any], Any]] = {
    _K.UNARY_PLUS: operator.pos,
    _K.NEGATE: operator.neg,
    _K.COMPLEMENT: operator.invert,
    _K.LOGICAL_NOT: operator.not_,
}

_BINARY_OPS: dict[ExprKind, Callable[[Any, Any], Any]] = {
    _K.SHIFT_LEFT: operator.lshift,
    _K.SHIFT_RIGHT: operator.rshift,
    _K.MULTIPLIES: operator.mul,
    _K.DIVIDES: operator.truediv,
    _K.MODULUS: operator.mod,
    _K.PLUS: operator.add,
    _K.MINUS: operator.sub,
    _K.LESS: operator.lt,
    _K.GREATER: operator.gt,
    _K.LESS_EQUAL: operator.le,
    _K.GREATER_EQUAL: operator.ge,
    _K.EQUAL_TO: operator.eq,
    _K.NOT_EQUAL_TO: operator.ne,
    _K.BITWISE_AND: operator.and_,
    _K.BITWISE_OR: operator.or_,
    _K.BITWISE_XOR: operator.xor,
    _K.SUBSCRIPT: operator.getitem,
}

_ASSIGN_OPS: dict[ExprKind, Callable[[Any, Any], Any] | None] = {
    _K.ASSIGN: None,
    _K.SHIFT_LEFT_ASSIGN: operator.ilshift,
    _K.SHIFT_RIGHT_ASSIGN: operator.irshift,
    _K.MULTIPLIES_ASSIGN: operator.imul,
    _K.DIVIDES_ASSIGN: operator.itruediv,
    _K.MODULUS_ASSIGN: operator.imod,
    _K.PLUS_ASSIGN: operator.iadd,
    _K.MINUS_ASSIGN: operator.isub,
    _K.BITWISE_AND_ASSIGN: operator.iand,
    _K.BITWISE_OR_ASSIGN: operator.ior,
    _K.BITWISE_XOR_ASSIGN: operator.ixor,
}

_STEPS = {
    _K.PRE_INC: (1, False),
    _K.PRE_DEC: (-1, False),
    _K.POST_INC: (1, True),
    _K.POST_DEC: (-1, True),
}


class _Evaluation:
    """Computes the value of an expression tree with Python's operators."""

    def __init__(self, values: tuple) -> None:
        self._values = values

    def __call__(self, item: Any) -> Any:
        node = _deref(item)
        if not isinstance(node, Expression):
            return node
        kind = node.kind
        elements = node.elements
        if kind is _K.TERMINAL:
            return self._terminal(elements[0])
        if kind in _UNARY_OPS:
            return _UNARY_OPS[kind](self(elements[0]))
        if kind in _BINARY_OPS:
            return _BINARY_OPS[kind](self(elements[0]), self(elements[1]))
        if kind in _ASSIGN_OPS:
            return self._assign(kind, elements[0], elements[1])
        if kind in _STEPS:
            return self._step(kind, elements[0])
        if kind is _K.LOGICAL_AND:
            return bool(self(elements[0])) and bool(self(elements[1]))
        if kind is _K.LOGICAL_OR:
            return bool(self(elements[0])) or bool(self(elements[1]))
        if kind is _K.COMMA:
            self(elements[0])
            return self(elements[1])
        if kind is _K.IF_ELSE:
            return self(elements[1]) if self(elements[0]) else self(elements[2])
        if kind is _K.CALL:
            function = self(elements[0])
            return function(*(self(element) for element in elements[1:]))
        if kind is _K.MEM_PTR:
            return self._member(self(elements[0]), self(elements[1]))
        raise ExpressionError(f"a {kind.value} expression cannot be evaluated")

    def _terminal(self, item: Any) -> Any:
        if not isinstance(item, Placeholder):
            return item
        if item.index > len(self._values):
            raise IndexError(
                f"placeholder {item.index} out of range: {len(self._values)} value(s) given"
            )
        return self._values[item.index - 1]

    @staticmethod
    def _member(obj: Any, member: Any) -> Any:
        if isinstance(member, str):
            return getattr(obj, member)
        if callable(member):
            return member(obj)
        raise ExpressionError("a member access needs an attribute name or a callable")

    def _store(self, target_item: Any, new_value: Any) -> None:
        target = _deref(target_item)
        if not isinstance(target, Expression):
            raise ExpressionError("cannot assign to a value that is not an expression")
        if target.kind is _K.TERMINAL:
            if isinstance(target.elements[0], Placeholder):
                raise ExpressionError("cannot assign to a placeholder")
            target.elements = (new_value,)
        elif target.kind is _K.SUBSCRIPT:
            container = self(target.elements[0])
            container[self(target.elements[1])] = new_value
        else:
            raise ExpressionError(f"cannot assign to a {target.kind.value} expression")

    def _assign(self, kind: ExprKind, target: Any, source: Any) -> Any:
        op = _ASSIGN_OPS[kind]
        result = self(source) if op is None else op(self(target), self(source))
        self._store(target, result)
        return result

    def _step(self, kind: ExprKind, target: Any) -> Any:
        delta, returns_old = _STEPS[kind]
        old = self(target)
        new = old + delta
        self._store(target, new)
        return old if returns_old else new


def evaluate(expr: Expression, *args: Any) -> Any:
    """Evaluate ``expr``; placeholder N takes the value ``args[N - 1]``.

    Assignment, compound assignment and increment nodes store their result
    into a terminal or a subscripted container on their left.
    """
    if not isinstance(expr, Expression):
        raise ExpressionError("evaluate() is only defined for expressions")
    return _Evaluation(args)(expr)