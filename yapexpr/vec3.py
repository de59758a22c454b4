"""Three-component integer vectors assigned from expressions elementwise."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

from yapexpr.expression import Expression, as_expr, make_terminal
from yapexpr.kinds import ExprKind
from yapexpr.transform import evaluate, transform

_SIZE = 3


def _to_int(item: Any) -> int:
    if not isinstance(item, numbers.Real):
        raise TypeError(f"vector components are integers, got {item!r}")
    return int(item)


def _is_vec3_value(item: Any) -> bool:
    return isinstance(item, list) and len(item) == _SIZE


@dataclass(frozen=True)
class _TakeNth:
    n: int

    def terminal(self, item: Any) -> Any:
        if not _is_vec3_value(item):
            return NotImplemented
        return make_terminal(item[self.n])


class Vec3(Expression):
    """A terminal holding three integers."""

    expr_template = Expression

    def __init__(self, i: int = 0, j: int = 0, k: int = 0) -> None:
        super().__init__(ExprKind.TERMINAL, ([_to_int(i), _to_int(j), _to_int(k)],))

    def __getitem__(self, index: int) -> int:
        return self.elements[0][index]

    def __setitem__(self, index: int, item: Any) -> None:
        self.elements[0][index] = _to_int(item)

    def assign(self, value: Any) -> Vec3:
        """Evaluate ``value`` once per component and store each result."""
        expr = as_expr(value)
        for n in range(_SIZE):
            self[n] = evaluate(transform(expr, _TakeNth(n)))
        return self

    def format(self) -> str:
        """Return the components as ``{x, y, z}``."""
        return "{" + ", ".join(str(item) for item in self.elements[0]) + "}"


class _LeafCounter:
    def __init__(self) -> None:
        self.count = 0

    def __call__(self, node: Expression) -> Any:
        if node.kind is ExprKind.TERMINAL and _is_vec3_value(node.elements[0]):
            self.count += 1
            return node
        return NotImplemented


def count_leaves(expr: Any) -> int:
    """Count the three-component vector terminals in ``expr``."""
    counter = _LeafCounter()
    transform(as_expr(expr), counter)
    return counter.count