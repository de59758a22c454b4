"""Vectors of floats whose sums and differences are evaluated lazily per element."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from yapexpr.expression import Expression
from yapexpr.kinds import ExprKind
from yapexpr.transform import evaluate, transform


@dataclass(frozen=True)
class _TakeNth:
    """Replaces each vector terminal by its element ``n``."""

    n: int

    def terminal(self, item: Any) -> Any:
        if not isinstance(item, list):
            return NotImplemented
        return _LazyVectorExpr(ExprKind.TERMINAL, (item[self.n],))


class _LazyVectorExpr(Expression):
    """Node of a lazy vector expression; supports only + and -.

    Indexing evaluates the expression for one element.  Every other operator
    is switched off by setting its special method to None, which makes Python
    raise TypeError; comparisons fall back to the plain object behaviour.
    """

    def __getitem__(self, index: int) -> float:
        return evaluate(transform(self, _TakeNth(index)))

    __mul__ = __rmul__ = __truediv__ = __rtruediv__ = None
    __mod__ = __rmod__ = __lshift__ = __rlshift__ = None
    __rshift__ = __rrshift__ = __and__ = __rand__ = None
    __or__ = __ror__ = __xor__ = __rxor__ = None
    __pos__ = __neg__ = __invert__ = None
    __call__ = None

    __lt__ = object.__lt__
    __gt__ = object.__gt__
    __le__ = object.__le__
    __ge__ = object.__ge__
    __eq__ = object.__eq__
    __ne__ = object.__ne__
    __hash__ = object.__hash__


class LazyVector(_LazyVectorExpr):
    """A terminal holding a list of floats, updated in place by ``+=``."""

    expr_template = _LazyVectorExpr

    def __init__(self, values: Iterable[float] = ()) -> None:
        super().__init__(ExprKind.TERMINAL, ([float(item) for item in values],))

    def __getitem__(self, index: int) -> float:
        return self.elements[0][index]

    def __iadd__(self, other: Any) -> LazyVector:
        if not isinstance(other, _LazyVectorExpr):
            raise TypeError("only a lazy vector expression can be added in place")
        this = self.elements[0]
        for index, item in enumerate(this):
            this[index] = item + other[index]
        return self