"""Matrix expressions that evaluate themselves, fusing a*x + y into daxpy()."""

from __future__ import annotations

from typing import Any

from yapexpr.expression import (
    Expression,
    ExpressionError,
    as_expr,
    deref,
    is_expr,
    make_terminal,
    value,
)
from yapexpr.kinds import ExprKind
from yapexpr.transform import evaluate, transform


def _is_scalar(item: Any) -> bool:
    return isinstance(item, (int, float)) and not isinstance(item, bool)


class Matrix:
    """A dense row-major matrix of floats, indexed as ``m[row, col]``."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if (rows, cols) != (0, 0) and (rows <= 0 or cols <= 0):
            raise ValueError(f"matrix dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._values = [0.0] * (rows * cols)

    def _offset(self, index: tuple[int, int]) -> int:
        row, col = index
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"index ({row}, {col}) outside a {self.rows}x{self.cols} matrix")
        return row * self.cols + col

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self._values[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], item: float) -> None:
        self._values[self._offset(index)] = item

    def copy(self) -> Matrix:
        """Return an independent copy."""
        duplicate = Matrix()
        duplicate.rows = self.rows
        duplicate.cols = self.cols
        duplicate._values = list(self._values)
        return duplicate

    def check_same_shape(self, other: Matrix) -> None:
        """Raise ValueError unless ``other`` has this matrix's shape."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.check_same_shape(other)
        result = self.copy()
        result._values = [a + b for a, b in zip(self._values, other._values)]
        return result

    def __mul__(self, factor: Any) -> Matrix:
        if not _is_scalar(factor):
            return NotImplemented
        result = self.copy()
        result._values = [item * factor for item in self._values]
        return result

    def __rmul__(self, factor: Any) -> Matrix:
        return self.__mul__(factor)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self._values) == (other.rows, other.cols, other._values)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self._values!r})"


def daxpy(a: float, x: Matrix, y: Matrix) -> Matrix:
    """Add ``a * x`` into ``y`` in place, with no temporaries; return ``y``."""
    x.check_same_shape(y)
    y._values = [yv + a * xv for xv, yv in zip(x._values, y._values)]
    return y


def _leaf(item: Any) -> Any:
    while is_expr(item) and item.kind is ExprKind.EXPR_REF:
        item = deref(item)
    if is_expr(item) and item.kind is ExprKind.TERMINAL:
        return value(item)
    return item


class UseDaxpy:
    """Transform that turns ``scalar * matrix + matrix`` into a daxpy() call."""

    def plus(self, lhs: Any, rhs: Any) -> Any:
        if not isinstance(rhs, Matrix):
            return NotImplemented
        if not is_expr(lhs) or lhs.kind is not ExprKind.MULTIPLIES:
            return NotImplemented
        factor, x = (_leaf(element) for element in lhs.elements)
        if not _is_scalar(factor) or not isinstance(x, Matrix):
            return NotImplemented
        # The right operand is copied so the caller's matrix stays unchanged.
        return make_terminal(daxpy)(factor, x, rhs.copy())


def evaluate_matrix_expr(expr: Expression) -> Any:
    """Apply UseDaxpy to ``expr`` and evaluate the result."""
    if not is_expr(expr):
        raise ExpressionError("evaluate_matrix_expr() is only defined for expressions")
    result = evaluate(transform(expr, UseDaxpy()))
    return result.copy() if isinstance(result, Matrix) else result


class _SelfEvaluatingExpr(Expression):
    """Node of a self-evaluating matrix expression."""

    def to_matrix(self) -> Any:
        """Evaluate this expression with the daxpy optimisation."""
        return evaluate_matrix_expr(self)


class SelfEvaluating(_SelfEvaluatingExpr):
    """A terminal holding a Matrix that evaluates expressions assigned to it."""

    expr_template = _SelfEvaluatingExpr

    def __init__(self, matrix: Matrix | None = None) -> None:
        if matrix is None:
            matrix = Matrix()
        if not isinstance(matrix, Matrix):
            raise TypeError("SelfEvaluating holds a Matrix")
        super().__init__(ExprKind.TERMINAL, (matrix,))

    def assign(self, expr: Any) -> SelfEvaluating:
        """Evaluate ``expr`` and store the result as this terminal's matrix."""
        result = evaluate_matrix_expr(as_expr(expr))
        if not isinstance(result, Matrix):
            raise TypeError("only a matrix can be assigned to a SelfEvaluating terminal")
        self.elements = (result,)
        return self

    def to_matrix(self) -> Matrix:
        """Return a copy of the matrix this terminal holds."""
        return evaluate_matrix_expr(self)