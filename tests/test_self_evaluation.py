import pytest

from yapexpr.expression import callee, value
from yapexpr.kinds import ExprKind
from yapexpr.self_evaluation import (
    Matrix,
    SelfEvaluating,
    UseDaxpy,
    daxpy,
    evaluate_matrix_expr,
)
from yapexpr.transform import transform


def identity():
    m = Matrix(2, 2)
    m[0, 0] = 1.0
    m[1, 1] = 1.0
    return m


def test_matrix_index_round_trip():
    m = Matrix(2, 3)
    m[1, 2] = 5.5
    assert m[1, 2] == 5.5
    assert m[0, 0] == 0.0


def test_matrix_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        Matrix(0, 3)
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_matrix_index_out_of_range():
    with pytest.raises(IndexError):
        Matrix(2, 2)[2, 0]


def test_matrix_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)


def test_scalar_multiplication_commutes():
    m = identity()
    assert 3.0 * m == m * 3.0
    assert (3.0 * m)[0, 0] == 3.0


def test_daxpy_updates_y_in_place():
    x = identity()
    y = identity()
    expected = y + 2.0 * x
    returned = daxpy(2.0, x, y)
    assert returned is y
    assert y == expected


def test_daxpy_shape_mismatch():
    with pytest.raises(ValueError):
        daxpy(1.0, Matrix(2, 2), Matrix(3, 3))


def test_assign_uses_daxpy_and_matches_naive_result():
    m1 = SelfEvaluating(identity())
    m2 = SelfEvaluating(identity())
    m3 = SelfEvaluating(identity())
    m1.assign(3.0 * m2 + m3)
    assert value(m1) == 3.0 * identity() + identity()
    assert value(m1)[0, 0] == 4.0


def test_operands_are_not_modified():
    m2 = SelfEvaluating(identity())
    m3 = SelfEvaluating(identity())
    (3.0 * m2 + m3).to_matrix()
    assert value(m3) == identity()
    assert value(m2) == identity()


def test_to_matrix_without_daxpy_pattern():
    m2 = SelfEvaluating(identity())
    assert (3.0 * m2).to_matrix() == 3.0 * identity()


def test_use_daxpy_rewrites_to_call():
    m2 = SelfEvaluating(identity())
    m3 = SelfEvaluating(identity())
    rewritten = transform(3.0 * m2 + m3, UseDaxpy())
    assert rewritten.kind is ExprKind.CALL
    assert value(callee(rewritten)) is daxpy


def test_use_daxpy_leaves_other_expressions():
    m2 = SelfEvaluating(identity())
    rewritten = transform(3.0 * m2, UseDaxpy())
    assert rewritten.kind is ExprKind.MULTIPLIES


def test_nested_daxpy_pattern():
    m1 = SelfEvaluating(identity())
    m2 = SelfEvaluating(identity())
    m3 = SelfEvaluating(identity())
    result = evaluate_matrix_expr((3.0 * m2 + m3) + m1)
    assert result == 3.0 * identity() + identity() + identity()


def test_terminal_to_matrix_is_a_copy():
    m = SelfEvaluating(identity())
    result = m.to_matrix()
    assert result == identity()
    result[0, 0] = 9.0
    assert value(m) == identity()


def test_self_evaluating_requires_matrix():
    with pytest.raises(TypeError):
        SelfEvaluating([1.0, 2.0])