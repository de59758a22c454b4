import pytest

from yapexpr.arithmetic import (
    NaxpyTransform,
    Number,
    eval_as_expr,
    eval_as_expr_4x,
    eval_as_native,
    eval_as_native_4x,
    eval_with_naxpy,
    naxpy,
)
from yapexpr.expression import make_terminal
from yapexpr.transform import evaluate, transform

SAMPLES = [
    (Number(1.0), Number(42.0), Number(3.0)),
    (Number(2.5), Number(-1.5), Number(0.25)),
    (Number(0.0), Number(7.0), Number(-3.0)),
]


def test_source_sample_value():
    assert eval_as_native(Number(1.0), Number(42.0), Number(3.0)) == Number(2070.0)


@pytest.mark.parametrize("a,x,y", SAMPLES)
def test_expression_matches_native(a, x, y):
    assert eval_as_expr(a, x, y) == eval_as_native(a, x, y)


@pytest.mark.parametrize("a,x,y", SAMPLES)
def test_expression_4x_matches_native_4x(a, x, y):
    assert eval_as_expr_4x(a, x, y) == eval_as_native_4x(a, x, y)


@pytest.mark.parametrize("a,x,y", SAMPLES)
def test_naxpy_form_matches_native(a, x, y):
    assert eval_with_naxpy(a, x, y) == eval_as_native(a, x, y)


@pytest.mark.parametrize("a,x,y", SAMPLES)
def test_naxpy_matches_plain_arithmetic(a, x, y):
    assert naxpy(a, x, y) == a * x + y


def test_number_operations_return_numbers():
    assert Number(2.0) + Number(3.0) == Number(5.0)
    assert Number(2.0) * Number(3.0) == Number(6.0)


def test_number_rejects_plain_floats():
    with pytest.raises(TypeError):
        Number(1.0) + 1.0


def test_transform_fuses_every_axpy():
    a, x, y = (make_terminal(Number(v)) for v in (1.0, 42.0, 3.0))
    xform = NaxpyTransform()
    result = evaluate(transform((a * x + y) * (a * x + y) + (a * x + y), xform))
    assert result == eval_as_native(Number(1.0), Number(42.0), Number(3.0))
    assert xform.fused == 4


def test_transform_leaves_other_sums_alone():
    a, y = make_terminal(Number(2.0)), make_terminal(Number(5.0))
    xform = NaxpyTransform()
    result = evaluate(transform(a + y, xform))
    assert result == Number(2.0) + Number(5.0)
    assert xform.fused == 0