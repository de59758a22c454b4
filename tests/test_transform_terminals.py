from yapexpr.expression import callee, make_terminal, value
from yapexpr.transform import evaluate, transform
from yapexpr.transform_terminals import IotaTerminalTransform, sum_ints


def test_sum_ints():
    assert sum_ints(8, 8) == 16


def test_call_expression_uses_both_overloads():
    expr = make_terminal(sum_ints)(8, 8)
    assert evaluate(expr) == 16
    iota_expr = transform(expr, IotaTerminalTransform(1))
    assert evaluate(iota_expr) == 3


def test_terminal_only_expression():
    expr = -(make_terminal(8) + 8)
    assert evaluate(expr) == -16
    iota_expr = transform(expr, IotaTerminalTransform(0))
    assert evaluate(iota_expr) == -1


def test_nested_call_expression():
    expr = make_terminal(sum_ints)(-(make_terminal(8) + 8), 0)
    assert evaluate(expr) == -16
    iota_expr = transform(expr, IotaTerminalTransform(0))
    assert evaluate(iota_expr) == -3


def test_callable_is_not_replaced():
    iota_expr = transform(make_terminal(sum_ints)(8, 8), IotaTerminalTransform(1))
    assert value(callee(iota_expr)) is sum_ints


def test_counter_advances_once_per_terminal():
    xform = IotaTerminalTransform(1)
    transform(make_terminal(sum_ints)(8, 8), xform)
    assert xform.index == 3


def test_original_expression_is_unchanged():
    expr = make_terminal(sum_ints)(8, 8)
    transform(expr, IotaTerminalTransform(1))
    assert evaluate(expr) == 16