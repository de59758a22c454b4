import pytest

from yapexpr.expression import value
from yapexpr.lazy_vector import LazyVector


@pytest.fixture
def vectors():
    return LazyVector([1.0] * 4), LazyVector([2.0] * 4), LazyVector([3.0] * 4)


def elements(v):
    return [v[i] for i in range(4)]


def test_element_of_sum(vectors):
    _, v2, v3 = vectors
    assert (v2 + v3)[2] == 5.0


def test_plus_assign_difference(vectors):
    v1, v2, v3 = vectors
    v1 += v2 - v3
    assert elements(v1) == [0.0, 0.0, 0.0, 0.0]


def test_plus_assign_keeps_storage(vectors):
    v1, v2, v3 = vectors
    storage = value(v1)
    original = v1
    v1 += v2 - v3
    assert v1 is original
    assert value(v1) is storage


def test_plus_assign_terminal(vectors):
    v1, v2, _ = vectors
    v1 += v2
    assert elements(v1) == [3.0, 3.0, 3.0, 3.0]


def test_nested_expression(vectors):
    v1, v2, v3 = vectors
    assert (v2 + v3 - v1)[0] == 4.0


def test_expression_sees_later_changes(vectors):
    v1, v2, v3 = vectors
    expr = v2 + v3
    v1 += v1
    assert expr[1] == 5.0
    assert elements(v1) == [2.0, 2.0, 2.0, 2.0]


def test_unsupported_operators(vectors):
    _, v2, v3 = vectors
    with pytest.raises(TypeError):
        v2 * v3
    with pytest.raises(TypeError):
        -v2
    assert elements(v2) == [2.0, 2.0, 2.0, 2.0]
    assert (v2 + v3)[0] == 5.0


def test_plus_assign_rejects_plain_values(vectors):
    v1, _, _ = vectors
    target = v1
    with pytest.raises(TypeError):
        target += 1.0
    assert elements(v1) == [1.0, 1.0, 1.0, 1.0]


def test_index_out_of_range(vectors):
    _, v2, v3 = vectors
    total = v2 + v3
    with pytest.raises(IndexError):
        total[4]
    assert total[3] == 5.0