import pytest

from yapexpr.expression import if_else
from yapexpr.vector_ops import assign_to, equal_sizes, plus_assign, vec

N = 10


@pytest.fixture
def vectors():
    a = list(range(N))
    b = [2 * i for i in range(N)]
    c = [3 * i for i in range(N)]
    d = list(range(N))
    return a, b, c, d


def test_assign_scalar(vectors):
    _, b, _, _ = vectors
    result = assign_to(b, 2)
    assert result is b
    assert b == [2] * N


def test_assign_expression(vectors):
    a, b, c, d = vectors
    assign_to(b, 2)
    assign_to(d, vec(a) + vec(b) * vec(c))
    assert d == [x + y * z for x, y, z in zip(a, b, c)]


def test_plus_assign_if_else(vectors):
    a, b, c, d = vectors
    assign_to(b, 2)
    assign_to(d, vec(a) + vec(b) * vec(c))
    before = list(a)
    result = plus_assign(a, if_else(vec(d) < 30, vec(b), vec(c)))
    assert result is a
    assert a == [x + (y if w < 30 else z) for x, y, z, w in zip(before, b, c, d)]


def test_float_target_keeps_floats(vectors):
    _, _, c, _ = vectors
    e = [0.0] * N
    assign_to(e, vec(c))
    assert e == [float(x) for x in c]
    assert all(type(x) is float for x in e)
    before = list(e)
    plus_assign(e, vec(e) - 4 / (vec(c) + 1))
    assert e == [x + (x - 4 // (z + 1)) for x, z in zip(before, c)]


def test_integer_division_truncates():
    assert assign_to([0, 0], vec([7, -7]) / 2) == [3, -3]


def test_integer_modulus_follows_dividend_sign():
    assert assign_to([0, 0], vec([7, -7]) % 3) == [1, -1]


def test_float_division_is_exact():
    assert assign_to([0.0, 0.0], vec([1.0, 3.0]) / 2) == [0.5, 1.5]


def test_int_target_truncates_floats():
    out = [0, 0]
    assign_to(out, vec([1.5, -2.5]) + 0)
    assert out == [int(1.5), int(-2.5)]
    assert all(type(x) is int for x in out)


def test_equal_sizes():
    assert equal_sizes(3, vec([1, 2, 3]) + vec([4, 5, 6])) is True
    assert equal_sizes(3, vec([1, 2]) + vec([1, 2, 3])) is False
    assert equal_sizes(4, 7) is True


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        assign_to([0, 0, 0], vec([1, 2]))
    with pytest.raises(ValueError):
        plus_assign([0, 0, 0], vec([1, 2]) + 1)


def test_vec_requires_list():
    with pytest.raises(TypeError):
        vec((1, 2))


def test_target_must_be_list():
    with pytest.raises(TypeError):
        assign_to((1, 2), 3)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        assign_to([0], vec([1]) / 0)