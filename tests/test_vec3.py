import pytest

from yapexpr.vec3 import Vec3, count_leaves


def components(v):
    return [v[n] for n in range(3)]


def test_default_is_zero():
    assert Vec3().format() == "{0, 0, 0}"


def test_format_lists_components():
    assert Vec3(-1, -2, -3).format() == "{-1, -2, -3}"


def test_assign_scalar_fills_every_component():
    c = Vec3()
    result = c.assign(4)
    assert result is c
    assert components(c) == [4, 4, 4]


def test_assign_sum():
    b = Vec3(-1, -2, -3)
    c = Vec3()
    c.assign(4)
    a = Vec3()
    a.assign(b + c)
    assert components(a) == [x + y for x, y in zip(components(b), components(c))]


def test_assign_saved_expression_sees_later_changes():
    b = Vec3(-1, -2, -3)
    c = Vec3(4, 4, 4)
    expr1 = b + c
    b[0] = 10
    d = Vec3()
    d.assign(expr1)
    assert d[0] == 10 + c[0]
    assert components(d)[1:] == [b[1] + c[1], b[2] + c[2]]


def test_assign_with_scalar_factor():
    b = Vec3(-1, -2, -3)
    c = Vec3(4, 5, 6)
    a = Vec3()
    a.assign(b + 3 * c)
    assert components(a) == [x + 3 * y for x, y in zip(components(b), components(c))]


def test_setitem_rejects_non_numbers():
    v = Vec3(1, 2, 3)
    with pytest.raises(TypeError):
        v[0] = "x"
    assert components(v) == [1, 2, 3]


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Vec3()[3]


def test_count_single_vector():
    assert count_leaves(Vec3()) == 1


def test_count_is_additive():
    b, c, d = Vec3(), Vec3(), Vec3()
    assert count_leaves(b + c) == count_leaves(b) + count_leaves(c)
    assert count_leaves(b + c * d) == count_leaves(b + c) + count_leaves(d)


def test_count_ignores_scalars():
    b, c = Vec3(), Vec3()
    assert count_leaves(b + 3 * c) == count_leaves(b + c)
    assert count_leaves(7) == 0