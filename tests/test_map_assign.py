import pytest

from yapexpr.kinds import ExprKind
from yapexpr.map_assign import (
    MapListOf,
    make_map_manually,
    make_map_with_expressions,
    map_list_of,
)


def test_expression_map_matches_manual_map():
    assert make_map_with_expressions() == make_map_manually()


def test_expression_map_values_from_source():
    result = make_map_with_expressions()
    assert result["<"] == 1
    assert result["<="] == 2
    assert result[">"] == 3
    assert result[">="] == 4
    assert result["="] == 5
    assert result["<>"] == 6


def test_keys_are_ordered():
    result = make_map_with_expressions()
    assert list(result) == sorted(result)


def test_chain_builds_call_expressions():
    chain = map_list_of("a", 1)("b", 2)
    assert isinstance(chain, MapListOf)
    assert chain.kind is ExprKind.CALL


def test_first_value_for_a_key_is_kept():
    assert map_list_of("a", 1)("a", 2).to_dict() == {"a": 1}


def test_single_pair():
    assert map_list_of("k", "v").to_dict() == {"k": "v"}


def test_pair_count_matches_calls():
    chain = map_list_of("x", 1)("y", 2)("z", 3)
    assert len(chain.to_dict()) == 3


def test_wrong_number_of_call_arguments_raises():
    with pytest.raises(TypeError):
        map_list_of("a", 1)("b")