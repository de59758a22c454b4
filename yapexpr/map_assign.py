"""Building dictionaries from chained call expressions: ``map_list_of(k, v)(k, v)...``."""

from __future__ import annotations

from typing import Any

from yapexpr.expression import Expression, as_expr
from yapexpr.kinds import ExprKind
from yapexpr.transform import transform


class _MapListOfTag:
    """The value of the terminal that starts a chain of key/value calls."""

    def __repr__(self) -> str:
        return "map_list_of"


class _MapListOfTransform:
    """Collects the key/value pairs of a call chain, first call first."""

    def __init__(self) -> None:
        self.items: dict[Any, Any] = {}

    def call(self, function: Any, *args: Any) -> Any:
        if len(args) != 2:
            return NotImplemented
        key, item = args
        # The earlier calls sit inside the callable; collect them first.
        transform(as_expr(function), self)
        # Like an emplace, an existing key keeps its first value.
        self.items.setdefault(key, item)
        return 0


class MapListOf(Expression):
    """Node of a key/value call chain; convert it with to_dict()."""

    def __call__(self, key: Any, item: Any) -> MapListOf:
        return super().__call__(key, item)

    def to_dict(self) -> dict:
        """Return the collected pairs as a dict ordered by key."""
        collector = _MapListOfTransform()
        transform(self, collector)
        return dict(sorted(collector.items.items()))


_MAP_LIST_OF = MapListOf(ExprKind.TERMINAL, (_MapListOfTag(),))


def map_list_of(key: Any, item: Any) -> MapListOf:
    """Start a call chain with one key/value pair."""
    return _MAP_LIST_OF(key, item)


def make_map_with_expressions() -> dict[str, int]:
    """Build the comparison-operator map from a call chain."""
    return map_list_of("<", 1)("<=", 2)(">", 3)(">=", 4)("=", 5)("<>", 6).to_dict()


def make_map_manually() -> dict[str, int]:
    """Build the comparison-operator map one entry at a time."""
    result: dict[str, int] = {}
    for key, item in (("<", 1), ("<=", 2), (">", 3), (">=", 4), ("=", 5), ("<>", 6)):
        result.setdefault(key, item)
    return dict(sorted(result.items()))