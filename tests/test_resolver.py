"""Tests for composite calorie resolution."""

import pytest

from yada.domain.foods import BasicFood, CompositeFood
from yada.errors import CyclicCompositionError
from yada.services.resolver import find_cycle, resolve_calories


def _lookup(*foods):
    by_id = {food.id: food for food in foods}
    return by_id.get


def test_basic_food_resolves_to_stored_value() -> None:
    apple = BasicFood("apple", frozenset(), 95)

    assert resolve_calories(apple, _lookup(apple)) == 95


def test_composite_is_weighted_sum_of_leaves() -> None:
    apple = BasicFood("apple", frozenset(), 95)
    butter = BasicFood("peanut-butter", frozenset(), 190)
    snack = CompositeFood("snack", frozenset(), {"apple": 1, "peanut-butter": 2})
    lunch = CompositeFood("lunch", frozenset(), {"snack": 2, "apple": 3})
    lookup = _lookup(apple, butter, snack, lunch)

    assert resolve_calories(snack, lookup) == 475
    assert resolve_calories(lunch, lookup) == 2 * 475 + 3 * 95


def test_shared_component_counts_each_path() -> None:
    apple = BasicFood("apple", frozenset(), 100)
    left = CompositeFood("left", frozenset(), {"apple": 1})
    right = CompositeFood("right", frozenset(), {"apple": 2})
    both = CompositeFood("both", frozenset(), {"left": 1, "right": 1})

    assert resolve_calories(both, _lookup(apple, left, right, both)) == 300


def test_cycle_raises_instead_of_recursing() -> None:
    first = CompositeFood("first", frozenset(), {"second": 1})
    second = CompositeFood("second", frozenset(), {"first": 1})

    with pytest.raises(CyclicCompositionError) as exc_info:
        resolve_calories(first, _lookup(first, second))

    assert exc_info.value.path == ["first", "second", "first"]


def test_missing_component_counts_as_zero() -> None:
    apple = BasicFood("apple", frozenset(), 95)
    orphan = CompositeFood("orphan", frozenset(), {"apple": 1, "gone": 4})

    assert resolve_calories(orphan, _lookup(apple, orphan)) == 95


def test_find_cycle_reports_transitive_path() -> None:
    inner = CompositeFood("inner", frozenset(), {"outer": 1})
    middle = CompositeFood("middle", frozenset(), {"inner": 2})

    cycle = find_cycle("outer", {"middle": 1}, _lookup(inner, middle))

    assert cycle == ["outer", "middle", "inner", "outer"]


def test_find_cycle_none_for_acyclic_graph() -> None:
    apple = BasicFood("apple", frozenset(), 95)
    snack = CompositeFood("snack", frozenset(), {"apple": 1})

    assert find_cycle("meal", {"snack": 1, "apple": 1}, _lookup(apple, snack)) is None
