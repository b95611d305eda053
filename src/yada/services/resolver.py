"""Calorie resolution over the composite food graph."""

import logging
from collections.abc import Callable, Mapping

from yada.domain.foods import BasicFood, CompositeFood, Food
from yada.errors import CyclicCompositionError

_logger = logging.getLogger(__name__)

FoodLookup = Callable[[str], Food | None]


def resolve_calories(food: Food, lookup: FoodLookup) -> int:
    """Return calories per serving of a food.

    Composite components are looked up by id and traversed depth-first in id
    order. A composite that reappears on the active path raises
    ``CyclicCompositionError``. Components missing from the lookup count as
    zero calories.
    """
    return _resolve(food, lookup, [])


def _resolve(food: Food, lookup: FoodLookup, path: list[str]) -> int:
    if isinstance(food, BasicFood):
        return food.calories
    if food.id in path:
        raise CyclicCompositionError([*path[path.index(food.id) :], food.id])
    path.append(food.id)
    total = 0
    for component_id in sorted(food.components):
        component = lookup(component_id)
        if component is None:
            _logger.warning(
                "Missing component: composite=%s component=%s",
                food.id,
                component_id,
            )
            continue
        total += _resolve(component, lookup, path) * food.components[component_id]
    path.pop()
    return total


def find_cycle(
    food_id: str, components: Mapping[str, int], lookup: FoodLookup
) -> list[str] | None:
    """Return a path from ``food_id`` back to itself through ``components``.

    ``components`` are the would-be components of ``food_id``; the rest of the
    graph comes from ``lookup``. Returns ``None`` when no cycle exists.
    """
    visited: set[str] = set()

    def visit(edges: Mapping[str, int], path: list[str]) -> list[str] | None:
        for component_id in sorted(edges):
            if component_id == food_id:
                return [*path, component_id]
            if component_id in visited:
                continue
            visited.add(component_id)
            component = lookup(component_id)
            if isinstance(component, CompositeFood):
                found = visit(component.components, [*path, component_id])
                if found:
                    return found
        return None

    return visit(components, [food_id])
