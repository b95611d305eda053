"""Food catalog with keyword search and referential-integrity rules."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from yada.domain.foods import BasicFood, CompositeFood, Food
from yada.errors import (
    CyclicCompositionError,
    DuplicateFoodError,
    FoodInUseError,
    InvalidInputError,
    NotFoundError,
)
from yada.services.resolver import find_cycle, resolve_calories

_logger = logging.getLogger(__name__)


@dataclass
class FoodCatalog:
    """Owns every basic and composite food, keyed by id."""

    foods: dict[str, Food] = field(default_factory=dict)

    def __contains__(self, food_id: object) -> bool:
        return food_id in self.foods

    def __len__(self) -> int:
        return len(self.foods)

    def lookup(self, food_id: str) -> Food | None:
        """Return a food by exact id, if present."""
        return self.foods.get(food_id)

    def get(self, food_id: str) -> Food:
        """Return a food by exact id."""
        food = self.foods.get(food_id)
        if food is None:
            raise NotFoundError(f"Food not found: {food_id}")
        return food

    def search(self, query: str) -> list[Food]:
        """Search foods by id and keywords.

        Exact id match first, then id substring matches, then keyword
        matches. Case-sensitive; returns an empty list when nothing matches.
        """
        if not query:
            return []
        exact = [food for food in self.foods.values() if food.id == query]
        by_id = [
            food
            for food in self.foods.values()
            if food.id != query and query in food.id
        ]
        by_keyword = [
            food
            for food in self.foods.values()
            if query not in food.id and query in food.keywords
        ]
        return exact + by_id + by_keyword

    def find(self, query: str) -> Food:
        """Return the best search match for a query."""
        results = self.search(query)
        if not results:
            raise NotFoundError(f"Food not found: {query}")
        return results[0]

    def add_basic(
        self, food_id: str, keywords: Iterable[str], calories: int
    ) -> BasicFood:
        """Add a basic food with a fixed calorie value."""
        food_id = _validate_id(food_id)
        if food_id in self.foods:
            raise DuplicateFoodError(f"Food already exists: {food_id}")
        if isinstance(calories, bool) or not isinstance(calories, int):
            raise InvalidInputError("Calories must be an integer")
        if calories < 0:
            raise InvalidInputError("Calories must not be negative")
        food = BasicFood(
            id=food_id, keywords=_clean_keywords(keywords), calories=calories
        )
        self.foods[food_id] = food
        _logger.info("Basic food added: id=%s calories=%s", food_id, calories)
        return food

    def composite_builder(self) -> "CompositeBuilder":
        """Return an empty builder bound to this catalog."""
        return CompositeBuilder(self)

    def add_composite(
        self, food_id: str, keywords: Iterable[str], builder: "CompositeBuilder"
    ) -> CompositeFood:
        """Add a composite food from the components collected by a builder."""
        food_id = _validate_id(food_id)
        if food_id in self.foods:
            raise DuplicateFoodError(f"Food already exists: {food_id}")
        components = dict(builder.components)
        for component_id in components:
            if component_id != food_id and component_id not in self.foods:
                raise NotFoundError(f"Food not found: {component_id}")
        cycle = find_cycle(food_id, components, self.lookup)
        if cycle:
            raise CyclicCompositionError(cycle)
        food = CompositeFood(
            id=food_id, keywords=_clean_keywords(keywords), components=components
        )
        self.foods[food_id] = food
        _logger.info(
            "Composite food added: id=%s components=%s", food_id, len(components)
        )
        return food

    def remove(self, food_id: str) -> Food:
        """Remove a food that no composite in the catalog still uses."""
        food = self.get(food_id)
        users = self.composites_using(food_id)
        if users:
            raise FoodInUseError(
                f"Food {food_id} is a component of: {', '.join(users)}"
            )
        del self.foods[food_id]
        _logger.info("Food removed: id=%s", food_id)
        return food

    def composites_using(self, food_id: str) -> list[str]:
        """Return ids of composites that list a food as a direct component."""
        return [
            food.id
            for food in self.list_composite()
            if food_id in food.components
        ]

    def list_basic(self) -> Iterator[BasicFood]:
        """Yield basic foods in catalog order."""
        return (food for food in self.foods.values() if isinstance(food, BasicFood))

    def list_composite(self) -> Iterator[CompositeFood]:
        """Yield composite foods in catalog order."""
        return (
            food for food in self.foods.values() if isinstance(food, CompositeFood)
        )

    def calories(self, food: Food) -> int:
        """Return calories per serving of a food resolved against this catalog."""
        return resolve_calories(food, self.lookup)


@dataclass
class CompositeBuilder:
    """Collects components for a composite food before it is added."""

    catalog: FoodCatalog
    components: dict[str, int] = field(default_factory=dict)

    def add(self, query: str, servings: int) -> Food:
        """Look up a component and record its servings.

        Raises ``NotFoundError`` for an unknown food without touching the
        components collected so far. Adding the same food twice keeps the last
        servings value.
        """
        if isinstance(servings, bool) or not isinstance(servings, int):
            raise InvalidInputError("Servings must be an integer")
        if servings < 1:
            raise InvalidInputError("Servings must be at least 1")
        food = self.catalog.find(query)
        self.components[food.id] = servings
        return food


def _validate_id(food_id: str) -> str:
    cleaned = food_id.strip()
    if not cleaned:
        raise InvalidInputError("Food id must not be empty")
    return cleaned


def _clean_keywords(keywords: Iterable[str]) -> frozenset[str]:
    return frozenset(word.strip() for word in keywords if word.strip())
