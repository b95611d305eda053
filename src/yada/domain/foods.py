"""Domain models for foods and log entries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal


@dataclass(frozen=True)
class BasicFood:
    """Leaf food with a fixed calories-per-serving value."""

    id: str
    keywords: frozenset[str]
    calories: int
    kind: Literal["basic"] = field(default="basic", init=False)


@dataclass(frozen=True)
class CompositeFood:
    """Food whose calories derive from its components.

    Components map a component food id to the servings of it in one serving
    of this food. Calories are resolved against the catalog on demand.
    """

    id: str
    keywords: frozenset[str]
    components: Mapping[str, int]
    kind: Literal["composite"] = field(default="composite", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "components", MappingProxyType(dict(self.components))
        )


Food = BasicFood | CompositeFood


@dataclass(eq=False)
class LogEntry:
    """A recorded consumption of servings of a food.

    Entries compare by identity; two entries for the same food and servings
    are still distinct log lines.
    """

    food: Food
    servings: int

    def __str__(self) -> str:
        return f"{self.food.id} x{self.servings}"
