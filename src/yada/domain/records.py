"""Persisted record shapes for foods and log entries."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class FoodRecord(BaseModel):
    """Stored form of a basic or composite food."""

    id: str = Field(min_length=1)
    kind: Literal["basic", "composite"]
    keywords: list[str] = Field(default_factory=list)
    calories: int | None = Field(default=None, ge=0)
    components: dict[str, int] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_kind(self) -> "FoodRecord":
        if self.kind == "basic" and self.calories is None:
            raise ValueError("basic food requires calories")
        if any(servings < 1 for servings in self.components.values()):
            raise ValueError("component servings must be at least 1")
        return self


class LogRecord(BaseModel):
    """Stored form of a log entry; list order is entry order.

    ``calories`` is the per-serving value when the entry was saved.
    """

    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    food_id: str = Field(min_length=1)
    servings: int = Field(ge=1)
    calories: int | None = Field(default=None, ge=0)
