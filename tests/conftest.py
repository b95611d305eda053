"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from yada.config import Settings
from yada.containers import AppContainer, build_container
from yada.domain.records import FoodRecord, LogRecord
from yada.services.catalog import FoodCatalog
from yada.services.log_editor import LogEditor
from yada.services.storage import FoodRepository, LogRepository


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    records: list[FoodRecord] = field(default_factory=list)
    saves: int = 0

    def load_foods(self) -> list[FoodRecord]:
        return list(self.records)

    def save_foods(self, records: list[FoodRecord]) -> None:
        self.records = list(records)
        self.saves += 1


@dataclass
class InMemoryLogRepository(LogRepository):
    """In-memory log repository for tests."""

    records: list[LogRecord] = field(default_factory=list)
    saves: int = 0

    def load_logs(self) -> list[LogRecord]:
        return list(self.records)

    def save_logs(self, records: list[LogRecord]) -> None:
        self.records = list(records)
        self.saves += 1


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path)


@pytest.fixture
def catalog() -> FoodCatalog:
    catalog = FoodCatalog()
    catalog.add_basic("apple", ["fruit", "red"], 95)
    catalog.add_basic("peanut-butter", ["spread"], 190)
    builder = catalog.composite_builder()
    builder.add("apple", 1)
    builder.add("peanut-butter", 2)
    catalog.add_composite("snack", ["afternoon"], builder)
    return catalog


@pytest.fixture
def editor() -> LogEditor:
    return LogEditor()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    log_repository: InMemoryLogRepository,
) -> AppContainer:
    return build_container(settings, food_repository, log_repository)
