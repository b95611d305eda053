"""Load and save the catalog and log through a repository."""

import logging
from collections.abc import Iterable
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from yada.domain.foods import BasicFood, CompositeFood, Food, LogEntry
from yada.domain.records import FoodRecord, LogRecord
from yada.services.catalog import FoodCatalog
from yada.services.daily_log import DailyLog
from yada.services.resolver import find_cycle

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class FoodRepository(Protocol):
    """Persistence interface for foods."""

    def load_foods(self) -> list[FoodRecord]:
        """Return every stored food record."""

    def save_foods(self, records: list[FoodRecord]) -> None:
        """Replace stored foods with the given records."""


class LogRepository(Protocol):
    """Persistence interface for log entries."""

    def load_logs(self) -> list[LogRecord]:
        """Return every stored log record in entry order."""

    def save_logs(self, records: list[LogRecord]) -> None:
        """Replace stored log entries with the given records."""


def parse_records(
    rows: Iterable[dict[str, object]], model: type[RecordT]
) -> list[RecordT]:
    """Validate raw rows, skipping the ones that do not fit the model."""
    records: list[RecordT] = []
    for index, row in enumerate(rows):
        try:
            records.append(model.model_validate(row))
        except ValidationError as exc:
            _logger.warning(
                "Skipping invalid %s row %s: %s",
                model.__name__,
                index,
                exc.error_count(),
            )
    return records


def load_catalog(repository: FoodRepository) -> FoodCatalog:
    """Build a catalog, discarding composites that form a cycle."""
    catalog = FoodCatalog()
    for record in repository.load_foods():
        if record.id in catalog:
            _logger.warning("Skipping duplicate food: id=%s", record.id)
            continue
        catalog.foods[record.id] = _food_from_record(record)

    for food in list(catalog.list_composite()):
        cycle = find_cycle(food.id, food.components, catalog.lookup)
        if cycle:
            del catalog.foods[food.id]
            _logger.error(
                "Discarding cyclic composite: id=%s cycle=%s",
                food.id,
                " -> ".join(cycle),
            )
            continue
        missing = [c for c in food.components if c not in catalog]
        if missing:
            _logger.warning(
                "Composite has missing components: id=%s missing=%s",
                food.id,
                ", ".join(sorted(missing)),
            )
    _logger.info("Foods loaded: count=%s", len(catalog))
    return catalog


def save_catalog(catalog: FoodCatalog, repository: FoodRepository) -> None:
    """Persist every food in the catalog."""
    records = [_record_from_food(food) for food in catalog.foods.values()]
    repository.save_foods(records)
    _logger.info("Foods saved: count=%s", len(records))


def load_log(repository: LogRepository, catalog: FoodCatalog) -> DailyLog:
    """Build the daily log, resolving food ids against the catalog.

    Entries for foods no longer in the catalog keep the calories saved with
    them, through a basic placeholder food that is not added to the catalog.
    """
    log = DailyLog()
    placeholders: dict[str, Food] = {}
    for record in repository.load_logs():
        food = catalog.lookup(record.food_id) or placeholders.get(record.food_id)
        if food is None:
            _logger.warning(
                "Log entry for removed food: date=%s food_id=%s calories=%s",
                record.date,
                record.food_id,
                record.calories,
            )
            food = BasicFood(
                id=record.food_id, keywords=frozenset(), calories=record.calories or 0
            )
            placeholders[record.food_id] = food
        log.add_entry(record.date, LogEntry(food=food, servings=record.servings))
    _logger.info("Log loaded: dates=%s", len(log.dates()))
    return log


def save_log(log: DailyLog, repository: LogRepository, catalog: FoodCatalog) -> None:
    """Persist every log entry, date by date in entry order.

    Each record carries the calories per serving of its food at save time.
    """
    records = [
        LogRecord(
            date=date,
            food_id=entry.food.id,
            servings=entry.servings,
            calories=catalog.calories(entry.food),
        )
        for date in log.dates()
        for entry in log.entries(date)
    ]
    repository.save_logs(records)
    _logger.info("Log saved: entries=%s", len(records))


def _food_from_record(record: FoodRecord) -> Food:
    keywords = frozenset(record.keywords)
    if record.kind == "basic":
        return BasicFood(id=record.id, keywords=keywords, calories=record.calories)
    return CompositeFood(id=record.id, keywords=keywords, components=record.components)


def _record_from_food(food: Food) -> FoodRecord:
    keywords = sorted(food.keywords)
    if isinstance(food, BasicFood):
        return FoodRecord(
            id=food.id, kind="basic", keywords=keywords, calories=food.calories
        )
    return FoodRecord(
        id=food.id,
        kind="composite",
        keywords=keywords,
        components=dict(food.components),
    )
