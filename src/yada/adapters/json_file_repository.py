"""JSON file repositories for foods and log entries."""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from yada.domain.records import FoodRecord, LogRecord
from yada.services.storage import FoodRepository, LogRepository, parse_records


@dataclass
class JsonFoodRepository(FoodRepository):
    """Stores foods as a JSON array in a single file."""

    path: Path

    def load_foods(self) -> list[FoodRecord]:
        """Return stored food records; a missing file means no foods."""
        return parse_records(_read_rows(self.path), FoodRecord)

    def save_foods(self, records: list[FoodRecord]) -> None:
        """Write food records, replacing the file."""
        _write_rows(self.path, records)


@dataclass
class JsonLogRepository(LogRepository):
    """Stores log entries as a JSON array in a single file."""

    path: Path

    def load_logs(self) -> list[LogRecord]:
        """Return stored log records; a missing file means no entries."""
        return parse_records(_read_rows(self.path), LogRecord)

    def save_logs(self, records: list[LogRecord]) -> None:
        """Write log records, replacing the file."""
        _write_rows(self.path, records)


def _read_rows(path: Path) -> list[dict[str, object]]:
    if not path.exists():
        return []
    payload = json.loads(path.read_text(encoding="utf-8") or "[]")
    if not isinstance(payload, list):
        raise RuntimeError(f"Expected a JSON array in {path}")
    return [row for row in payload if isinstance(row, dict)]


def _write_rows(path: Path, records: Sequence[BaseModel]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(
        json.dumps([record.model_dump(mode="json") for record in records], indent=2),
        encoding="utf-8",
    )
    tmp_path.replace(path)
