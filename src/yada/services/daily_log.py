"""Per-date ordered log of consumed servings."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from yada.domain.foods import Food, LogEntry
from yada.errors import IndexOutOfRangeError, InvalidInputError, NotFoundError

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_date(value: str) -> str:
    """Check a ``YYYY-MM-DD`` shaped date string and return it stripped."""
    cleaned = value.strip()
    if not _DATE_PATTERN.fullmatch(cleaned):
        raise InvalidInputError(f"Date must look like YYYY-MM-DD: {value!r}")
    return cleaned


@dataclass
class DailyLog:
    """Mapping of date strings to ordered log entries."""

    days: dict[str, list[LogEntry]] = field(default_factory=dict)

    def add_entry(self, date: str, entry: LogEntry) -> int:
        """Append an entry and return its 0-based position."""
        date = validate_date(date)
        entries = self.days.setdefault(date, [])
        entries.append(entry)
        return len(entries) - 1

    def insert_entry(self, date: str, position: int, entry: LogEntry) -> None:
        """Insert an entry at a position, shifting later entries down."""
        date = validate_date(date)
        entries = self.days.get(date, [])
        if not 0 <= position <= len(entries):
            raise IndexOutOfRangeError(f"No position {position} for {date}")
        entries.insert(position, entry)
        self.days[date] = entries

    def entries(self, date: str) -> list[LogEntry]:
        """Return a copy of the entries for a date."""
        return list(self.days.get(date.strip(), []))

    def delete_entry(self, date: str, position: int) -> LogEntry:
        """Remove and return the entry at a 0-based position."""
        date = date.strip()
        entries = self.days.get(date, [])
        if not 0 <= position < len(entries):
            raise IndexOutOfRangeError(
                f"Entry {position + 1} does not exist for {date}"
            )
        entry = entries.pop(position)
        self._drop_if_empty(date)
        return entry

    def remove_entry(self, date: str, entry: LogEntry) -> int:
        """Remove a specific entry by identity and return its former position."""
        date = date.strip()
        entries = self.days.get(date, [])
        for position, candidate in enumerate(entries):
            if candidate is entry:
                del entries[position]
                self._drop_if_empty(date)
                return position
        raise NotFoundError(f"Log entry not found for {date}: {entry}")

    def dates(self) -> list[str]:
        """Return dates that have at least one entry, sorted."""
        return sorted(date for date, entries in self.days.items() if entries)

    def total_calories(self, date: str, resolve: Callable[[Food], int]) -> int:
        """Sum calories of every entry logged on a date."""
        return sum(
            resolve(entry.food) * entry.servings for entry in self.entries(date)
        )

    def _drop_if_empty(self, date: str) -> None:
        if not self.days.get(date):
            self.days.pop(date, None)
