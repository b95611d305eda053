"""Log mutations that record their own inverse."""

from dataclasses import dataclass, field

from yada.domain.foods import Food, LogEntry
from yada.errors import InvalidInputError
from yada.services.daily_log import DailyLog, validate_date
from yada.services.undo import UndoAddEntry, UndoCommand, UndoDeleteEntry, UndoStack


@dataclass
class LogEditor:
    """Edits the daily log and keeps the undo stack in step with it."""

    log: DailyLog = field(default_factory=DailyLog)
    undo_stack: UndoStack = field(default_factory=UndoStack)

    def add_entry(self, date: str, food: Food, servings: int) -> LogEntry:
        """Log servings of a food on a date."""
        date = validate_date(date)
        if isinstance(servings, bool) or not isinstance(servings, int):
            raise InvalidInputError("Servings must be an integer")
        if servings < 1:
            raise InvalidInputError("Servings must be at least 1")
        entry = LogEntry(food=food, servings=servings)
        self.log.add_entry(date, entry)
        self.undo_stack.push(UndoAddEntry(date=date, entry=entry))
        return entry

    def delete_entry(self, date: str, position: int) -> LogEntry:
        """Delete the entry at a 0-based position on a date."""
        date = validate_date(date)
        entry = self.log.delete_entry(date, position)
        self.undo_stack.push(
            UndoDeleteEntry(date=date, position=position, entry=entry)
        )
        return entry

    def undo(self) -> UndoCommand:
        """Reverse the most recent tracked mutation."""
        return self.undo_stack.undo(self.log)
