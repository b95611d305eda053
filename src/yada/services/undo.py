"""Single-step undo for daily log edits."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from yada.domain.foods import LogEntry
from yada.errors import EmptyStackError
from yada.services.daily_log import DailyLog

_logger = logging.getLogger(__name__)


class UndoCommand(Protocol):
    """Inverse of one log mutation, captured when the mutation happened."""

    def apply(self, log: DailyLog) -> None:
        """Reverse the mutation on the log."""

    def describe(self) -> str:
        """Return a short human-readable description."""


@dataclass(frozen=True)
class UndoAddEntry:
    """Removes the exact entry an add placed in the log."""

    date: str
    entry: LogEntry

    def apply(self, log: DailyLog) -> None:
        log.remove_entry(self.date, self.entry)

    def describe(self) -> str:
        return f"Undid log entry addition for {self.date}: {self.entry}"


@dataclass(frozen=True)
class UndoDeleteEntry:
    """Reinserts a deleted entry at its original position."""

    date: str
    position: int
    entry: LogEntry

    def apply(self, log: DailyLog) -> None:
        log.insert_entry(self.date, self.position, self.entry)

    def describe(self) -> str:
        return f"Undid deletion of log entry for {self.date}: {self.entry}"


@dataclass
class UndoStack:
    """LIFO history of inverse commands."""

    commands: list[UndoCommand] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)

    def push(self, command: UndoCommand) -> None:
        self.commands.append(command)

    def undo(self, log: DailyLog) -> UndoCommand:
        """Pop the most recent command and apply it to the log."""
        if not self.commands:
            raise EmptyStackError("Nothing to undo")
        command = self.commands[-1]
        command.apply(log)
        self.commands.pop()
        _logger.info("Undo applied: %s", command.describe())
        return command
