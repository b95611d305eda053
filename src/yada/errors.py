"""Error kinds raised by the catalog, log and undo services."""


class YadaError(Exception):
    """Base class for recoverable user-facing errors."""


class InvalidInputError(YadaError):
    """Malformed or out-of-range input."""


class NotFoundError(YadaError):
    """A food or log entry is not present."""


class DuplicateFoodError(YadaError):
    """A food with the same id already exists."""


class CyclicCompositionError(YadaError):
    """A composite food would contain itself, directly or transitively."""

    def __init__(self, path: list[str]) -> None:
        self.path = path
        super().__init__(f"Cyclic composition: {' -> '.join(path)}")


class IndexOutOfRangeError(YadaError):
    """A log entry position is outside the current sequence."""


class EmptyStackError(YadaError):
    """Undo was requested with nothing to undo."""


class FoodInUseError(InvalidInputError):
    """A food cannot be removed while a composite still lists it."""
