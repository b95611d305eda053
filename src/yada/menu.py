"""Menu configuration for the interactive loop."""

from enum import Enum


class MenuAction(Enum):
    """Enum of menu actions (single source of truth for numbering)."""

    ADD_BASIC_FOOD = ("1", "Add Basic Food")
    ADD_COMPOSITE_FOOD = ("2", "Add Composite Food")
    REMOVE_FOOD = ("3", "Remove Food")
    LIST_FOODS = ("4", "List All Foods")
    ADD_LOG_ENTRY = ("5", "Add Log Entry")
    DELETE_LOG_ENTRY = ("6", "Delete Log Entry")
    VIEW_DAILY_LOG = ("7", "View Daily Log")
    SET_PROFILE = ("8", "Set/Update User Profile")
    COMPUTE_GOALS = ("9", "Compute Diet Goals")
    UNDO = ("10", "Undo Last Action")
    SAVE_FOODS = ("11", "Save Food Data")
    SAVE_LOGS = ("12", "Save Log Data")
    SAVE_AND_EXIT = ("13", "Save and Exit")

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @classmethod
    def from_choice(cls, choice: str) -> "MenuAction | None":
        """Return the action for a typed menu number, if any."""
        for action in cls:
            if action.key == choice.strip():
                return action
        return None


def menu_lines() -> list[str]:
    """Return the menu as numbered lines."""
    return [f"{action.key}. {action.label}" for action in MenuAction]
