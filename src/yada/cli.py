"""Interactive menu loop."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from yada.app_logging import configure_logging
from yada.config import Settings
from yada.containers import AppContainer, build_container
from yada.domain.foods import Food
from yada.errors import EmptyStackError, InvalidInputError, NotFoundError, YadaError
from yada.menu import MenuAction, menu_lines
from yada.services.goals import GoalMethod, GoalReport, build_profile, target_calories
from yada.services.storage import save_catalog, save_log

_logger = logging.getLogger(__name__)

DONE = "done"


@dataclass
class MenuLoop:
    """Reads menu choices and runs one action at a time."""

    container: AppContainer
    read: Callable[[str], str] = input
    write: Callable[[str], None] = print

    def run(self) -> None:
        """Process actions until save-and-exit or end of input."""
        self.write("Welcome to YADA - Yet Another Diet Assistant")
        while True:
            self.write("\nMenu:")
            for line in menu_lines():
                self.write(line)
            try:
                choice = self.read("Enter choice: ")
            except EOFError:
                return
            action = MenuAction.from_choice(choice)
            if action is None:
                self.write("Invalid choice. Please try again.")
                continue
            try:
                keep_going = self.dispatch(action)
            except EOFError:
                return
            except YadaError as exc:
                self.write(f"Error: {exc}")
                continue
            except Exception:
                _logger.exception("Action failed: %s", action.label)
                self.write(f"Error: {action.label} failed; see the log for details.")
                continue
            if not keep_going:
                return

    def dispatch(self, action: MenuAction) -> bool:
        """Run an action; return False when the loop should stop."""
        handlers: dict[MenuAction, Callable[[], None]] = {
            MenuAction.ADD_BASIC_FOOD: self.add_basic_food,
            MenuAction.ADD_COMPOSITE_FOOD: self.add_composite_food,
            MenuAction.REMOVE_FOOD: self.remove_food,
            MenuAction.LIST_FOODS: self.list_foods,
            MenuAction.ADD_LOG_ENTRY: self.add_log_entry,
            MenuAction.DELETE_LOG_ENTRY: self.delete_log_entry,
            MenuAction.VIEW_DAILY_LOG: self.view_daily_log,
            MenuAction.SET_PROFILE: self.set_profile,
            MenuAction.COMPUTE_GOALS: self.compute_goals,
            MenuAction.UNDO: self.undo,
            MenuAction.SAVE_FOODS: self.save_foods,
            MenuAction.SAVE_LOGS: self.save_logs,
        }
        if action is MenuAction.SAVE_AND_EXIT:
            self.save_foods()
            self.save_logs()
            self.write("Data saved. Exiting application.")
            return False
        handlers[action]()
        return True

    def add_basic_food(self) -> None:
        catalog = self.container.catalog
        food_id = self.read("Enter food id: ")
        if food_id.strip() in catalog:
            self.write("Food already exists.")
            return
        calories = self._read_int("Enter calories per serving: ")
        keywords = _split_keywords(self.read("Enter keywords (comma-separated): "))
        food = catalog.add_basic(food_id, keywords, calories)
        self.write(f"Basic food added: {self._describe(food)}")

    def add_composite_food(self) -> None:
        catalog = self.container.catalog
        food_id = self.read("Enter composite food id: ")
        if food_id.strip() in catalog:
            self.write("Food already exists.")
            return
        keywords = _split_keywords(self.read("Enter keywords (comma-separated): "))
        builder = catalog.composite_builder()
        self.write("Adding components to composite food. Type 'done' when finished.")
        while True:
            query = self.read("Enter component food id (or 'done'): ").strip()
            if query.lower() == DONE:
                break
            try:
                component = catalog.find(query)
                servings = self._read_int(
                    f"Enter number of servings for {component.id}: "
                )
                builder.add(component.id, servings)
            except (NotFoundError, InvalidInputError) as exc:
                self.write(f"Skipped: {exc}")
        food = catalog.add_composite(food_id, keywords, builder)
        self.write(f"Composite food added: {self._describe(food)}")

    def remove_food(self) -> None:
        food_id = self.read("Enter food id: ").strip()
        self.container.catalog.remove(food_id)
        self.write(f"Food '{food_id}' removed.")

    def list_foods(self) -> None:
        catalog = self.container.catalog
        self.write("Basic foods:")
        for food in catalog.list_basic():
            self.write(f" - {self._describe(food)}")
        self.write("Composite foods:")
        for food in catalog.list_composite():
            self.write(f" - {self._describe(food)}")

    def add_log_entry(self) -> None:
        date = self.read("Enter date (YYYY-MM-DD): ")
        food = self.container.catalog.find(self.read("Enter food id to log: ").strip())
        servings = self._read_int("Enter number of servings: ")
        entry = self.container.editor.add_entry(date, food, servings)
        self.write(f"Log entry added: {entry}")

    def delete_log_entry(self) -> None:
        editor = self.container.editor
        date = self.read("Enter date (YYYY-MM-DD): ").strip()
        entries = editor.log.entries(date)
        if not entries:
            self.write("No entries for that date.")
            return
        for number, entry in enumerate(entries, start=1):
            self.write(f"{number}. {entry}")
        position = self._read_int("Enter entry number to delete: ") - 1
        removed = editor.delete_entry(date, position)
        self.write(f"Deleted entry: {removed}")

    def view_daily_log(self) -> None:
        catalog = self.container.catalog
        log = self.container.editor.log
        date = self.read("Enter date (YYYY-MM-DD): ").strip()
        entries = log.entries(date)
        if not entries:
            self.write("No log entries for this date.")
            return
        self.write(f"Log for {date}:")
        for entry in entries:
            calories = catalog.calories(entry.food) * entry.servings
            self.write(f" - {entry} ({calories} cal)")
        total = log.total_calories(date, catalog.calories)
        self.write(f"Total calories consumed: {total}")

    def set_profile(self) -> None:
        gender = self.read("Enter gender (male/female): ")
        height = self._read_float("Enter height (in centimeters): ")
        age = self._read_int("Enter age: ")
        weight = self._read_float("Enter weight (in kg): ")
        activity = self._read_float(
            "Enter activity level multiplier (e.g., 1.2, 1.55): "
        )
        profile = build_profile(gender, height, age, weight, activity)
        method_choice = self.read("Choose diet goal calculation method (1 or 2): ")
        self.container.profile = profile
        self.container.goal_method = (
            GoalMethod.METHOD_TWO
            if method_choice.strip() == "2"
            else GoalMethod.METHOD_ONE
        )
        self.write(f"User profile set: {profile}")
        self.write(f"Goal method: {self.container.goal_method.value}")

    def compute_goals(self) -> None:
        if self.container.profile is None:
            self.write("User profile not set. Please set the user profile first.")
            return
        catalog = self.container.catalog
        date = self.read("Enter date (YYYY-MM-DD) to view log: ").strip()
        consumed = self.container.editor.log.total_calories(date, catalog.calories)
        target = target_calories(self.container.profile, self.container.goal_method)
        report = GoalReport(date=date, consumed=consumed, target=target)
        self.write(f"For date {report.date}:")
        self.write(f"Total calories consumed: {report.consumed}")
        self.write(f"Target calorie intake: {report.target:.2f}")
        self.write(
            "Difference (excess if positive, available if negative): "
            f"{report.difference:.2f}"
        )

    def undo(self) -> None:
        try:
            command = self.container.editor.undo()
        except EmptyStackError:
            self.write("Nothing to undo.")
            return
        self.write(command.describe())

    def save_foods(self) -> None:
        save_catalog(self.container.catalog, self.container.food_repository)
        self.write("Food data saved.")

    def save_logs(self) -> None:
        container = self.container
        save_log(container.editor.log, container.log_repository, container.catalog)
        self.write("Log data saved.")

    def _describe(self, food: Food) -> str:
        calories = self.container.catalog.calories(food)
        keywords = ", ".join(sorted(food.keywords))
        if food.kind == "basic":
            return f"{food.id} ({calories} cal) [{keywords}]"
        components = ", ".join(
            f"{component_id} x{servings}"
            for component_id, servings in food.components.items()
        )
        return f"{food.id} ({calories} cal) [{keywords}] = {components}"

    def _read_int(self, prompt: str) -> int:
        raw = self.read(prompt).strip()
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidInputError(f"Expected a whole number, got {raw!r}") from exc

    def _read_float(self, prompt: str) -> float:
        raw = self.read(prompt).strip()
        try:
            return float(raw)
        except ValueError as exc:
            raise InvalidInputError(f"Expected a number, got {raw!r}") from exc


def _split_keywords(raw: str) -> list[str]:
    return [word.strip() for word in raw.split(",") if word.strip()]


def main() -> None:
    """Console entry point."""
    settings = Settings()
    configure_logging(settings)
    container = build_container(settings)
    _logger.info("Started: backend=%s", settings.storage_backend)
    MenuLoop(container).run()
