"""Dependency container wiring for the application."""

from dataclasses import dataclass, field

from supabase import create_client

from yada.adapters.json_file_repository import JsonFoodRepository, JsonLogRepository
from yada.adapters.supabase_repository import (
    SupabaseFoodRepository,
    SupabaseLogRepository,
)
from yada.config import Settings
from yada.domain.profile import UserProfile
from yada.services.catalog import FoodCatalog
from yada.services.goals import GoalMethod
from yada.services.log_editor import LogEditor
from yada.services.storage import (
    FoodRepository,
    LogRepository,
    load_catalog,
    load_log,
)


@dataclass
class AppContainer:
    """Holds the application state and its storage."""

    settings: Settings
    food_repository: FoodRepository
    log_repository: LogRepository
    catalog: FoodCatalog
    editor: LogEditor
    goal_method: GoalMethod
    profile: UserProfile | None = field(default=None)


def build_repositories(settings: Settings) -> tuple[FoodRepository, LogRepository]:
    """Create the repositories for the configured storage backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise RuntimeError("Supabase backend requires URL and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseFoodRepository(client), SupabaseLogRepository(client)
    return (
        JsonFoodRepository(settings.foods_path),
        JsonLogRepository(settings.logs_path),
    )


def build_container(
    settings: Settings | None = None,
    food_repository: FoodRepository | None = None,
    log_repository: LogRepository | None = None,
) -> AppContainer:
    """Create the default container and load persisted data."""
    resolved_settings = settings or Settings()
    if food_repository is None or log_repository is None:
        default_foods, default_logs = build_repositories(resolved_settings)
        food_repository = food_repository or default_foods
        log_repository = log_repository or default_logs
    catalog = load_catalog(food_repository)
    log = load_log(log_repository, catalog)
    return AppContainer(
        settings=resolved_settings,
        food_repository=food_repository,
        log_repository=log_repository,
        catalog=catalog,
        editor=LogEditor(log=log),
        goal_method=resolved_settings.goal_method,
    )
