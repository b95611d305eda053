"""Tests for container wiring and settings."""

import pytest

from yada.adapters.json_file_repository import JsonFoodRepository
from yada.config import Settings
from yada.containers import build_container, build_repositories
from yada.domain.records import FoodRecord, LogRecord
from yada.services.goals import GoalMethod
from tests.conftest import InMemoryFoodRepository, InMemoryLogRepository


def test_build_container_loads_state() -> None:
    foods = InMemoryFoodRepository(
        records=[FoodRecord(id="apple", kind="basic", calories=95)]
    )
    logs = InMemoryLogRepository(
        records=[LogRecord(date="2024-01-01", food_id="apple", servings=2)]
    )

    container = build_container(Settings(), foods, logs)

    assert "apple" in container.catalog
    assert len(container.editor.log.entries("2024-01-01")) == 1
    assert len(container.editor.undo_stack) == 0
    assert container.profile is None


def test_default_backend_uses_json_files(settings: Settings) -> None:
    food_repository, _ = build_repositories(settings)

    assert isinstance(food_repository, JsonFoodRepository)
    assert food_repository.path == settings.data_dir / "foods.json"


def test_supabase_backend_requires_credentials() -> None:
    with pytest.raises(RuntimeError):
        build_repositories(Settings(storage_backend="supabase"))


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("YADA_GOAL_METHOD", "method_two")
    monkeypatch.setenv("YADA_DATA_DIR", "/tmp/yada")

    settings = Settings()

    assert settings.goal_method is GoalMethod.METHOD_TWO
    assert str(settings.logs_path) == "/tmp/yada/logs.json"
