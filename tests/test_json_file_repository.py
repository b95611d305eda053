"""Tests for the JSON file repositories."""

import json

import pytest

from yada.adapters.json_file_repository import JsonFoodRepository, JsonLogRepository
from yada.domain.records import FoodRecord, LogRecord


def test_missing_files_load_empty(tmp_path) -> None:
    assert JsonFoodRepository(tmp_path / "foods.json").load_foods() == []
    assert JsonLogRepository(tmp_path / "logs.json").load_logs() == []


def test_food_records_round_trip(tmp_path) -> None:
    path = tmp_path / "nested" / "foods.json"
    repository = JsonFoodRepository(path)
    records = [
        FoodRecord(id="apple", kind="basic", keywords=["fruit"], calories=95),
        FoodRecord(id="snack", kind="composite", components={"apple": 2}),
    ]

    repository.save_foods(records)

    assert repository.load_foods() == records
    assert json.loads(path.read_text())[1]["components"] == {"apple": 2}
    assert not path.with_suffix(".json.tmp").exists()


def test_log_records_skip_invalid_rows(tmp_path) -> None:
    path = tmp_path / "logs.json"
    path.write_text(
        json.dumps(
            [
                {"date": "2024-01-01", "food_id": "apple", "servings": 2},
                {"date": "yesterday", "food_id": "apple", "servings": 1},
                "garbage",
            ]
        )
    )

    records = JsonLogRepository(path).load_logs()

    assert records == [LogRecord(date="2024-01-01", food_id="apple", servings=2)]


def test_non_array_file_is_an_error(tmp_path) -> None:
    path = tmp_path / "foods.json"
    path.write_text('{"apple": 95}')

    with pytest.raises(RuntimeError):
        JsonFoodRepository(path).load_foods()
