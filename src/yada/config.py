"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from yada.services.goals import GoalMethod

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    foods_file: str = "foods.json"
    logs_file: str = "logs.json"
    storage_backend: Literal["json", "supabase"] = "json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    goal_method: GoalMethod = GoalMethod.METHOD_ONE
    log_level: str = "INFO"
    log_format: str = "%(levelname)s: %(name)s: %(message)s"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="YADA_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def foods_path(self) -> Path:
        return self.data_dir / self.foods_file

    @property
    def logs_path(self) -> Path:
        return self.data_dir / self.logs_file
