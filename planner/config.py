"""Application settings, read from ``PLANNER_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = Field(default="Day Planner")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
