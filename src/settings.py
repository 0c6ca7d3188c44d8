from __future__ import annotations

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (e.g. ``API_KEY``).
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    database_url: str = "sqlite:///activities.db"
    upstash_redis_rest_url: str
    upstash_redis_rest_token: str

    stats_first_year: int = 2014
    stats_last_year: int = 2023
    partial_year_weeks: float = 32
    best_effort_seconds: int = 720
    max_plausible_distance_m: float = 3000.0
    report_key: str = "yearly_statistics"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
