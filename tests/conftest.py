"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from datetime import date
from pathlib import Path
from typing import Dict, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src import main
from src.platform.wiring import provide_report_store, provide_statistics_orchestrator
from src.services.redis import RedisClient, get_redis
from src.settings import Settings, get_settings
from src.statistics.application import StatisticsConfig, YearlyStatisticsOrchestrator

from tests.fakes import ActivityStoreFake, ReportStoreFake, TelemetryStoreFake

TODAY = date(2023, 6, 15)


class RedisFake(RedisClient):
    """In-memory Redis double that records interactions."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self.set_calls: list[tuple[str, str, Optional[int]]] = []
        self.raises: Exception | None = None

    def assert_last_set(self, key: str) -> str:
        """Assert the most recent ``set`` call was for ``key`` and return its value."""

        assert self.set_calls, "No set() call was recorded"
        last_key, last_value, _ = self.set_calls[-1]
        assert last_key == key, f"Expected last set for {key!r}, saw {last_key!r}"
        return last_value

    def get(self, key: str) -> Optional[str]:
        if self.raises:
            raise self.raises
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        if self.raises:
            raise self.raises
        self.set_calls.append((key, value, ex))
        self.store[key] = value


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        database_url="sqlite://",
        upstash_redis_rest_url="https://redis.example.com",
        upstash_redis_rest_token="redis-token",
        stats_first_year=2021,
        stats_last_year=2023,
        partial_year_weeks=32,
    )


@pytest.fixture
def statistics_config(settings: Settings) -> StatisticsConfig:
    return StatisticsConfig.from_settings(settings)


@pytest.fixture
def redis_fake() -> RedisFake:
    return RedisFake()


@pytest.fixture
def activity_store() -> ActivityStoreFake:
    return ActivityStoreFake()


@pytest.fixture
def telemetry_store() -> TelemetryStoreFake:
    return TelemetryStoreFake()


@pytest.fixture
def report_store() -> ReportStoreFake:
    return ReportStoreFake()


@pytest.fixture
def orchestrator(
    activity_store: ActivityStoreFake,
    telemetry_store: TelemetryStoreFake,
    report_store: ReportStoreFake,
    statistics_config: StatisticsConfig,
) -> YearlyStatisticsOrchestrator:
    return YearlyStatisticsOrchestrator(
        activity_store,
        telemetry_store,
        report_store,
        statistics_config,
        clock=lambda: TODAY,
    )


@pytest.fixture
def app(
    settings: Settings,
    redis_fake: RedisFake,
    report_store: ReportStoreFake,
    orchestrator: YearlyStatisticsOrchestrator,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_redis: lambda: redis_fake,
        provide_report_store: lambda: report_store,
        provide_statistics_orchestrator: lambda: orchestrator,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
