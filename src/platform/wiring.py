"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from ..services.database import get_session_factory
from ..services.redis import RedisClient, get_redis
from ..settings import Settings, get_settings
from ..statistics.application import (
    ActivityStorePort,
    ReportStorePort,
    StatisticsConfig,
    TelemetryStorePort,
    YearlyStatisticsOrchestrator,
)
from ..statistics.infrastructure import (
    SqlActivityStore,
    SqlTelemetryStore,
    create_redis_report_store,
)


def provide_activity_store(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> ActivityStorePort:
    return SqlActivityStore(session_factory)


def provide_telemetry_store(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> TelemetryStorePort:
    return SqlTelemetryStore(session_factory)


def provide_report_store(redis: RedisClient = Depends(get_redis)) -> ReportStorePort:
    return create_redis_report_store(redis)


def provide_statistics_config(
    settings: Settings = Depends(get_settings),
) -> StatisticsConfig:
    return StatisticsConfig.from_settings(settings)


def provide_statistics_orchestrator(
    activities: ActivityStorePort = Depends(provide_activity_store),
    telemetry: TelemetryStorePort = Depends(provide_telemetry_store),
    reports: ReportStorePort = Depends(provide_report_store),
    config: StatisticsConfig = Depends(provide_statistics_config),
) -> YearlyStatisticsOrchestrator:
    return YearlyStatisticsOrchestrator(activities, telemetry, reports, config)


__all__ = [
    "provide_activity_store",
    "provide_report_store",
    "provide_statistics_config",
    "provide_statistics_orchestrator",
    "provide_telemetry_store",
]
