"""Yearly statistics package."""

from .application import StatisticsConfig, YearlyStatisticsOrchestrator
from .infrastructure import (
    RedisReportStore,
    SqlActivityStore,
    SqlTelemetryStore,
    create_session_factory,
)

__all__ = [
    "RedisReportStore",
    "SqlActivityStore",
    "SqlTelemetryStore",
    "StatisticsConfig",
    "YearlyStatisticsOrchestrator",
    "create_session_factory",
]
