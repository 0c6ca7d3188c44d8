"""Application layer for yearly statistics."""

from .config import StatisticsConfig
from .orchestrator import YearlyStatisticsOrchestrator
from .ports import (
    ActivityStoreError,
    ActivityStorePort,
    ReportStoreError,
    ReportStorePort,
    TelemetryStorePort,
)

__all__ = [
    "ActivityStoreError",
    "ActivityStorePort",
    "ReportStoreError",
    "ReportStorePort",
    "StatisticsConfig",
    "TelemetryStorePort",
    "YearlyStatisticsOrchestrator",
]
