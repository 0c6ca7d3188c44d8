from .activity import Activity, TelemetrySeries
from .statistics import (
    ZERO_EFFORT,
    ActivityTypeMonthStats,
    ActivityTypeYearStats,
    AerobicEstimate,
    BestEffortResponse,
    BestEffortResult,
    WholeReport,
    YearReport,
)

__all__ = [
    'Activity',
    'ActivityTypeMonthStats',
    'ActivityTypeYearStats',
    'AerobicEstimate',
    'BestEffortResponse',
    'BestEffortResult',
    'TelemetrySeries',
    'WholeReport',
    'YearReport',
    'ZERO_EFFORT',
]
