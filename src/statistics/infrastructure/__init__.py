"""Infrastructure adapters for yearly statistics."""

from .report_store import RedisReportStore, create_redis_report_store
from .sql_store import SqlActivityStore, SqlTelemetryStore, create_session_factory

__all__ = [
    "RedisReportStore",
    "SqlActivityStore",
    "SqlTelemetryStore",
    "create_redis_report_store",
    "create_session_factory",
]
