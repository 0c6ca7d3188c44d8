"""Ports for the yearly statistics application layer."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ...domain.queries import ActivityCriteria, ActivityField, SortSpec
from ...models.activity import Activity, TelemetrySeries
from ...models.statistics import WholeReport


class ActivityStoreError(RuntimeError):
    """Raised when the activity or telemetry store cannot be queried."""


class ReportStoreError(RuntimeError):
    """Raised when the report store cannot be read or written."""


@runtime_checkable
class ActivityStorePort(Protocol):
    """Read-only aggregate queries over recorded activities."""

    async def filter(self, criteria: ActivityCriteria) -> List[Activity]:
        """Return matching activities ordered by start date."""

    async def count(self, criteria: ActivityCriteria) -> int:
        """Return the number of matching activities."""

    async def sum(self, criteria: ActivityCriteria, field: ActivityField) -> float:
        """Return the sum of ``field`` over matches, 0 when nothing matches."""

    async def top(self, criteria: ActivityCriteria, sort: SortSpec) -> List[Activity]:
        """Return at most ``sort.limit`` matches ordered by ``sort.field``."""

    async def top_ids(self, criteria: ActivityCriteria, sort: SortSpec) -> List[int]:
        """Same as ``top`` but projected to activity identifiers."""


@runtime_checkable
class TelemetryStorePort(Protocol):
    """Lookup of per-activity telemetry series."""

    async def get_series(self, activity_id: int) -> Optional[TelemetrySeries]:
        """Return the series of ``activity_id`` or ``None`` when absent."""


@runtime_checkable
class ReportStorePort(Protocol):
    """Persistence of the whole statistics report under a fixed key."""

    async def upsert(self, key: str, report: WholeReport) -> None:
        """Replace the document stored under ``key``."""

    async def fetch(self, key: str) -> Optional[WholeReport]:
        """Return the document stored under ``key`` if any."""


__all__ = [
    "ActivityStoreError",
    "ActivityStorePort",
    "ReportStoreError",
    "ReportStorePort",
    "TelemetryStorePort",
]
