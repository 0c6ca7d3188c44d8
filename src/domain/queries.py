"""Backend-neutral value objects describing activity store queries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional


class ActivityField(str, Enum):
    """Activity fields that may be summed or sorted on."""

    DISTANCE = "distance"
    MOVING_TIME = "moving_time"
    TOTAL_ELEVATION_GAIN = "total_elevation_gain"
    CALORIES = "calories"
    KUDOS_COUNT = "kudos_count"
    AVERAGE_SPEED = "average_speed"


@dataclass(frozen=True, slots=True)
class DateWindow:
    """Half-open ``[start, end)`` window on the activity local start date."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Empty date window {self.start} -> {self.end}")

    @classmethod
    def for_year(cls, year: int) -> "DateWindow":
        return cls(date(year, 1, 1), date(year + 1, 1, 1))

    @classmethod
    def for_month(cls, year: int, month: int) -> "DateWindow":
        if month == 12:
            return cls(date(year, 12, 1), date(year + 1, 1, 1))
        return cls(date(year, month, 1), date(year, month + 1, 1))


@dataclass(frozen=True, slots=True)
class ActivityCriteria:
    """Filter combining a date window with optional type and thresholds."""

    window: Optional[DateWindow] = None
    activity_type: Optional[str] = None
    min_distance: Optional[float] = None
    min_participants: Optional[int] = None

    @classmethod
    def in_year(cls, year: int, activity_type: Optional[str] = None) -> "ActivityCriteria":
        return cls(window=DateWindow.for_year(year), activity_type=activity_type)

    def with_min_distance(self, meters: float) -> "ActivityCriteria":
        return replace(self, min_distance=meters)

    def with_min_participants(self, participants: int) -> "ActivityCriteria":
        return replace(self, min_participants=participants)


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Ordering and limit for ``top`` queries."""

    field: ActivityField
    descending: bool = True
    limit: int = 1

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be at least 1")


__all__ = ["ActivityCriteria", "ActivityField", "DateWindow", "SortSpec"]
