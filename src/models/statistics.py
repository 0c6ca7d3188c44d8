from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BestEffortResult(BaseModel):
    """Longest distance covered in a window of at least the test duration."""

    model_config = ConfigDict(frozen=True)

    distance_meters: float = 0.0
    activity_id: Optional[int] = None


ZERO_EFFORT = BestEffortResult()


class AerobicEstimate(BaseModel):
    """Aerobic capacity estimate derived from a best effort."""

    model_config = ConfigDict(frozen=True)

    value: float = 0.0
    source_activity_id: Optional[int] = None


class ActivityTypeYearStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    count: int = 0
    total_km: float = 0.0
    total_elevation_gain: float = 0.0
    calories: float = 0.0
    total_kudos: int = 0
    avg_speed: float = Field(0.0, description="Mean of average speeds in m/s")
    mins_per_week: float = 0.0
    longest_activity_id: Optional[int] = None
    hardest_activity_id: Optional[int] = None


class ActivityTypeMonthStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    total_km: float = 0.0
    mins_per_week: float = 0.0


class YearReport(BaseModel):
    """All derived statistics for one calendar year."""

    model_config = ConfigDict(frozen=True)

    year: int
    sports: List[ActivityTypeYearStats] = Field(default_factory=list)
    aerobic_estimate: AerobicEstimate = Field(default_factory=AerobicEstimate)
    best_effort_distance_m: float = 0.0
    total_kudos: int = Field(0, description="Kudos received across every activity type")
    most_kudos_activity_id: Optional[int] = None
    activities_with_friends: int = 0
    runs_over_16k: int = 0
    rides_over_100k: int = 0
    rides_over_160k: int = 0
    current_month: List[ActivityTypeMonthStats] = Field(default_factory=list)


class WholeReport(BaseModel):
    """Per-year reports ordered by ascending year."""

    model_config = ConfigDict(frozen=True)

    years: List[YearReport] = Field(default_factory=list)


class BestEffortResponse(BaseModel):
    best_effort: BestEffortResult
    aerobic_estimate: AerobicEstimate
