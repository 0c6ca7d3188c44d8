from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...domain.best_effort import MAX_PLAUSIBLE_DISTANCE_M, TEST_DURATION_SECONDS
from ...settings import Settings


class StatisticsConfig(BaseModel):
    """Parameters of a yearly statistics run."""

    model_config = ConfigDict(frozen=True)

    first_year: int = 2014
    last_year: int = 2023
    activity_types: Tuple[str, ...] = ("Ride", "Run")
    best_effort_type: str = "Run"
    partial_year_weeks: float = Field(
        32, gt=0, description="Weeks divisor for the year still in progress"
    )
    best_effort_seconds: int = Field(TEST_DURATION_SECONDS, gt=0)
    max_plausible_distance_m: float = MAX_PLAUSIBLE_DISTANCE_M
    report_key: str = "yearly_statistics"

    @model_validator(mode="after")
    def _check_year_range(self) -> "StatisticsConfig":
        if self.last_year < self.first_year:
            raise ValueError(
                f"last_year {self.last_year} precedes first_year {self.first_year}"
            )
        return self

    @property
    def years(self) -> range:
        return range(self.first_year, self.last_year + 1)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: object) -> "StatisticsConfig":
        values = {
            "first_year": settings.stats_first_year,
            "last_year": settings.stats_last_year,
            "partial_year_weeks": settings.partial_year_weeks,
            "best_effort_seconds": settings.best_effort_seconds,
            "max_plausible_distance_m": settings.max_plausible_distance_m,
            "report_key": settings.report_key,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


__all__ = ["StatisticsConfig"]
