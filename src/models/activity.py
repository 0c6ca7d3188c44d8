from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

FiniteSample = Annotated[float, Field(allow_inf_nan=False)]


class Activity(BaseModel):
    """Subset of the recorded activity fields used for statistics."""

    id: int
    type: str
    start_date_local: datetime
    distance: float = 0.0
    moving_time: int = 0
    elapsed_time: Optional[int] = None
    total_elevation_gain: float = 0.0
    calories: float = 0.0
    kudos_count: int = 0
    athlete_count: int = 1
    average_speed: float = 0.0


class TelemetrySeries(BaseModel):
    """Elapsed time vs. cumulative distance samples of one activity."""

    activity_id: int
    time: List[FiniteSample] = Field(default_factory=list, description="Elapsed seconds")
    distance: List[FiniteSample] = Field(
        default_factory=list, description="Cumulative distance in meters"
    )
