"""Builder helpers to express test inputs succinctly."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from src.models.activity import Activity, TelemetrySeries


def make_activity(id: int, start: str, **overrides: Any) -> Activity:
    """Build a run started at ISO date ``start`` with optional field overrides."""

    base: Dict[str, Any] = {
        "id": id,
        "type": "Run",
        "start_date_local": datetime.fromisoformat(start),
        "distance": 10000.0,
        "moving_time": 3000,
        "total_elevation_gain": 0.0,
        "calories": 0.0,
        "kudos_count": 0,
        "athlete_count": 1,
        "average_speed": 0.0,
    }
    base.update(overrides)
    return Activity(**base)


def make_steady_series(
    activity_id: int,
    meters_per_sample: float,
    samples: int = 21,
    interval_s: int = 60,
) -> TelemetrySeries:
    """Series sampled every ``interval_s`` seconds at a constant pace."""

    return TelemetrySeries(
        activity_id=activity_id,
        time=[index * interval_s for index in range(samples)],
        distance=[index * meters_per_sample for index in range(samples)],
    )


def make_series(
    activity_id: int, time: Sequence[float], distance: Sequence[float]
) -> TelemetrySeries:
    return TelemetrySeries(activity_id=activity_id, time=list(time), distance=list(distance))


def make_unchecked_series(
    activity_id: int, time: Sequence[float], distance: Sequence[float]
) -> TelemetrySeries:
    """Series built without validation, as a store returning raw samples would."""

    return TelemetrySeries.model_construct(
        activity_id=activity_id, time=list(time), distance=list(distance)
    )
