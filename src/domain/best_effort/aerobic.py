"""Aerobic capacity estimate from a twelve minute best effort."""

from __future__ import annotations

from ...models.statistics import AerobicEstimate, BestEffortResult

# Cooper test regression: VO2max = (distance_m - 504.9) / 44.73
COOPER_INTERCEPT_M = 504.9
COOPER_SLOPE_M = 44.73


def estimate(best: BestEffortResult) -> AerobicEstimate:
    if best.distance_meters <= 0:
        return AerobicEstimate()
    return AerobicEstimate(
        value=(best.distance_meters - COOPER_INTERCEPT_M) / COOPER_SLOPE_M,
        source_activity_id=best.activity_id,
    )
