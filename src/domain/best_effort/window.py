"""Best-effort window scanning over telemetry series."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from ...models.activity import TelemetrySeries
from ...models.statistics import ZERO_EFFORT, BestEffortResult

logger = logging.getLogger(__name__)

TEST_DURATION_SECONDS = 12 * 60
MAX_PLAUSIBLE_DISTANCE_M = 3000.0


def describe_defect(series: TelemetrySeries) -> Optional[str]:
    """Return why ``series`` cannot be scanned, or ``None`` when it is usable."""

    if len(series.time) != len(series.distance):
        return (
            f"length mismatch: {len(series.time)} time samples, "
            f"{len(series.distance)} distance samples"
        )
    for name, samples in (("time", series.time), ("distance", series.distance)):
        for index, value in enumerate(samples):
            if not math.isfinite(value):
                return f"non-finite {name} at sample {index}"
    for index in range(1, len(series.time)):
        if int(series.time[index]) < int(series.time[index - 1]):
            return f"time decreases at sample {index}"
    return None


def find_best_effort(
    series: Optional[TelemetrySeries],
    min_duration_seconds: int = TEST_DURATION_SECONDS,
    max_plausible_distance: float = MAX_PLAUSIBLE_DISTANCE_M,
) -> BestEffortResult:
    """Find the longest distance covered in any span of at least ``min_duration_seconds``.

    For every sample the window is shrunk to the latest start that still
    spans the duration, so the delta measures the distance covered in as
    close to the test duration as the sampling allows. Deltas above
    ``max_plausible_distance`` are treated as sensor aberrations.
    """

    if min_duration_seconds <= 0:
        raise ValueError("min_duration_seconds must be positive")
    if series is None or not series.time:
        return ZERO_EFFORT

    defect = describe_defect(series)
    if defect is not None:
        logger.warning(
            "Skipping telemetry of activity %s: %s", series.activity_id, defect
        )
        return ZERO_EFFORT

    times = [int(value) for value in series.time]
    distances = [int(value) for value in series.distance]

    best_distance = 0.0
    best_activity: Optional[int] = None
    start = 0
    for end in range(len(times)):
        if times[end] - times[start] < min_duration_seconds:
            continue
        # start + 1 never passes end since a zero-length window cannot qualify
        while times[end] - times[start + 1] >= min_duration_seconds:
            start += 1

        delta = float(distances[end] - distances[start])
        if best_distance < delta <= max_plausible_distance:
            best_distance = delta
            best_activity = series.activity_id

    if best_activity is None:
        return ZERO_EFFORT
    return BestEffortResult(distance_meters=best_distance, activity_id=best_activity)


def pick_best(results: Iterable[BestEffortResult]) -> BestEffortResult:
    """Reduce per-activity results to the longest one; the first wins on ties."""

    best = ZERO_EFFORT
    for result in results:
        if result.distance_meters > best.distance_meters:
            best = result
    return best
