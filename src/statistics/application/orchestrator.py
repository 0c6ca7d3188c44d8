from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Callable, List, Optional

from ...domain.best_effort import estimate, find_best_effort, pick_best
from ...domain.queries import ActivityCriteria, ActivityField, DateWindow, SortSpec
from ...models.statistics import (
    ActivityTypeMonthStats,
    ActivityTypeYearStats,
    BestEffortResult,
    WholeReport,
    YearReport,
)
from .config import StatisticsConfig
from .ports import ActivityStorePort, ReportStorePort, TelemetryStorePort

logger = logging.getLogger(__name__)

WEEKS_IN_YEAR = 52
LONG_RUN_M = 16_000
LONG_RIDE_M = 100_000
CENTURY_RIDE_M = 160_000

Clock = Callable[[], date]


def average(total: float, count: int) -> float:
    return total / count if count else 0.0


def minutes_per_week(moving_seconds: float, weeks: float) -> float:
    return moving_seconds / 60 / weeks


class YearlyStatisticsOrchestrator:
    """Builds the yearly statistics report and hands it to the report store."""

    def __init__(
        self,
        activities: ActivityStorePort,
        telemetry: TelemetryStorePort,
        reports: ReportStorePort,
        config: StatisticsConfig | None = None,
        clock: Clock = date.today,
    ) -> None:
        self._activities = activities
        self._telemetry = telemetry
        self._reports = reports
        self._config = config or StatisticsConfig()
        self._clock = clock

    @property
    def config(self) -> StatisticsConfig:
        return self._config

    async def run(self) -> WholeReport:
        """Build every year and replace the stored report in a single write."""

        report = await self.build_report()
        await self._reports.upsert(self._config.report_key, report)
        logger.info(
            "Stored statistics for %d years under %r",
            len(report.years),
            self._config.report_key,
        )
        return report

    async def build_report(self) -> WholeReport:
        today = self._clock()
        years = await asyncio.gather(
            *(self.build_year(year, today) for year in self._config.years)
        )
        return WholeReport(years=list(years))

    async def build_year(self, year: int, today: date) -> YearReport:
        in_progress = year == today.year
        weeks = self._config.partial_year_weeks if in_progress else WEEKS_IN_YEAR
        in_year = ActivityCriteria.in_year(year)
        runs = ActivityCriteria.in_year(year, "Run")
        rides = ActivityCriteria.in_year(year, "Ride")

        best = await self.best_effort_in_year(year)
        sports = await asyncio.gather(
            *(
                self._type_stats(activity_type, year, weeks)
                for activity_type in self._config.activity_types
            )
        )
        (
            total_kudos,
            most_kudos,
            with_friends,
            runs_over_16k,
            rides_over_100k,
            rides_over_160k,
        ) = await asyncio.gather(
            self._activities.sum(in_year, ActivityField.KUDOS_COUNT),
            self._activities.top_ids(in_year, SortSpec(ActivityField.KUDOS_COUNT)),
            self._activities.count(in_year.with_min_participants(2)),
            self._activities.count(runs.with_min_distance(LONG_RUN_M)),
            self._activities.count(rides.with_min_distance(LONG_RIDE_M)),
            self._activities.count(rides.with_min_distance(CENTURY_RIDE_M)),
        )
        current_month = await self._month_stats(today, weeks) if in_progress else []

        logger.info("Year %d: best effort %.0f m", year, best.distance_meters)
        return YearReport(
            year=year,
            sports=list(sports),
            aerobic_estimate=estimate(best),
            best_effort_distance_m=best.distance_meters,
            total_kudos=int(total_kudos),
            most_kudos_activity_id=most_kudos[0] if most_kudos else None,
            activities_with_friends=with_friends,
            runs_over_16k=runs_over_16k,
            rides_over_100k=rides_over_100k,
            rides_over_160k=rides_over_160k,
            current_month=current_month,
        )

    async def best_effort_in_year(self, year: int) -> BestEffortResult:
        """Scan the telemetry of every qualifying activity of ``year``."""

        criteria = ActivityCriteria.in_year(year, self._config.best_effort_type)
        results: List[BestEffortResult] = []
        for activity in await self._activities.filter(criteria):
            result = await self.scan_activity(activity.id)
            if result is not None:
                results.append(result)
        return pick_best(results)

    async def scan_activity(self, activity_id: int) -> Optional[BestEffortResult]:
        series = await self._telemetry.get_series(activity_id)
        if series is None:
            logger.debug("No telemetry stored for activity %s", activity_id)
            return None
        return find_best_effort(
            series,
            self._config.best_effort_seconds,
            self._config.max_plausible_distance_m,
        )

    async def _type_stats(
        self, activity_type: str, year: int, weeks: float
    ) -> ActivityTypeYearStats:
        criteria = ActivityCriteria.in_year(year, activity_type)
        store = self._activities
        (
            distance,
            elevation,
            calories,
            moving_time,
            kudos,
            speed_sum,
            count,
            longest,
            hardest,
        ) = await asyncio.gather(
            store.sum(criteria, ActivityField.DISTANCE),
            store.sum(criteria, ActivityField.TOTAL_ELEVATION_GAIN),
            store.sum(criteria, ActivityField.CALORIES),
            store.sum(criteria, ActivityField.MOVING_TIME),
            store.sum(criteria, ActivityField.KUDOS_COUNT),
            store.sum(criteria, ActivityField.AVERAGE_SPEED),
            store.count(criteria),
            store.top_ids(criteria, SortSpec(ActivityField.DISTANCE)),
            store.top_ids(criteria, SortSpec(ActivityField.TOTAL_ELEVATION_GAIN)),
        )
        return ActivityTypeYearStats(
            type=activity_type,
            count=count,
            total_km=distance / 1000,
            total_elevation_gain=elevation,
            calories=calories,
            total_kudos=int(kudos),
            avg_speed=average(speed_sum, count),
            mins_per_week=minutes_per_week(moving_time, weeks),
            longest_activity_id=longest[0] if longest else None,
            hardest_activity_id=hardest[0] if hardest else None,
        )

    async def _month_stats(
        self, today: date, weeks: float
    ) -> List[ActivityTypeMonthStats]:
        window = DateWindow.for_month(today.year, today.month)
        stats: List[ActivityTypeMonthStats] = []
        for activity_type in self._config.activity_types:
            criteria = ActivityCriteria(window=window, activity_type=activity_type)
            distance, moving_time = await asyncio.gather(
                self._activities.sum(criteria, ActivityField.DISTANCE),
                self._activities.sum(criteria, ActivityField.MOVING_TIME),
            )
            stats.append(
                ActivityTypeMonthStats(
                    type=activity_type,
                    total_km=distance / 1000,
                    mins_per_week=minutes_per_week(moving_time, weeks),
                )
            )
        return stats


__all__ = [
    "Clock",
    "YearlyStatisticsOrchestrator",
    "average",
    "minutes_per_week",
]
