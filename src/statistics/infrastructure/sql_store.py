"""SQLAlchemy implementation of the activity and telemetry store ports."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, time
from typing import Any, Callable, List, Optional, TypeVar

from pydantic import ValidationError
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ...domain.queries import ActivityCriteria, ActivityField, SortSpec
from ...models.activity import Activity, TelemetrySeries
from ..application.ports import ActivityStoreError, ActivityStorePort, TelemetryStorePort
from .tables import ActivityRecord, Base, TelemetryRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COLUMNS = {
    ActivityField.DISTANCE: ActivityRecord.distance,
    ActivityField.MOVING_TIME: ActivityRecord.moving_time,
    ActivityField.TOTAL_ELEVATION_GAIN: ActivityRecord.total_elevation_gain,
    ActivityField.CALORIES: ActivityRecord.calories,
    ActivityField.KUDOS_COUNT: ActivityRecord.kudos_count,
    ActivityField.AVERAGE_SPEED: ActivityRecord.average_speed,
}


def create_session_factory(
    database_url: str, *, create_schema: bool = False, **engine_kwargs: Any
) -> sessionmaker[Session]:
    """Build a session factory for ``database_url``."""

    engine = create_engine(database_url, **engine_kwargs)
    if create_schema:
        Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _conditions(criteria: ActivityCriteria) -> list:
    conditions = []
    if criteria.window is not None:
        conditions.append(
            ActivityRecord.start_date_local >= datetime.combine(criteria.window.start, time.min)
        )
        conditions.append(
            ActivityRecord.start_date_local < datetime.combine(criteria.window.end, time.min)
        )
    if criteria.activity_type is not None:
        conditions.append(ActivityRecord.type == criteria.activity_type)
    if criteria.min_distance is not None:
        conditions.append(ActivityRecord.distance >= criteria.min_distance)
    if criteria.min_participants is not None:
        conditions.append(ActivityRecord.athlete_count >= criteria.min_participants)
    return conditions


def _to_activity(record: ActivityRecord) -> Activity:
    return Activity(
        id=record.id,
        type=record.type,
        start_date_local=record.start_date_local,
        distance=record.distance,
        moving_time=record.moving_time,
        elapsed_time=record.elapsed_time,
        total_elevation_gain=record.total_elevation_gain,
        calories=record.calories,
        kudos_count=record.kudos_count,
        athlete_count=record.athlete_count,
        average_speed=record.average_speed,
    )


class _SqlStore:
    """Runs blocking session work on a worker thread so the event loop stays free."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    async def _run(self, work: Callable[[Session], T]) -> T:
        return await asyncio.to_thread(self._run_sync, work)

    def _run_sync(self, work: Callable[[Session], T]) -> T:
        try:
            with self._session_factory() as session:
                return work(session)
        except SQLAlchemyError as exc:
            raise ActivityStoreError(f"Activity store query failed: {exc}") from exc


class SqlActivityStore(_SqlStore, ActivityStorePort):
    """Translate activity criteria into SQL aggregate queries."""

    async def filter(self, criteria: ActivityCriteria) -> List[Activity]:
        statement = (
            select(ActivityRecord)
            .where(*_conditions(criteria))
            .order_by(ActivityRecord.start_date_local, ActivityRecord.id)
        )

        def work(session: Session) -> List[Activity]:
            records = session.execute(statement).scalars().all()
            return [_to_activity(record) for record in records]

        return await self._run(work)

    async def count(self, criteria: ActivityCriteria) -> int:
        statement = (
            select(func.count()).select_from(ActivityRecord).where(*_conditions(criteria))
        )
        return await self._run(lambda session: int(session.execute(statement).scalar() or 0))

    async def sum(self, criteria: ActivityCriteria, field: ActivityField) -> float:
        statement = select(func.coalesce(func.sum(_COLUMNS[field]), 0)).where(
            *_conditions(criteria)
        )
        return await self._run(lambda session: float(session.execute(statement).scalar() or 0))

    async def top(self, criteria: ActivityCriteria, sort: SortSpec) -> List[Activity]:
        statement = self._top_statement(ActivityRecord, criteria, sort)

        def work(session: Session) -> List[Activity]:
            records = session.execute(statement).scalars().all()
            return [_to_activity(record) for record in records]

        return await self._run(work)

    async def top_ids(self, criteria: ActivityCriteria, sort: SortSpec) -> List[int]:
        statement = self._top_statement(ActivityRecord.id, criteria, sort)

        def work(session: Session) -> List[int]:
            return [int(value) for value in session.execute(statement).scalars().all()]

        return await self._run(work)

    @staticmethod
    def _top_statement(target: Any, criteria: ActivityCriteria, sort: SortSpec):
        column = _COLUMNS[sort.field]
        order = column.desc() if sort.descending else column.asc()
        return (
            select(target)
            .where(*_conditions(criteria))
            .order_by(order, ActivityRecord.id)
            .limit(sort.limit)
        )


class SqlTelemetryStore(_SqlStore, TelemetryStorePort):
    """Fetch telemetry streams stored alongside the activities."""

    async def get_series(self, activity_id: int) -> Optional[TelemetrySeries]:
        def work(session: Session) -> Optional[TelemetrySeries]:
            record = session.get(TelemetryRecord, activity_id)
            if record is None:
                return None
            try:
                return TelemetrySeries(
                    activity_id=activity_id,
                    time=record.time or [],
                    distance=record.distance or [],
                )
            except ValidationError:
                logger.warning("Unreadable telemetry stored for activity %s", activity_id)
                return None

        return await self._run(work)


__all__ = [
    "SqlActivityStore",
    "SqlTelemetryStore",
    "create_session_factory",
]
