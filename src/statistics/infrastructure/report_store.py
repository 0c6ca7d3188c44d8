"""Redis-backed implementation of the report store port."""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from ...models.statistics import WholeReport
from ...services.redis import RedisClient
from ..application.ports import ReportStoreError, ReportStorePort


class RedisReportStore(ReportStorePort):
    """Keep the whole report as one JSON document per key."""

    def __init__(self, redis: RedisClient) -> None:
        self._redis = redis

    async def upsert(self, key: str, report: WholeReport) -> None:
        document = report.model_dump_json()
        try:
            self._redis.set(key, document)
        except Exception as exc:
            raise ReportStoreError(f"Unable to store report {key!r}") from exc

    async def fetch(self, key: str) -> Optional[WholeReport]:
        try:
            document = self._redis.get(key)
        except Exception as exc:
            raise ReportStoreError(f"Unable to read report {key!r}") from exc
        if document is None:
            return None
        try:
            return WholeReport.model_validate_json(document)
        except ValidationError as exc:
            raise ReportStoreError(f"Stored report {key!r} is not readable") from exc


def create_redis_report_store(redis: RedisClient) -> RedisReportStore:
    return RedisReportStore(redis)


__all__ = ["RedisReportStore", "create_redis_report_store"]
