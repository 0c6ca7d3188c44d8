"""Redis client used as the report store backend."""

from __future__ import annotations

from typing import Optional, Protocol

from fastapi import Depends
from upstash_redis import Redis

from ..settings import Settings, get_settings


class RedisClient(Protocol):
    """The two Redis commands the report store relies on."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ex: int | None = None) -> None:
        ...


def create_redis(settings: Settings) -> RedisClient:
    return Redis(url=settings.upstash_redis_rest_url, token=settings.upstash_redis_rest_token)


def get_redis(settings: Settings = Depends(get_settings)) -> RedisClient:
    """FastAPI provider for the Upstash Redis client."""

    return create_redis(settings)


__all__ = ["RedisClient", "create_redis", "get_redis"]
