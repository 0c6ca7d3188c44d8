from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from ..settings import Settings, get_settings
from ..statistics.infrastructure import create_session_factory


@lru_cache()
def _session_factory(database_url: str) -> sessionmaker[Session]:
    return create_session_factory(database_url)


def get_session_factory(
    settings: Settings = Depends(get_settings),
) -> sessionmaker[Session]:
    """Provide the session factory bound to the configured activity database."""

    return _session_factory(settings.database_url)
