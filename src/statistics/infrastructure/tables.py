"""SQLAlchemy tables backing the activity and telemetry stores."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, BigInteger, DateTime, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ActivityRecord(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    start_date_local: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    distance: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    moving_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    elapsed_time: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    total_elevation_gain: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    calories: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    kudos_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    athlete_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    average_speed: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    def __repr__(self) -> str:
        return f"<ActivityRecord(id={self.id}, type='{self.type}', start={self.start_date_local})>"


class TelemetryRecord(Base):
    """Time and distance streams of one activity, stored as JSON arrays."""

    __tablename__ = "telemetry"

    activity_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    time: Mapped[Optional[List[float]]] = mapped_column(JSON, nullable=True)
    distance: Mapped[Optional[List[float]]] = mapped_column(JSON, nullable=True)


__all__ = ["ActivityRecord", "Base", "TelemetryRecord"]
