from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, Index, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class TemplateRecord(Base):
    """Workout template stored as a JSON document.

    Stores:
    - id: Template id
    - owner_id: Owning user
    - name: Template name (denormalized for listing)
    - archived: Archive flag (denormalized for filtering)
    - payload: Full WorkoutTemplate dump
    - updated_at: Last write timestamp
    """

    __tablename__ = "workout_templates"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    owner_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class WorkoutRecord(Base):
    """Workout instance stored as a JSON document.

    ``is_active`` and ``start_time`` are copied out of the payload so that
    history queries can filter and order without decoding documents.
    """

    __tablename__ = "workout_instances"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    owner_id: Mapped[str] = mapped_column(String, nullable=False)
    template_id: Mapped[str] = mapped_column(String, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)

    __table_args__ = (Index("idx_workout_instances_owner_start", "owner_id", "start_time"),)
