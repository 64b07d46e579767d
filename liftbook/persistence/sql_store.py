"""SQLAlchemy-backed workout store.

Each template and workout is one row holding the full pydantic dump as a
JSON document, keyed by id and scoped by owner.
"""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from liftbook.db.models import TemplateRecord, WorkoutRecord
from liftbook.db.session import get_session_factory, session_scope
from liftbook.models import WorkoutInstance, WorkoutTemplate


class SqlWorkoutStore:
    """WorkoutStore implementation on a SQLAlchemy session factory.

    Args:
        session_factory: Factory bound to an engine with the liftbook tables
            created (defaults to the settings-configured database)
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory or get_session_factory()

    def load_recent_finished_instances(self, owner_id: str, limit: int) -> list[WorkoutInstance]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(
                select(WorkoutRecord)
                .where(WorkoutRecord.owner_id == owner_id, WorkoutRecord.is_active.is_(False))
                .order_by(WorkoutRecord.start_time.desc())
                .limit(limit)
            ).all()
            workouts = [WorkoutInstance.model_validate(row.payload) for row in rows]

        logger.debug(f"Loaded {len(workouts)} finished workout(s) for owner {owner_id}")
        return workouts

    def load_template(self, owner_id: str, template_id: str) -> WorkoutTemplate | None:
        with session_scope(self._session_factory) as session:
            row = session.scalars(
                select(TemplateRecord).where(
                    TemplateRecord.id == template_id,
                    TemplateRecord.owner_id == owner_id,
                )
            ).first()
            if row is None:
                return None
            return WorkoutTemplate.model_validate(row.payload)

    def persist_template(self, template: WorkoutTemplate) -> bool:
        record = TemplateRecord(
            id=template.id,
            owner_id=template.owner_id,
            name=template.name,
            archived=template.archived,
            payload=template.model_dump(mode="json"),
            updated_at=template.updated_at,
        )
        try:
            with session_scope(self._session_factory) as session:
                session.merge(record)
        except SQLAlchemyError:
            logger.exception(f"Failed to persist template {template.id} (owner_id={template.owner_id})")
            return False
        logger.debug(f"Persisted template {template.id}")
        return True

    def persist_instance(self, instance: WorkoutInstance) -> bool:
        record = WorkoutRecord(
            id=instance.id,
            owner_id=instance.owner_id,
            template_id=instance.template_id,
            is_active=instance.is_active,
            start_time=instance.start_time,
            payload=instance.model_dump(mode="json"),
        )
        try:
            with session_scope(self._session_factory) as session:
                session.merge(record)
        except SQLAlchemyError:
            logger.exception(f"Failed to persist workout {instance.id} (owner_id={instance.owner_id})")
            return False
        logger.debug(f"Persisted workout {instance.id} (active={instance.is_active})")
        return True
