"""Workout service wiring the engine to storage.

Starts workouts from stored templates with previous performance
preloaded, finishes them, and reconciles the finished workout back into
the template with the user's chosen strategy.
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger
from pydantic import BaseModel, Field

from liftbook.config.settings import settings
from liftbook.models import WorkoutChangeSet, WorkoutInstance, WorkoutTemplate
from liftbook.persistence.store import WorkoutStore
from liftbook.sessions import SessionManager, WorkoutSession
from liftbook.workouts.changes import detect_changes
from liftbook.workouts.history import PreviousPerformance
from liftbook.workouts.history import resolve_previous_performance as resolve_from_history
from liftbook.workouts.reconciliation import UpdateStrategy, apply_template_update, get_update_summary


class WorkoutServiceError(Exception):
    """Base exception for workout service errors.

    Attributes:
        code: Error code
        details: Human-readable detail
    """

    code = "WORKOUT_SERVICE_ERROR"

    def __init__(self, details: str, code: str | None = None):
        if code is not None:
            self.code = code
        self.details = details
        super().__init__(f"{self.code}: {details}")


class TemplateNotFoundError(WorkoutServiceError):
    """Raised when the source template of a workout cannot be loaded."""

    code = "TEMPLATE_NOT_FOUND"


class ReconciliationOutcome(BaseModel):
    """Result of folding a finished workout into its template.

    Attributes:
        strategy: Strategy that was applied
        workout: Finished workout with its change set embedded
        changes: Detected change set
        template: Updated or newly created template (None for keep_original)
        workout_persisted: Whether the workout was written to history
        template_persisted: Whether the template was written (False when
            there was nothing to write)
        summary: Human-readable description of the applied strategy
    """

    strategy: UpdateStrategy
    workout: WorkoutInstance
    changes: WorkoutChangeSet
    template: WorkoutTemplate | None = None
    workout_persisted: bool = False
    template_persisted: bool = False
    summary: list[str] = Field(default_factory=list)


class WorkoutService:
    """Coordinates sessions, history lookups and template updates for a store."""

    def __init__(
        self,
        store: WorkoutStore,
        sessions: SessionManager | None = None,
        lookup_window: int | None = None,
    ) -> None:
        self._store = store
        self.sessions = sessions or SessionManager()
        self._lookup_window = lookup_window or settings.previous_lookup_window

    def _require_template(self, owner_id: str, template_id: str) -> WorkoutTemplate:
        template = self._store.load_template(owner_id, template_id)
        if template is None:
            raise TemplateNotFoundError(f"Template {template_id} not found for owner {owner_id}")
        return template

    def resolve_previous_performance(
        self,
        exercise_names: list[str],
        owner_id: str,
    ) -> dict[str, PreviousPerformance]:
        """Look up the most recent completed sets for each exercise name."""
        workouts = self._store.load_recent_finished_instances(owner_id, self._lookup_window)
        return resolve_from_history(exercise_names, workouts, window=self._lookup_window)

    def start_workout(self, owner_id: str, template_id: str, now: datetime | None = None) -> WorkoutSession:
        """Start a session from a stored template.

        Raises:
            TemplateNotFoundError: If the template does not exist for the owner
            SessionAlreadyActiveError: If the owner already has a running workout
        """
        template = self._require_template(owner_id, template_id)
        previous = self.resolve_previous_performance(template.exercise_names(), owner_id)
        session = self.sessions.start(template, owner_id, previous=previous, now=now)

        if not self._store.persist_instance(session.workout):
            logger.error(f"Active workout {session.workout.id} could not be saved; continuing in memory")
        return session

    def finish_workout(
        self,
        owner_id: str,
        strategy: UpdateStrategy | str,
        now: datetime | None = None,
    ) -> ReconciliationOutcome:
        """Finish the owner's running workout and reconcile it.

        Raises:
            NoActiveSessionError: If the owner has no running workout
        """
        template = self.sessions.require(owner_id).template
        finished = self.sessions.finish(owner_id, now=now)
        return self.reconcile(finished, strategy, template=template, now=now)

    def reconcile(
        self,
        instance: WorkoutInstance,
        strategy: UpdateStrategy | str,
        template: WorkoutTemplate | None = None,
        now: datetime | None = None,
    ) -> ReconciliationOutcome:
        """Apply a finished workout to its template and persist the results.

        Args:
            instance: Finished workout
            strategy: Update strategy chosen by the user
            template: Source template (loaded from the store when omitted)
            now: Timestamp for template updates

        Returns:
            ReconciliationOutcome with the change set, template and persist flags

        Raises:
            TemplateNotFoundError: If the source template cannot be loaded
            ValueError: If strategy is not a known UpdateStrategy
        """
        strategy = UpdateStrategy(strategy)
        if template is None:
            template = self._require_template(instance.owner_id, instance.template_id)

        changes = detect_changes(instance, template)
        workout = instance.model_copy(update={"changes": changes}, deep=True)
        updated = apply_template_update(template, workout, changes, strategy, now=now)

        workout_persisted = self._store.persist_instance(workout)
        template_persisted = self._store.persist_template(updated) if updated is not None else False
        if not workout_persisted:
            logger.error(f"Workout {workout.id} was not saved to history")
        if updated is not None and not template_persisted:
            logger.error(f"Template {updated.id} update was not saved (strategy={strategy.value})")

        logger.info(
            f"Reconciled workout {workout.id} into template {template.id} with strategy={strategy.value}: "
            f"{len(changes.modified_exercises)} modified, {len(changes.added_exercises)} added, "
            f"{len(changes.deleted_exercises)} deleted, {len(changes.skipped_exercises)} skipped"
        )
        return ReconciliationOutcome(
            strategy=strategy,
            workout=workout,
            changes=changes,
            template=updated,
            workout_persisted=workout_persisted,
            template_persisted=template_persisted,
            summary=get_update_summary(strategy, changes),
        )
