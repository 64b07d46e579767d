"""Template reconciliation logic.

Rewrites a template from a finished workout according to one of four
strategies. Pure: inputs are never mutated and no storage is touched.
"""

from datetime import datetime

from loguru import logger

from liftbook.models import (
    Exercise,
    WorkoutChangeSet,
    WorkoutInstance,
    WorkoutSet,
    WorkoutTemplate,
    new_id,
    utc_now,
)
from liftbook.workouts.changes.matching import ExerciseMatcher
from liftbook.workouts.reconciliation.types import UpdateStrategy


def _target_set_from(workout_set: WorkoutSet, set_number: int, set_id: str) -> WorkoutSet:
    """Turn a performed set into a planned set.

    Completed sets promote their actual values to targets, falling back to
    the existing target for any dimension without an actual value.
    """
    if workout_set.completed:
        reps = workout_set.actual_reps if workout_set.actual_reps is not None else workout_set.target_reps
        weight = workout_set.actual_weight if workout_set.actual_weight is not None else workout_set.target_weight
        time = workout_set.actual_time if workout_set.actual_time is not None else workout_set.target_time
        distance = (
            workout_set.actual_distance if workout_set.actual_distance is not None else workout_set.target_distance
        )
    else:
        reps = workout_set.target_reps
        weight = workout_set.target_weight
        time = workout_set.target_time
        distance = workout_set.target_distance

    return WorkoutSet(
        id=set_id,
        set_number=set_number,
        target_reps=reps,
        target_weight=weight,
        target_time=time,
        target_distance=distance,
    )


def _new_template_exercise(workout_exercise: Exercise, order: int) -> Exercise:
    """Build a brand-new template exercise from a workout exercise."""
    return workout_exercise.model_copy(
        update={
            "id": new_id("exercise"),
            "order": order,
            "template_exercise_id": None,
            "sets": [
                _target_set_from(s, index + 1, new_id("set")) for index, s in enumerate(workout_exercise.sets)
            ],
        },
        deep=True,
    )


def update_values_only(template: WorkoutTemplate, workout: WorkoutInstance, now: datetime) -> WorkoutTemplate:
    """Update targets on existing sets only.

    Ignores added sets, removed sets, added exercises, deleted exercises and
    skipped exercises. Exercise and set counts never change.
    """
    matcher = ExerciseMatcher(template.exercises)
    updated_exercises: list[Exercise] = []

    for template_exercise in template.exercises:
        workout_exercise = matcher.workout_exercise_for(template_exercise, workout.exercises)
        if workout_exercise is None:
            updated_exercises.append(template_exercise.model_copy(deep=True))
            continue

        updated_sets: list[WorkoutSet] = []
        for index, template_set in enumerate(template_exercise.sets):
            workout_set = workout_exercise.sets[index] if index < len(workout_exercise.sets) else None
            if workout_set is None or not workout_set.completed:
                updated_sets.append(template_set.model_copy())
                continue
            updated_sets.append(
                template_set.model_copy(
                    update={
                        "target_reps": (
                            workout_set.actual_reps if workout_set.actual_reps is not None else template_set.target_reps
                        ),
                        "target_weight": (
                            workout_set.actual_weight
                            if workout_set.actual_weight is not None
                            else template_set.target_weight
                        ),
                        "target_time": (
                            workout_set.actual_time if workout_set.actual_time is not None else template_set.target_time
                        ),
                    }
                )
            )

        updated_exercises.append(template_exercise.model_copy(update={"sets": updated_sets}, deep=True))

    return template.model_copy(update={"exercises": updated_exercises, "updated_at": now}, deep=True)


def update_template_and_values(
    template: WorkoutTemplate,
    workout: WorkoutInstance,
    changes: WorkoutChangeSet,
    now: datetime,
) -> WorkoutTemplate:
    """Rebuild the template from the workout.

    - Deleted exercises are removed
    - Skipped exercises are kept unchanged
    - Other exercises take every workout set (renumbered) and the workout's
      rest interval
    - Added exercises are appended after existing ones
    """
    matcher = ExerciseMatcher(template.exercises)

    deleted_ids = {d.exercise_id for d in changes.deleted_exercises}
    skipped_ids = {s.template_exercise_id for s in changes.skipped_exercises if s.template_exercise_id}
    legacy_skipped_names = {s.exercise_name.lower() for s in changes.skipped_exercises if not s.template_exercise_id}

    updated_exercises: list[Exercise] = []
    consumed_workout_ids: set[str] = set()

    for template_exercise in template.exercises:
        if template_exercise.id in deleted_ids:
            continue

        if template_exercise.id in skipped_ids or template_exercise.match_name in legacy_skipped_names:
            updated_exercises.append(template_exercise.model_copy(update={"order": len(updated_exercises)}, deep=True))
            continue

        workout_exercise = matcher.workout_exercise_for(template_exercise, workout.exercises)
        if workout_exercise is None:
            updated_exercises.append(template_exercise.model_copy(update={"order": len(updated_exercises)}, deep=True))
            continue

        consumed_workout_ids.add(workout_exercise.id)
        updated_exercises.append(
            template_exercise.model_copy(
                update={
                    "order": len(updated_exercises),
                    "rest_seconds": workout_exercise.rest_seconds,
                    "sets": [_target_set_from(s, index + 1, s.id) for index, s in enumerate(workout_exercise.sets)],
                },
                deep=True,
            )
        )

    workout_by_id = {e.id: e for e in workout.exercises}
    for added in changes.added_exercises:
        workout_exercise = workout_by_id.get(added.exercise_id)
        if workout_exercise is None:
            logger.warning(f"Added exercise {added.exercise_id} ({added.exercise_name}) not found in workout {workout.id}")
            continue
        if workout_exercise.id in consumed_workout_ids:
            # Already folded into an existing template exercise
            continue
        updated_exercises.append(_new_template_exercise(workout_exercise, len(updated_exercises)))

    return template.model_copy(update={"exercises": updated_exercises, "updated_at": now}, deep=True)


def create_template_from_workout(
    template: WorkoutTemplate,
    workout: WorkoutInstance,
    now: datetime,
) -> WorkoutTemplate:
    """Create a new template from the workout, leaving the original alone.

    The new template is named "<original name> (<Mon> <D>)". The date is the
    calendar date of ``now`` in its own timezone, so callers naming by the
    user's local day pass a local-aware ``now``.
    """
    date_suffix = f"{now:%b} {now.day}"
    return WorkoutTemplate(
        name=f"{template.name} ({date_suffix})",
        description=template.description,
        exercises=[_new_template_exercise(e, index) for index, e in enumerate(workout.exercises)],
        tags=list(template.tags),
        owner_id=template.owner_id,
        created_at=now,
        updated_at=now,
    )


def apply_template_update(
    template: WorkoutTemplate,
    workout: WorkoutInstance,
    changes: WorkoutChangeSet,
    strategy: UpdateStrategy | str,
    now: datetime | None = None,
) -> WorkoutTemplate | None:
    """Apply a finished workout to its template using the chosen strategy.

    Args:
        template: Template the workout was started from
        workout: Finished workout instance
        changes: Change set from detect_changes(workout, template)
        strategy: One of values_only, template_and_values, save_as_new, keep_original
        now: Timestamp for updated_at/created_at (defaults to current UTC time)

    Returns:
        Updated or new template, or None when the template must not change

    Raises:
        ValueError: If strategy is not a known UpdateStrategy
    """
    strategy = UpdateStrategy(strategy)
    now = now or utc_now()

    logger.debug(f"Applying strategy={strategy.value} to template {template.id} from workout {workout.id}")

    if strategy == UpdateStrategy.VALUES_ONLY:
        return update_values_only(template, workout, now)
    if strategy == UpdateStrategy.TEMPLATE_AND_VALUES:
        return update_template_and_values(template, workout, changes, now)
    if strategy == UpdateStrategy.SAVE_AS_NEW:
        return create_template_from_workout(template, workout, now)
    return None
