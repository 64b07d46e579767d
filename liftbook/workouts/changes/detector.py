"""Workout change detection.

Compares a finished workout against the template it was started from and
classifies every exercise as added, skipped, modified, deleted or unchanged.

This function is pure (no storage, no clock) and deterministic.
"""

from loguru import logger

from liftbook.models import (
    AddedExercise,
    ChangeType,
    DeletedExercise,
    Exercise,
    ExerciseModification,
    ModificationDetails,
    SetSnapshot,
    SkippedExercise,
    WorkoutChangeSet,
    WorkoutInstance,
    WorkoutTemplate,
)
from liftbook.workouts.changes.matching import ExerciseMatcher, find_duplicate_names


def has_entered_values(exercise: Exercise) -> bool:
    """Check whether any set was completed or carries any actual value."""
    return any(s.completed or s.has_actual_values() for s in exercise.sets)


def detect_exercise_modification(
    workout_exercise: Exercise,
    template_exercise: Exercise,
) -> ExerciseModification | None:
    """Compare a workout exercise with its template exercise.

    Structure changes are differences in set count. Value changes are
    completed sets (within the overlapping index range) whose actual
    reps/weight/time differ from the template set's targets.

    Args:
        workout_exercise: Exercise as performed
        template_exercise: Matching template exercise

    Returns:
        ExerciseModification if anything changed, None if unchanged
    """
    template_count = len(template_exercise.sets)
    workout_count = len(workout_exercise.sets)

    sets_added = max(workout_count - template_count, 0)
    sets_removed = max(template_count - workout_count, 0)
    structure_changed = sets_added > 0 or sets_removed > 0

    values_changed = False
    for template_set, workout_set in zip(template_exercise.sets, workout_exercise.sets):
        if not workout_set.completed:
            continue
        if (
            workout_set.actual_reps != template_set.target_reps
            or workout_set.actual_weight != template_set.target_weight
            or workout_set.actual_time != template_set.target_time
        ):
            values_changed = True
            break

    if not values_changed and not structure_changed:
        return None

    change_type: ChangeType
    if values_changed and structure_changed:
        change_type = "both"
    elif structure_changed:
        change_type = "structure"
    else:
        change_type = "values"

    return ExerciseModification(
        exercise_id=workout_exercise.id,
        exercise_name=workout_exercise.name,
        template_exercise_id=template_exercise.id,
        change_type=change_type,
        details=ModificationDetails(
            sets_added=sets_added or None,
            sets_removed=sets_removed or None,
            values_changed=values_changed,
        ),
    )


def detect_changes(workout: WorkoutInstance, template: WorkoutTemplate) -> WorkoutChangeSet:
    """Detect all changes between a workout and its source template.

    Logic:
    1. Link each workout exercise to a template exercise (id, then name)
    2. Unlinked workout exercises are added
    3. Linked exercises with nothing entered are skipped, otherwise
       checked for modifications
    4. Template exercises with no surviving workout exercise are deleted

    Args:
        workout: Finished (or in-progress) workout instance
        template: Template the workout was started from

    Returns:
        WorkoutChangeSet with four disjoint lists
    """
    matcher = ExerciseMatcher(template.exercises)
    changes = WorkoutChangeSet()

    duplicates = find_duplicate_names(workout.exercises)
    if duplicates:
        logger.warning(f"Workout {workout.id} contains duplicate exercise names: {duplicates}")

    for exercise in workout.exercises:
        template_exercise = matcher.link(exercise)
        if template_exercise is None:
            changes.added_exercises.append(AddedExercise(exercise_id=exercise.id, exercise_name=exercise.name))
            continue

        if not has_entered_values(exercise):
            changes.skipped_exercises.append(
                SkippedExercise(
                    exercise_id=exercise.id,
                    exercise_name=exercise.name,
                    template_exercise_id=template_exercise.id,
                )
            )
            continue

        modification = detect_exercise_modification(exercise, template_exercise)
        if modification is not None:
            changes.modified_exercises.append(modification)

    for template_exercise in template.exercises:
        if matcher.is_present(template_exercise, workout.exercises):
            continue
        changes.deleted_exercises.append(
            DeletedExercise(
                exercise_id=template_exercise.id,
                exercise_name=template_exercise.name,
                original_sets=[
                    SetSnapshot(
                        set_number=s.set_number,
                        target_reps=s.target_reps,
                        target_weight=s.target_weight,
                        target_time=s.target_time,
                    )
                    for s in template_exercise.sets
                ],
            )
        )

    logger.debug(
        f"Detected changes for workout {workout.id} against template {template.id}: "
        f"modified={len(changes.modified_exercises)}, deleted={len(changes.deleted_exercises)}, "
        f"skipped={len(changes.skipped_exercises)}, added={len(changes.added_exercises)}"
    )

    return changes
