"""Previous-performance lookup.

Most-recent-performance-wins per exercise: each requested exercise is
resolved independently, so two results may come from different workouts.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from liftbook.config.settings import settings
from liftbook.models import Exercise, WorkoutInstance
from liftbook.workouts.history.types import PreviousPerformance, PreviousSetData


def _find_exercise(workout: WorkoutInstance, name_key: str) -> Exercise | None:
    for exercise in workout.exercises:
        if exercise.match_name == name_key:
            return exercise
    return None


def resolve_previous_performance(
    exercise_names: Iterable[str],
    workouts: Sequence[WorkoutInstance],
    window: int | None = None,
) -> dict[str, PreviousPerformance]:
    """Find the most recent completed values for each exercise.

    Args:
        exercise_names: Exercise names to look up (case-insensitive)
        workouts: Finished workouts ordered most-recent-first
        window: Maximum number of finished workouts to scan
            (defaults to settings.previous_lookup_window)

    Returns:
        Mapping from lowercased exercise name to PreviousPerformance.
        Exercises with no completed sets in the window are absent.
    """
    limit = window if window is not None else settings.previous_lookup_window
    finished = [w for w in workouts if not w.is_active][:limit]

    result: dict[str, PreviousPerformance] = {}
    for name in exercise_names:
        name_key = name.lower()
        if name_key in result:
            continue

        for workout in finished:
            exercise = _find_exercise(workout, name_key)
            if exercise is None:
                continue

            completed_sets = [
                PreviousSetData(
                    set_number=s.set_number,
                    weight=s.actual_weight,
                    reps=s.actual_reps,
                    time=s.actual_time,
                )
                for s in exercise.sets
                if s.completed
            ]
            if not completed_sets:
                continue

            result[name_key] = PreviousPerformance(
                exercise_id=exercise.id,
                exercise_name=exercise.name,
                workout_id=workout.id,
                last_performed=workout.start_time,
                sets=completed_sets,
            )
            break

    logger.debug(f"Resolved previous performance for {len(result)} exercise(s) from {len(finished)} workout(s)")
    return result


def lookup_previous(previous: dict[str, PreviousPerformance], exercise_name: str) -> PreviousPerformance | None:
    return previous.get(exercise_name.lower())
