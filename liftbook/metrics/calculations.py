"""Workout metrics.

Volume, estimated one-rep max, best set, completion and progress figures
computed from completed sets. Only sets marked completed with both a
weight and a rep count contribute to load-based metrics.
"""

import math
from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel

from liftbook.models import Exercise, WorkoutInstance, WorkoutSet


class PersonalRecord(BaseModel):
    """Heaviest estimated one-rep max found for an exercise in history."""

    weight: float
    reps: int
    one_rep_max: int
    date: datetime
    workout_id: str


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _is_loaded(workout_set: WorkoutSet) -> bool:
    return bool(workout_set.completed and workout_set.actual_weight and workout_set.actual_reps)


def calculate_exercise_volume(exercise: Exercise) -> float:
    """Sum of weight x reps over completed sets."""
    return sum(
        s.actual_weight * s.actual_reps  # type: ignore[operator]
        for s in exercise.sets
        if _is_loaded(s)
    )


def calculate_workout_volume(workout: WorkoutInstance) -> float:
    return sum(calculate_exercise_volume(e) for e in workout.exercises)


def calculate_weekly_volume(workouts: Iterable[WorkoutInstance]) -> float:
    return sum(calculate_workout_volume(w) for w in workouts)


def calculate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate one-rep max with the Epley formula.

    Args:
        weight: Load lifted
        reps: Repetitions performed at that load

    Returns:
        0 for non-positive inputs, the weight itself for a single, otherwise
        weight x (1 + reps / 30) rounded to the nearest whole number
    """
    if reps <= 0 or weight <= 0:
        return 0
    if reps == 1:
        return weight
    return _round_half_up(weight * (1 + reps / 30))


def get_best_set(exercise: Exercise) -> WorkoutSet | None:
    """Return the completed set with the highest estimated one-rep max.

    Ties keep the earliest set.
    """
    best_set: WorkoutSet | None = None
    best_one_rm: float = 0
    for workout_set in exercise.sets:
        if not _is_loaded(workout_set):
            continue
        one_rm = calculate_one_rep_max(workout_set.actual_weight, workout_set.actual_reps)  # type: ignore[arg-type]
        if one_rm > best_one_rm:
            best_one_rm = one_rm
            best_set = workout_set
    return best_set


def count_completed_sets(workout: WorkoutInstance) -> int:
    return sum(1 for e in workout.exercises for s in e.sets if s.completed)


def count_completed_exercises(workout: WorkoutInstance) -> int:
    """Count exercises with at least one completed set."""
    return sum(1 for e in workout.exercises if any(s.completed for s in e.sets))


def calculate_completion_percentage(workout: WorkoutInstance) -> int:
    total_sets = sum(len(e.sets) for e in workout.exercises)
    if total_sets == 0:
        return 0
    return _round_half_up(count_completed_sets(workout) / total_sets * 100)


def calculate_average_weight(exercise: Exercise) -> int:
    weights = [s.actual_weight for s in exercise.sets if s.completed and s.actual_weight]
    if not weights:
        return 0
    return _round_half_up(sum(weights) / len(weights))


def calculate_average_reps(exercise: Exercise) -> int:
    reps = [s.actual_reps for s in exercise.sets if s.completed and s.actual_reps]
    if not reps:
        return 0
    return _round_half_up(sum(reps) / len(reps))


def calculate_progress(current: float, previous: float) -> int:
    """Percentage change from previous to current.

    A zero baseline reports 100 when there is any current value, else 0.
    """
    if previous == 0:
        return 100 if current > 0 else 0
    return _round_half_up((current - previous) / previous * 100)


def get_personal_record(exercise_name: str, workouts: Iterable[WorkoutInstance]) -> PersonalRecord | None:
    """Find the best estimated one-rep max for an exercise across workouts.

    Args:
        exercise_name: Exercise name, matched case-insensitively
        workouts: Workout history in any order

    Returns:
        PersonalRecord for the strongest set, or None if no loaded set exists
    """
    key = exercise_name.lower()
    record: PersonalRecord | None = None
    best_one_rm: float = 0

    for workout in workouts:
        exercise = next((e for e in workout.exercises if e.match_name == key), None)
        if exercise is None:
            continue
        for workout_set in exercise.sets:
            if not _is_loaded(workout_set):
                continue
            one_rm = calculate_one_rep_max(workout_set.actual_weight, workout_set.actual_reps)  # type: ignore[arg-type]
            if one_rm > best_one_rm:
                best_one_rm = one_rm
                record = PersonalRecord(
                    weight=workout_set.actual_weight,  # type: ignore[arg-type]
                    reps=workout_set.actual_reps,  # type: ignore[arg-type]
                    one_rep_max=_round_half_up(one_rm),
                    date=workout.start_time,
                    workout_id=workout.id,
                )
    return record
