"""Input validation for workout values and names.

Range checks mirror what the workout screens accept. The completed-set
check enforces that a set marked done carries a value for what its
exercise measures.
"""

from collections.abc import Iterable

from liftbook.models import ExerciseType, WorkoutSet

MAX_WEIGHT = 2000
MAX_REPS = 1000
MAX_TIME_SECONDS = 86400
MAX_TEXT_LENGTH = 500

# Actual-value fields that count as "performed" per exercise type
MEASURED_DIMENSIONS: dict[ExerciseType, tuple[str, ...]] = {
    ExerciseType.STRENGTH: ("actual_weight", "actual_reps"),
    ExerciseType.BODYWEIGHT: ("actual_reps", "actual_weight"),
    ExerciseType.TIMED: ("actual_time",),
    ExerciseType.CARDIO: ("actual_time", "actual_distance"),
}


def is_valid_weight(weight: float) -> bool:
    return 0 <= weight <= MAX_WEIGHT


def is_valid_reps(reps: float) -> bool:
    return 0 < reps <= MAX_REPS and float(reps).is_integer()


def is_valid_time(seconds: float) -> bool:
    return 0 < seconds <= MAX_TIME_SECONDS


def sanitize_string(value: str) -> str:
    """Trim whitespace and cap length."""
    return value.strip()[:MAX_TEXT_LENGTH]


def find_duplicates(new_names: Iterable[str], existing_names: Iterable[str]) -> list[str]:
    """Return the new names that already exist (case-insensitive)."""
    existing_lower = {n.lower() for n in existing_names}
    return [name for name in new_names if name.lower() in existing_lower]


def has_measured_values(workout_set: WorkoutSet, exercise_type: ExerciseType) -> bool:
    """Check that a set has at least one actual value its exercise measures.

    Args:
        workout_set: Set being completed
        exercise_type: Type of the owning exercise

    Returns:
        True if any measured dimension has an actual value
    """
    fields = MEASURED_DIMENSIONS.get(exercise_type, ())
    return any(getattr(workout_set, field) is not None for field in fields)
