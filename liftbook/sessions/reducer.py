"""Pure reducer for in-session edits.

``apply_command`` never mutates its input; it returns a new workout
instance. ``replay`` folds a command log, so a recorded session can be
reproduced deterministically.
"""

from collections.abc import Iterable

from liftbook.config.settings import settings
from liftbook.models import Exercise, WorkoutInstance, WorkoutSet
from liftbook.sessions.commands import (
    AddExercise,
    AddSet,
    CompleteAllSets,
    DeleteExercise,
    DeleteSet,
    FillFromPrevious,
    SessionCommand,
    ToggleSetComplete,
    UpdateRestTimer,
    UpdateSetValue,
)
from liftbook.sessions.errors import SessionCommandError
from liftbook.workouts.history import PreviousPerformance, lookup_previous
from liftbook.workouts.validation import (
    has_measured_values,
    is_valid_reps,
    is_valid_time,
    is_valid_weight,
    sanitize_string,
)

PreviousMap = dict[str, PreviousPerformance]


def _exercise_at(workout: WorkoutInstance, exercise_index: int) -> Exercise:
    if not 0 <= exercise_index < len(workout.exercises):
        raise SessionCommandError(f"No exercise at index {exercise_index}", code="INVALID_INDEX")
    return workout.exercises[exercise_index]


def _set_at(exercise: Exercise, set_index: int) -> WorkoutSet:
    if not 0 <= set_index < len(exercise.sets):
        raise SessionCommandError(f"{exercise.name} has no set at index {set_index}", code="INVALID_INDEX")
    return exercise.sets[set_index]


def _with_exercise(workout: WorkoutInstance, exercise_index: int, exercise: Exercise) -> WorkoutInstance:
    exercises = list(workout.exercises)
    exercises[exercise_index] = exercise
    return workout.model_copy(update={"exercises": exercises}).model_copy(deep=True)


def _with_sets(workout: WorkoutInstance, exercise_index: int, sets: list[WorkoutSet]) -> WorkoutInstance:
    exercise = workout.exercises[exercise_index]
    return _with_exercise(workout, exercise_index, exercise.model_copy(update={"sets": sets}))


def _require_measured(exercise: Exercise, workout_set: WorkoutSet) -> None:
    if not has_measured_values(workout_set, exercise.exercise_type):
        raise SessionCommandError(
            f"{exercise.name} set {workout_set.set_number} has no {exercise.exercise_type.value} values entered",
            code="INCOMPLETE_SET",
        )


def _toggle_set_complete(workout: WorkoutInstance, command: ToggleSetComplete) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    workout_set = _set_at(exercise, command.set_index)
    completed = not workout_set.completed
    if completed:
        _require_measured(exercise, workout_set)

    sets = list(exercise.sets)
    sets[command.set_index] = workout_set.model_copy(update={"completed": completed, "skipped": False})
    return _with_sets(workout, command.exercise_index, sets)


def _update_set_value(workout: WorkoutInstance, command: UpdateSetValue) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    workout_set = _set_at(exercise, command.set_index)
    value = command.value

    update: dict[str, float | int | None]
    if command.field == "reps":
        if value is not None and not is_valid_reps(value):
            raise SessionCommandError(f"Invalid reps value: {value}", code="INVALID_VALUE")
        update = {"actual_reps": int(value) if value is not None else None}
    elif command.field == "weight":
        if value is not None and not is_valid_weight(value):
            raise SessionCommandError(f"Invalid weight value: {value}", code="INVALID_VALUE")
        update = {"actual_weight": value}
    elif command.field == "time":
        if value is not None and not is_valid_time(value):
            raise SessionCommandError(f"Invalid time value: {value}", code="INVALID_VALUE")
        update = {"actual_time": int(value) if value is not None else None}
    else:
        if value is not None and value <= 0:
            raise SessionCommandError(f"Invalid distance value: {value}", code="INVALID_VALUE")
        update = {"actual_distance": value}

    sets = list(exercise.sets)
    updated = workout_set.model_copy(update=update)
    if updated.completed:
        _require_measured(exercise, updated)
    sets[command.set_index] = updated
    return _with_sets(workout, command.exercise_index, sets)


def _add_set(workout: WorkoutInstance, command: AddSet) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    last_set = exercise.sets[-1] if exercise.sets else None

    new_set = WorkoutSet(
        id=command.set_id,
        set_number=len(exercise.sets) + 1,
        target_reps=last_set.target_reps if last_set else None,
        target_weight=last_set.target_weight if last_set else None,
        target_time=last_set.target_time if last_set else None,
        target_distance=last_set.target_distance if last_set else None,
    )
    return _with_sets(workout, command.exercise_index, [*exercise.sets, new_set])


def _delete_set(workout: WorkoutInstance, command: DeleteSet) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    _set_at(exercise, command.set_index)
    if len(exercise.sets) <= 1:
        raise SessionCommandError(f"{exercise.name} must have at least one set", code="LAST_SET")

    remaining = [s for index, s in enumerate(exercise.sets) if index != command.set_index]
    renumbered = [s.model_copy(update={"set_number": index + 1}) for index, s in enumerate(remaining)]
    return _with_sets(workout, command.exercise_index, renumbered)


def _complete_all_sets(workout: WorkoutInstance, command: CompleteAllSets) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    completed = not all(s.completed for s in exercise.sets)
    if completed:
        for workout_set in exercise.sets:
            _require_measured(exercise, workout_set)

    sets = [s.model_copy(update={"completed": completed}) for s in exercise.sets]
    return _with_sets(workout, command.exercise_index, sets)


def _add_exercise(workout: WorkoutInstance, command: AddExercise, previous: PreviousMap) -> WorkoutInstance:
    name = sanitize_string(command.name)
    if not name:
        raise SessionCommandError("Exercise name is required", code="INVALID_VALUE")
    if any(e.match_name == name.lower() for e in workout.exercises):
        raise SessionCommandError(f"{name} is already in this workout", code="DUPLICATE_EXERCISE")

    prior = lookup_previous(previous, name)
    first_prior_set = prior.sets[0] if prior and prior.sets else None

    target_reps = command.target_reps
    if target_reps is None:
        target_reps = (first_prior_set.reps if first_prior_set else None) or settings.default_new_exercise_reps
    target_weight = command.target_weight
    if target_weight is None and first_prior_set is not None:
        target_weight = first_prior_set.weight

    exercise = Exercise(
        id=command.exercise_id,
        name=name,
        exercise_type=command.exercise_type,
        notes=command.notes,
        order=len(workout.exercises),
        sets=[WorkoutSet(id=command.set_id, set_number=1, target_reps=target_reps, target_weight=target_weight)],
    )
    return workout.model_copy(update={"exercises": [*workout.exercises, exercise]}).model_copy(deep=True)


def _delete_exercise(workout: WorkoutInstance, command: DeleteExercise) -> WorkoutInstance:
    _exercise_at(workout, command.exercise_index)
    exercises = [e for index, e in enumerate(workout.exercises) if index != command.exercise_index]
    return workout.model_copy(update={"exercises": exercises}).model_copy(deep=True)


def _fill_from_previous(workout: WorkoutInstance, command: FillFromPrevious, previous: PreviousMap) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    workout_set = _set_at(exercise, command.set_index)

    prior = lookup_previous(previous, exercise.name)
    if prior is None or command.set_index >= len(prior.sets):
        return workout

    prior_set = prior.sets[command.set_index]
    filled = workout_set.model_copy(
        update={
            "actual_weight": prior_set.weight,
            "actual_reps": prior_set.reps,
            "actual_time": prior_set.time,
        }
    )
    if filled.completed:
        _require_measured(exercise, filled)

    sets = list(exercise.sets)
    sets[command.set_index] = filled
    return _with_sets(workout, command.exercise_index, sets)


def _update_rest_timer(workout: WorkoutInstance, command: UpdateRestTimer) -> WorkoutInstance:
    exercise = _exercise_at(workout, command.exercise_index)
    if command.rest_seconds is not None and command.rest_seconds < 0:
        raise SessionCommandError(f"Invalid rest interval: {command.rest_seconds}", code="INVALID_VALUE")
    return _with_exercise(workout, command.exercise_index, exercise.model_copy(update={"rest_seconds": command.rest_seconds}))


def apply_command(
    workout: WorkoutInstance,
    command: SessionCommand,
    previous: PreviousMap | None = None,
) -> WorkoutInstance:
    """Apply one edit command to a workout.

    Args:
        workout: Current workout state
        command: Edit to apply
        previous: Previous performance by lowercased exercise name

    Returns:
        New workout state

    Raises:
        SessionCommandError: If the command is invalid for the current state
    """
    previous = previous or {}

    if isinstance(command, ToggleSetComplete):
        return _toggle_set_complete(workout, command)
    if isinstance(command, UpdateSetValue):
        return _update_set_value(workout, command)
    if isinstance(command, AddSet):
        return _add_set(workout, command)
    if isinstance(command, DeleteSet):
        return _delete_set(workout, command)
    if isinstance(command, CompleteAllSets):
        return _complete_all_sets(workout, command)
    if isinstance(command, AddExercise):
        return _add_exercise(workout, command, previous)
    if isinstance(command, DeleteExercise):
        return _delete_exercise(workout, command)
    if isinstance(command, FillFromPrevious):
        return _fill_from_previous(workout, command, previous)
    if isinstance(command, UpdateRestTimer):
        return _update_rest_timer(workout, command)
    raise SessionCommandError(f"Unsupported command: {command!r}")


def replay(
    workout: WorkoutInstance,
    commands: Iterable[SessionCommand],
    previous: PreviousMap | None = None,
) -> WorkoutInstance:
    """Apply a sequence of commands in order."""
    for command in commands:
        workout = apply_command(workout, command, previous)
    return workout
