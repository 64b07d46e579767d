"""Shared record types for templates, workouts and change sets."""

from liftbook.models.changes import (
    AddedExercise,
    ChangeType,
    DeletedExercise,
    ExerciseModification,
    ModificationDetails,
    SetSnapshot,
    SkippedExercise,
    WorkoutChangeSet,
)
from liftbook.models.exercise import Exercise, ExerciseType, clone_exercise, create_empty_exercise
from liftbook.models.ids import new_id
from liftbook.models.instance import EmptySetSummary, WorkoutInstance, materialize_instance
from liftbook.models.set import WorkoutSet, create_empty_set, create_set
from liftbook.models.template import WorkoutTemplate, utc_now

__all__ = [
    "AddedExercise",
    "ChangeType",
    "DeletedExercise",
    "EmptySetSummary",
    "Exercise",
    "ExerciseModification",
    "ExerciseType",
    "ModificationDetails",
    "SetSnapshot",
    "SkippedExercise",
    "WorkoutChangeSet",
    "WorkoutInstance",
    "WorkoutSet",
    "WorkoutTemplate",
    "clone_exercise",
    "create_empty_exercise",
    "create_empty_set",
    "create_set",
    "materialize_instance",
    "new_id",
    "utc_now",
]
