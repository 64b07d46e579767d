"""Change set models - the output of comparing a workout to its template.

A WorkoutChangeSet holds four disjoint lists. An exercise that appears in
none of them is unchanged.
"""

from typing import Literal

from pydantic import BaseModel, Field

ChangeType = Literal["values", "structure", "both"]


class ModificationDetails(BaseModel):
    """Counts describing how an exercise changed.

    ``sets_added`` / ``sets_removed`` are None when zero.
    """

    sets_added: int | None = None
    sets_removed: int | None = None
    values_changed: bool = False


class ExerciseModification(BaseModel):
    """An exercise present in both template and workout whose sets changed."""

    exercise_id: str
    exercise_name: str
    template_exercise_id: str | None = None
    change_type: ChangeType
    details: ModificationDetails


class SetSnapshot(BaseModel):
    """Target values of a template set, kept for display and undo."""

    set_number: int
    target_reps: int | None = None
    target_weight: float | None = None
    target_time: int | None = None


class DeletedExercise(BaseModel):
    """A template exercise that is absent from the finished workout.

    ``exercise_id`` is the template exercise id.
    """

    exercise_id: str
    exercise_name: str
    original_sets: list[SetSnapshot] = Field(default_factory=list)


class SkippedExercise(BaseModel):
    """A template exercise present in the workout with no values entered."""

    exercise_id: str
    exercise_name: str
    template_exercise_id: str | None = None


class AddedExercise(BaseModel):
    """A workout exercise with no counterpart in the template."""

    exercise_id: str
    exercise_name: str


class WorkoutChangeSet(BaseModel):
    modified_exercises: list[ExerciseModification] = Field(default_factory=list)
    deleted_exercises: list[DeletedExercise] = Field(default_factory=list)
    skipped_exercises: list[SkippedExercise] = Field(default_factory=list)
    added_exercises: list[AddedExercise] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.modified_exercises or self.deleted_exercises or self.skipped_exercises or self.added_exercises
        )
