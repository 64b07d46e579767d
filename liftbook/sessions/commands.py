"""In-session edit commands.

Every edit made during a workout is recorded as one of these commands.
Commands that create entities carry the new ids so that replaying a
command log reproduces the same workout exactly.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from liftbook.models import ExerciseType, new_id

SetField = Literal["reps", "weight", "time", "distance"]


class ToggleSetComplete(BaseModel):
    kind: Literal["toggle_set_complete"] = "toggle_set_complete"
    exercise_index: int
    set_index: int


class UpdateSetValue(BaseModel):
    """Enter or clear an actual value on a set (None clears)."""

    kind: Literal["update_set_value"] = "update_set_value"
    exercise_index: int
    set_index: int
    field: SetField
    value: float | None = None


class AddSet(BaseModel):
    kind: Literal["add_set"] = "add_set"
    exercise_index: int
    set_id: str = Field(default_factory=lambda: new_id("set"))


class DeleteSet(BaseModel):
    kind: Literal["delete_set"] = "delete_set"
    exercise_index: int
    set_index: int


class CompleteAllSets(BaseModel):
    kind: Literal["complete_all_sets"] = "complete_all_sets"
    exercise_index: int


class AddExercise(BaseModel):
    """Add an exercise mid-session.

    Target values left as None are filled from previous performance when
    available.
    """

    kind: Literal["add_exercise"] = "add_exercise"
    name: str
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    target_reps: int | None = None
    target_weight: float | None = None
    notes: str | None = None
    exercise_id: str = Field(default_factory=lambda: new_id("exercise"))
    set_id: str = Field(default_factory=lambda: new_id("set"))


class DeleteExercise(BaseModel):
    kind: Literal["delete_exercise"] = "delete_exercise"
    exercise_index: int


class FillFromPrevious(BaseModel):
    kind: Literal["fill_from_previous"] = "fill_from_previous"
    exercise_index: int
    set_index: int


class UpdateRestTimer(BaseModel):
    kind: Literal["update_rest_timer"] = "update_rest_timer"
    exercise_index: int
    rest_seconds: int | None = None


SessionCommand = Annotated[
    ToggleSetComplete
    | UpdateSetValue
    | AddSet
    | DeleteSet
    | CompleteAllSets
    | AddExercise
    | DeleteExercise
    | FillFromPrevious
    | UpdateRestTimer,
    Field(discriminator="kind"),
]
