"""Exercise model - a named movement with an ordered sequence of sets."""

from enum import StrEnum

from pydantic import BaseModel, Field

from liftbook.models.ids import new_id
from liftbook.models.set import WorkoutSet


class ExerciseType(StrEnum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    BODYWEIGHT = "bodyweight"
    TIMED = "timed"


class Exercise(BaseModel):
    """A named movement within a template or workout.

    Names are free text and are not keys into any exercise catalog.

    Attributes:
        id: Exercise identifier
        name: User-defined exercise name
        exercise_type: Measurement family of the exercise
        sets: Ordered sets
        notes: Optional free-text notes
        rest_seconds: Optional rest interval between sets
        order: Position within the workout
        template_exercise_id: Id of the template exercise this one was
            materialized from (None for template exercises, exercises added
            mid-session, and legacy data)
    """

    id: str = Field(default_factory=lambda: new_id("exercise"))
    name: str
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    sets: list[WorkoutSet] = Field(default_factory=list)
    notes: str | None = None
    rest_seconds: int | None = None
    order: int = 0
    template_exercise_id: str | None = None

    @property
    def match_name(self) -> str:
        return self.name.lower()


def create_empty_exercise(name: str, order: int) -> Exercise:
    return Exercise(name=name, order=order)


def clone_exercise(exercise: Exercise) -> Exercise:
    """Deep-copy an exercise for a new workout instance.

    Fresh ids are generated for the exercise and its sets, actual values and
    status flags are discarded, and the source exercise id is kept as
    ``template_exercise_id``.
    """
    return exercise.model_copy(
        update={
            "id": new_id("exercise"),
            "template_exercise_id": exercise.id,
            "sets": [
                s.model_copy(
                    update={
                        "id": new_id("set"),
                        "actual_reps": None,
                        "actual_weight": None,
                        "actual_time": None,
                        "actual_distance": None,
                        "completed": False,
                        "skipped": False,
                    }
                )
                for s in exercise.sets
            ],
        },
        deep=True,
    )
