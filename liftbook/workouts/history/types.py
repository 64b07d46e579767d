"""Previous performance models used for the "Previous" column during workouts."""

from datetime import datetime

from pydantic import BaseModel, Field


class PreviousSetData(BaseModel):
    """Actual values of one completed set from an earlier workout."""

    set_number: int
    weight: float | None = None
    reps: int | None = None
    time: int | None = None


class PreviousPerformance(BaseModel):
    """Most recent completed sets for one exercise.

    Attributes:
        exercise_id: Exercise id within the source workout
        exercise_name: Exercise name as recorded in the source workout
        workout_id: Source workout id
        last_performed: Start time of the source workout
        sets: Completed sets in order
    """

    exercise_id: str
    exercise_name: str
    workout_id: str
    last_performed: datetime
    sets: list[PreviousSetData] = Field(default_factory=list)
