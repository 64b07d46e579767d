"""Set model - a single planned/performed unit of work within an exercise."""

from pydantic import BaseModel, Field

from liftbook.models.ids import new_id


class WorkoutSet(BaseModel):
    """A single set within an exercise.

    Target values are planned (template side), actual values are what the
    user performed during a session. All values are optional and may be
    combined freely.

    Attributes:
        id: Stable set identifier
        set_number: 1-based position within the exercise
        target_reps: Planned repetitions
        target_weight: Planned load
        target_time: Planned duration in seconds
        target_distance: Planned distance in meters
        actual_reps: Performed repetitions
        actual_weight: Performed load
        actual_time: Performed duration in seconds
        actual_distance: Performed distance in meters
        completed: User explicitly marked the set done
        skipped: User explicitly marked the set as intentionally not done
    """

    id: str = Field(default_factory=lambda: new_id("set"))
    set_number: int

    target_reps: int | None = None
    target_weight: float | None = None
    target_time: int | None = None
    target_distance: float | None = None

    actual_reps: int | None = None
    actual_weight: float | None = None
    actual_time: int | None = None
    actual_distance: float | None = None

    completed: bool = False
    skipped: bool = False

    def has_actual_values(self) -> bool:
        return any(
            value is not None
            for value in (self.actual_reps, self.actual_weight, self.actual_time, self.actual_distance)
        )


def create_set(
    set_number: int,
    *,
    reps: int | None = None,
    weight: float | None = None,
    time: int | None = None,
    distance: float | None = None,
) -> WorkoutSet:
    """Create a planned set carrying only target values."""
    return WorkoutSet(
        set_number=set_number,
        target_reps=reps,
        target_weight=weight,
        target_time=time,
        target_distance=distance,
    )


def create_empty_set(set_number: int) -> WorkoutSet:
    return WorkoutSet(set_number=set_number)
