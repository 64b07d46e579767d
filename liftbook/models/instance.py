"""WorkoutInstance model - one concrete execution of a template."""

from datetime import datetime

from pydantic import BaseModel, Field

from liftbook.models.changes import WorkoutChangeSet
from liftbook.models.exercise import Exercise, clone_exercise
from liftbook.models.ids import new_id
from liftbook.models.template import WorkoutTemplate, utc_now


class EmptySetSummary(BaseModel):
    exercise_name: str
    empty_set_count: int


class WorkoutInstance(BaseModel):
    """A point-in-time execution of a template.

    Created by deep-cloning a template's exercises. Immutable to the engine
    once finished (``is_active`` False).

    Attributes:
        id: Workout identifier
        template_id: Source template id
        template_name: Template name at workout start
        start_time: Workout start
        end_time: Workout end (None while active)
        exercises: Exercises being performed
        is_active: True while the session is running
        changes: Change set accumulated for the session
        notes: Optional notes
        owner_id: Owning user
    """

    id: str = Field(default_factory=lambda: new_id("workout"))
    template_id: str
    template_name: str
    start_time: datetime = Field(default_factory=utc_now)
    end_time: datetime | None = None
    exercises: list[Exercise] = Field(default_factory=list)
    is_active: bool = True
    changes: WorkoutChangeSet = Field(default_factory=WorkoutChangeSet)
    notes: str | None = None
    owner_id: str

    def duration_minutes(self) -> int | None:
        if self.end_time is None:
            return None
        return round((self.end_time - self.start_time).total_seconds() / 60)

    def empty_set_exercises(self) -> list[EmptySetSummary]:
        """List exercises that still have sets with nothing entered."""
        result: list[EmptySetSummary] = []
        for exercise in self.exercises:
            empty_count = sum(
                1
                for s in exercise.sets
                if not s.completed
                and not s.skipped
                and s.actual_reps is None
                and s.actual_weight is None
                and s.actual_time is None
            )
            if empty_count > 0:
                result.append(EmptySetSummary(exercise_name=exercise.name, empty_set_count=empty_count))
        return result


def materialize_instance(
    template: WorkoutTemplate,
    owner_id: str,
    now: datetime | None = None,
) -> WorkoutInstance:
    """Create an active workout instance from a template.

    The instance owns independent copies of the template's exercises with
    all actual values discarded.

    Args:
        template: Source template
        owner_id: User starting the workout
        now: Start time (defaults to current UTC time)

    Returns:
        Active WorkoutInstance with an empty change set
    """
    return WorkoutInstance(
        template_id=template.id,
        template_name=template.name,
        start_time=now or utc_now(),
        exercises=[clone_exercise(e) for e in template.exercises],
        is_active=True,
        changes=WorkoutChangeSet(),
        owner_id=owner_id,
    )
