"""WorkoutTemplate model - a reusable, user-authored workout plan."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from liftbook.models.exercise import Exercise
from liftbook.models.ids import new_id


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutTemplate(BaseModel):
    """Reusable workout plan.

    Template sets carry target values only. Templates are archived rather
    than deleted in normal flows.

    Attributes:
        id: Template identifier
        name: Template name
        description: Optional description
        exercises: Ordered exercises
        tags: Free-form tags
        owner_id: Owning user
        created_at: Creation timestamp
        updated_at: Last modification timestamp
        last_used: When a workout was last started from this template
        archived: Hidden from the main list but kept for history
    """

    id: str = Field(default_factory=lambda: new_id("template"))
    name: str
    description: str | None = None
    exercises: list[Exercise] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    owner_id: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    last_used: datetime | None = None
    archived: bool = False

    def exercise_names(self) -> list[str]:
        return [e.name for e in self.exercises]
