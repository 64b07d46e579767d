"""Storage contract for templates and workout history."""

from typing import Protocol

from liftbook.models import WorkoutInstance, WorkoutTemplate


class WorkoutStore(Protocol):
    """Persistence collaborator used by the workout service.

    Loads return None or an empty list when nothing matches. Persists
    report failure as False instead of raising.
    """

    def load_recent_finished_instances(self, owner_id: str, limit: int) -> list[WorkoutInstance]:
        """Return up to ``limit`` finished workouts, most recent first."""
        ...

    def load_template(self, owner_id: str, template_id: str) -> WorkoutTemplate | None: ...

    def persist_template(self, template: WorkoutTemplate) -> bool: ...

    def persist_instance(self, instance: WorkoutInstance) -> bool: ...
