"""Human-readable summaries of what each update strategy will do."""

from liftbook.models import WorkoutChangeSet
from liftbook.workouts.reconciliation.types import UpdateStrategy


def _plural_sets(count: int) -> str:
    return f"{count} set{'s' if count > 1 else ''}"


def get_update_summary(strategy: UpdateStrategy | str, changes: WorkoutChangeSet) -> list[str]:
    """Describe the effect of a strategy for a given change set.

    Args:
        strategy: Update strategy being offered
        changes: Change set from detect_changes

    Returns:
        Ordered list of short summary lines
    """
    strategy = UpdateStrategy(strategy)
    summary: list[str] = []

    if strategy == UpdateStrategy.VALUES_ONLY:
        for modification in changes.modified_exercises:
            if not modification.details.values_changed:
                continue
            parts: list[str] = []
            if modification.details.sets_added:
                parts.append(f"+{_plural_sets(modification.details.sets_added)}")
            parts.append("updated weights")
            summary.append(f"{modification.exercise_name}: {', '.join(parts)}")
        if changes.deleted_exercises:
            summary.append(f"Keeps: {', '.join(e.exercise_name for e in changes.deleted_exercises)}")
        if changes.skipped_exercises:
            summary.append(f"Keeps: {', '.join(e.exercise_name for e in changes.skipped_exercises)}")

    elif strategy == UpdateStrategy.TEMPLATE_AND_VALUES:
        summary.append("Updates all values")
        for modification in changes.modified_exercises:
            if modification.details.sets_added:
                summary.append(f"Adds {_plural_sets(modification.details.sets_added)} to {modification.exercise_name}")
        if changes.added_exercises:
            summary.append(f"Adds: {', '.join(e.exercise_name for e in changes.added_exercises)}")
        if changes.deleted_exercises:
            summary.append(f"Removes: {', '.join(e.exercise_name for e in changes.deleted_exercises)}")
        if changes.skipped_exercises:
            summary.append(f"Keeps: {', '.join(e.exercise_name for e in changes.skipped_exercises)} (skipped)")

    elif strategy == UpdateStrategy.SAVE_AS_NEW:
        summary.append("Creates new template with today's workout")
        summary.append("Original template unchanged")

    else:
        summary.append("No changes to template")
        summary.append("Workout saved to history only")

    return summary
