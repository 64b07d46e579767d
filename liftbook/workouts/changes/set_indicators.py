"""Set-level change indicators.

Classifies a single workout set against its template counterpart for
display next to each set row.
"""

from typing import Literal

from liftbook.models import WorkoutSet

SetChangeIndicator = Literal["none", "improved", "decreased", "added", "skipped"]


def is_set_improved(workout_set: WorkoutSet, template_set: WorkoutSet) -> bool:
    """Check whether a completed set beat its template targets.

    Weight dominates reps: more reps only count as an improvement when the
    actual weight did not drop below the target weight.
    """
    if not workout_set.completed:
        return False

    if (
        workout_set.actual_weight is not None
        and template_set.target_weight is not None
        and workout_set.actual_weight > template_set.target_weight
    ):
        return True

    if (
        workout_set.actual_reps is not None
        and template_set.target_reps is not None
        and workout_set.actual_reps > template_set.target_reps
        and (workout_set.actual_weight or 0) >= (template_set.target_weight or 0)
    ):
        return True

    return (
        workout_set.actual_time is not None
        and template_set.target_time is not None
        and workout_set.actual_time > template_set.target_time
    )


def is_set_decreased(workout_set: WorkoutSet, template_set: WorkoutSet) -> bool:
    """Check whether a completed set fell short on weight or reps."""
    if not workout_set.completed:
        return False

    if (
        workout_set.actual_weight is not None
        and template_set.target_weight is not None
        and workout_set.actual_weight < template_set.target_weight
    ):
        return True

    return (
        workout_set.actual_reps is not None
        and template_set.target_reps is not None
        and workout_set.actual_reps < template_set.target_reps
    )


def get_set_change_indicator(
    workout_set: WorkoutSet,
    template_set: WorkoutSet | None,
) -> SetChangeIndicator:
    """Classify a workout set against its template counterpart.

    Args:
        workout_set: Set as performed
        template_set: Template set at the same index, or None if the set was added

    Returns:
        One of "none", "improved", "decreased", "added", "skipped"
    """
    if template_set is None:
        return "added"

    if not workout_set.completed and not workout_set.has_actual_values():
        return "skipped"

    if is_set_improved(workout_set, template_set):
        return "improved"

    if is_set_decreased(workout_set, template_set):
        return "decreased"

    return "none"
