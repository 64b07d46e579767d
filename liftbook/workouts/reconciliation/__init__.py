"""Template reconciliation module.

Folds a finished workout back into its source template using one of four
user-selected strategies. Pure functions only - persistence belongs to the
caller.
"""

from liftbook.workouts.reconciliation.reconcile import (
    apply_template_update,
    create_template_from_workout,
    update_template_and_values,
    update_values_only,
)
from liftbook.workouts.reconciliation.summary import get_update_summary
from liftbook.workouts.reconciliation.types import UpdateStrategy

__all__ = [
    "UpdateStrategy",
    "apply_template_update",
    "create_template_from_workout",
    "get_update_summary",
    "update_template_and_values",
    "update_values_only",
]
