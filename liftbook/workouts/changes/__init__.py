"""Change detection between a finished workout and its template.

Observation only - nothing here mutates templates.
"""

from liftbook.workouts.changes.detector import detect_changes, detect_exercise_modification, has_entered_values
from liftbook.workouts.changes.matching import ExerciseMatcher, find_duplicate_names
from liftbook.workouts.changes.set_indicators import (
    SetChangeIndicator,
    get_set_change_indicator,
    is_set_decreased,
    is_set_improved,
)

__all__ = [
    "ExerciseMatcher",
    "SetChangeIndicator",
    "detect_changes",
    "detect_exercise_modification",
    "find_duplicate_names",
    "get_set_change_indicator",
    "has_entered_values",
    "is_set_decreased",
    "is_set_improved",
]
