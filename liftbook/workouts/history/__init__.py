"""Previous-performance lookup across workout history."""

from liftbook.workouts.history.previous import lookup_previous, resolve_previous_performance
from liftbook.workouts.history.types import PreviousPerformance, PreviousSetData

__all__ = [
    "PreviousPerformance",
    "PreviousSetData",
    "lookup_previous",
    "resolve_previous_performance",
]
