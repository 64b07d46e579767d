"""Workout storage contract and implementations."""

from liftbook.persistence.sql_store import SqlWorkoutStore
from liftbook.persistence.store import WorkoutStore

__all__ = ["SqlWorkoutStore", "WorkoutStore"]
