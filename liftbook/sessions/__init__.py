"""Workout session state, clock and lifecycle."""

from liftbook.sessions.clock import SessionClock
from liftbook.sessions.commands import (
    AddExercise,
    AddSet,
    CompleteAllSets,
    DeleteExercise,
    DeleteSet,
    FillFromPrevious,
    SessionCommand,
    ToggleSetComplete,
    UpdateRestTimer,
    UpdateSetValue,
)
from liftbook.sessions.errors import (
    NoActiveSessionError,
    SessionAlreadyActiveError,
    SessionCommandError,
    SessionError,
)
from liftbook.sessions.manager import SessionManager
from liftbook.sessions.reducer import apply_command, replay
from liftbook.sessions.session import WorkoutSession
from liftbook.sessions.ticker import SessionTicker

__all__ = [
    "AddExercise",
    "AddSet",
    "CompleteAllSets",
    "DeleteExercise",
    "DeleteSet",
    "FillFromPrevious",
    "NoActiveSessionError",
    "SessionAlreadyActiveError",
    "SessionClock",
    "SessionCommand",
    "SessionCommandError",
    "SessionError",
    "SessionManager",
    "SessionTicker",
    "ToggleSetComplete",
    "UpdateRestTimer",
    "UpdateSetValue",
    "WorkoutSession",
    "apply_command",
    "replay",
]
