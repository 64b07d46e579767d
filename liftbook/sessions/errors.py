"""Session error types.

Standard error codes:
- SESSION_ALREADY_ACTIVE: Owner already has a running session
- NO_ACTIVE_SESSION: Operation requires a running session
- INVALID_INDEX: Command references an exercise or set that does not exist
- INCOMPLETE_SET: Set marked complete without a value for what it measures
- LAST_SET: Attempt to delete the only remaining set of an exercise
- DUPLICATE_EXERCISE: Exercise name already present in the workout
- INVALID_VALUE: Entered value is out of range
"""


class SessionError(RuntimeError):
    """Base error for workout session operations.

    Attributes:
        code: Error code (e.g., "NO_ACTIVE_SESSION", "LAST_SET")
        details: Human-readable detail
    """

    code = "SESSION_ERROR"

    def __init__(self, details: str, code: str | None = None):
        if code is not None:
            self.code = code
        self.details = details
        super().__init__(f"{self.code}: {details}")


class SessionAlreadyActiveError(SessionError):
    code = "SESSION_ALREADY_ACTIVE"


class NoActiveSessionError(SessionError):
    code = "NO_ACTIVE_SESSION"


class SessionCommandError(SessionError):
    """Raised when an in-session edit command cannot be applied."""

    code = "INVALID_COMMAND"
