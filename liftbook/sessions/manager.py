"""Session manager enforcing one active workout per owner."""

import threading
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from liftbook.models import WorkoutInstance, WorkoutTemplate
from liftbook.sessions.clock import SessionClock
from liftbook.sessions.errors import NoActiveSessionError, SessionAlreadyActiveError
from liftbook.sessions.reducer import PreviousMap
from liftbook.sessions.session import WorkoutSession


class SessionManager:
    """Owns the active WorkoutSession of each user.

    Args:
        clock_factory: Creates the clock for each new session (tests inject
            clocks driven by a fake time source)
    """

    def __init__(self, clock_factory: Callable[[], SessionClock] = SessionClock) -> None:
        self._clock_factory = clock_factory
        self._sessions: dict[str, WorkoutSession] = {}
        self._lock = threading.Lock()

    def get(self, owner_id: str) -> WorkoutSession | None:
        with self._lock:
            return self._sessions.get(owner_id)

    def require(self, owner_id: str) -> WorkoutSession:
        session = self.get(owner_id)
        if session is None:
            raise NoActiveSessionError(f"Owner {owner_id} has no active workout")
        return session

    def start(
        self,
        template: WorkoutTemplate,
        owner_id: str,
        previous: PreviousMap | None = None,
        now: datetime | None = None,
        on_tick: Callable[[int], None] | None = None,
    ) -> WorkoutSession:
        """Start a new session for an owner.

        ``on_tick`` receives elapsed seconds from a background ticker that
        stops when the session is finished or discarded.

        Raises:
            SessionAlreadyActiveError: If the owner already has a session
        """
        with self._lock:
            existing = self._sessions.get(owner_id)
            if existing is not None:
                raise SessionAlreadyActiveError(
                    f"Owner {owner_id} already has workout {existing.workout.id} "
                    f"running from template {existing.template.id}"
                )
            session = WorkoutSession.start(
                template,
                owner_id,
                previous=previous,
                clock=self._clock_factory(),
                now=now,
                on_tick=on_tick,
            )
            self._sessions[owner_id] = session
            return session

    def resume(self, owner_id: str, template_id: str) -> WorkoutSession:
        """Return the owner's running session for a template and resume its clock.

        Raises:
            NoActiveSessionError: If no session is running for that template
        """
        session = self.get(owner_id)
        if session is None or session.template.id != template_id:
            raise NoActiveSessionError(f"Owner {owner_id} has no active workout for template {template_id}")
        session.resume()
        return session

    def pause(self, owner_id: str) -> None:
        self.require(owner_id).pause()

    def finish(self, owner_id: str, now: datetime | None = None) -> WorkoutInstance:
        """Finish the owner's session and release the slot."""
        with self._lock:
            session = self._sessions.pop(owner_id, None)
        if session is None:
            raise NoActiveSessionError(f"Owner {owner_id} has no active workout")
        return session.finish(now=now)

    def discard(self, owner_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(owner_id, None)
        if session is None:
            logger.debug(f"No active workout to discard for owner {owner_id}")
            return
        session.discard()
