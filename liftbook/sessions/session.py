"""In-session state for one running workout.

A WorkoutSession holds the workout being performed, the template it came
from, previous performance for the "Previous" column, the session clock,
and the log of every edit command applied so far. When given an
``on_tick`` callback the session also owns a SessionTicker, which runs
from ``start()`` until the session is finished or discarded.
"""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from liftbook.models import WorkoutChangeSet, WorkoutInstance, WorkoutTemplate, materialize_instance, utc_now
from liftbook.sessions.clock import SessionClock
from liftbook.sessions.commands import SessionCommand
from liftbook.sessions.reducer import PreviousMap, apply_command, replay
from liftbook.sessions.ticker import SessionTicker
from liftbook.workouts.changes import detect_changes


class WorkoutSession:
    """A running workout with a replayable command log.

    Usage:
        session = WorkoutSession.start(template, owner_id="user-1")
        session.dispatch(UpdateSetValue(exercise_index=0, set_index=0, field="reps", value=5))
        session.dispatch(ToggleSetComplete(exercise_index=0, set_index=0))
        finished = session.finish()
    """

    def __init__(
        self,
        template: WorkoutTemplate,
        workout: WorkoutInstance,
        previous: PreviousMap | None = None,
        clock: SessionClock | None = None,
        on_tick: Callable[[int], None] | None = None,
        tick_interval: float | None = None,
    ) -> None:
        self.template = template
        self.initial_workout = workout
        self.workout = workout
        self.previous: PreviousMap = dict(previous or {})
        self.clock = clock or SessionClock()
        self.commands: list[SessionCommand] = []
        self.ticker = SessionTicker(self.clock, on_tick, interval=tick_interval) if on_tick else None

    @classmethod
    def start(
        cls,
        template: WorkoutTemplate,
        owner_id: str,
        previous: PreviousMap | None = None,
        clock: SessionClock | None = None,
        now: datetime | None = None,
        on_tick: Callable[[int], None] | None = None,
        tick_interval: float | None = None,
    ) -> "WorkoutSession":
        """Materialize a workout from a template and start the clock (and ticker, if any)."""
        workout = materialize_instance(template, owner_id, now=now)
        session = cls(template, workout, previous=previous, clock=clock, on_tick=on_tick, tick_interval=tick_interval)
        session.clock.start()
        if session.ticker is not None:
            session.ticker.start()
        logger.info(f"Started workout {workout.id} from template {template.id} for owner {owner_id}")
        return session

    @property
    def owner_id(self) -> str:
        return self.workout.owner_id

    def dispatch(self, command: SessionCommand) -> WorkoutInstance:
        """Apply an edit and record it in the command log.

        Raises:
            SessionCommandError: If the command is invalid; the log and
                workout are left unchanged
        """
        self.workout = apply_command(self.workout, command, self.previous)
        self.commands.append(command)
        return self.workout

    def replayed(self) -> WorkoutInstance:
        """Rebuild the current workout from the initial state and the command log."""
        return replay(self.initial_workout, self.commands, self.previous)

    def pending_changes(self) -> WorkoutChangeSet:
        return detect_changes(self.workout, self.template)

    def pause(self) -> None:
        self.clock.pause()

    def resume(self) -> None:
        self.clock.resume()

    def elapsed_seconds(self) -> int:
        return self.clock.elapsed_seconds()

    def _stop_ticker(self) -> None:
        if self.ticker is not None:
            self.ticker.stop()

    def finish(self, now: datetime | None = None) -> WorkoutInstance:
        """Close the workout and embed its change set.

        Returns:
            Finished workout (is_active False, end_time set)
        """
        self._stop_ticker()
        self.clock.pause()
        finished = self.workout.model_copy(
            update={
                "end_time": now or utc_now(),
                "is_active": False,
                "changes": detect_changes(self.workout, self.template),
            },
            deep=True,
        )
        logger.info(
            f"Finished workout {finished.id} after {self.clock.elapsed_seconds()}s active, "
            f"{len(self.commands)} edit(s)"
        )
        return finished

    def discard(self) -> None:
        self._stop_ticker()
        self.clock.reset()
        self.commands.clear()
        logger.info(f"Discarded workout {self.workout.id}")
