"""Root conftest for all tests.

Shared fixtures: a Push Day template and a workout started from it, a
controllable time source for session clocks, an in-memory SQLite session
factory, and a loguru capture sink.
"""

from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from liftbook.db.models import Base
from liftbook.models import Exercise, WorkoutInstance, WorkoutTemplate, create_set, materialize_instance

OWNER_ID = "user-1"
WORKOUT_START = datetime(2026, 1, 10, 9, 0, tzinfo=UTC)


class FakeTimeSource:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def owner_id() -> str:
    return OWNER_ID


@pytest.fixture
def push_day_template() -> WorkoutTemplate:
    """Push Day: Bench Press 3x5@185, Overhead Press 3x8@95, Tricep Pushdown 3x12@50."""
    return WorkoutTemplate(
        id="template_push",
        name="Push Day",
        description="Chest, shoulders, triceps",
        owner_id=OWNER_ID,
        tags=["push"],
        exercises=[
            Exercise(
                id="exercise_bench",
                name="Bench Press",
                order=0,
                rest_seconds=180,
                sets=[create_set(n, reps=5, weight=185) for n in (1, 2, 3)],
            ),
            Exercise(
                id="exercise_ohp",
                name="Overhead Press",
                order=1,
                rest_seconds=120,
                sets=[create_set(n, reps=8, weight=95) for n in (1, 2, 3)],
            ),
            Exercise(
                id="exercise_pushdown",
                name="Tricep Pushdown",
                order=2,
                sets=[create_set(n, reps=12, weight=50) for n in (1, 2, 3)],
            ),
        ],
    )


@pytest.fixture
def push_day_workout(push_day_template: WorkoutTemplate) -> WorkoutInstance:
    """Fresh active workout materialized from Push Day."""
    return materialize_instance(push_day_template, OWNER_ID, now=WORKOUT_START)


@pytest.fixture
def fake_time() -> FakeTimeSource:
    return FakeTimeSource()


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def loguru_messages() -> Generator[list[str], None, None]:
    """Capture loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
