"""Tests for template reconciliation strategies.

Tests that apply_template_update:
- Leaves the template alone for keep_original
- Only rewrites existing set targets for values_only
- Rebuilds structure for template_and_values
- Creates an independent template for save_as_new
- Never mutates its inputs
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from liftbook.models import Exercise, WorkoutInstance, WorkoutSet, WorkoutTemplate
from liftbook.workouts.changes import detect_changes
from liftbook.workouts.reconciliation import UpdateStrategy, apply_template_update

NOW = datetime(2026, 3, 7, 18, 30, tzinfo=UTC)


def _perform(workout: WorkoutInstance, exercise_index: int, set_index: int, reps: int, weight: float) -> None:
    workout_set = workout.exercises[exercise_index].sets[set_index]
    workout_set.actual_reps = reps
    workout_set.actual_weight = weight
    workout_set.completed = True


def _targets(exercise: Exercise) -> list[tuple[int | None, float | None]]:
    return [(s.target_reps, s.target_weight) for s in exercise.sets]


def _content(template: WorkoutTemplate) -> tuple:
    """Template content without ids and timestamps."""
    return (
        template.name,
        template.description,
        template.tags,
        [
            (
                e.name,
                e.order,
                e.rest_seconds,
                [(s.set_number, s.target_reps, s.target_weight, s.target_time) for s in e.sets],
            )
            for e in template.exercises
        ],
    )


@pytest.fixture
def push_day_extra_set(push_day_workout: WorkoutInstance) -> WorkoutInstance:
    """Push Day with a heavier third bench set and an added fourth set."""
    _perform(push_day_workout, 0, 2, reps=6, weight=195)
    push_day_workout.exercises[0].sets.append(WorkoutSet(set_number=4, target_reps=5, target_weight=185))
    _perform(push_day_workout, 0, 3, reps=5, weight=195)
    for exercise in push_day_workout.exercises[1:]:
        for workout_set in exercise.sets:
            workout_set.actual_reps = workout_set.target_reps
            workout_set.actual_weight = workout_set.target_weight
            workout_set.completed = True
    return push_day_workout


def _apply(template: WorkoutTemplate, workout: WorkoutInstance, strategy: str) -> WorkoutTemplate | None:
    return apply_template_update(template, workout, detect_changes(workout, template), strategy, now=NOW)


class TestKeepOriginal:
    """Tests for keep_original."""

    def test_keep_original_returns_none(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that keep_original never produces a template."""
        assert _apply(push_day_template, push_day_extra_set, "keep_original") is None
        assert _apply(push_day_template, push_day_extra_set, UpdateStrategy.KEEP_ORIGINAL) is None

    def test_unknown_strategy_is_rejected(
        self,
        push_day_template: WorkoutTemplate,
        push_day_workout: WorkoutInstance,
    ) -> None:
        """Test that the strategy set is closed."""
        with pytest.raises(ValueError):
            _apply(push_day_template, push_day_workout, "merge_everything")


class TestValuesOnly:
    """Tests for values_only."""

    def test_values_only_keeps_structure(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that exercise and set counts never change."""
        del push_day_extra_set.exercises[2]
        push_day_extra_set.exercises.append(
            Exercise(name="Dips", sets=[WorkoutSet(set_number=1, actual_reps=10, completed=True)])
        )

        updated = _apply(push_day_template, push_day_extra_set, "values_only")

        assert updated is not None
        assert [e.name for e in updated.exercises] == ["Bench Press", "Overhead Press", "Tricep Pushdown"]
        assert [len(e.sets) for e in updated.exercises] == [3, 3, 3]
        assert _targets(updated.exercises[0]) == [(5, 185), (5, 185), (6, 195)]
        assert _targets(updated.exercises[2]) == [(12, 50), (12, 50), (12, 50)]
        assert updated.id == push_day_template.id
        assert updated.updated_at == NOW

    def test_values_only_is_idempotent(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that applying values_only twice equals applying it once."""
        once = _apply(push_day_template, push_day_extra_set, "values_only")
        assert once is not None
        twice = _apply(once, push_day_extra_set, "values_only")

        assert twice is not None
        assert twice.model_dump() == once.model_dump()

    def test_values_only_keeps_target_for_missing_actual(self, push_day_template: WorkoutTemplate) -> None:
        """Test that a completed set with only reps keeps its target weight."""
        workout = WorkoutInstance(
            template_id=push_day_template.id,
            template_name=push_day_template.name,
            owner_id="user-1",
            exercises=[
                Exercise(
                    name="Bench Press",
                    template_exercise_id="exercise_bench",
                    sets=[WorkoutSet(set_number=1, actual_reps=7, completed=True)],
                ),
            ],
        )

        updated = _apply(push_day_template, workout, "values_only")

        assert updated is not None
        assert _targets(updated.exercises[0])[0] == (7, 185)

    def test_values_only_short_workout_keeps_set_counts(
        self,
        push_day_template: WorkoutTemplate,
        push_day_workout: WorkoutInstance,
    ) -> None:
        """Test that a workout with fewer sets never shrinks the template."""
        del push_day_workout.exercises[0].sets[1:]
        _perform(push_day_workout, 0, 0, reps=5, weight=190)

        once = _apply(push_day_template, push_day_workout, "values_only")
        assert once is not None
        twice = _apply(once, push_day_workout, "values_only")

        assert twice is not None
        assert [len(e.sets) for e in twice.exercises] == [len(e.sets) for e in push_day_template.exercises]
        assert _targets(twice.exercises[0]) == [(5, 190), (5, 185), (5, 185)]
        assert twice.model_dump() == once.model_dump()


class TestTemplateAndValues:
    """Tests for template_and_values."""

    def test_push_day_adds_fourth_set(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test the canonical extra-set scenario."""
        updated = _apply(push_day_template, push_day_extra_set, "template_and_values")

        assert updated is not None
        bench = updated.exercises[0]
        assert _targets(bench) == [(5, 185), (5, 185), (6, 195), (5, 195)]
        assert [s.set_number for s in bench.sets] == [1, 2, 3, 4]
        assert all(not s.completed and not s.has_actual_values() for s in bench.sets)
        assert bench.id == "exercise_bench"

    def test_deleted_removed_skipped_kept_added_appended(
        self,
        push_day_template: WorkoutTemplate,
        push_day_workout: WorkoutInstance,
    ) -> None:
        """Test structural rewrite across all categories."""
        _perform(push_day_workout, 0, 0, reps=5, weight=190)
        del push_day_workout.exercises[1]
        push_day_workout.exercises.append(
            Exercise(
                id="exercise_dips",
                name="Dips",
                rest_seconds=90,
                sets=[WorkoutSet(set_number=1, target_reps=10, actual_reps=12, completed=True)],
            )
        )

        updated = _apply(push_day_template, push_day_workout, "template_and_values")

        assert updated is not None
        assert [e.name for e in updated.exercises] == ["Bench Press", "Tricep Pushdown", "Dips"]
        assert [e.order for e in updated.exercises] == [0, 1, 2]
        assert updated.exercises[1].sets == push_day_template.exercises[2].sets
        dips = updated.exercises[2]
        assert dips.id != "exercise_dips"
        assert dips.template_exercise_id is None
        assert dips.rest_seconds == 90
        assert _targets(dips) == [(12, None)]

    def test_rest_interval_comes_from_workout(
        self,
        push_day_template: WorkoutTemplate,
        push_day_workout: WorkoutInstance,
    ) -> None:
        """Test that the workout's rest interval replaces the template's."""
        push_day_workout.exercises[0].rest_seconds = 240
        _perform(push_day_workout, 0, 0, reps=5, weight=185)

        updated = _apply(push_day_template, push_day_workout, "template_and_values")

        assert updated is not None
        assert updated.exercises[0].rest_seconds == 240

    def test_template_and_values_is_idempotent(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that a second application changes nothing but updated_at."""
        once = _apply(push_day_template, push_day_extra_set, "template_and_values")
        assert once is not None
        later = datetime(2026, 3, 8, 7, 0, tzinfo=UTC)
        twice = apply_template_update(
            once,
            push_day_extra_set,
            detect_changes(push_day_extra_set, once),
            "template_and_values",
            now=later,
        )

        assert twice is not None
        assert twice.updated_at == later
        assert twice.model_dump(exclude={"updated_at"}) == once.model_dump(exclude={"updated_at"})


class TestSaveAsNew:
    """Tests for save_as_new."""

    def test_save_as_new_creates_dated_copy(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that a new template is built from the workout and the original is untouched."""
        before = push_day_template.model_dump_json()

        created = _apply(push_day_template, push_day_extra_set, "save_as_new")

        assert created is not None
        assert created.id != push_day_template.id
        assert created.name == "Push Day (Mar 7)"
        assert created.created_at == NOW
        assert created.owner_id == push_day_template.owner_id
        assert _targets(created.exercises[0]) == [(5, 185), (5, 185), (6, 195), (5, 195)]
        assert {e.id for e in created.exercises}.isdisjoint({e.id for e in push_day_template.exercises})
        assert push_day_template.model_dump_json() == before

    def test_save_as_new_is_repeatable(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that saving the same workout twice yields the same content under fresh ids."""
        first = _apply(push_day_template, push_day_extra_set, "save_as_new")
        second = _apply(push_day_template, push_day_extra_set, "save_as_new")

        assert first is not None and second is not None
        assert first.id != second.id
        assert _content(second) == _content(first)

    def test_save_as_new_names_by_local_date(
        self,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that a late-evening local save is named for that evening, not the next UTC day."""
        evening = datetime(2026, 3, 7, 23, 30, tzinfo=timezone(timedelta(hours=-5)))

        created = apply_template_update(
            push_day_template,
            push_day_extra_set,
            detect_changes(push_day_extra_set, push_day_template),
            "save_as_new",
            now=evening,
        )

        assert created is not None
        assert created.name == "Push Day (Mar 7)"
        assert created.created_at.astimezone(UTC).day == 8


class TestPurity:
    """Tests that strategies never mutate inputs."""

    @pytest.mark.parametrize("strategy", ["values_only", "template_and_values", "save_as_new", "keep_original"])
    def test_inputs_unchanged(
        self,
        strategy: str,
        push_day_template: WorkoutTemplate,
        push_day_extra_set: WorkoutInstance,
    ) -> None:
        """Test that template and workout are unchanged after any strategy."""
        template_before = push_day_template.model_dump_json()
        workout_before = push_day_extra_set.model_dump_json()

        result = _apply(push_day_template, push_day_extra_set, strategy)
        if result is not None:
            result.exercises[0].sets[0].target_weight = 1

        assert push_day_template.model_dump_json() == template_before
        assert push_day_extra_set.model_dump_json() == workout_before
