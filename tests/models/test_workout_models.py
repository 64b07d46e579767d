"""Tests for workout records and their helpers."""

from datetime import timedelta

from liftbook.models import (
    Exercise,
    ExerciseType,
    WorkoutInstance,
    WorkoutSet,
    WorkoutTemplate,
    clone_exercise,
    create_empty_exercise,
    create_empty_set,
    create_set,
    materialize_instance,
)


class TestSetHelpers:
    """Tests for set construction helpers."""

    def test_create_set_carries_targets_only(self) -> None:
        """Test that create_set fills targets and leaves actuals empty."""
        workout_set = create_set(2, reps=5, weight=185)
        assert workout_set.set_number == 2
        assert workout_set.target_reps == 5
        assert workout_set.target_weight == 185
        assert not workout_set.has_actual_values()
        assert workout_set.id.startswith("set_")

    def test_create_empty_set(self) -> None:
        """Test that an empty set has no targets and is not completed."""
        workout_set = create_empty_set(1)
        assert workout_set.target_reps is None
        assert workout_set.completed is False
        assert workout_set.skipped is False

    def test_has_actual_values_detects_distance(self) -> None:
        """Test that distance alone counts as an actual value."""
        assert WorkoutSet(set_number=1, actual_distance=400.0).has_actual_values()


class TestExerciseHelpers:
    """Tests for exercise construction and cloning."""

    def test_create_empty_exercise(self) -> None:
        """Test defaults of an empty exercise."""
        exercise = create_empty_exercise("Dips", order=3)
        assert exercise.name == "Dips"
        assert exercise.order == 3
        assert exercise.exercise_type == ExerciseType.STRENGTH
        assert exercise.sets == []

    def test_clone_exercise_links_to_source_and_clears_actuals(self) -> None:
        """Test that cloning assigns fresh ids and drops performed values."""
        source = Exercise(
            id="exercise_src",
            name="Squat",
            sets=[
                WorkoutSet(id="set_a", set_number=1, target_reps=5, actual_reps=6, completed=True),
                WorkoutSet(id="set_b", set_number=2, target_reps=5, skipped=True),
            ],
        )

        clone = clone_exercise(source)

        assert clone.id != source.id
        assert clone.template_exercise_id == "exercise_src"
        assert [s.id for s in clone.sets] != ["set_a", "set_b"]
        assert all(not s.completed and not s.skipped and not s.has_actual_values() for s in clone.sets)
        assert [s.target_reps for s in clone.sets] == [5, 5]
        assert source.sets[0].actual_reps == 6

    def test_match_name_is_lowercase(self) -> None:
        """Test that name matching key ignores case."""
        assert Exercise(name="Bench PRESS").match_name == "bench press"


class TestMaterializeInstance:
    """Tests for creating a workout from a template."""

    def test_materialized_instance_is_active_and_empty(self, push_day_template: WorkoutTemplate) -> None:
        """Test that a new instance is active with an empty change set."""
        workout = materialize_instance(push_day_template, "user-1")

        assert workout.is_active
        assert workout.end_time is None
        assert workout.template_id == push_day_template.id
        assert workout.template_name == "Push Day"
        assert workout.changes.is_empty()
        assert [e.template_exercise_id for e in workout.exercises] == [e.id for e in push_day_template.exercises]

    def test_materialized_instance_does_not_share_state(self, push_day_template: WorkoutTemplate) -> None:
        """Test that editing the instance leaves the template untouched."""
        workout = materialize_instance(push_day_template, "user-1")
        workout.exercises[0].sets[0].target_weight = 999
        workout.exercises[0].sets.pop()

        assert push_day_template.exercises[0].sets[0].target_weight == 185
        assert len(push_day_template.exercises[0].sets) == 3


class TestWorkoutInstanceHelpers:
    """Tests for duration and empty-set reporting."""

    def test_duration_is_none_while_active(self, push_day_workout: WorkoutInstance) -> None:
        """Test that duration is unknown until the workout ends."""
        assert push_day_workout.duration_minutes() is None

    def test_duration_minutes(self, push_day_workout: WorkoutInstance) -> None:
        """Test duration rounding to whole minutes."""
        push_day_workout.end_time = push_day_workout.start_time + timedelta(minutes=52, seconds=10)
        assert push_day_workout.duration_minutes() == 52

    def test_empty_set_exercises(self, push_day_workout: WorkoutInstance) -> None:
        """Test that only sets with nothing entered are counted."""
        bench = push_day_workout.exercises[0]
        bench.sets[0].actual_reps = 5
        bench.sets[1].skipped = True

        summary = {s.exercise_name: s.empty_set_count for s in push_day_workout.empty_set_exercises()}

        assert summary == {"Bench Press": 1, "Overhead Press": 3, "Tricep Pushdown": 3}
