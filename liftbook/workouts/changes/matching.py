"""Exercise matching between a workout and its source template.

Workout exercises materialized from a template carry ``template_exercise_id``
and are matched on it. Exercises without a resolvable id (legacy data) fall
back to case-insensitive name equality, first template exercise wins.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

from loguru import logger

from liftbook.models import Exercise


def find_duplicate_names(exercises: Iterable[Exercise]) -> list[str]:
    """Return lowercased names that occur more than once, in first-seen order."""
    counts = Counter(e.match_name for e in exercises)
    seen: list[str] = []
    for name, count in counts.items():
        if count > 1:
            seen.append(name)
    return seen


class ExerciseMatcher:
    """Links workout exercises to template exercises.

    Usage:
        matcher = ExerciseMatcher(template.exercises)
        template_exercise = matcher.link(workout_exercise)
    """

    def __init__(self, template_exercises: Sequence[Exercise]) -> None:
        self._template_exercises = list(template_exercises)
        self._by_id: dict[str, Exercise] = {e.id: e for e in self._template_exercises}
        self._by_name: dict[str, Exercise] = {}
        for exercise in self._template_exercises:
            self._by_name.setdefault(exercise.match_name, exercise)

        duplicates = find_duplicate_names(self._template_exercises)
        if duplicates:
            logger.warning(f"Template contains duplicate exercise names, first match wins: {duplicates}")

    def link_by_id(self, exercise: Exercise) -> Exercise | None:
        if exercise.template_exercise_id is None:
            return None
        return self._by_id.get(exercise.template_exercise_id)

    def link(self, exercise: Exercise) -> Exercise | None:
        """Find the template exercise a workout exercise was performed for.

        Args:
            exercise: Workout exercise

        Returns:
            Matching template exercise, or None if the exercise was added
        """
        linked = self.link_by_id(exercise)
        if linked is not None:
            return linked
        return self._by_name.get(exercise.match_name)

    def is_present(self, template_exercise: Exercise, workout_exercises: Sequence[Exercise]) -> bool:
        """Check whether a template exercise survives in the workout.

        A template exercise is present when a workout exercise links to it by
        id, or when a workout exercise matched by name shares its name.
        """
        for exercise in workout_exercises:
            linked = self.link_by_id(exercise)
            if linked is not None:
                if linked.id == template_exercise.id:
                    return True
            elif exercise.match_name == template_exercise.match_name:
                return True
        return False

    def workout_exercise_for(
        self,
        template_exercise: Exercise,
        workout_exercises: Sequence[Exercise],
    ) -> Exercise | None:
        """Find the first workout exercise linked to a template exercise."""
        for exercise in workout_exercises:
            linked = self.link(exercise)
            if linked is not None and linked.id == template_exercise.id:
                return exercise
        return None
