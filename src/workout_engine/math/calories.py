"""Session calorie and progress calculations.

Catalog calorie values are per set at a 70 kg reference body weight and
scale linearly with the user's weight.
"""

from __future__ import annotations

from typing import Collection, Iterable

from workout_engine.models.enums import REFERENCE_BODY_WEIGHT_KG
from workout_engine.models.exercise import Exercise


def exercise_calories(exercise: Exercise, weight_kg: float) -> float:
    """Calories for all sets of one exercise.

    Uses the exercise's own ``sets``, so level-adjusted plan entries count
    their adjusted set total, not the catalog default.
    """
    if weight_kg < 0:
        raise ValueError(f"weight_kg must be non-negative, got {weight_kg}")
    return exercise.calories_per_set * exercise.sets * (weight_kg / REFERENCE_BODY_WEIGHT_KG)


def session_calories(
    exercises: Iterable[Exercise],
    completed_ids: Collection[str],
    weight_kg: float,
) -> float:
    """Total calories for the completed exercises of a day.

    Args:
        exercises: The day's exercises as carried on the plan.
        completed_ids: Ids the user marked completed; others are ignored.
        weight_kg: User body weight in kg.

    Returns:
        Unrounded calorie total (>= 0).
    """
    return sum(
        exercise_calories(e, weight_kg)
        for e in exercises
        if e.exercise_id in completed_ids
    )


def session_progress_pct(
    exercises: Collection[Exercise], completed_ids: Collection[str],
) -> float:
    """Share of a day's exercises completed, as a percentage (0 for an empty day)."""
    if not exercises:
        return 0.0
    done = sum(1 for e in exercises if e.exercise_id in completed_ids)
    return done / len(exercises) * 100
