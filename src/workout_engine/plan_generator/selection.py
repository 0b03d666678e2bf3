"""Exercise selection — equipment resolution, count bands and pool truncation."""

from __future__ import annotations

from typing import Iterable

from workout_engine.catalog import get_exercises_by_muscle
from workout_engine.models.enums import (
    EXERCISE_COUNT_BANDS,
    MAX_EXERCISE_COUNT,
    Equipment,
    ExerciseCategory,
)
from workout_engine.models.exercise import Exercise


def resolve_equipment(equipment: Iterable[Equipment]) -> frozenset[Equipment]:
    """Effective equipment set: what the user has plus bodyweight moves."""
    return frozenset(equipment) | {Equipment.NONE}


def exercise_count_for_minutes(workout_minutes: int) -> int:
    """Exercises per day for a session length.

    Step function with inclusive upper bounds:
    <=30 → 4, <=45 → 5, <=60 → 6, anything longer → 7.
    """
    for max_minutes, count in EXERCISE_COUNT_BANDS:
        if workout_minutes <= max_minutes:
            return count
    return MAX_EXERCISE_COUNT


def pick_exercises(
    pool: Iterable[ExerciseCategory],
    available: frozenset[Equipment],
    count: int,
) -> tuple[Exercise, ...]:
    """Take the first *count* equipment-eligible exercises from a pool.

    Categories are concatenated in pool order and each keeps catalog order.
    This is a plain truncation: when the first category already supplies
    *count* exercises, later categories contribute nothing.

    Args:
        pool: Catalog categories for the day, in priority order.
        available: Resolved equipment set (see resolve_equipment()).
        count: Maximum number of exercises to return.

    Returns:
        Up to *count* exercises; fewer if the pool runs out.
    """
    eligible = [
        exercise
        for category in pool
        for exercise in get_exercises_by_muscle(category)
        if exercise.equipment in available
    ]
    return tuple(eligible[:count])
