"""Exercise catalog — the fixed registry every plan is drawn from.

The catalog is built once at import time into a read-only mapping of
category → tuple of exercises. Declaration order matters: plan selection
takes exercises in exactly this order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from workout_engine.models.enums import Equipment, ExerciseCategory, MuscleGroup
from workout_engine.models.exercise import Exercise


def _ex(
    exercise_id: str,
    name: str,
    sets: int,
    reps: str,
    muscle_group: MuscleGroup,
    rest_seconds: int,
    equipment: Equipment,
    calories_per_set: float,
    is_premium: bool = False,
) -> Exercise:
    return Exercise(
        exercise_id=exercise_id,
        name=name,
        sets=sets,
        reps=reps,
        muscle_group=muscle_group,
        rest_seconds=rest_seconds,
        equipment=equipment,
        is_premium=is_premium,
        calories_per_set=calories_per_set,
    )


_CHEST = MuscleGroup.CHEST
_BACK = MuscleGroup.BACK
_SHOULDERS = MuscleGroup.SHOULDERS
_LEGS = MuscleGroup.LEGS
_BICEPS = MuscleGroup.BICEPS
_TRICEPS = MuscleGroup.TRICEPS
_CORE = MuscleGroup.CORE

_NONE = Equipment.NONE
_DB = Equipment.DUMBBELLS
_BANDS = Equipment.RESISTANCE_BANDS
_GYM = Equipment.GYM

EXERCISE_CATALOG: Mapping[ExerciseCategory, tuple[Exercise, ...]] = MappingProxyType({
    ExerciseCategory.CHEST: (
        _ex("bp", "Bench Press", 4, "8-10", _CHEST, 90, _GYM, 8),
        _ex("ip", "Incline Dumbbell Press", 3, "10-12", _CHEST, 75, _DB, 7),
        _ex("cf", "Cable Flyes", 3, "12-15", _CHEST, 60, _GYM, 5, is_premium=True),
        _ex("pu", "Push-Ups", 3, "15-20", _CHEST, 60, _NONE, 5),
        _ex("rbf", "Resistance Band Flyes", 3, "12-15", _CHEST, 60, _BANDS, 4),
    ),
    ExerciseCategory.BACK: (
        _ex("br", "Barbell Rows", 4, "8-10", _BACK, 90, _GYM, 9),
        _ex("lp", "Lat Pulldowns", 3, "10-12", _BACK, 75, _GYM, 7),
        _ex("dr", "Dumbbell Rows", 3, "10-12", _BACK, 75, _DB, 7),
        _ex("sr", "Seated Cable Rows", 3, "12-15", _BACK, 60, _GYM, 6, is_premium=True),
        _ex("rbr", "Resistance Band Rows", 3, "12-15", _BACK, 60, _BANDS, 5),
    ),
    ExerciseCategory.SHOULDERS: (
        _ex("ohp", "Overhead Press", 4, "8-10", _SHOULDERS, 90, _GYM, 7),
        _ex("lr", "Lateral Raises", 3, "12-15", _SHOULDERS, 60, _DB, 4),
        _ex("fp", "Face Pulls", 3, "15-20", _SHOULDERS, 60, _GYM, 4, is_premium=True),
        _ex("rblr", "Band Lateral Raises", 3, "15-20", _SHOULDERS, 60, _BANDS, 3),
    ),
    ExerciseCategory.LEGS: (
        _ex("sq", "Squats", 4, "8-10", _LEGS, 120, _GYM, 12),
        _ex("rdl", "Romanian Deadlifts", 3, "10-12", _LEGS, 90, _GYM, 10),
        _ex("lp2", "Leg Press", 3, "10-12", _LEGS, 90, _GYM, 10, is_premium=True),
        _ex("gl", "Goblet Squats", 3, "12-15", _LEGS, 75, _DB, 8),
        _ex("lu", "Lunges", 3, "12 each", _LEGS, 60, _NONE, 7),
        _ex("bsq", "Band Squats", 3, "15-20", _LEGS, 60, _BANDS, 6),
    ),
    ExerciseCategory.ARMS: (
        _ex("bc", "Barbell Curls", 3, "10-12", _BICEPS, 60, _GYM, 5),
        _ex("td", "Tricep Dips", 3, "10-12", _TRICEPS, 60, _GYM, 6),
        _ex("hc", "Hammer Curls", 3, "10-12", _BICEPS, 60, _DB, 5),
        _ex("oe", "Overhead Tricep Extension", 3, "12-15", _TRICEPS, 60, _DB, 5),
        _ex("rbc", "Band Curls", 3, "15-20", _BICEPS, 60, _BANDS, 3),
    ),
    ExerciseCategory.CORE: (
        _ex("pl", "Plank", 3, "45-60s", _CORE, 45, _NONE, 4),
        _ex("cr", "Crunches", 3, "20", _CORE, 45, _NONE, 3),
        _ex("lrs", "Leg Raises", 3, "15", _CORE, 45, _NONE, 4),
        _ex("rw", "Russian Twists", 3, "20", _CORE, 45, _NONE, 4),
    ),
})

_BY_ID: Mapping[str, Exercise] = MappingProxyType({
    exercise.exercise_id: exercise
    for exercises in EXERCISE_CATALOG.values()
    for exercise in exercises
})


def get_all_exercises() -> tuple[Exercise, ...]:
    """Every catalog exercise, in declaration order."""
    return tuple(
        exercise
        for exercises in EXERCISE_CATALOG.values()
        for exercise in exercises
    )


def get_exercises_by_muscle(category: ExerciseCategory | str) -> tuple[Exercise, ...]:
    """Exercises in one catalog category.

    Args:
        category: An ExerciseCategory or its name in any case ("Legs").

    Returns:
        The category's exercises in declaration order, or an empty tuple
        for an unknown category.
    """
    if not isinstance(category, ExerciseCategory):
        try:
            category = ExerciseCategory(str(category).lower())
        except ValueError:
            return ()
    return EXERCISE_CATALOG.get(category, ())


def get_exercise(exercise_id: str) -> Exercise | None:
    """Look up a catalog exercise by its id."""
    return _BY_ID.get(exercise_id)
