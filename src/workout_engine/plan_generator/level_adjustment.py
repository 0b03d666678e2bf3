"""Experience-level adjustment applied to selected exercises."""

from __future__ import annotations

import dataclasses

from workout_engine.models.enums import (
    BEGINNER_EXTRA_REST_SECONDS,
    BEGINNER_MIN_SETS,
    BEGINNER_SET_REDUCTION,
    ExperienceLevel,
)
from workout_engine.models.exercise import Exercise


def adjust_for_level(exercise: Exercise, level: ExperienceLevel) -> Exercise:
    """Scale one exercise for the user's experience level.

    Beginners drop one set (never below 2) and get 15 s more rest.
    Intermediate users keep the catalog defaults.
    """
    if level != ExperienceLevel.BEGINNER:
        return exercise
    return dataclasses.replace(
        exercise,
        sets=max(BEGINNER_MIN_SETS, exercise.sets - BEGINNER_SET_REDUCTION),
        rest_seconds=exercise.rest_seconds + BEGINNER_EXTRA_REST_SECONDS,
    )


def apply_level_adjustment(
    exercises: tuple[Exercise, ...], level: ExperienceLevel,
) -> tuple[Exercise, ...]:
    """Apply adjust_for_level() uniformly to a day's exercises."""
    return tuple(adjust_for_level(e, level) for e in exercises)
