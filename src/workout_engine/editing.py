"""Plan editing — replacement suggestions and copy-on-write day edits.

Plans are frozen, so every edit returns a new WorkoutPlan with the targeted
day rebuilt and everything else (including plan_id) carried over.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable

from workout_engine.catalog import get_all_exercises
from workout_engine.models.enums import (
    REPLACEMENT_ID_SUFFIX,
    REPLACEMENT_SUGGESTION_LIMIT,
)
from workout_engine.models.exercise import Exercise
from workout_engine.models.workout_plan import WorkoutDay, WorkoutPlan

logger = logging.getLogger(__name__)


def suggest_replacements(exercise: Exercise) -> tuple[Exercise, ...]:
    """Up to 4 catalog exercises hitting the same muscle group.

    The input exercise itself is excluded. Results are in catalog order and
    are not filtered by equipment or premium status.
    """
    candidates = [
        e for e in get_all_exercises()
        if e.muscle_group == exercise.muscle_group
        and e.exercise_id != exercise.exercise_id
    ]
    return tuple(candidates[:REPLACEMENT_SUGGESTION_LIMIT])


def replace_exercise(
    plan: WorkoutPlan,
    day_id: str,
    old_exercise_id: str,
    new_exercise: Exercise,
) -> WorkoutPlan:
    """Swap one exercise in a day, keeping its position.

    The replacement is tagged with a derived id (``"<id>_r"``) so it never
    collides with the original. Unknown day or exercise ids leave the plan's
    content unchanged.
    """
    tagged = dataclasses.replace(
        new_exercise,
        exercise_id=new_exercise.exercise_id + REPLACEMENT_ID_SUFFIX,
    )

    def edit(day: WorkoutDay) -> WorkoutDay:
        return dataclasses.replace(day, exercises=tuple(
            tagged if e.exercise_id == old_exercise_id else e
            for e in day.exercises
        ))

    logger.debug(
        "Replacing %s with %s on %s", old_exercise_id, tagged.exercise_id, day_id,
    )
    return _edit_day(plan, day_id, edit)


def remove_exercise(plan: WorkoutPlan, day_id: str, exercise_id: str) -> WorkoutPlan:
    """Drop one exercise from a day."""

    def edit(day: WorkoutDay) -> WorkoutDay:
        return dataclasses.replace(day, exercises=tuple(
            e for e in day.exercises if e.exercise_id != exercise_id
        ))

    logger.debug("Removing %s from %s", exercise_id, day_id)
    return _edit_day(plan, day_id, edit)


def _edit_day(
    plan: WorkoutPlan,
    day_id: str,
    edit: Callable[[WorkoutDay], WorkoutDay],
) -> WorkoutPlan:
    days = tuple(edit(d) if d.day_id == day_id else d for d in plan.days)
    return dataclasses.replace(plan, days=days)
