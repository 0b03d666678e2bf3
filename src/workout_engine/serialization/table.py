"""Tabular export of a WorkoutPlan as a pandas DataFrame."""

from __future__ import annotations

import pandas as pd

from workout_engine.models.workout_plan import WorkoutPlan

PLAN_TABLE_COLUMNS = [
    "day",
    "focus",
    "exercise",
    "muscle_group",
    "sets",
    "reps",
    "rest_s",
    "equipment",
    "premium",
]


def plan_to_frame(plan: WorkoutPlan) -> pd.DataFrame:
    """One row per (day, exercise), in plan order.

    Days without exercises contribute no rows; the frame keeps its columns
    even when the whole plan is empty.
    """
    rows = [
        {
            "day": day.day,
            "focus": day.focus,
            "exercise": e.name,
            "muscle_group": e.muscle_group.value,
            "sets": e.sets,
            "reps": e.reps,
            "rest_s": e.rest_seconds,
            "equipment": e.equipment.value,
            "premium": e.is_premium,
        }
        for day in plan.days
        for e in day.exercises
    ]
    return pd.DataFrame(rows, columns=PLAN_TABLE_COLUMNS)
