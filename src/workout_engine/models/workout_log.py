"""WorkoutLog — the record produced when a workout session is finished."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class WorkoutLog:
    """Summary of one finished session, shaped like a ``workout_logs`` row."""

    day_id: str
    completed_exercises: tuple[str, ...] = field(default_factory=tuple)
    total_minutes: int = 0
    calories_burned: int = 0
    water_ml: int = 0
    notes: str = ""
    logged_on: date = field(default_factory=date.today)
