"""Exercise — a single immutable catalog entry."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import Equipment, MuscleGroup


@dataclass(frozen=True)
class Exercise:
    """One exercise as stored in the catalog or carried on a plan.

    ``sets`` and ``rest_seconds`` are catalog defaults until the plan
    generator applies a level adjustment. ``reps`` stays free text because
    some entries are time-based (e.g. "45-60s").
    ``calories_per_set`` assumes a 70 kg reference body weight.
    """

    exercise_id: str
    name: str
    sets: int
    reps: str
    muscle_group: MuscleGroup
    rest_seconds: int
    equipment: Equipment
    is_premium: bool
    calories_per_set: float

    def __post_init__(self) -> None:
        if self.sets < 1:
            raise ValueError(f"sets must be >= 1, got {self.sets}")
        if self.rest_seconds < 0:
            raise ValueError(f"rest_seconds must be >= 0, got {self.rest_seconds}")
        if self.calories_per_set <= 0:
            raise ValueError(
                f"calories_per_set must be positive, got {self.calories_per_set}"
            )
