"""Workout plan models: WorkoutDay and WorkoutPlan."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.enums import ExperienceLevel, Goal
from workout_engine.models.exercise import Exercise


@dataclass(frozen=True)
class WorkoutDay:
    """One training day of a plan.

    ``exercises`` is in selection order. It may be empty when nothing in the
    day's muscle-group pool matches the user's equipment.
    """

    day_id: str
    day: str
    focus: str
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    warmup: tuple[str, ...] = field(default_factory=tuple)
    cooldown: tuple[str, ...] = field(default_factory=tuple)

    @property
    def exercise_ids(self) -> tuple[str, ...]:
        return tuple(e.exercise_id for e in self.exercises)


@dataclass(frozen=True)
class WorkoutPlan:
    """Output of PlanGenerator.generate(): a named multi-day plan."""

    plan_id: str
    name: str
    goal: Goal
    level: ExperienceLevel
    days: tuple[WorkoutDay, ...] = field(default_factory=tuple)

    @property
    def days_per_week(self) -> int:
        """Always the number of days; there is no separate field to drift."""
        return len(self.days)

    def get_day(self, day_id: str) -> WorkoutDay | None:
        for day in self.days:
            if day.day_id == day_id:
                return day
        return None
