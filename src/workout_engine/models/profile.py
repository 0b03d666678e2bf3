"""UserProfile — questionnaire answers fed into plan generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.enums import Equipment, ExperienceLevel, Goal


@dataclass(frozen=True)
class UserProfile:
    """Frozen snapshot of one user's questionnaire answers.

    Only ``goal``, ``level``, ``equipment`` and ``workout_minutes`` drive
    exercise selection; ``weight_kg`` scales session calories. ``age`` and
    ``height_cm`` are carried for the surrounding app.
    """

    age: int
    weight_kg: float
    height_cm: float
    goal: Goal
    level: ExperienceLevel
    workout_minutes: int
    equipment: frozenset[Equipment] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.workout_minutes <= 0:
            raise ValueError(
                f"workout_minutes must be positive, got {self.workout_minutes}"
            )
        if self.weight_kg <= 0:
            raise ValueError(f"weight_kg must be positive, got {self.weight_kg}")
        # Raw tokens ("bulk", "dumbbells") are coerced to their enum members
        object.__setattr__(self, "goal", Goal(self.goal))
        object.__setattr__(self, "level", ExperienceLevel(self.level))
        object.__setattr__(
            self, "equipment", frozenset(Equipment(e) for e in self.equipment),
        )
