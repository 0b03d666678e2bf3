"""Data models for the workout engine."""

from workout_engine.models.enums import (
    ConsistencyBadge,
    Equipment,
    ExerciseCategory,
    ExperienceLevel,
    Goal,
    MuscleGroup,
    StreakBadge,
)
from workout_engine.models.exercise import Exercise
from workout_engine.models.profile import UserProfile
from workout_engine.models.workout_log import WorkoutLog
from workout_engine.models.workout_plan import WorkoutDay, WorkoutPlan

__all__ = [
    "ConsistencyBadge",
    "Equipment",
    "Exercise",
    "ExerciseCategory",
    "ExperienceLevel",
    "Goal",
    "MuscleGroup",
    "StreakBadge",
    "UserProfile",
    "WorkoutDay",
    "WorkoutLog",
    "WorkoutPlan",
]
