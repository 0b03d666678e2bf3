"""Free-tier limits consulted by the app's paywall.

The plan generator never calls these: it returns premium exercises to every
user and leaves gating to the caller.
"""

from __future__ import annotations

from workout_engine.models.enums import MAX_FREE_PLANS
from workout_engine.models.exercise import Exercise


def can_create_plan(
    is_premium: bool,
    existing_plan_count: int,
    max_free_plans: int = MAX_FREE_PLANS,
) -> bool:
    """Whether a user may save another plan."""
    return is_premium or existing_plan_count < max_free_plans


def is_exercise_locked(exercise: Exercise, is_premium: bool) -> bool:
    """Premium exercises are locked for free users."""
    return exercise.is_premium and not is_premium
