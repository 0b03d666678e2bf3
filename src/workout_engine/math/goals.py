"""Streak badges, consistency badges and daily goal progress."""

from __future__ import annotations

from workout_engine.models.enums import (
    CONSISTENCY_RISING_PCT,
    CONSISTENCY_STAR_PCT,
    STREAK_BUILDING_DAYS,
    STREAK_ON_FIRE_DAYS,
    ConsistencyBadge,
    StreakBadge,
)


def streak_badge(days: int) -> StreakBadge:
    """Badge for a workout or water streak length in days."""
    if days >= STREAK_ON_FIRE_DAYS:
        return StreakBadge.ON_FIRE
    if days >= STREAK_BUILDING_DAYS:
        return StreakBadge.BUILDING
    return StreakBadge.STARTING


def consistency_badge(score: float) -> ConsistencyBadge:
    """Badge for a 0-100 consistency score."""
    if score >= CONSISTENCY_STAR_PCT:
        return ConsistencyBadge.STAR
    if score >= CONSISTENCY_RISING_PCT:
        return ConsistencyBadge.RISING
    return ConsistencyBadge.FOCUS


def goal_progress_pct(amount: float, goal: float) -> float:
    """Progress toward a daily goal (water ml, calories), capped at 100.

    Negative running totals (e.g. after undoing a water entry) count as 0.

    Raises:
        ValueError: If goal is not positive.
    """
    if goal <= 0:
        raise ValueError(f"goal must be positive, got {goal}")
    return min(100.0, max(0.0, amount) / goal * 100)


def goal_reached(amount: float, goal: float) -> bool:
    """True once ``amount`` meets or exceeds the daily ``goal``."""
    return goal_progress_pct(amount, goal) >= 100.0
