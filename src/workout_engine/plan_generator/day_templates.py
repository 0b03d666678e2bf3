"""Day templates — the fixed split for each training goal.

Each template names the weekday, the human-readable focus and the ordered
muscle-group pool the PlanGenerator draws that day's exercises from. Pool
order is significant: selection truncates the concatenated pool, so earlier
categories fill the day first.
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import ExerciseCategory, Goal

_CHEST = ExerciseCategory.CHEST
_BACK = ExerciseCategory.BACK
_SHOULDERS = ExerciseCategory.SHOULDERS
_LEGS = ExerciseCategory.LEGS
_ARMS = ExerciseCategory.ARMS
_CORE = ExerciseCategory.CORE


@dataclass(frozen=True)
class DayTemplate:
    """Template for a single training day.

    Attributes:
        day: Weekday label shown to the user.
        focus: Muscle-group summary for the day.
        pool: Catalog categories to draw from, in priority order.
    """

    day: str
    focus: str
    pool: tuple[ExerciseCategory, ...]


# ---------------------------------------------------------------------------
# Template definitions for all 3 goals
# ---------------------------------------------------------------------------

DAY_TEMPLATES: dict[Goal, tuple[DayTemplate, ...]] = {
    # BULK: 4-day body-part split
    Goal.BULK: (
        DayTemplate("Monday", "Chest & Triceps", (_CHEST, _ARMS)),
        DayTemplate("Wednesday", "Back & Biceps", (_BACK, _ARMS)),
        DayTemplate("Friday", "Legs & Shoulders", (_LEGS, _SHOULDERS)),
        DayTemplate("Saturday", "Arms & Core", (_ARMS, _CORE)),
    ),

    # CUT: 3 full-body days that together cover every group
    Goal.CUT: (
        DayTemplate("Monday", "Full Body A", (_CHEST, _BACK, _LEGS, _CORE)),
        DayTemplate("Wednesday", "Full Body B", (_SHOULDERS, _ARMS, _LEGS, _CORE)),
        DayTemplate("Friday", "Full Body C", (_CHEST, _BACK, _SHOULDERS, _CORE)),
    ),

    # MAINTAIN: upper / lower / full
    Goal.MAINTAIN: (
        DayTemplate("Monday", "Upper Body", (_CHEST, _BACK, _SHOULDERS)),
        DayTemplate("Wednesday", "Lower Body", (_LEGS, _CORE)),
        DayTemplate("Friday", "Full Body", (_CHEST, _BACK, _LEGS, _ARMS)),
    ),
}


def get_day_templates(goal: Goal) -> tuple[DayTemplate, ...]:
    """Look up the day templates for a training goal.

    Args:
        goal: The user's goal.

    Returns:
        The goal's DayTemplates in weekday order.

    Raises:
        KeyError: If no templates are defined for the goal.
    """
    return DAY_TEMPLATES[goal]
