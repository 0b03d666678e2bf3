"""PlanGenerator — turns a UserProfile into a multi-day WorkoutPlan.

Selection is a fixed pipeline over the static catalog: resolve equipment,
derive the per-day exercise count, look up the goal's day templates,
truncate each day's pool, then scale for experience level.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from workout_engine.models.enums import COOLDOWN_STEPS, WARMUP_STEPS, Goal
from workout_engine.models.profile import UserProfile
from workout_engine.models.workout_plan import WorkoutDay, WorkoutPlan
from workout_engine.plan_generator.day_templates import get_day_templates
from workout_engine.plan_generator.level_adjustment import apply_level_adjustment
from workout_engine.plan_generator.selection import (
    exercise_count_for_minutes,
    pick_exercises,
    resolve_equipment,
)

logger = logging.getLogger(__name__)


def _new_plan_id() -> str:
    return uuid.uuid4().hex


def plan_name_for_goal(goal: Goal) -> str:
    """Display name for a plan, e.g. Goal.BULK -> 'Bulk Plan'."""
    return f"{goal.value.capitalize()} Plan"


class PlanGenerator:
    """Generates workout plans from user profiles.

    Output depends only on the profile and the catalog, except for the plan
    id which is fresh on every call. Premium flags are ignored here; gating
    is the caller's concern.

    Usage::

        generator = PlanGenerator()
        plan = generator.generate(profile)
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self.id_factory = id_factory or _new_plan_id

    def generate(self, profile: UserProfile) -> WorkoutPlan:
        """Build a complete plan for one profile.

        Algorithm:
        1. Resolve equipment (user's set plus "none")
        2. Exercise count from workout_minutes bands
        3. Look up day templates for profile.goal
        4. Per day: concatenate pool categories, filter by equipment, truncate
        5. Beginner level: -1 set (min 2), +15 s rest on every exercise
        6. Attach warmup/cooldown, name the plan, assign a fresh id

        Args:
            profile: Frozen questionnaire answers.

        Returns:
            A WorkoutPlan with 4 days for bulk and 3 for cut or maintain.
        """
        available = resolve_equipment(profile.equipment)
        count = exercise_count_for_minutes(profile.workout_minutes)

        days: list[WorkoutDay] = []
        for index, template in enumerate(get_day_templates(profile.goal), start=1):
            exercises = pick_exercises(template.pool, available, count)
            exercises = apply_level_adjustment(exercises, profile.level)
            if not exercises:
                logger.debug(
                    "No exercises for %s (%s) with equipment %s",
                    template.day,
                    template.focus,
                    sorted(e.value for e in available),
                )
            days.append(WorkoutDay(
                day_id=f"d{index}",
                day=template.day,
                focus=template.focus,
                exercises=exercises,
                warmup=WARMUP_STEPS,
                cooldown=COOLDOWN_STEPS,
            ))

        plan = WorkoutPlan(
            plan_id=self.id_factory(),
            name=plan_name_for_goal(profile.goal),
            goal=profile.goal,
            level=profile.level,
            days=tuple(days),
        )
        logger.debug(
            "Generated %s %s: %d days, up to %d exercises per day",
            plan.name,
            plan.plan_id,
            plan.days_per_week,
            count,
        )
        return plan


_DEFAULT_GENERATOR = PlanGenerator()


def generate_workout_plan(profile: UserProfile) -> WorkoutPlan:
    """Generate a plan with the default generator (random uuid4 plan ids)."""
    return _DEFAULT_GENERATOR.generate(profile)
