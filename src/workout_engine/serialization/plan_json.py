"""JSON serialization for WorkoutPlan and WorkoutLog objects.

Plans use the app's camelCase wire shape so stored plans written by the web
client and by this package are interchangeable.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from typing import Any

from workout_engine.exceptions import PlanFormatError
from workout_engine.models.enums import Equipment, ExperienceLevel, Goal, MuscleGroup
from workout_engine.models.exercise import Exercise
from workout_engine.models.workout_log import WorkoutLog
from workout_engine.models.workout_plan import WorkoutDay, WorkoutPlan


def plan_to_dict(plan: WorkoutPlan) -> dict:
    """Convert a WorkoutPlan to its camelCase dict form."""
    return {
        "id": plan.plan_id,
        "name": plan.name,
        "goal": plan.goal.value,
        "level": plan.level.value,
        "daysPerWeek": plan.days_per_week,
        "days": [_day_to_dict(d) for d in plan.days],
    }


def plan_to_json_string(plan: WorkoutPlan, indent: int = 2) -> str:
    """Convert a WorkoutPlan to a JSON string."""
    return json.dumps(plan_to_dict(plan), indent=indent)


def plan_from_dict(data: dict) -> WorkoutPlan:
    """Rebuild a WorkoutPlan from its dict form.

    ``daysPerWeek`` is ignored on input; it is always derived from ``days``.

    Raises:
        PlanFormatError: If a required key is missing or a value is invalid.
    """
    try:
        return WorkoutPlan(
            plan_id=str(data["id"]),
            name=data["name"],
            goal=Goal(data["goal"]),
            level=ExperienceLevel(data["level"]),
            days=tuple(_day_from_dict(d) for d in data["days"]),
        )
    except KeyError as exc:
        raise PlanFormatError(f"Missing key in plan data: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise PlanFormatError(f"Invalid plan data: {exc}") from exc


def log_to_dict(log: WorkoutLog) -> dict:
    """Convert a WorkoutLog to a ``workout_logs`` row."""
    return {
        "day_id": log.day_id,
        "completed_exercises": list(log.completed_exercises),
        "total_minutes": log.total_minutes,
        "calories_burned": log.calories_burned,
        "water_ml": log.water_ml,
        "notes": log.notes,
        "logged_at": log.logged_on.isoformat(),
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _exercise_to_dict(exercise: Exercise) -> dict:
    return {
        "id": exercise.exercise_id,
        "name": exercise.name,
        "sets": exercise.sets,
        "reps": exercise.reps,
        "muscleGroup": exercise.muscle_group.value,
        "restSeconds": exercise.rest_seconds,
        "equipment": exercise.equipment.value,
        "isPremium": exercise.is_premium,
        "caloriesPerSet": exercise.calories_per_set,
    }


def _day_to_dict(day: WorkoutDay) -> dict:
    return {
        "id": day.day_id,
        "day": day.day,
        "focus": day.focus,
        "exercises": [_exercise_to_dict(e) for e in day.exercises],
        "warmup": list(day.warmup),
        "cooldown": list(day.cooldown),
    }


def _exercise_from_dict(data: dict[str, Any]) -> Exercise:
    return Exercise(
        exercise_id=str(data["id"]),
        name=data["name"],
        sets=int(data["sets"]),
        reps=str(data["reps"]),
        muscle_group=MuscleGroup(data["muscleGroup"]),
        rest_seconds=int(data["restSeconds"]),
        equipment=Equipment(data["equipment"]),
        is_premium=bool(data.get("isPremium", False)),
        calories_per_set=float(data["caloriesPerSet"]),
    )


def _day_from_dict(data: dict[str, Any]) -> WorkoutDay:
    return WorkoutDay(
        day_id=str(data["id"]),
        day=data["day"],
        focus=data["focus"],
        exercises=tuple(_exercise_from_dict(e) for e in data.get("exercises", [])),
        warmup=tuple(data.get("warmup", ())),
        cooldown=tuple(data.get("cooldown", ())),
    )
