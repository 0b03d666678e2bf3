"""Build UserProfiles from questionnaire answers.

Answers arrive as plain dicts (decoded JSON). Keys follow the app's
camelCase names; snake_case spellings are accepted too.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from workout_engine.exceptions import InvalidProfileError
from workout_engine.models.enums import Equipment, ExperienceLevel, Goal
from workout_engine.models.profile import UserProfile

_E = TypeVar("_E", bound=Enum)

# Used when the questionnaire skipped body measurements
DEFAULT_AGE = 30
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0


def _get(answers: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in answers:
            return answers[key]
    return default


def _parse_enum(enum_cls: type[_E], value: Any, field: str) -> _E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise InvalidProfileError(
            f"Invalid {field} {value!r}; expected one of: {allowed}", field=field,
        ) from None


def _parse_number(value: Any, field: str, cast: type = float) -> Any:
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise InvalidProfileError(f"Invalid {field} {value!r}", field=field) from None


def build_user_profile(answers: dict) -> UserProfile:
    """Build a frozen UserProfile from questionnaire answers.

    Required keys: ``goal``, ``level``, ``workoutMinutes`` (or
    ``workout_minutes``). ``equipment`` defaults to an empty list; age,
    weight and height fall back to module defaults.

    Raises:
        InvalidProfileError: On a missing required key, an unknown goal,
            level or equipment token, a fractional or non-positive session
            length, or a non-positive body weight.
    """
    for field, keys in (
        ("goal", ("goal",)),
        ("level", ("level",)),
        ("workout_minutes", ("workoutMinutes", "workout_minutes")),
    ):
        if _get(answers, *keys) is None:
            raise InvalidProfileError(f"Missing required answer: {field}", field=field)

    goal = _parse_enum(Goal, answers["goal"], "goal")
    level = _parse_enum(ExperienceLevel, answers["level"], "level")

    raw_equipment = _get(answers, "equipment", default=[]) or []
    if isinstance(raw_equipment, str):
        raw_equipment = [raw_equipment]
    equipment = frozenset(
        _parse_enum(Equipment, item, "equipment") for item in raw_equipment
    )

    raw_minutes = _get(answers, "workoutMinutes", "workout_minutes")
    minutes = _parse_number(raw_minutes, "workout_minutes")
    if not minutes.is_integer():
        raise InvalidProfileError(
            f"workout_minutes must be a whole number, got {raw_minutes!r}",
            field="workout_minutes",
        )
    if minutes <= 0:
        raise InvalidProfileError(
            f"workout_minutes must be positive, got {raw_minutes!r}",
            field="workout_minutes",
        )

    weight = _parse_number(
        _get(answers, "weight", "weight_kg", default=DEFAULT_WEIGHT_KG), "weight",
    )
    if weight <= 0:
        raise InvalidProfileError(
            f"weight must be positive, got {weight}", field="weight",
        )

    return UserProfile(
        age=_parse_number(_get(answers, "age", default=DEFAULT_AGE), "age", int),
        weight_kg=weight,
        height_cm=_parse_number(
            _get(answers, "height", "height_cm", default=DEFAULT_HEIGHT_CM), "height",
        ),
        goal=goal,
        level=level,
        workout_minutes=int(minutes),
        equipment=equipment,
    )


def load_profile(path: str | Path) -> UserProfile:
    """Load questionnaire answers from a JSON file and build a UserProfile."""
    with open(path) as f:
        try:
            answers = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidProfileError(f"Profile file {path} is not valid JSON: {exc}") from exc
    if not isinstance(answers, dict):
        raise InvalidProfileError(f"Profile file {path} must contain a JSON object")
    return build_user_profile(answers)
