"""Shared test fixtures: questionnaire profiles and generated plans."""

from __future__ import annotations

import pytest

from workout_engine.models.enums import Equipment, ExperienceLevel, Goal
from workout_engine.models.profile import UserProfile
from workout_engine.models.workout_plan import WorkoutPlan
from workout_engine.plan_generator.generator import PlanGenerator


@pytest.fixture
def beginner_dumbbell_profile() -> UserProfile:
    """Beginner bulking at home with dumbbells, 45-minute sessions."""
    return UserProfile(
        age=24,
        weight_kg=80.0,
        height_cm=180.0,
        goal=Goal.BULK,
        level=ExperienceLevel.BEGINNER,
        workout_minutes=45,
        equipment=frozenset({Equipment.DUMBBELLS}),
    )


@pytest.fixture
def gym_cut_profile() -> UserProfile:
    """Intermediate cutting with full gym access, 90-minute sessions."""
    return UserProfile(
        age=31,
        weight_kg=70.0,
        height_cm=172.0,
        goal=Goal.CUT,
        level=ExperienceLevel.INTERMEDIATE,
        workout_minutes=90,
        equipment=frozenset({Equipment.GYM}),
    )


@pytest.fixture
def bodyweight_profile() -> UserProfile:
    """No equipment at all, short 20-minute sessions."""
    return UserProfile(
        age=40,
        weight_kg=65.0,
        height_cm=165.0,
        goal=Goal.CUT,
        level=ExperienceLevel.INTERMEDIATE,
        workout_minutes=20,
        equipment=frozenset(),
    )


@pytest.fixture
def fixed_id_generator() -> PlanGenerator:
    """Generator with a predictable plan id."""
    return PlanGenerator(id_factory=lambda: "plan-fixed")


@pytest.fixture
def beginner_bulk_plan(
    fixed_id_generator: PlanGenerator, beginner_dumbbell_profile: UserProfile,
) -> WorkoutPlan:
    return fixed_id_generator.generate(beginner_dumbbell_profile)
