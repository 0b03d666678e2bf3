"""Tests for free-tier limits."""

from __future__ import annotations

from workout_engine.catalog import get_exercise
from workout_engine.entitlements import can_create_plan, is_exercise_locked


class TestCanCreatePlan:
    def test_free_user_under_limit(self) -> None:
        assert can_create_plan(is_premium=False, existing_plan_count=1)

    def test_free_user_at_limit(self) -> None:
        assert not can_create_plan(is_premium=False, existing_plan_count=2)

    def test_premium_unlimited(self) -> None:
        assert can_create_plan(is_premium=True, existing_plan_count=50)

    def test_custom_limit(self) -> None:
        assert can_create_plan(False, 4, max_free_plans=5)


class TestExerciseLock:
    def test_premium_exercise_locked_for_free_user(self) -> None:
        assert is_exercise_locked(get_exercise("cf"), is_premium=False)

    def test_premium_exercise_open_for_premium_user(self) -> None:
        assert not is_exercise_locked(get_exercise("cf"), is_premium=True)

    def test_free_exercise_never_locked(self) -> None:
        assert not is_exercise_locked(get_exercise("bp"), is_premium=False)
