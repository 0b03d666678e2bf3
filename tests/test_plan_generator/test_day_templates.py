"""Tests for the goal → day template table."""

from __future__ import annotations

from workout_engine.models.enums import ExerciseCategory, Goal
from workout_engine.plan_generator.day_templates import DAY_TEMPLATES, get_day_templates


class TestDayTemplates:
    def test_every_goal_has_templates(self) -> None:
        for goal in Goal:
            assert get_day_templates(goal)

    def test_day_counts(self) -> None:
        assert len(get_day_templates(Goal.BULK)) == 4
        assert len(get_day_templates(Goal.CUT)) == 3
        assert len(get_day_templates(Goal.MAINTAIN)) == 3

    def test_bulk_split(self) -> None:
        days = get_day_templates(Goal.BULK)
        assert [d.day for d in days] == ["Monday", "Wednesday", "Friday", "Saturday"]
        assert [d.focus for d in days] == [
            "Chest & Triceps", "Back & Biceps", "Legs & Shoulders", "Arms & Core",
        ]
        assert days[0].pool == (ExerciseCategory.CHEST, ExerciseCategory.ARMS)
        assert days[2].pool == (ExerciseCategory.LEGS, ExerciseCategory.SHOULDERS)

    def test_cut_covers_whole_body(self) -> None:
        covered = {c for d in get_day_templates(Goal.CUT) for c in d.pool}
        assert covered == set(ExerciseCategory)

    def test_cut_days_have_four_groups(self) -> None:
        for template in get_day_templates(Goal.CUT):
            assert len(template.pool) == 4

    def test_maintain_split(self) -> None:
        days = get_day_templates(Goal.MAINTAIN)
        assert [d.focus for d in days] == ["Upper Body", "Lower Body", "Full Body"]
        assert days[1].pool == (ExerciseCategory.LEGS, ExerciseCategory.CORE)
        assert days[2].pool == (
            ExerciseCategory.CHEST,
            ExerciseCategory.BACK,
            ExerciseCategory.LEGS,
            ExerciseCategory.ARMS,
        )

    def test_table_keys(self) -> None:
        assert set(DAY_TEMPLATES) == set(Goal)
