"""Tests for equipment resolution, count bands and pool truncation."""

from __future__ import annotations

import pytest

from workout_engine.models.enums import Equipment, ExerciseCategory, MuscleGroup
from workout_engine.plan_generator.selection import (
    exercise_count_for_minutes,
    pick_exercises,
    resolve_equipment,
)

_ALL_EQUIPMENT = frozenset(Equipment)


class TestExerciseCount:
    @pytest.mark.parametrize(
        ("minutes", "expected"),
        [
            (1, 4),
            (20, 4),
            (30, 4),
            (31, 5),
            (45, 5),
            (46, 6),
            (60, 6),
            (61, 7),
            (90, 7),
            (240, 7),
        ],
    )
    def test_bands(self, minutes: int, expected: int) -> None:
        assert exercise_count_for_minutes(minutes) == expected


class TestResolveEquipment:
    def test_empty_gets_none(self) -> None:
        assert resolve_equipment([]) == frozenset({Equipment.NONE})

    def test_user_equipment_kept(self) -> None:
        resolved = resolve_equipment({Equipment.DUMBBELLS})
        assert resolved == frozenset({Equipment.DUMBBELLS, Equipment.NONE})

    def test_none_not_duplicated(self) -> None:
        assert resolve_equipment([Equipment.NONE]) == frozenset({Equipment.NONE})


class TestPickExercises:
    def test_filters_by_equipment(self) -> None:
        picked = pick_exercises(
            (ExerciseCategory.CHEST,), resolve_equipment([]), 10,
        )
        assert [e.exercise_id for e in picked] == ["pu"]

    def test_concatenates_in_pool_order(self) -> None:
        picked = pick_exercises(
            (ExerciseCategory.CHEST, ExerciseCategory.ARMS),
            resolve_equipment({Equipment.DUMBBELLS}),
            10,
        )
        assert [e.exercise_id for e in picked] == ["ip", "pu", "hc", "oe"]

    def test_truncates_to_count(self) -> None:
        picked = pick_exercises(
            (ExerciseCategory.CORE,), resolve_equipment([]), 2,
        )
        assert [e.exercise_id for e in picked] == ["pl", "cr"]

    def test_short_pool_returns_fewer(self) -> None:
        picked = pick_exercises(
            (ExerciseCategory.BACK, ExerciseCategory.ARMS), resolve_equipment([]), 5,
        )
        assert picked == ()

    def test_later_groups_can_starve(self) -> None:
        picked = pick_exercises(
            (ExerciseCategory.LEGS, ExerciseCategory.CORE), _ALL_EQUIPMENT, 6,
        )
        assert len(picked) == 6
        assert all(e.muscle_group == MuscleGroup.LEGS for e in picked)

    def test_zero_count(self) -> None:
        assert pick_exercises((ExerciseCategory.CORE,), _ALL_EQUIPMENT, 0) == ()
