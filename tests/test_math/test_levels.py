"""Tests for XP level tiers."""

from __future__ import annotations

import pytest

from workout_engine.math.levels import TIERS, get_level_info


class TestLevelTiers:
    def test_four_tiers_ascending(self) -> None:
        assert [t.name for t in TIERS] == ["Beginner", "Intermediate", "Advanced", "Elite"]
        assert [t.min_xp for t in TIERS] == [0, 500, 2000, 5000]

    @pytest.mark.parametrize(
        ("xp", "name"),
        [
            (0, "Beginner"),
            (499, "Beginner"),
            (500, "Intermediate"),
            (1999, "Intermediate"),
            (2000, "Advanced"),
            (4999, "Advanced"),
            (5000, "Elite"),
            (100000, "Elite"),
        ],
    )
    def test_tier_boundaries(self, xp: int, name: str) -> None:
        assert get_level_info(xp).current.name == name


class TestLevelProgress:
    def test_advanced_example(self) -> None:
        info = get_level_info(2500)
        assert info.current.name == "Advanced"
        assert info.next_tier.name == "Elite"
        assert info.progress_pct == pytest.approx(16.666, abs=0.01)
        assert info.xp_to_next == 2500

    def test_start_of_tier_is_zero(self) -> None:
        assert get_level_info(500).progress_pct == 0.0

    def test_beginner_midway(self) -> None:
        info = get_level_info(250)
        assert info.progress_pct == pytest.approx(50.0)
        assert info.xp_in_level == 250
        assert info.xp_for_next == 500

    def test_top_tier(self) -> None:
        info = get_level_info(7000)
        assert info.next_tier is None
        assert info.progress_pct == 100.0
        assert info.xp_to_next is None

    def test_negative_xp_clamped(self) -> None:
        info = get_level_info(-50)
        assert info.current.name == "Beginner"
        assert info.progress_pct == 0.0

    def test_progress_in_range(self) -> None:
        for xp in range(-100, 6000, 37):
            assert 0.0 <= get_level_info(xp).progress_pct <= 100.0
