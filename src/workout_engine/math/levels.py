"""XP level tiers.

Tiers: Beginner (0), Intermediate (500), Advanced (2000), Elite (5000).
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import LEVEL_TIERS


@dataclass(frozen=True)
class LevelTier:
    name: str
    min_xp: int


@dataclass(frozen=True)
class LevelInfo:
    """Where an XP total sits in the tier ladder.

    ``next_tier`` is None at the top tier, where progress is 100.
    """

    current: LevelTier
    next_tier: LevelTier | None
    xp_in_level: int
    xp_for_next: int
    progress_pct: float

    @property
    def xp_to_next(self) -> int | None:
        """XP still needed for the next tier, or None at the top."""
        if self.next_tier is None:
            return None
        return self.xp_for_next - self.xp_in_level


TIERS: tuple[LevelTier, ...] = tuple(LevelTier(name, xp) for name, xp in LEVEL_TIERS)


def get_level_info(xp: int) -> LevelInfo:
    """Map cumulative XP to its tier and the progress toward the next one.

    Args:
        xp: Cumulative experience points. Values below 0 count as Beginner.

    Returns:
        LevelInfo with progress clamped to [0, 100].

    Example:
        2500 XP → Advanced, progress (2500 - 2000) / (5000 - 2000) ≈ 16.7 %.
    """
    index = 0
    for i in range(len(TIERS) - 1, -1, -1):
        if xp >= TIERS[i].min_xp:
            index = i
            break

    current = TIERS[index]
    next_tier = TIERS[index + 1] if index + 1 < len(TIERS) else None

    xp_in_level = xp - current.min_xp
    if next_tier is None:
        return LevelInfo(
            current=current,
            next_tier=None,
            xp_in_level=xp_in_level,
            xp_for_next=0,
            progress_pct=100.0,
        )

    xp_for_next = next_tier.min_xp - current.min_xp
    progress = min(100.0, max(0.0, xp_in_level / xp_for_next * 100))
    return LevelInfo(
        current=current,
        next_tier=next_tier,
        xp_in_level=xp_in_level,
        xp_for_next=xp_for_next,
        progress_pct=progress,
    )
