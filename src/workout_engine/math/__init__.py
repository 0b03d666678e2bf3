"""Pure calculators for session calories, XP levels, streaks and goals."""
