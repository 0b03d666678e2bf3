"""Enumerations and fixed constants for the workout engine.

Every threshold that drives plan generation or the progress calculators
lives here so the rules read as a single table.
"""

from enum import Enum


class Goal(str, Enum):
    """Training goal chosen in the questionnaire."""

    BULK = "bulk"
    CUT = "cut"
    MAINTAIN = "maintain"


class ExperienceLevel(str, Enum):
    """Self-reported training experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"


class Equipment(str, Enum):
    """Equipment an exercise requires (or a user has available)."""

    NONE = "none"
    DUMBBELLS = "dumbbells"
    RESISTANCE_BANDS = "resistance bands"
    GYM = "gym"


class MuscleGroup(str, Enum):
    """Primary muscle group tag shown on each exercise."""

    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    LEGS = "Legs"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    CORE = "Core"


class ExerciseCategory(str, Enum):
    """Catalog buckets used to build a day's muscle-group pool.

    ARMS holds both Biceps and Triceps exercises.
    """

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    LEGS = "legs"
    ARMS = "arms"
    CORE = "core"


class StreakBadge(str, Enum):
    """Badge shown next to a workout or water streak."""

    STARTING = "starting"
    BUILDING = "building"
    ON_FIRE = "on_fire"


class ConsistencyBadge(str, Enum):
    """Badge shown next to the consistency score."""

    FOCUS = "focus"
    RISING = "rising"
    STAR = "star"


# ---------------------------------------------------------------------------
# Plan generation
# ---------------------------------------------------------------------------

# Session length → exercises per day. Upper bounds are inclusive.
EXERCISE_COUNT_BANDS: tuple[tuple[int, int], ...] = (
    (30, 4),
    (45, 5),
    (60, 6),
)
MAX_EXERCISE_COUNT = 7  # Anything longer than the last band

# Beginner intensity scaling, applied after selection
BEGINNER_SET_REDUCTION = 1
BEGINNER_MIN_SETS = 2
BEGINNER_EXTRA_REST_SECONDS = 15

WARMUP_STEPS: tuple[str, ...] = (
    "5 min light cardio",
    "Dynamic stretching",
    "Arm circles & leg swings",
)
COOLDOWN_STEPS: tuple[str, ...] = (
    "5 min walking",
    "Static stretching",
    "Deep breathing",
)

# ---------------------------------------------------------------------------
# Plan editing
# ---------------------------------------------------------------------------
REPLACEMENT_SUGGESTION_LIMIT = 4
REPLACEMENT_ID_SUFFIX = "_r"

# ---------------------------------------------------------------------------
# Calories
# ---------------------------------------------------------------------------
# Catalog calories_per_set values assume this body weight; scaling is linear.
REFERENCE_BODY_WEIGHT_KG = 70.0

# ---------------------------------------------------------------------------
# XP level tiers — (name, minimum XP), ascending
# ---------------------------------------------------------------------------
LEVEL_TIERS: tuple[tuple[str, int], ...] = (
    ("Beginner", 0),
    ("Intermediate", 500),
    ("Advanced", 2000),
    ("Elite", 5000),
)

# ---------------------------------------------------------------------------
# Streaks, consistency and daily goals
# ---------------------------------------------------------------------------
STREAK_ON_FIRE_DAYS = 7
STREAK_BUILDING_DAYS = 3
CONSISTENCY_STAR_PCT = 80
CONSISTENCY_RISING_PCT = 50

DEFAULT_DAILY_WATER_GOAL_ML = 2500
DEFAULT_DAILY_CALORIE_GOAL = 2000

# ---------------------------------------------------------------------------
# Free tier
# ---------------------------------------------------------------------------
MAX_FREE_PLANS = 2
