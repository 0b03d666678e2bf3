"""Environment-variable-based configuration for the planner CLI."""

from __future__ import annotations

import os
from pathlib import Path

from workout_engine.models.enums import MAX_FREE_PLANS as _DEFAULT_MAX_FREE_PLANS

PROFILE_PATH: Path = Path(
    os.environ.get("FITPLAN_PROFILE", "profiles/my_profile.json")
).expanduser()
LOG_LEVEL: str = os.environ.get("FITPLAN_LOG_LEVEL", "INFO").upper()
OUTPUT_FORMAT: str = os.environ.get("FITPLAN_OUTPUT_FORMAT", "json")
MAX_FREE_PLANS: int = int(
    os.environ.get("FITPLAN_MAX_FREE_PLANS", str(_DEFAULT_MAX_FREE_PLANS))
)
