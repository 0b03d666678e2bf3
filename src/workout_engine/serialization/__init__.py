"""Serialization module — export plans and logs to storage-friendly formats."""

from workout_engine.serialization.plan_json import (
    log_to_dict,
    plan_from_dict,
    plan_to_dict,
    plan_to_json_string,
)
from workout_engine.serialization.table import plan_to_frame

__all__ = [
    "log_to_dict",
    "plan_from_dict",
    "plan_to_dict",
    "plan_to_frame",
    "plan_to_json_string",
]
