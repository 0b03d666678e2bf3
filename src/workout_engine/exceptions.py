"""Custom exception hierarchy for the workout engine."""

from __future__ import annotations


class WorkoutEngineError(Exception):
    """Base exception for all workout_engine errors."""


class InvalidProfileError(WorkoutEngineError, ValueError):
    """Questionnaire answers could not be turned into a UserProfile."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class PlanFormatError(WorkoutEngineError, ValueError):
    """A serialized plan is missing fields or has invalid values."""
