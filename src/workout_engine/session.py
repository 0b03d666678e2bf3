"""WorkoutSession — tracks one day's workout while it is being performed.

The session keeps the completed set, the exercise currently on screen and
the water drunk. It never reads a clock: the caller passes elapsed seconds
to finish().
"""

from __future__ import annotations

from datetime import date

from workout_engine.math.calories import session_calories, session_progress_pct
from workout_engine.models.exercise import Exercise
from workout_engine.models.workout_log import WorkoutLog
from workout_engine.models.workout_plan import WorkoutDay


class WorkoutSession:
    """Mutable tracker for a single WorkoutDay.

    Usage::

        session = WorkoutSession(day, weight_kg=80)
        session.complete_current()
        log = session.finish(elapsed_seconds=1800)
    """

    def __init__(self, day: WorkoutDay, weight_kg: float) -> None:
        self.day = day
        self.weight_kg = weight_kg
        self.completed: set[str] = set()
        self.current_index = 0
        self.water_ml = 0

    @property
    def current_exercise(self) -> Exercise | None:
        if self.current_index < len(self.day.exercises):
            return self.day.exercises[self.current_index]
        return None

    @property
    def calories_burned(self) -> float:
        return session_calories(self.day.exercises, self.completed, self.weight_kg)

    @property
    def progress_pct(self) -> float:
        return session_progress_pct(self.day.exercises, self.completed)

    def toggle(self, exercise_id: str) -> None:
        """Mark an exercise completed, or un-mark it if already completed."""
        if exercise_id in self.completed:
            self.completed.discard(exercise_id)
        else:
            self.completed.add(exercise_id)

    def complete_current(self) -> None:
        """Toggle the current exercise and move on to the next one."""
        current = self.current_exercise
        if current is None:
            return
        self.toggle(current.exercise_id)
        self.skip()

    def skip(self) -> None:
        """Advance to the next exercise; stays on the last one."""
        if self.current_index < len(self.day.exercises) - 1:
            self.current_index += 1

    def rest_seconds(self) -> int:
        """Rest timer length for the current exercise (0 for an empty day)."""
        current = self.current_exercise
        return current.rest_seconds if current is not None else 0

    def add_water(self, ml: int) -> None:
        """Adjust water drunk during the session; the total never goes below 0."""
        self.water_ml = max(0, self.water_ml + ml)

    def finish(
        self,
        elapsed_seconds: float,
        notes: str = "",
        logged_on: date | None = None,
    ) -> WorkoutLog:
        """Close the session and summarise it as a WorkoutLog.

        Minutes and calories are rounded to whole numbers. Completed ids keep
        the day's exercise order.
        """
        if elapsed_seconds < 0:
            raise ValueError(f"elapsed_seconds must be non-negative, got {elapsed_seconds}")
        completed = tuple(
            e.exercise_id for e in self.day.exercises if e.exercise_id in self.completed
        )
        return WorkoutLog(
            day_id=self.day.day_id,
            completed_exercises=completed,
            total_minutes=round(elapsed_seconds / 60),
            calories_burned=round(self.calories_burned),
            water_ml=self.water_ml,
            notes=notes,
            logged_on=logged_on or date.today(),
        )
