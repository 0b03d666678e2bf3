"""Plan generator — builds WorkoutPlans from UserProfiles."""

from workout_engine.plan_generator.generator import PlanGenerator, generate_workout_plan

__all__ = ["PlanGenerator", "generate_workout_plan"]
