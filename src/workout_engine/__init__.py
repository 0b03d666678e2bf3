"""Workout engine — deterministic workout plan generation and progress math."""
