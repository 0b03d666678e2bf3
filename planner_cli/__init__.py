"""Command-line driver for the workout plan generator."""
