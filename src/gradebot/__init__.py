"""Gradebot: automated grading for process scheduler submissions."""

__version__ = "0.1.0"
