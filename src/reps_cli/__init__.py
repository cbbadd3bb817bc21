"""Reps - terminal countdown for timed workout repetitions."""

__version__ = "0.1.0"
