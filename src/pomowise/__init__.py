"""Pomowise - a terminal Pomodoro timer with animated backgrounds."""

__version__ = "0.1.0"
