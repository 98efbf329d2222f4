"""Pomodoro CLI - a terminal countdown timer for focus sessions."""

__version__ = "0.1.0"
