"""Custom exceptions for Pomodoro CLI."""


class PomodoroError(Exception):
    """Base exception for all Pomodoro CLI errors."""


class PresetConfigError(PomodoroError):
    """Raised when the preset list is empty or a preset has a non-positive duration."""


class TerminalError(PomodoroError):
    """Raised when the terminal cannot be initialised or written to."""
