"""Focus Minion - Pomodoro-style focus timer for macOS."""

__version__ = "0.1.0"
