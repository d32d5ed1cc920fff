"""Centralized Rich Console management.

A single Console is shared by the status reporter, the CLI error paths and
the timeline preview so styling stays consistent. Errors go through a
second Console bound to stderr.
"""

from rich.console import Console

_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def get_error_console() -> Console:
    """Get or create the Rich Console that writes to stderr."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, highlight=False)
    return _error_console


def set_console(console: Console | None) -> None:
    """Replace the global console (None resets to a fresh default)."""
    global _console
    _console = console


def set_error_console(console: Console | None) -> None:
    """Replace the stderr console (None resets to a fresh default)."""
    global _error_console
    _error_console = console


def safe_print(message: str, style: str | None = None) -> None:
    """Print using Rich Console with optional styling.

    Args:
        message: The message to print
        style: Optional Rich style string (e.g., "bold red", "green")
    """
    console = get_console()
    if style:
        console.print(message, style=style, markup=False)
    else:
        console.print(message, markup=False)
