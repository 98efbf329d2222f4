"""Console utilities for Pomodoro CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(stderr: bool = False) -> Console:
    """Get a Rich Console instance for consistent output formatting.

    The stderr console is used for fatal errors so they stay visible after
    the live timer screen is torn down.
    """
    return Console(stderr=stderr, highlight=False)
