"""Shared Rich console."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """The one Console every command and view prints through.

    It writes to whatever ``sys.stdout`` is at print time, so output
    redirected by a test runner is captured.
    """
    return Console()
