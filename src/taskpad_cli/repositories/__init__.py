"""Storage port and record repositories for Taskpad.

``KeyValueStorage`` is the port; the adapters in ``taskpad_cli.adapters``
implement it. The record repositories turn its string slots into models.
"""

from .records import TaskRepository, ThemeRepository, UserRepository
from .repository import TASKS_KEY, THEME_KEY, USER_KEY, KeyValueStorage

__all__ = [
    "KeyValueStorage",
    "TaskRepository",
    "ThemeRepository",
    "UserRepository",
    "TASKS_KEY",
    "THEME_KEY",
    "USER_KEY",
]
