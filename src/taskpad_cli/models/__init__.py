"""Taskpad domain models.

Pydantic models for the persisted records (tasks, user, config) and plain
dataclasses for the transient application state.
"""

from .config_models import AppConfig
from .state import AppState, PendingEdit, Theme
from .task import TASK_FILTERS, TASK_SORTS, Task, TaskFilter, TaskList, TaskSort
from .user import PROVIDERS, Provider, User

__all__ = [
    # Task models
    "Task",
    "TaskList",
    "TaskFilter",
    "TaskSort",
    "TASK_FILTERS",
    "TASK_SORTS",
    # User model
    "User",
    "Provider",
    "PROVIDERS",
    # State
    "AppState",
    "PendingEdit",
    "Theme",
    # Config models
    "AppConfig",
]
