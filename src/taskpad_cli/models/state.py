"""Application state owned by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from taskpad_cli.models.task import Task, TaskFilter, TaskSort
from taskpad_cli.models.user import User

Theme = Literal["light", "dark"]
EditField = Literal["text", "date"]
Confirmation = Literal["clear_all"]


@dataclass
class PendingEdit:
    """An edit prompt waiting for the user's answer."""

    task_id: int
    field: EditField
    initial: str


@dataclass
class AppState:
    """Everything the renderer needs.

    ``tasks`` is the task store's own collection, shared by reference.
    Filter, sort and pending prompts are transient and never persisted.
    """

    tasks: list[Task] = field(default_factory=list)
    theme: Theme = "light"
    user: User | None = None
    current_filter: TaskFilter = "all"
    current_sort: TaskSort = "newest"
    pending_edit: PendingEdit | None = None
    pending_confirmation: Confirmation | None = None
