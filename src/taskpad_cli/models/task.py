"""Task data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

TaskFilter = Literal["all", "active", "completed"]
TaskSort = Literal["newest", "oldest", "completed", "active"]

TASK_FILTERS: tuple[TaskFilter, ...] = ("all", "active", "completed")
TASK_SORTS: tuple[TaskSort, ...] = ("newest", "oldest", "completed", "active")


class Task(BaseModel):
    """A single to-do item.

    Attributes:
        id: Creation time in epoch milliseconds, unique within the collection
        text: Trimmed, non-empty task text
        done: Whether the task is completed
        date: Free-form display date, never parsed
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int
    text: str = Field(min_length=1)
    done: bool = False
    date: str


TaskList = TypeAdapter(list[Task])
