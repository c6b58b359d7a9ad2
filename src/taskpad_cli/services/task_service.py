"""Task service - the in-memory task collection and its mutations.

The collection is loaded once from the task repository and written back in
full after every mutation. Mutations happen in place so that anyone holding a
reference to ``TaskService.tasks`` (the controller's state) sees them.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime

from taskpad_cli.models import Task
from taskpad_cli.models.config_models import DEFAULT_DATE_FORMAT
from taskpad_cli.models.exceptions import AmbiguousTaskIdError, TaskNotFoundError
from taskpad_cli.repositories import TaskRepository

logger = logging.getLogger(__name__)


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


class TaskService:
    """Service for task business logic."""

    def __init__(
        self,
        task_repository: TaskRepository,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
        clock: Callable[[], int] = _now_millis,
        now: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the task service.

        Args:
            task_repository: Where the collection is loaded from and saved to
            date_format: strftime pattern for the display date of new tasks
            clock: Current time in epoch milliseconds, used for task ids
            now: Current local time, used for display dates
        """
        self.repository = task_repository
        self.date_format = date_format
        self._clock = clock
        self._now = now
        self.tasks: list[Task] = task_repository.load_all()

    def _save(self) -> None:
        self.repository.save_all(self.tasks)

    def _next_id(self) -> int:
        candidate = self._clock()
        if self.tasks:
            newest = max(t.id for t in self.tasks)
            if candidate <= newest:
                candidate = newest + 1
        return candidate

    def get(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def resolve(self, task_id_or_suffix: str) -> int:
        """Resolve a full task id or a unique suffix of one to the full id.

        Raises:
            TaskNotFoundError: If nothing matches
            AmbiguousTaskIdError: If the suffix matches more than one task
        """
        value = task_id_or_suffix.strip()
        if value.isdigit() and any(t.id == int(value) for t in self.tasks):
            return int(value)

        matches = [t.id for t in self.tasks if value and str(t.id).endswith(value)]
        if not matches:
            raise TaskNotFoundError(task_id_or_suffix)
        if len(matches) > 1:
            raise AmbiguousTaskIdError(task_id_or_suffix, matches)
        return matches[0]

    def add(self, text: str) -> Task | None:
        """Create a task at the front of the collection.

        Returns None, changing nothing, when the text is blank.
        """
        text = text.strip()
        if not text:
            return None

        task = Task(
            id=self._next_id(),
            text=text,
            done=False,
            date=self._now().strftime(self.date_format),
        )
        self.tasks.insert(0, task)
        self._save()
        logger.info("task added: %s", task.id)
        return task

    def toggle(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.done = not task.done
        self._save()
        logger.info("task %s done=%s", task_id, task.done)
        return task

    def edit_text(self, task_id: int, new_text: str | None) -> Task | None:
        """Replace a task's text.

        ``None`` means the edit was cancelled. Blank text deletes the task,
        in which case None is returned.
        """
        task = self.get(task_id)
        if new_text is None:
            return task

        text = new_text.strip()
        if not text:
            self.remove(task_id)
            return None

        task.text = text
        self._save()
        logger.info("task %s text edited", task_id)
        return task

    def edit_date(self, task_id: int, new_date: str | None) -> Task:
        """Replace a task's display date.

        ``None`` means the edit was cancelled; a blank value keeps the
        previous date. Any other string is stored as-is (trimmed).
        """
        task = self.get(task_id)
        if new_date is None:
            return task

        task.date = new_date.strip() or task.date
        self._save()
        logger.info("task %s date set to %r", task_id, task.date)
        return task

    def remove(self, task_id: int) -> None:
        self.get(task_id)
        self.tasks[:] = [t for t in self.tasks if t.id != task_id]
        self._save()
        logger.info("task removed: %s", task_id)

    def clear_completed(self) -> int:
        before = len(self.tasks)
        self.tasks[:] = [t for t in self.tasks if not t.done]
        self._save()
        removed = before - len(self.tasks)
        logger.info("cleared %d completed task(s)", removed)
        return removed

    def clear_all(self) -> int:
        """Delete every task. Callers are responsible for confirming first."""
        removed = len(self.tasks)
        self.tasks.clear()
        self._save()
        logger.info("cleared all %d task(s)", removed)
        return removed
