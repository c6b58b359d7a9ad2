"""Pure rendering of application state into a view model.

Nothing here touches a terminal or a widget toolkit. Platform adapters
(the Rich console view, the Textual app) draw a ``ViewModel`` and send the
``RowAction`` values it exposes back to the controller.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from taskpad_cli.models import (
    PROVIDERS,
    TASK_FILTERS,
    TASK_SORTS,
    AppState,
    Provider,
    Task,
    TaskFilter,
    TaskSort,
    Theme,
)

EMPTY_PLACEHOLDER = "No tasks yet"
EDIT_TEXT_TITLE = "Edit Task"
EDIT_DATE_TITLE = "Edit Date (YYYY-MM-DD HH:MM)"
CLEAR_ALL_QUESTION = "Clear all tasks?"

THEME_ICONS: dict[str, str] = {"light": "🌙", "dark": "☀️"}

Screen = Literal["login", "tasks"]
ActionKind = Literal["toggle", "edit_text", "edit_date", "delete"]


@dataclass(frozen=True)
class RowAction:
    kind: ActionKind
    task_id: int


@dataclass(frozen=True)
class TaskRow:
    task_id: int
    text: str
    date: str
    done: bool

    @property
    def actions(self) -> tuple[RowAction, ...]:
        return (
            RowAction("toggle", self.task_id),
            RowAction("edit_text", self.task_id),
            RowAction("edit_date", self.task_id),
            RowAction("delete", self.task_id),
        )


@dataclass(frozen=True)
class ChoiceGroup:
    """A button group with exactly one active option."""

    options: tuple[str, ...]
    active: str

    def is_active(self, option: str) -> bool:
        return option == self.active


@dataclass(frozen=True)
class UserBadge:
    name: str
    avatar: str


@dataclass(frozen=True)
class EditPrompt:
    task_id: int
    field: str
    title: str
    initial: str


@dataclass(frozen=True)
class ConfirmPrompt:
    question: str


@dataclass(frozen=True)
class ViewModel:
    screen: Screen
    theme: Theme
    theme_icon: str
    user: UserBadge | None
    filters: ChoiceGroup
    sorts: ChoiceGroup
    rows: tuple[TaskRow, ...]
    placeholder: str | None
    edit_prompt: EditPrompt | None
    confirm_prompt: ConfirmPrompt | None
    providers: tuple[Provider, ...] = PROVIDERS


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter) -> list[Task]:
    """Return a new list holding the tasks the filter lets through."""
    if task_filter == "active":
        return [t for t in tasks if not t.done]
    if task_filter == "completed":
        return [t for t in tasks if t.done]
    return list(tasks)


def sort_tasks(tasks: Iterable[Task], task_sort: TaskSort) -> list[Task]:
    """Return a new sorted list. Ties keep their incoming order."""
    if task_sort == "oldest":
        return sorted(tasks, key=lambda t: t.id)
    if task_sort == "completed":
        return sorted(tasks, key=lambda t: int(t.done), reverse=True)
    if task_sort == "active":
        return sorted(tasks, key=lambda t: int(t.done))
    return sorted(tasks, key=lambda t: t.id, reverse=True)


def visible_tasks(
    tasks: Iterable[Task], task_filter: TaskFilter, task_sort: TaskSort
) -> list[Task]:
    return sort_tasks(filter_tasks(tasks, task_filter), task_sort)


def _edit_prompt(state: AppState) -> EditPrompt | None:
    pending = state.pending_edit
    if pending is None:
        return None
    title = EDIT_TEXT_TITLE if pending.field == "text" else EDIT_DATE_TITLE
    return EditPrompt(pending.task_id, pending.field, title, pending.initial)


def render(state: AppState) -> ViewModel:
    """Build the complete view for ``state``. Never mutates it."""
    user = state.user
    shown = visible_tasks(state.tasks, state.current_filter, state.current_sort)
    rows = tuple(TaskRow(t.id, t.text, t.date, t.done) for t in shown)

    return ViewModel(
        screen="tasks" if user is not None else "login",
        theme=state.theme,
        theme_icon=THEME_ICONS[state.theme],
        user=UserBadge(user.name, user.avatar) if user is not None else None,
        filters=ChoiceGroup(TASK_FILTERS, state.current_filter),
        sorts=ChoiceGroup(TASK_SORTS, state.current_sort),
        rows=rows,
        placeholder=None if rows else EMPTY_PLACEHOLDER,
        edit_prompt=_edit_prompt(state),
        confirm_prompt=(
            ConfirmPrompt(CLEAR_ALL_QUESTION)
            if state.pending_confirmation == "clear_all"
            else None
        ),
    )
