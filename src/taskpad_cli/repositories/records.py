"""Typed record repositories on top of a KeyValueStorage.

Each repository owns one storage key and (de)serializes its record as JSON.
Corrupt stored values are logged and treated as absent.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from taskpad_cli.models import Task, TaskList, Theme, User
from taskpad_cli.repositories.repository import (
    TASKS_KEY,
    THEME_KEY,
    USER_KEY,
    KeyValueStorage,
)

logger = logging.getLogger(__name__)


class TaskRepository:
    """Persists the whole task collection under a single key."""

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load_all(self) -> list[Task]:
        raw = self.storage.get_item(TASKS_KEY)
        if raw is None:
            return []
        try:
            return TaskList.validate_json(raw)
        except ValidationError as e:
            logger.warning("discarding unreadable %s value: %s", TASKS_KEY, e)
            return []

    def save_all(self, tasks: list[Task]) -> None:
        self.storage.set_item(TASKS_KEY, TaskList.dump_json(tasks).decode("utf-8"))


class ThemeRepository:
    """Persists the light/dark preference. Stored as the bare word."""

    def __init__(self, storage: KeyValueStorage, default: Theme = "light"):
        self.storage = storage
        self.default = default

    def load(self) -> Theme:
        raw = self.storage.get_item(THEME_KEY)
        if raw is None:
            return self.default
        if raw not in ("light", "dark"):
            logger.warning("unknown theme %r in storage, using %s", raw, self.default)
            return self.default
        return raw  # type: ignore[return-value]

    def save(self, theme: Theme) -> None:
        self.storage.set_item(THEME_KEY, theme)


class UserRepository:
    """Persists the signed-in user. Absence of the key means logged out."""

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self) -> User | None:
        raw = self.storage.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("discarding unreadable %s value: %s", USER_KEY, e)
            return None

    def save(self, user: User) -> None:
        self.storage.set_item(USER_KEY, user.model_dump_json())

    def clear(self) -> None:
        self.storage.remove_item(USER_KEY)
