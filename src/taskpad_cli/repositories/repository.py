"""Storage abstraction layer for Taskpad.

This module defines the port every storage backend implements. The contract
mirrors a browser's ``localStorage``: a flat mapping of string keys to string
values, written synchronously, one shared slot per key.

Implementations (Adapters) are in:
- taskpad_cli.adapters.json_file (durable, one JSON file)
- taskpad_cli.adapters.memory (process-local, for tests)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

TASKS_KEY = "todo.tasks"
THEME_KEY = "todo.theme"
USER_KEY = "todo.user"


class KeyValueStorage(ABC):
    """Abstract base class for string key-value persistence."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        raise NotImplementedError(
            "KeyValueStorage.get_item() must be implemented by adapter"
        )

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Write failures propagate to the caller.
        """
        raise NotImplementedError(
            "KeyValueStorage.set_item() must be implemented by adapter"
        )

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is a no-op."""
        raise NotImplementedError(
            "KeyValueStorage.remove_item() must be implemented by adapter"
        )

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys."""
        raise NotImplementedError("KeyValueStorage.keys() must be implemented by adapter")
