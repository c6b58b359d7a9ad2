"""In-memory key-value storage."""

from __future__ import annotations

from taskpad_cli.repositories.repository import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Process-local storage. Nothing survives the process."""

    def __init__(self, items: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)
