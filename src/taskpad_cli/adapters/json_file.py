"""JSON file key-value storage.

All keys live in a single JSON object on disk. The file is read once when the
storage is opened and replaced in full on every write, so the on-disk state
always matches the last completed mutation.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from json import JSONDecodeError
from pathlib import Path

from taskpad_cli.repositories.repository import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Durable storage backed by one JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._items: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except JSONDecodeError as e:
            logger.warning("storage file %s is not valid JSON, starting empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("storage file %s does not hold an object, starting empty", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self) -> None:
        """Replace the file atomically: an interrupted write keeps the old one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._items, f, indent=2, ensure_ascii=False)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._write()
        logger.debug("stored %s (%d bytes)", key, len(value))

    def remove_item(self, key: str) -> None:
        if key in self._items:
            del self._items[key]
            self._write()
            logger.debug("removed %s", key)

    def keys(self) -> list[str]:
        return list(self._items)
