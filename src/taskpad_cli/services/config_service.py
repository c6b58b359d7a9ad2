"""Configuration service for managing Taskpad configuration.

This module provides the ConfigService class, the single source of truth for
configuration in Taskpad. It handles:

- Loading and saving config.json (created with defaults on first run)
- Dot-notation get/set/reset of individual settings
- Resolving where the key-value storage file lives
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from taskpad_cli.models.config_models import AppConfig

logger = logging.getLogger(__name__)

STORAGE_FILENAME = "local_storage.json"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("taskpad_cli"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("taskpad_cli"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def storage_path(self) -> Path:
        """Path of the key-value storage file."""
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser()
        return self.data_dir / STORAGE_FILENAME

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except ValidationError as e:
            # If config is corrupted, fall back to defaults without overwriting it
            logger.warning("config file %s is invalid, using defaults: %s", self.config_path, e)
            self._config = AppConfig()

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))

            # Set file permissions
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name an existing setting
            ValidationError: If the value does not fit the setting
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value

        # Reload config from the modified dictionary
        self._config = AppConfig(**config_dict)
        self.save_config()
        logger.info("config %s set to %r", key, value)

    def reset(self, key: str | None = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            logger.info("config reset to defaults")
            return

        self.set(key, self.get_from_config(AppConfig(), key))

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get or create the config service."""
    return ConfigService()
