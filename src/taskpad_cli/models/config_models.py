"""Configuration models.

The config file only holds settings. User data (tasks, theme, session) lives
in the key-value storage file.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from taskpad_cli.models.task import TaskFilter, TaskSort

# Matches the "10/19/2026, 3:04:05 PM" shape of a US-locale timestamp.
DEFAULT_DATE_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


class StorageConfig(BaseModel):
    """Storage configuration."""

    path: str | None = Field(default=None)  # None = local_storage.json in data dir


class UIConfig(BaseModel):
    """UI configuration."""

    date_format: str = Field(default=DEFAULT_DATE_FORMAT)
    default_filter: TaskFilter = Field(default="all")
    default_sort: TaskSort = Field(default="newest")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
