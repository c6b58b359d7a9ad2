"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories.
"""

from __future__ import annotations

import itertools
from datetime import datetime
from unittest.mock import patch

import pytest

from taskpad_cli.adapters import InMemoryStorage
from taskpad_cli.repositories import TaskRepository, ThemeRepository, UserRepository
from taskpad_cli.services.app_controller import AppController
from taskpad_cli.services.auth_service import AuthService, LocalIdentityProvider
from taskpad_cli.services.task_service import TaskService
from taskpad_cli.services.theme_service import ThemeService

# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolated_log_dir(tmp_path_factory):
    """Keep the rotating log file out of the real user log dir."""
    log_dir = tmp_path_factory.mktemp("logs")
    with patch("taskpad_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs config/data lookups at *tmp_path*.

    Also clears the lru_cache so each test gets a fresh config service.
    """
    from taskpad_cli.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    get_config_service.cache_clear()
    with patch(
        "taskpad_cli.services.config_service.user_config_dir",
        return_value=str(config_dir),
    ):
        with patch(
            "taskpad_cli.services.config_service.user_data_dir",
            return_value=str(data_dir),
        ):
            yield tmp_path
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Core objects over in-memory storage
# ---------------------------------------------------------------------------


def make_task_service(storage, start: int = 1_700_000_000_000) -> TaskService:
    """TaskService with a deterministic millisecond clock (+1000 per call)."""
    ticks = itertools.count(start, 1000)
    return TaskService(
        TaskRepository(storage),
        clock=lambda: next(ticks),
        now=lambda: datetime(2026, 10, 19, 9, 30, 0),
    )


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def task_service(storage) -> TaskService:
    return make_task_service(storage)


@pytest.fixture()
def controller(storage, task_service) -> AppController:
    """Controller over in-memory storage, not yet logged in."""
    return AppController(
        task_service,
        AuthService(UserRepository(storage), LocalIdentityProvider(clock=lambda: 1700000000.0)),
        ThemeService(ThemeRepository(storage)),
    )


@pytest.fixture()
def logged_in(controller) -> AppController:
    """Controller with a demo session."""
    controller.login("demo")
    return controller
