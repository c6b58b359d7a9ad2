"""Application controller - the interaction handlers.

One controller owns the ``AppState``. Every handler performs a single task
store, session or theme operation and then renders; the rendered view is
returned and also pushed to the ``on_render`` listener a UI adapter registers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from taskpad_cli.adapters import JsonFileStorage
from taskpad_cli.models import AppState, PendingEdit, TaskFilter, TaskSort
from taskpad_cli.models.exceptions import NotAuthenticatedError
from taskpad_cli.repositories import (
    KeyValueStorage,
    TaskRepository,
    ThemeRepository,
    UserRepository,
)
from taskpad_cli.services.auth_service import AuthService, IdentityProvider
from taskpad_cli.services.config_service import ConfigService, get_config_service
from taskpad_cli.services.task_service import TaskService
from taskpad_cli.services.theme_service import ThemeService
from taskpad_cli.ui.render import RowAction, ViewModel, render

logger = logging.getLogger(__name__)

RenderListener = Callable[[ViewModel], None]


class AppController:
    """Translates user intents into state changes followed by a render."""

    def __init__(
        self,
        task_service: TaskService,
        auth_service: AuthService,
        theme_service: ThemeService,
        *,
        default_filter: TaskFilter = "all",
        default_sort: TaskSort = "newest",
        on_render: RenderListener | None = None,
    ):
        self.task_service = task_service
        self.auth_service = auth_service
        self.theme_service = theme_service
        self.on_render = on_render
        self.state = AppState(
            tasks=task_service.tasks,
            theme=theme_service.theme,
            user=auth_service.current_user,
            current_filter=default_filter,
            current_sort=default_sort,
        )

    def render(self) -> ViewModel:
        view = render(self.state)
        if self.on_render is not None:
            self.on_render(view)
        return view

    def require_session(self) -> None:
        if not self.auth_service.is_authenticated():
            raise NotAuthenticatedError()

    # -- session ---------------------------------------------------------

    def login(self, provider: str) -> ViewModel:
        self.state.user = self.auth_service.login(provider)
        return self.render()

    def logout(self) -> ViewModel:
        self.auth_service.logout()
        self.state.user = None
        self.state.pending_edit = None
        self.state.pending_confirmation = None
        return self.render()

    # -- tasks -----------------------------------------------------------

    def submit_task(self, text: str) -> ViewModel:
        self.require_session()
        self.task_service.add(text)
        return self.render()

    def toggle_task(self, task_id: int) -> ViewModel:
        self.require_session()
        self.task_service.toggle(task_id)
        return self.render()

    def delete_task(self, task_id: int) -> ViewModel:
        self.require_session()
        self.task_service.remove(task_id)
        return self.render()

    def begin_edit_text(self, task_id: int) -> ViewModel:
        self.require_session()
        task = self.task_service.get(task_id)
        self.state.pending_edit = PendingEdit(task_id, "text", task.text)
        return self.render()

    def begin_edit_date(self, task_id: int) -> ViewModel:
        self.require_session()
        task = self.task_service.get(task_id)
        self.state.pending_edit = PendingEdit(task_id, "date", task.date)
        return self.render()

    def submit_edit(self, value: str) -> ViewModel:
        """Answer the pending edit prompt. Without one this only re-renders."""
        self.require_session()
        pending = self.state.pending_edit
        self.state.pending_edit = None
        if pending is not None:
            if pending.field == "text":
                self.task_service.edit_text(pending.task_id, value)
            else:
                self.task_service.edit_date(pending.task_id, value)
        return self.render()

    def cancel_edit(self) -> ViewModel:
        self.state.pending_edit = None
        return self.render()

    def clear_completed(self) -> ViewModel:
        self.require_session()
        self.task_service.clear_completed()
        return self.render()

    def request_clear_all(self) -> ViewModel:
        self.require_session()
        self.state.pending_confirmation = "clear_all"
        return self.render()

    def resolve_confirmation(self, accepted: bool) -> ViewModel:
        pending = self.state.pending_confirmation
        self.state.pending_confirmation = None
        if pending == "clear_all" and accepted:
            self.require_session()
            self.task_service.clear_all()
        elif pending == "clear_all":
            logger.info("clear all declined")
        return self.render()

    def dispatch(self, action: RowAction) -> ViewModel:
        """Route an action exposed by a rendered task row."""
        handlers: dict[str, Callable[[int], ViewModel]] = {
            "toggle": self.toggle_task,
            "edit_text": self.begin_edit_text,
            "edit_date": self.begin_edit_date,
            "delete": self.delete_task,
        }
        return handlers[action.kind](action.task_id)

    # -- view selection --------------------------------------------------

    def set_filter(self, task_filter: TaskFilter) -> ViewModel:
        self.state.current_filter = task_filter
        return self.render()

    def set_sort(self, task_sort: TaskSort) -> ViewModel:
        self.state.current_sort = task_sort
        return self.render()

    def toggle_theme(self) -> ViewModel:
        self.state.theme = self.theme_service.toggle()
        return self.render()


def build_controller(
    storage: KeyValueStorage,
    *,
    config_service: ConfigService | None = None,
    identity_provider: IdentityProvider | None = None,
    on_render: RenderListener | None = None,
) -> AppController:
    """Wire services on top of ``storage`` using the current configuration."""
    config = (config_service or get_config_service()).config
    return AppController(
        TaskService(TaskRepository(storage), date_format=config.ui.date_format),
        AuthService(UserRepository(storage), identity_provider),
        ThemeService(ThemeRepository(storage)),
        default_filter=config.ui.default_filter,
        default_sort=config.ui.default_sort,
        on_render=on_render,
    )


def create_controller(on_render: RenderListener | None = None) -> AppController:
    """Controller over the configured JSON storage file."""
    config_service = get_config_service()
    storage = JsonFileStorage(config_service.storage_path)
    logger.debug("using storage file %s", storage.path)
    return build_controller(storage, config_service=config_service, on_render=on_render)
