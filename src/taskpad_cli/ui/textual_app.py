"""Textual terminal UI.

A thin adapter: widgets forward user intents to the ``AppController`` and
``apply_view`` redraws everything from the ``ViewModel`` it renders. Edit and
clear-all confirmations are modal screens answering the controller's pending
prompt.
"""

from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Checkbox, ContentSwitcher, Footer, Input, Label, Static

from taskpad_cli.models import PROVIDERS, TASK_FILTERS, TASK_SORTS
from taskpad_cli.models.exceptions import AppError
from taskpad_cli.services.app_controller import AppController, create_controller
from taskpad_cli.ui.render import RowAction, TaskRow, ViewModel

TEXTUAL_THEMES = {"light": "textual-light", "dark": "textual-dark"}

ROW_BUTTONS = (("edit_text", "✏️"), ("edit_date", "📅"), ("delete", "🗑️"))


def action_name(action: RowAction) -> str:
    """Encode a row action as a widget name."""
    return f"{action.kind}:{action.task_id}"


def parse_action_name(name: str | None) -> RowAction | None:
    """Decode a widget name produced by ``action_name``."""
    if not name or ":" not in name:
        return None
    kind, _, raw_id = name.partition(":")
    if kind not in ("toggle", "edit_text", "edit_date", "delete") or not raw_id.isdigit():
        return None
    return RowAction(kind, int(raw_id))  # type: ignore[arg-type]


class PromptScreen(ModalScreen[str | None]):
    """Text prompt. Dismisses with the entered value, or None when cancelled."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, prompt_title: str, initial: str):
        super().__init__()
        self.prompt_title = prompt_title
        self.initial = initial

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self.prompt_title)
            yield Input(value=self.initial, id="prompt-input")
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", variant="primary", id="prompt-ok")
                yield Button("Cancel", id="prompt-cancel")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    @on(Input.Submitted, "#prompt-input")
    def handle_submit(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    @on(Button.Pressed, "#prompt-ok")
    def handle_ok(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(self.query_one("#prompt-input", Input).value)

    @on(Button.Pressed, "#prompt-cancel")
    def handle_cancel(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no question."""

    BINDINGS = [("escape", "decline", "No")]

    def __init__(self, question: str):
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self.question)
            with Horizontal(classes="dialog-buttons"):
                yield Button("Yes", variant="error", id="confirm-yes")
                yield Button("No", id="confirm-no")

    @on(Button.Pressed, "#confirm-yes")
    def handle_yes(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(True)

    @on(Button.Pressed, "#confirm-no")
    def handle_no(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(False)

    def action_decline(self) -> None:
        self.dismiss(False)


class TaskRowWidget(Horizontal):
    """One task: checkbox, text, date and the row buttons."""

    def __init__(self, row: TaskRow):
        super().__init__(classes="task-row completed" if row.done else "task-row")
        self.row = row

    def compose(self) -> ComposeResult:
        toggle, *rest = self.row.actions
        yield Checkbox(value=self.row.done, name=action_name(toggle))
        yield Static(self.row.text, classes="title")
        yield Static(self.row.date, classes="date")
        labels = dict(ROW_BUTTONS)
        for action in rest:
            yield Button(labels[action.kind], name=action_name(action), classes="row-button")


class TaskpadApp(App[None]):
    """Login screen and task list in one window."""

    TITLE = "Taskpad"

    CSS = """
    #login {
        align: center middle;
    }

    #login Button {
        width: 32;
        margin: 1 0 0 0;
    }

    #topbar, #task-form, #filters, #sorts, #bulk {
        height: auto;
    }

    #user-badge {
        width: 1fr;
        padding: 1 1;
    }

    #task-input {
        width: 1fr;
    }

    .choice.active {
        background: $accent;
        text-style: bold;
    }

    .task-row {
        height: auto;
    }

    .task-row .title {
        width: 1fr;
        padding: 1 1;
    }

    .task-row .date {
        width: auto;
        padding: 1 1;
        color: $text-muted;
    }

    .task-row.completed .title {
        text-style: strike;
        color: $text-muted;
    }

    .row-button {
        min-width: 6;
    }

    .placeholder {
        padding: 1 2;
        color: $text-muted;
    }

    PromptScreen, ConfirmScreen {
        align: center middle;
    }

    .dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $accent;
        background: $surface;
    }

    .dialog-buttons {
        height: auto;
        margin: 1 0 0 0;
    }
    """

    BINDINGS = [
        ("ctrl+t", "toggle_theme", "Theme"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, controller: AppController | None = None):
        super().__init__()
        self.controller = controller or create_controller()
        self._prompt_open = False

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial="login", id="switcher"):
            with Vertical(id="login"):
                yield Label("Sign in to Taskpad")
                for provider in PROVIDERS:
                    yield Button(f"Continue with {provider.title()}", id=f"login-{provider}")
            with Vertical(id="tasks"):
                with Horizontal(id="topbar"):
                    yield Label("", id="user-badge")
                    yield Button("🌙", id="theme-toggle")
                    yield Button("Logout", id="logout")
                with Horizontal(id="task-form"):
                    yield Input(placeholder="What needs to be done?", id="task-input")
                    yield Button("Add", variant="primary", id="add-task")
                with Horizontal(id="filters"):
                    for task_filter in TASK_FILTERS:
                        yield Button(task_filter.title(), id=f"filter-{task_filter}", classes="choice")
                with Horizontal(id="sorts"):
                    for task_sort in TASK_SORTS:
                        yield Button(task_sort.title(), id=f"sort-{task_sort}", classes="choice")
                yield VerticalScroll(id="tasks-list")
                with Horizontal(id="bulk"):
                    yield Button("Clear completed", id="clear-completed")
                    yield Button("Clear all", variant="error", id="clear-all")
        yield Footer()

    def on_mount(self) -> None:
        self.controller.on_render = self.apply_view
        self.controller.render()

    # -- drawing ---------------------------------------------------------

    def apply_view(self, view: ViewModel) -> None:
        """Redraw from scratch. Called after every controller handler."""
        self.theme = TEXTUAL_THEMES[view.theme]
        self.query_one("#switcher", ContentSwitcher).current = view.screen
        if view.screen == "login":
            return

        if view.user is not None:
            self.query_one("#user-badge", Label).update(
                f"[link={view.user.avatar}]👤[/link] {view.user.name}"
            )
        self.query_one("#theme-toggle", Button).label = view.theme_icon

        for task_filter in TASK_FILTERS:
            self.query_one(f"#filter-{task_filter}", Button).set_class(
                view.filters.is_active(task_filter), "active"
            )
        for task_sort in TASK_SORTS:
            self.query_one(f"#sort-{task_sort}", Button).set_class(
                view.sorts.is_active(task_sort), "active"
            )

        task_list = self.query_one("#tasks-list", VerticalScroll)
        task_list.remove_children()
        if view.placeholder is not None:
            task_list.mount(Static(view.placeholder, classes="placeholder"))
        else:
            task_list.mount(*(TaskRowWidget(row) for row in view.rows))

        self._open_prompts(view)

    def _open_prompts(self, view: ViewModel) -> None:
        if self._prompt_open:
            return
        if view.edit_prompt is not None:
            self._prompt_open = True
            self.push_screen(
                PromptScreen(view.edit_prompt.title, view.edit_prompt.initial),
                callback=self._answer_edit,
            )
        elif view.confirm_prompt is not None:
            self._prompt_open = True
            self.push_screen(
                ConfirmScreen(view.confirm_prompt.question),
                callback=self._answer_confirmation,
            )

    def _answer_edit(self, value: str | None) -> None:
        self._prompt_open = False
        if value is None:
            self._run(self.controller.cancel_edit)
        else:
            self._run(self.controller.submit_edit, value)

    def _answer_confirmation(self, accepted: bool | None) -> None:
        self._prompt_open = False
        self._run(self.controller.resolve_confirmation, bool(accepted))

    def _run(self, handler, *args) -> None:
        try:
            handler(*args)
        except AppError as e:
            self.notify(str(e), severity="error")

    # -- events ----------------------------------------------------------

    def _submit_input(self) -> None:
        task_input = self.query_one("#task-input", Input)
        text = task_input.value
        task_input.value = ""
        self._run(self.controller.submit_task, text)

    @on(Input.Submitted, "#task-input")
    def handle_task_submitted(self) -> None:
        self._submit_input()

    @on(Checkbox.Changed)
    def handle_checkbox(self, event: Checkbox.Changed) -> None:
        action = parse_action_name(event.checkbox.name)
        if action is None:
            return
        task = next((t for t in self.controller.state.tasks if t.id == action.task_id), None)
        if task is not None and task.done != event.value:
            self._run(self.controller.toggle_task, action.task_id)

    @on(Button.Pressed)
    def handle_button(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        controller = self.controller

        if button_id.startswith("login-"):
            self._run(controller.login, button_id.removeprefix("login-"))
        elif button_id == "logout":
            self._run(controller.logout)
        elif button_id == "theme-toggle":
            self._run(controller.toggle_theme)
        elif button_id == "add-task":
            self._submit_input()
        elif button_id.startswith("filter-"):
            self._run(controller.set_filter, button_id.removeprefix("filter-"))
        elif button_id.startswith("sort-"):
            self._run(controller.set_sort, button_id.removeprefix("sort-"))
        elif button_id == "clear-completed":
            self._run(controller.clear_completed)
        elif button_id == "clear-all":
            self._run(controller.request_clear_all)
        else:
            action = parse_action_name(event.button.name)
            if action is not None:
                self._run(controller.dispatch, action)

    def action_toggle_theme(self) -> None:
        self._run(self.controller.toggle_theme)
