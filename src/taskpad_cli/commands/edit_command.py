"""Command 'edit' of taskpad-cli"""

import typer

from taskpad_cli.services.app_controller import AppController, create_controller
from taskpad_cli.ui.render import ViewModel
from taskpad_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


def answer_prompt(controller: AppController, view: ViewModel, value: str | None) -> str | None:
    """Answer the view's pending edit prompt.

    Without ``value`` the user is asked interactively, starting from the
    current value. Aborting the prompt cancels the edit. Returns the answer,
    or None if the edit was cancelled.
    """
    prompt = view.edit_prompt
    assert prompt is not None, "an edit must be pending"

    if value is None:
        try:
            value = typer.prompt(prompt.title, default=prompt.initial)
        except typer.Abort:
            controller.cancel_edit()
            format_info("Cancelled")
            return None

    controller.submit_edit(value)
    return value


@app.command("edit")
@command_wrapper
def edit(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    text: str | None = typer.Option(
        None, "--text", "-t", help="New text (an empty value deletes the task)"
    ),
) -> None:
    """Edit a task's text. Prompts with the current text when --text is omitted."""
    controller = create_controller()
    controller.require_session()
    resolved = controller.task_service.resolve(task_id)
    view = controller.begin_edit_text(resolved)

    answer = answer_prompt(controller, view, text)
    if answer is None:
        return
    if answer.strip():
        format_success(f"Task updated: {answer.strip()}")
    else:
        format_success(f"Task deleted: {resolved}")
