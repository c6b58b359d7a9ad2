"""Command 'date' of taskpad-cli"""

import typer

from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .edit_command import answer_prompt

app = typer.Typer()


@app.command("date")
@command_wrapper
def date(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    value: str | None = typer.Option(
        None, "--value", "-v", help="New date, any text (empty keeps the old one)"
    ),
) -> None:
    """Change a task's display date. Prompts when --value is omitted."""
    controller = create_controller()
    controller.require_session()
    resolved = controller.task_service.resolve(task_id)
    view = controller.begin_edit_date(resolved)

    if answer_prompt(controller, view, value) is None:
        return
    format_success(f"Date set to {controller.task_service.get(resolved).date}")
