"""Delete command - delete a task."""

import typer

from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
) -> None:
    """Delete a task."""
    controller = create_controller()
    controller.require_session()
    resolved = controller.task_service.resolve(task_id)
    controller.delete_task(resolved)
    format_success(f"Task deleted: {resolved}")
