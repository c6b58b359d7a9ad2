"""Clear commands - bulk deletion."""

import typer

from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("clear-completed")
@command_wrapper
def clear_completed() -> None:
    """Delete every completed task."""
    controller = create_controller()
    before = len(controller.state.tasks)
    controller.clear_completed()
    removed = before - len(controller.state.tasks)
    format_success(f"Removed {removed} completed task(s)")


@app.command("clear-all")
@command_wrapper
def clear_all(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every task, after confirmation."""
    controller = create_controller()
    view = controller.request_clear_all()
    assert view.confirm_prompt is not None

    accepted = yes or typer.confirm(view.confirm_prompt.question)
    before = len(controller.state.tasks)
    controller.resolve_confirmation(accepted)

    if not accepted:
        format_info("Cancelled")
        return
    format_success(f"Removed {before} task(s)")
