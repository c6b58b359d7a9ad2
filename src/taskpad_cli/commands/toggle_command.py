"""Command 'toggle' of taskpad-cli"""

import typer

from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.ui.console import get_console

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("toggle")
@command_wrapper
def toggle(
    task_ids: list[str] = typer.Argument(..., help="Task ID(s) or suffix(es)"),
) -> None:
    """Flip one or more tasks between done and not done."""
    controller = create_controller()
    controller.require_session()
    for task_id in task_ids:
        resolved = controller.task_service.resolve(task_id)
        controller.toggle_task(resolved)
        task = controller.task_service.get(resolved)
        mark = "[green]☑ done[/green]" if task.done else "[yellow]☐ not done[/yellow]"
        console.print(f"{mark}  {task.text}")
