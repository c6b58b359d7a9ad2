"""Command 'add' of taskpad-cli"""

import sys

import typer

from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.ui.console import get_console
from taskpad_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
def add(
    text: str | None = typer.Argument(None, help="Task text"),
    output: str = typer.Option(
        "pretty", "--output", "-o", help="Output format (pretty/json)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """
    Add a task to the top of the list.

    Examples:
      taskpad add "Buy milk"
      echo "Call the plumber" | taskpad add
    """
    if json_opt:
        output = "json"

    if text is None:
        if not sys.stdin.isatty():
            text = sys.stdin.read()
        else:
            text = typer.prompt("Task", default="", show_default=False)

    controller = create_controller()
    before = len(controller.state.tasks)
    controller.submit_task(text)

    if len(controller.state.tasks) == before:
        format_info("Nothing to add.")
        return

    task = controller.state.tasks[0]
    if output == "json":
        format_output(task.model_dump(), "json")
        return

    format_success("Task added")
    console.print(f"\n[bold cyan]Task:[/bold cyan] {task.text}")
    console.print(f"[dim]Task ID: {task.id} · {task.date}[/dim]")
