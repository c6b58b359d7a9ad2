"""List command - show the task list."""

import typer

from taskpad_cli.models import TASK_FILTERS, TASK_SORTS
from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.services.config_service import get_config_service
from taskpad_cli.ui import console_view
from taskpad_cli.utils.exit_codes import ERROR_AUTH_FAILURE, ERROR_INVALID_ARGS
from taskpad_cli.utils.ui.formatters import OUTPUT_FORMATS, format_error, format_output

from .decorators import command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_tasks(
    filter_: str | None = typer.Option(
        None, "--filter", "-f", help="Filter: all, active or completed"
    ),
    sort: str | None = typer.Option(
        None, "--sort", "-s", help="Sort: newest, oldest, completed or active"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty/table/json/yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List tasks."""
    if filter_ is not None and filter_ not in TASK_FILTERS:
        format_error(f"Unknown filter '{filter_}'. Choose one of: {', '.join(TASK_FILTERS)}")
        raise typer.Exit(ERROR_INVALID_ARGS)
    if sort is not None and sort not in TASK_SORTS:
        format_error(f"Unknown sort '{sort}'. Choose one of: {', '.join(TASK_SORTS)}")
        raise typer.Exit(ERROR_INVALID_ARGS)

    output_config = get_config_service().config.output
    if json_opt:
        output = "json"
    output = output or output_config.format
    if output not in OUTPUT_FORMATS:
        format_error(f"Unknown output format '{output}'")
        raise typer.Exit(ERROR_INVALID_ARGS)

    controller = create_controller()
    if filter_ is not None:
        controller.set_filter(filter_)  # type: ignore[arg-type]
    if sort is not None:
        controller.set_sort(sort)  # type: ignore[arg-type]
    view = controller.render()

    if view.screen == "login":
        console_view.draw(view)
        raise typer.Exit(ERROR_AUTH_FAILURE)

    if output == "pretty":
        known_ids = [t.id for t in controller.state.tasks]
        console = console_view.console
        previous = console.no_color
        console.no_color = not output_config.color
        try:
            console_view.draw(view, known_ids)
        finally:
            console.no_color = previous
        return

    tasks = [
        {"id": row.task_id, "text": row.text, "done": row.done, "date": row.date}
        for row in view.rows
    ]
    format_output({"tasks": tasks}, output)
