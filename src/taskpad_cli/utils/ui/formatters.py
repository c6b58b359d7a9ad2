"""Machine-oriented output and one-line status messages.

The human task list view is drawn by ``taskpad_cli.ui.console_view``; this
module covers the ``table``/``json``/``yaml`` formats and the coloured
Error/Success/Info lines every command prints.
"""

import json
from typing import Any

import yaml
from rich.table import Table

from taskpad_cli.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """Shortest suffix length that tells each id apart from all the others.

    An id that is itself a suffix of another one needs its full length.
    """
    result = {}
    for task_id in task_ids:
        others = [tid for tid in task_ids if tid != task_id]
        length = 1
        while length < len(task_id) and any(o.endswith(task_id[-length:]) for o in others):
            length += 1
        result[task_id] = length
    return result


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None:
        return "-"
    return str(value)


def format_output(data: Any, output_format: str = "json") -> None:
    """Print ``data`` as json, yaml or a Rich table.

    Raises:
        ValueError: For any other format name
    """
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif output_format == "table":
        format_table(data)
    else:
        raise ValueError(f"Unknown output format '{output_format}'")


def format_table(data: Any) -> None:
    """A list of records (or ``{"tasks": [...]}``) as rows, a dict as key/value pairs."""
    if isinstance(data, dict) and "tasks" not in data:
        format_single_item(data)
        return

    records = data["tasks"] if isinstance(data, dict) else data
    if not records:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(records[0])
    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for record in records:
        table.add_row(*(_cell(record.get(column)) for column in columns))
    console.print(table)


def format_single_item(item: dict) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))
    console.print(table)


def format_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    console.print(f"[bold blue]Info:[/bold blue] {message}")
