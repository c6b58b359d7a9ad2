"""Rich drawing of a ViewModel for the command line."""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from taskpad_cli.ui.render import ChoiceGroup, TaskRow, ViewModel
from taskpad_cli.utils.ui.console import get_console
from taskpad_cli.utils.ui.formatters import calculate_unique_suffixes

console = get_console()

# Per-theme styles: (accent, muted, done)
THEME_STYLES: dict[str, tuple[str, str, str]] = {
    "light": ("bold blue", "grey50", "strike grey50"),
    "dark": ("bold cyan", "grey62", "strike grey42"),
}


def short_ids(
    rows: tuple[TaskRow, ...], known_ids: Iterable[int] | None = None
) -> dict[int, str]:
    """Shortest id suffix per row that stays unique among ``known_ids``.

    ``known_ids`` should be the whole collection, not just the visible rows,
    so a suffix shown under a filter still resolves to one task.
    """
    shown = [str(row.task_id) for row in rows]
    everyone = {str(tid) for tid in known_ids or ()} | set(shown)
    lengths = calculate_unique_suffixes(sorted(everyone))
    return {int(tid): tid[-lengths[tid]:] for tid in shown}


def _choice_line(label: str, group: ChoiceGroup, accent: str) -> Text:
    line = Text(f"{label}: ", style="dim")
    for option in group.options:
        if group.is_active(option):
            line.append(f"[{option}]", style=accent)
        else:
            line.append(f" {option} ", style="dim")
        line.append(" ")
    return line


def draw_header(view: ViewModel) -> None:
    accent, muted, _ = THEME_STYLES[view.theme]
    header = Text()
    header.append("📋 Tasks ", style=accent)
    if view.user is not None:
        header.append(f"· {view.user.name} ", style=muted)
    header.append(view.theme_icon)
    console.print(header)
    console.print(_choice_line("Filter", view.filters, accent))
    console.print(_choice_line("Sort", view.sorts, accent))
    console.print()


def draw_tasks(view: ViewModel, known_ids: Iterable[int] | None = None) -> None:
    """Print the task list, or the placeholder when it is empty."""
    accent, muted, done_style = THEME_STYLES[view.theme]

    if view.placeholder is not None:
        console.print(f"[{muted}]{view.placeholder}[/{muted}]")
        return

    ids = short_ids(view.rows, known_ids)
    table = Table(show_header=True, header_style=accent, box=None, padding=(0, 1))
    table.add_column("ID", style=muted, no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Task")
    table.add_column("Date", style=muted, no_wrap=True)

    for row in view.rows:
        text = Text(row.text, style=done_style if row.done else "")
        table.add_row(ids[row.task_id], "☑" if row.done else "☐", text, row.date)

    console.print(table)


def draw(view: ViewModel, known_ids: Iterable[int] | None = None) -> None:
    """Print the whole view. ``known_ids`` are all task ids, for short ids."""
    if view.screen == "login":
        console.print("[yellow]Not logged in.[/yellow]")
        console.print(
            "Log in with one of: " + ", ".join(view.providers)
            + "  [dim](taskpad login --provider demo)[/dim]"
        )
        return

    draw_header(view)
    draw_tasks(view, known_ids)
