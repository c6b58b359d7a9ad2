"""Main entry point for Taskpad CLI."""

import typer

from taskpad_cli import __version__
from taskpad_cli.commands import (
    add_command,
    auth,
    clear_command,
    config,
    date_command,
    delete_command,
    edit_command,
    list_command,
    theme_command,
    toggle_command,
    ui_command,
)
from taskpad_cli.services.config_service import get_config_service
from taskpad_cli.utils.logger import log_file_path
from taskpad_cli.utils.typer_helpers import SuggestingGroup
from taskpad_cli.utils.ui.console import get_console

app = typer.Typer(
    name="taskpad",
    cls=SuggestingGroup,
    help="A small local task list for the terminal",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("add")(add_command.add)
app.command("list")(list_command.list_tasks)
app.command("toggle")(toggle_command.toggle)
app.command("edit")(edit_command.edit)
app.command("date")(date_command.date)
app.command("delete")(delete_command.delete)
app.command("clear-completed")(clear_command.clear_completed)
app.command("clear-all")(clear_command.clear_all)
app.command("theme")(theme_command.theme)
app.command("login")(auth.login)
app.command("logout")(auth.logout)
app.command("whoami")(auth.whoami)
app.command("ui")(ui_command.ui)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Taskpad CLI[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Storage: {get_config_service().storage_path}[/dim]", highlight=False)
    console.print(f"[dim]Log file: {log_file_path()}[/dim]", highlight=False)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
