"""Command 'theme' of taskpad-cli"""

import typer

from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.ui.console import get_console

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("theme")
@command_wrapper
def theme(
    show: bool = typer.Option(False, "--show", help="Show the theme without changing it"),
) -> None:
    """Switch between the light and dark theme."""
    controller = create_controller()
    view = controller.render() if show else controller.toggle_theme()
    console.print(f"{view.theme_icon}  Theme: [bold]{view.theme}[/bold]")
