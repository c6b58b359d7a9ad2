"""Command 'ui' of taskpad-cli"""

import typer

from .decorators import command_wrapper

app = typer.Typer()


@app.command("ui")
@command_wrapper
def ui() -> None:
    """Open the interactive terminal app."""
    # Lazy import to keep Textual out of every other command's startup
    from taskpad_cli.ui.textual_app import TaskpadApp

    TaskpadApp().run()
