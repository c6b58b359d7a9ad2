"""Session commands: login, logout, whoami.

Logging in never asks for credentials. The chosen provider only decides the
shape of the locally fabricated user record.
"""

import typer
from rich.prompt import Prompt

from taskpad_cli.models import PROVIDERS
from taskpad_cli.services.app_controller import create_controller
from taskpad_cli.utils.exit_codes import ERROR_AUTH_FAILURE
from taskpad_cli.utils.ui.console import get_console
from taskpad_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Session commands")
console = get_console()


@app.command("login")
@command_wrapper
def login(
    provider: str | None = typer.Option(
        None, "--provider", "-p", help="facebook, google or demo"
    ),
) -> None:
    """Start a session."""
    if provider is None:
        provider = Prompt.ask("Provider", choices=list(PROVIDERS), default="demo")

    controller = create_controller()
    controller.login(provider)
    user = controller.state.user
    assert user is not None
    format_success(f"Logged in as {user.name} ({user.provider})")


@app.command("logout")
@command_wrapper
def logout() -> None:
    """End the session."""
    controller = create_controller()
    if controller.state.user is None:
        format_info("Not logged in.")
        return
    controller.logout()
    format_success("Logged out")


@app.command("whoami")
@command_wrapper
def whoami(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show the current user."""
    controller = create_controller()
    user = controller.state.user
    if user is None:
        format_info("Not logged in.")
        raise typer.Exit(ERROR_AUTH_FAILURE)
    format_output(user.model_dump(), output)
