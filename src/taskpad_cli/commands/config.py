"""Configuration management commands."""

import typer
from pydantic import ValidationError

from taskpad_cli.services.config_service import get_config_service
from taskpad_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskpad_cli.utils.ui.console import get_console
from taskpad_cli.utils.ui.formatters import format_error, format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("json", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    format_output(config_service.config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.date_format)"),
) -> None:
    """Get a configuration value."""
    config_service = get_config_service()
    value = config_service.get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not set")
        raise typer.Exit(ERROR_NOT_FOUND)
    console.print(value, highlight=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.default_sort)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_service = get_config_service()

    # Try to convert value to appropriate type
    parsed_value: str | bool = value
    if value.lower() in ("true", "false"):
        parsed_value = value.lower() == "true"

    try:
        config_service.set(key, parsed_value)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(ERROR_NOT_FOUND) from None
    except ValidationError as e:
        format_error(f"Invalid value for '{key}': {e.errors()[0]['msg']}")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all settings"
        if not typer.confirm(f"Reset {target} to defaults?"):
            format_info("Cancelled")
            return

    config_service = get_config_service()
    try:
        config_service.reset(key)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(ERROR_NOT_FOUND) from None
    format_success("Configuration reset")
