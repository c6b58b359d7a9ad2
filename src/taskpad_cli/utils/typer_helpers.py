"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from taskpad_cli.utils.exit_codes import ERROR_GENERAL
from taskpad_cli.utils.ui.console import get_console
from taskpad_cli.utils.ui.formatters import format_error


class SuggestingGroup(TyperGroup):
    """Command group that answers a mistyped command with close matches.

    ``taskpad lst`` prints "Did you mean this? list" instead of click's bare
    usage error. Input with no close match keeps click's behaviour.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = get_close_matches(attempted, list(self.commands), n=3, cutoff=0.6)
            if not suggestions:
                raise

            console = get_console()
            format_error(f'unknown command "{attempted}" for "{ctx.info_name}"')
            console.print()
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(f"[yellow]{heading}[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(ERROR_GENERAL) from e
