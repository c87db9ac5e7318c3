"""Typer helpers shared by the top-level app and its command groups."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from smart_todo.utils import exit_codes
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_error

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, commands: dict[str, click.Command]) -> list[str]:
    """Return visible command names that look like *attempted*.

    Names starting with the attempt come first (``del`` offers ``delete``),
    then close spellings. Hidden aliases are never offered.
    """
    visible = [name for name, command in commands.items() if not command.hidden]
    prefixed = sorted(name for name in visible if attempted and name.startswith(attempted))
    similar = get_close_matches(attempted, visible, n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF)
    suggestions = prefixed + [name for name in similar if name not in prefixed]
    return suggestions[:MAX_SUGGESTIONS]


class SuggestingGroup(TyperGroup):
    """Typer group that answers an unknown command with likely alternatives."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, self.commands)
            if not suggestions:
                raise

            console = get_console()
            format_error(f'unknown command "{attempted}" for "{ctx.info_name}"')
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(exit_codes.ERROR_INVALID_ARGS) from e
