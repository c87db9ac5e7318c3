"""Command 'theme' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.adapters.json_storage import THEMES
from smart_todo.utils import exit_codes
from smart_todo.utils.ui.console import get_console, use_theme
from smart_todo.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import get_storage

app = typer.Typer()


@app.command("theme")
@command_wrapper
def set_theme(
    theme: Annotated[
        str | None, typer.Argument(help="Theme to use (light/dark); omit to show it")
    ] = None,
) -> None:
    """Show or set the colour theme."""
    storage = get_storage()

    if theme is None:
        get_console().print(f"Theme: [bold]{storage.load_theme()}[/bold]")
        return

    theme = theme.lower()
    if theme not in THEMES:
        raise AppError(
            f"Unknown theme '{theme}'. Choose from: {', '.join(THEMES)}",
            exit_codes.ERROR_INVALID_ARGS,
        )
    storage.save_theme(theme)
    use_theme(theme)
    format_success(f"Theme set to {theme}")
