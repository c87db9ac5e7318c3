"""Command 'stats' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_output, format_stats

from .decorators import command_wrapper
from .utils import get_task_store

app = typer.Typer()
console = get_console()


@app.command("stats")
@command_wrapper
def show_stats(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """Show task totals and completion progress."""
    if json_opt:
        output = "json"

    stats = get_task_store().get_stats()

    if output in ("json", "yaml"):
        format_output(stats.model_dump(), output)
    else:
        format_stats(stats)
