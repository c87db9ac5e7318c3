"""Command 'show' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_output, format_task_detail, task_to_dict

from .decorators import command_wrapper
from .utils import get_task_store, resolve_task

app = typer.Typer()
console = get_console()


@app.command("show")
@command_wrapper
def show_task(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """Show every field of a task."""
    if json_opt:
        output = "json"

    task = resolve_task(get_task_store(), task_id)

    if output in ("json", "yaml", "quiet"):
        format_output(task_to_dict(task), output)
    else:
        format_task_detail(task)
