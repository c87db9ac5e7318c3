"""Command 'delete' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import get_task_store, resolve_task

app = typer.Typer()
console = get_console()


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
) -> None:
    """Delete a task. There is no undo."""
    store = get_task_store()
    task = resolve_task(store, task_id)

    if not yes:
        confirm = typer.confirm(f"Delete task '{task.title}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    store.delete(task.id)
    format_success(f"Task deleted: {task.title}")
