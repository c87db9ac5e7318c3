"""Commands 'done' and 'toggle' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import get_notifier, get_task_store, resolve_task

app = typer.Typer()
console = get_console()


@app.command("toggle")
@command_wrapper
def toggle_task(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
) -> None:
    """Flip a task between pending and completed."""
    store = get_task_store()
    task = resolve_task(store, task_id)

    store.toggle_status(task.id)
    if task.completed:
        get_notifier().chime()
        format_success(f"Completed: {task.title}")
    else:
        format_success(f"Reopened: {task.title}")
