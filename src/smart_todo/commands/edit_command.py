"""Command 'edit' of smart-todo"""

from pathlib import Path
from typing import Annotated, Any

import typer

from smart_todo.models import TaskUpdate
from smart_todo.services.attachment_service import read_attachment
from smart_todo.services.deadline import scan_deadlines
from smart_todo.utils import exit_codes
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_info, format_success

from .decorators import AppError, command_wrapper
from .utils import get_notifier, get_task_store, parse_due_date, resolve_task

app = typer.Typer()
console = get_console()


@app.command("edit")
@command_wrapper
def edit_task(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    desc: Annotated[
        str | None, typer.Option("--desc", "-d", help="New description")
    ] = None,
    date: Annotated[
        str | None, typer.Option("--date", help="New due date (today/tomorrow/YYYY-MM-DD)")
    ] = None,
    priority: Annotated[
        str | None, typer.Option("--priority", "-p", help="New priority (high/medium/low)")
    ] = None,
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="Replace the attachment")
    ] = None,
    remove_file: Annotated[
        bool, typer.Option("--remove-file", help="Remove the attachment")
    ] = False,
) -> None:
    """Edit a task. Only the options given are changed."""
    if file is not None and remove_file:
        raise AppError(
            "--file and --remove-file cannot be used together",
            exit_codes.ERROR_INVALID_ARGS,
        )

    changes: dict[str, Any] = {}
    if title is not None:
        title = title.strip()
        if not title:
            raise AppError("Task title cannot be empty", exit_codes.ERROR_INVALID_ARGS)
        changes["title"] = title
    if desc is not None:
        changes["desc"] = desc.strip()
    if date is not None:
        changes["date"] = parse_due_date(date)
    if priority is not None:
        changes["priority"] = priority.lower()
    if file is not None:
        changes["file"] = read_attachment(file)
    elif remove_file:
        changes["file"] = None

    if not changes:
        format_info("Nothing to change")
        return

    update = TaskUpdate(**changes)

    store = get_task_store()
    task = resolve_task(store, task_id)
    store.edit(task.id, update)
    task = store.get(task.id)
    format_success(f"Task updated: {task.title}")

    scan_deadlines(store.get_all(), get_notifier())
