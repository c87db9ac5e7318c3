"""Command 'add' of smart-todo"""

from pathlib import Path
from typing import Annotated

import typer

from smart_todo.models import TaskCreate
from smart_todo.services.attachment_service import read_attachment
from smart_todo.services.deadline import scan_deadlines
from smart_todo.utils import exit_codes
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_output, format_success, task_to_dict

from .decorators import AppError, command_wrapper
from .utils import get_notifier, get_task_store, parse_due_date

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
def add_task(
    title: Annotated[str, typer.Argument(help="Task title")],
    desc: Annotated[
        str, typer.Option("--desc", "-d", help="Task description")
    ] = "",
    date: Annotated[
        str | None,
        typer.Option("--date", help="Due date (today/tomorrow/YYYY-MM-DD), default today"),
    ] = None,
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="Priority (high/medium/low)")
    ] = "medium",
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="File to attach (max 2 MB)")
    ] = None,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """
    Add a new task.

    Examples:
      smart-todo add "Write report" --date tomorrow -p high
      smart-todo add "Read paper" --file paper.pdf
    """
    if json_opt:
        output = "json"

    title = title.strip()
    if not title:
        raise AppError("Task title cannot be empty", exit_codes.ERROR_INVALID_ARGS)

    attachment = read_attachment(file) if file is not None else None
    data = TaskCreate(
        title=title,
        desc=desc.strip(),
        date=parse_due_date(date),
        priority=priority.lower(),
        file=attachment,
    )

    store = get_task_store()
    task = store.add(data.title, data.desc, data.date, data.priority, data.file)

    if output in ("json", "yaml", "quiet"):
        format_output(task_to_dict(task), output)
    else:
        format_success(f"Task created: {task.title} (#{task.id})")

    scan_deadlines(store.get_all(), get_notifier())
