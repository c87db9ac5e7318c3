"""Command 'check' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.services.deadline import count_urgent, scan_deadlines
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import command_wrapper
from .utils import get_notifier, get_task_store

app = typer.Typer()
console = get_console()


@app.command("check")
@command_wrapper
def check_deadlines(
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only print the alert, if any")
    ] = False,
) -> None:
    """Scan for tasks that are near their deadline or overdue."""
    store = get_task_store()
    notifier = get_notifier()
    tasks = store.get_all()

    delivered = scan_deadlines(tasks, notifier)
    if quiet or delivered is not None:
        return

    urgent = count_urgent(tasks)
    if urgent == 0:
        format_success("No tasks are near their deadline")
    elif not notifier.is_permission_granted():
        format_warning(
            f"{urgent} urgent task(s). Notifications are off; enable them with 'smart-todo notify on'"
        )
    else:
        format_info(f"{urgent} urgent task(s). Already alerted today")
