"""Command 'list' of smart-todo"""

from typing import Annotated

import typer

from smart_todo.services.config_service import get_config_service
from smart_todo.services.deadline import scan_deadlines
from smart_todo.services.query import FILTERS, SORT_MODES, query_tasks
from smart_todo.utils import exit_codes
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import OUTPUT_FORMATS, format_tasks

from .decorators import AppError, command_wrapper
from .utils import get_notifier, get_task_store

app = typer.Typer()
console = get_console()


@app.command("list")
@command_wrapper
def list_tasks(
    filter_opt: Annotated[
        str | None,
        typer.Option("--filter", help="Status filter (all/pending/completed)"),
    ] = None,
    sort: Annotated[
        str | None,
        typer.Option(
            "--sort",
            "-s",
            help="Sort mode (date_asc/date_desc/priority_desc/priority_asc)",
        ),
    ] = None,
    search: Annotated[
        str | None, typer.Option("--search", "-q", help="Search title and description")
    ] = None,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """List tasks. Pending tasks always come before completed ones."""
    if json_opt:
        output = "json"

    ui = get_config_service().config.ui
    filter_opt = filter_opt or ui.default_filter
    sort = sort or ui.default_sort

    if filter_opt not in FILTERS:
        raise AppError(
            f"Unknown filter '{filter_opt}'. Choose from: {', '.join(FILTERS)}",
            exit_codes.ERROR_INVALID_ARGS,
        )
    if sort not in SORT_MODES:
        raise AppError(
            f"Unknown sort '{sort}'. Choose from: {', '.join(SORT_MODES)}",
            exit_codes.ERROR_INVALID_ARGS,
        )
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            exit_codes.ERROR_INVALID_ARGS,
        )

    store = get_task_store()
    all_tasks = store.get_all()

    if output == "pretty":
        scan_deadlines(all_tasks, get_notifier())

    view = query_tasks(all_tasks, filter=filter_opt, sort=sort, search=search)
    format_tasks(
        view,
        output,
        all_task_ids=[task.id for task in all_tasks],
        date_format=ui.date_format,
    )
