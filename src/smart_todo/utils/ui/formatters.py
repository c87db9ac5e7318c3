"""Output formatters for different formats."""

from __future__ import annotations

import datetime as dt
import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from smart_todo.models import Task, TaskStats
from smart_todo.services.deadline import DeadlineStatus, classify_deadline
from smart_todo.services.task_store import calculate_unique_suffixes

from .console import get_console

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml", "quiet")

# Priority badges
PRIORITY_BADGES = {
    "high": ("HIGH", "bold white on red"),
    "medium": ("MEDIUM", "bold black on dark_orange"),
    "low": ("LOW", "bold white on green4"),
}

DEADLINE_STYLES = {
    DeadlineStatus.OVERDUE: "bold red",
    DeadlineStatus.NEAR_DUE: "bold dark_orange",
    DeadlineStatus.NONE: "cyan",
}

# Status Icons
STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}

# Metadata Icons
METADATA_ICONS = {
    "due_date": "📅",
    "overdue": "⏱️",
    "file": "📎",
}


def task_to_dict(task: Task) -> dict[str, Any]:
    """Serialise a task for machine-readable output, without attachment data."""
    return task.model_dump(mode="json", exclude={"file": {"data"}})


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data (dicts/lists) based on format."""
    console = get_console()
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif output_format == "quiet":
        format_quiet(data)
    elif isinstance(data, list) and data and isinstance(data[0], dict):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_tasks(
    tasks: list[Task],
    output_format: str = "pretty",
    *,
    all_task_ids: list[str] | None = None,
    today: dt.date | None = None,
    date_format: str = "%a, %d %b",
) -> None:
    """Render a view list in the requested format, keeping its order."""
    if output_format in ("json", "yaml", "quiet"):
        format_output([task_to_dict(task) for task in tasks], output_format)
        return

    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    suffix_ids = all_task_ids if all_task_ids is not None else [t.id for t in tasks]
    suffix_map = calculate_unique_suffixes(suffix_ids)
    today = today or dt.date.today()

    if output_format == "table":
        format_tasks_table(tasks, suffix_map, today, date_format)
        return

    active = [t for t in tasks if not t.completed]
    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active, {len(tasks) - len(active)} completed)", style="dim")
    console.print(header)
    console.print()

    for task in tasks:
        format_task_item(task, suffix_map=suffix_map, today=today, date_format=date_format)


def _id_suffix(task_id: str, suffix_map: dict[str, int] | None) -> str:
    if suffix_map and task_id in suffix_map:
        return task_id[-suffix_map[task_id]:]
    return task_id[-6:]


def format_task_item(
    task: Task,
    *,
    suffix_map: dict[str, int] | None = None,
    today: dt.date | None = None,
    date_format: str = "%a, %d %b",
    indent: str = "",
) -> None:
    """Format a single task as a title line plus a metadata line."""
    console = get_console()
    status = classify_deadline(task.date, task.completed, today)
    icon = STATUS_ICONS["completed"] if task.completed else STATUS_ICONS["open"]

    label, badge_style = PRIORITY_BADGES.get(task.priority, PRIORITY_BADGES["medium"])

    line = Text(f"{indent}{icon} ")
    line.append(f" {label} ", style=badge_style)
    line.append(" ")
    line.append(task.title, style="task.done" if task.completed else "task.title")
    if status is DeadlineStatus.OVERDUE:
        line.append("  ⚠ Late", style="bold red")
    console.print(line)

    if task.desc:
        desc = task.desc if len(task.desc) <= 120 else task.desc[:117] + "..."
        console.print(Text(f"{indent}   {desc}", style="task.desc"))

    meta = Text()
    meta.append(f"{indent}   └─ ", style="dim")
    meta.append(
        f"{METADATA_ICONS['due_date']} {format_date(task.date, date_format)}",
        style=DEADLINE_STYLES[status],
    )
    if task.file is not None:
        meta.append(" • ", style="dim")
        meta.append(f"{METADATA_ICONS['file']} {task.file.name}", style="magenta")
    meta.append(" • ", style="dim")
    meta.append(f"#{_id_suffix(task.id, suffix_map)}", style="dim")
    console.print(meta)


def format_tasks_table(
    tasks: list[Task],
    suffix_map: dict[str, int],
    today: dt.date,
    date_format: str = "%a, %d %b",
) -> None:
    """Format tasks as a rich table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Done")
    table.add_column("Priority")
    table.add_column("Title")
    table.add_column("Due")
    table.add_column("File")

    for task in tasks:
        status = classify_deadline(task.date, task.completed, today)
        label, badge_style = PRIORITY_BADGES.get(task.priority, PRIORITY_BADGES["medium"])
        table.add_row(
            _id_suffix(task.id, suffix_map),
            "✓" if task.completed else "✗",
            Text(label, style=badge_style),
            Text(task.title, style="task.done" if task.completed else ""),
            Text(format_date(task.date, date_format), style=DEADLINE_STYLES[status]),
            task.file.name if task.file else "-",
        )

    get_console().print(table)


def format_task_detail(task: Task, today: dt.date | None = None) -> None:
    """Show every field of one task."""
    status = classify_deadline(task.date, task.completed, today)
    item = {
        "id": task.id,
        "title": task.title,
        "description": task.desc or None,
        "due": task.date.isoformat(),
        "deadline": status.value,
        "priority": task.priority,
        "completed": task.completed,
        "created_at": task.created_at.isoformat(timespec="seconds"),
        "attachment": (
            f"{task.file.name} ({task.file.mime_type}, {task.file.size} bytes)"
            if task.file
            else None
        ),
    }
    format_single_item(item)


def format_stats(stats: TaskStats) -> None:
    """Show totals and a progress bar."""
    console = get_console()
    pct = stats.progress_percent
    console.print(
        f"[bold]Total:[/bold] {stats.total}   "
        f"[bold green]Completed:[/bold green] {stats.completed}   "
        f"[bold yellow]Pending:[/bold yellow] {stats.pending}"
    )
    console.print(
        f"[{get_completion_color(pct)}]{get_progress_bar(pct)} {pct}%[/{get_completion_color(pct)}]"
    )


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    table = Table(show_header=True, header_style="bold magenta")
    columns = list(items[0].keys())
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for item in items:
        table.add_row(*[_format_value(item.get(col)) for col in columns])
    get_console().print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), escape(_format_value(value)))

    get_console().print(table)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (IDs only)."""
    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict) and "id" in item:
                print(item["id"])
    elif isinstance(data, dict) and "id" in data:
        print(data["id"])


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {escape(message)}")


# ============================================================================
# Helper Functions
# ============================================================================


def format_date(value: dt.date, date_format: str = "%a, %d %b") -> str:
    """Format a due date, adding the year when it is not the current one."""
    text = value.strftime(date_format)
    if value.year != dt.date.today().year and "%Y" not in date_format:
        text += f" {value.year}"
    return text


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty


def get_completion_color(percentage: float) -> str:
    """Get color based on completion percentage."""
    if percentage >= 80:
        return "green"
    if percentage >= 40:
        return "yellow"
    return "red"
