"""Query engine - search, filter and sort the task collection into a view list."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Literal

from smart_todo.models import Task, priority_rank

StatusFilter = Literal["all", "pending", "completed"]
SortMode = Literal["date_asc", "date_desc", "priority_desc", "priority_asc"]

FILTERS: tuple[str, ...] = ("all", "pending", "completed")
SORT_MODES: tuple[str, ...] = ("date_asc", "date_desc", "priority_desc", "priority_asc")

_SECONDARY_KEYS: dict[str, Callable[[Task], int]] = {
    "date_asc": lambda t: t.date.toordinal(),
    "date_desc": lambda t: -t.date.toordinal(),
    "priority_desc": lambda t: -priority_rank(t.priority),
    "priority_asc": lambda t: priority_rank(t.priority),
}


def matches_search(task: Task, search: str) -> bool:
    """Case-insensitive substring match on title or description."""
    query = search.lower()
    return query in task.title.lower() or query in (task.desc or "").lower()


def query_tasks(
    tasks: Iterable[Task],
    filter: str = "all",
    sort: str = "date_asc",
    search: str | None = None,
) -> list[Task]:
    """Build the view list from a task collection.

    Stages run in a fixed order: search, then status filter, then a stable
    sort. Incomplete tasks always come before completed ones; *sort* picks
    the secondary key. Tasks that tie keep their input order. The input is
    never modified.

    Args:
        tasks: Task collection snapshot
        filter: "all", "pending" or "completed"; unknown values mean "all"
        sort: One of SORT_MODES; unknown values leave the secondary order as is
        search: Optional search text; empty means no search

    Returns:
        A new list of tasks
    """
    view = list(tasks)

    if search:
        view = [task for task in view if matches_search(task, search)]

    if filter == "pending":
        view = [task for task in view if not task.completed]
    elif filter == "completed":
        view = [task for task in view if task.completed]

    secondary = _SECONDARY_KEYS.get(sort, lambda t: 0)
    return sorted(view, key=lambda t: (t.completed, secondary(t)))
