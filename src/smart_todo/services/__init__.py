"""Services module for Smart To-Do - business logic layer."""

from .deadline import DeadlineStatus, classify_deadline, count_urgent, scan_deadlines
from .query import FILTERS, SORT_MODES, query_tasks
from .task_store import TaskStore

__all__ = [
    "TaskStore",
    "query_tasks",
    "FILTERS",
    "SORT_MODES",
    "DeadlineStatus",
    "classify_deadline",
    "count_urgent",
    "scan_deadlines",
]
