"""Smart To-Do: a local task manager with deadline alerts and an AI assistant."""

__version__ = "0.1.0"

from .models import Task
from .services.deadline import (
    DeadlineStatus,
    classify_deadline,
    count_urgent,
    scan_deadlines,
)
from .services.query import query_tasks
from .services.task_store import TaskStore

__all__ = [
    "__version__",
    "Task",
    "TaskStore",
    "query_tasks",
    "classify_deadline",
    "count_urgent",
    "scan_deadlines",
    "DeadlineStatus",
]
