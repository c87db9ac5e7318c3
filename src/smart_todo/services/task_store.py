"""Task store - the authoritative in-memory task collection.

The store holds the ordered task sequence for a session and writes the full
collection back through its repository after every mutation. Operations on
unknown IDs are no-ops; they never raise.
"""

from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Any

from smart_todo.exceptions import AmbiguousTaskIdError, TaskNotFoundError
from smart_todo.models import Attachment, Task, TaskStats, TaskUpdate
from smart_todo.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered collection of tasks synchronised with a TaskRepository."""

    def __init__(self, repository: TaskRepository):
        """Initialize the task store.

        Args:
            repository: TaskRepository implementation used for persistence
        """
        self.repository = repository
        self._tasks: list[Task] = []
        self._last_id = 0

    def load(self) -> None:
        """Populate the collection from the repository.

        Repositories return an empty list for unreadable data, so loading
        never fails.
        """
        self._tasks = list(self.repository.load_tasks())
        logger.debug("Loaded %d task(s)", len(self._tasks))

    def _save(self) -> bool:
        saved = self.repository.save_tasks(tuple(self._tasks))
        if not saved:
            logger.warning("Persisting %d task(s) failed", len(self._tasks))
        return saved

    def _new_id(self) -> str:
        candidate = time.time_ns() // 1_000
        existing = {task.id for task in self._tasks}
        candidate = max(candidate, self._last_id + 1)
        while str(candidate) in existing:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def _find(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(
        self,
        title: str,
        desc: str,
        date: dt.date | str,
        priority: str,
        file: Attachment | None = None,
    ) -> Task:
        """Create a task, append it to the collection and persist.

        Title and date are not checked for emptiness here; that is left to
        the caller.

        Returns:
            The newly created Task
        """
        task = Task(
            id=self._new_id(),
            title=title,
            desc=desc,
            date=date,
            priority=priority,
            file=file,
            completed=False,
            created_at=dt.datetime.now(),
        )
        self._tasks.append(task)
        self._save()
        logger.info("Added task %s", task.id)
        return task

    def delete(self, task_id: str) -> None:
        """Remove the task with *task_id* if present, then persist."""
        before = len(self._tasks)
        self._tasks = [task for task in self._tasks if task.id != task_id]
        if len(self._tasks) != before:
            logger.info("Deleted task %s", task_id)
        self._save()

    def toggle_status(self, task_id: str) -> None:
        """Flip the completion flag of the task with *task_id*, if present."""
        task = self._find(task_id)
        if task is not None:
            task.completed = not task.completed
            logger.info("Task %s completed=%s", task_id, task.completed)
        self._save()

    def edit(self, task_id: str, fields: TaskUpdate | None = None, **kwargs: Any) -> None:
        """Merge the supplied fields onto the task with *task_id*, if present.

        Only fields that are explicitly given change; omitted fields keep
        their previous values. The merged task is validated as a whole before
        it replaces the stored one, so a rejected edit changes nothing.

        Args:
            task_id: Task ID to update
            fields: TaskUpdate holding the fields to change
            **kwargs: Alternative to *fields*, validated through TaskUpdate

        Raises:
            ValidationError: If the merged task is invalid
        """
        update = fields if fields is not None else TaskUpdate(**kwargs)
        changes = update.model_dump(exclude_unset=True)
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                merged = {**task.model_dump(), **changes}
                self._tasks[index] = Task.model_validate(merged)
                logger.info("Edited task %s (%s)", task_id, ", ".join(sorted(changes)))
                break
        self._save()

    def get_all(self) -> tuple[Task, ...]:
        """Return a read-only view of the collection in insertion order."""
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Return the task with *task_id*, or None."""
        return self._find(task_id)

    def resolve_id(self, task_id_or_suffix: str) -> str:
        """Resolve a full task ID or a unique ID suffix to a full task ID.

        Raises:
            TaskNotFoundError: If no task matches
            AmbiguousTaskIdError: If several tasks end with the suffix
        """
        if self._find(task_id_or_suffix) is not None:
            return task_id_or_suffix

        matches = [task for task in self._tasks if task.id.endswith(task_id_or_suffix)]
        if not task_id_or_suffix or not matches:
            raise TaskNotFoundError(f"No task found with ID or suffix '{task_id_or_suffix}'")

        if len(matches) > 1:
            suffix_lengths = calculate_unique_suffixes([task.id for task in self._tasks])
            suggestions = []
            for task in matches:
                title = task.title
                if len(title) > 70:
                    title = title[:67] + "..."
                suffix = task.id[-suffix_lengths[task.id]:]
                suggestions.append(f"  [{suffix}] {title}")
            raise AmbiguousTaskIdError(
                f"Multiple tasks match suffix '{task_id_or_suffix}':\n"
                + "\n".join(suggestions)
                + "\n\nUse the suffix in brackets to select a specific task."
            )

        return matches[0].id

    def get_stats(self) -> TaskStats:
        """Return total, completed and pending counts."""
        total = len(self._tasks)
        completed = sum(1 for task in self._tasks if task.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    if not task_ids:
        return {}

    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result
