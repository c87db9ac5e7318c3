"""Deadline classification and the aggregate deadline scan."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable
from enum import Enum
from typing import Protocol

from smart_todo.models import Task

logger = logging.getLogger(__name__)

# Tasks due today, tomorrow or the day after count as near due.
NEAR_DUE_DAYS = 2


class DeadlineStatus(str, Enum):
    """Urgency of a task relative to today."""

    NONE = "none"
    NEAR_DUE = "near-due"
    OVERDUE = "overdue"


class Notifier(Protocol):
    """Delivery side of deadline alerts."""

    def is_permission_granted(self) -> bool: ...

    def already_alerted(self) -> bool: ...

    def deliver(self, count: int) -> None: ...


def _as_date(value: dt.date | str) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(value)


def classify_deadline(
    date: dt.date | str, completed: bool, today: dt.date | None = None
) -> DeadlineStatus:
    """Classify a due date as none, near-due or overdue.

    Args:
        date: Due date, as a date or an ISO ``YYYY-MM-DD`` string
        completed: Completed tasks are never urgent
        today: Reference day; defaults to the local calendar date

    Raises:
        ValueError: If *date* is a malformed string
    """
    if completed:
        return DeadlineStatus.NONE

    due = _as_date(date)
    if today is None:
        today = dt.date.today()

    diff_days = (due - today).days
    if diff_days < 0:
        return DeadlineStatus.OVERDUE
    if diff_days <= NEAR_DUE_DAYS:
        return DeadlineStatus.NEAR_DUE
    return DeadlineStatus.NONE


def count_urgent(tasks: Iterable[Task], today: dt.date | None = None) -> int:
    """Count incomplete tasks that are near due or overdue."""
    if today is None:
        today = dt.date.today()
    return sum(
        1
        for task in tasks
        if not task.completed
        and classify_deadline(task.date, False, today) is not DeadlineStatus.NONE
    )


def scan_deadlines(
    tasks: Iterable[Task], notifier: Notifier, today: dt.date | None = None
) -> int | None:
    """Raise at most one aggregate alert for urgent tasks.

    Nothing happens when the notifier lacks permission or has already
    alerted in the current window.

    Returns:
        The number of urgent tasks when an alert was delivered, else None
    """
    if not notifier.is_permission_granted():
        logger.debug("Deadline scan skipped: notifications not permitted")
        return None
    if notifier.already_alerted():
        logger.debug("Deadline scan skipped: already alerted in this window")
        return None

    count = count_urgent(tasks, today)
    if count == 0:
        return None

    notifier.deliver(count)
    logger.info("Deadline alert delivered for %d task(s)", count)
    return count
