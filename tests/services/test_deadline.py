"""Unit tests for services/deadline.py - classifier and aggregate scan."""

from __future__ import annotations

import datetime as dt

import pytest

from smart_todo.services.deadline import (
    NEAR_DUE_DAYS,
    DeadlineStatus,
    classify_deadline,
    count_urgent,
    scan_deadlines,
)


class FakeNotifier:
    """Notifier double with a per-window flag."""

    def __init__(self, permission: bool = True):
        self.permission = permission
        self.alerted = False
        self.delivered: list[int] = []

    def is_permission_granted(self) -> bool:
        return self.permission

    def already_alerted(self) -> bool:
        return self.alerted

    def deliver(self, count: int) -> None:
        self.delivered.append(count)
        self.alerted = True


# ---------------------------------------------------------------------------
# classify_deadline
# ---------------------------------------------------------------------------


class TestClassifyDeadline:
    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (-30, DeadlineStatus.OVERDUE),
            (-1, DeadlineStatus.OVERDUE),
            (0, DeadlineStatus.NEAR_DUE),
            (1, DeadlineStatus.NEAR_DUE),
            (2, DeadlineStatus.NEAR_DUE),
            (3, DeadlineStatus.NONE),
            (30, DeadlineStatus.NONE),
        ],
    )
    def test_boundaries(self, today, offset, expected):
        due = today + dt.timedelta(days=offset)
        assert classify_deadline(due, False, today) is expected

    def test_near_due_window_is_two_days(self):
        assert NEAR_DUE_DAYS == 2

    @pytest.mark.parametrize("offset", [-5, 0, 1, 10])
    def test_completed_is_never_urgent(self, today, offset):
        due = today + dt.timedelta(days=offset)
        assert classify_deadline(due, True, today) is DeadlineStatus.NONE

    def test_accepts_iso_string(self, today):
        assert classify_deadline("2024-05-09", False, today) is DeadlineStatus.OVERDUE

    def test_accepts_datetime(self, today):
        due = dt.datetime(2024, 5, 11, 23, 59)
        assert classify_deadline(due, False, today) is DeadlineStatus.NEAR_DUE

    def test_malformed_string_raises(self, today):
        with pytest.raises(ValueError):
            classify_deadline("not-a-date", False, today)

    def test_defaults_to_local_today(self):
        assert classify_deadline(dt.date.today(), False) is DeadlineStatus.NEAR_DUE

    def test_status_values(self):
        assert DeadlineStatus.NEAR_DUE.value == "near-due"
        assert DeadlineStatus.OVERDUE == "overdue"


# ---------------------------------------------------------------------------
# count_urgent / scan_deadlines
# ---------------------------------------------------------------------------


@pytest.fixture()
def scenario(make_task, today):
    """T1 overdue, T2 due tomorrow, T3 next week, T4 overdue but done."""
    return [
        make_task(title="T1", date=today - dt.timedelta(days=1)),
        make_task(title="T2", date=today + dt.timedelta(days=1)),
        make_task(title="T3", date=today + dt.timedelta(days=7)),
        make_task(title="T4", date=today - dt.timedelta(days=1), completed=True),
    ]


def test_count_urgent(scenario, today):
    assert count_urgent(scenario, today) == 2


def test_count_urgent_empty(today):
    assert count_urgent([], today) == 0


class TestScanDeadlines:
    def test_single_alert_then_suppressed(self, scenario, today):
        notifier = FakeNotifier()
        assert scan_deadlines(scenario, notifier, today) == 2
        assert scan_deadlines(scenario, notifier, today) is None
        assert notifier.delivered == [2]

    def test_no_permission_no_alert(self, scenario, today):
        notifier = FakeNotifier(permission=False)
        assert scan_deadlines(scenario, notifier, today) is None
        assert notifier.delivered == []

    def test_nothing_urgent_no_alert(self, make_task, today):
        notifier = FakeNotifier()
        tasks = [make_task(date=today + dt.timedelta(days=10))]
        assert scan_deadlines(tasks, notifier, today) is None
        assert notifier.delivered == []
        assert notifier.alerted is False

    def test_new_window_alerts_again(self, scenario, today):
        notifier = FakeNotifier()
        scan_deadlines(scenario, notifier, today)
        notifier.alerted = False
        scan_deadlines(scenario, notifier, today)
        assert notifier.delivered == [2, 2]
