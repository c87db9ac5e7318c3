"""Tests for utils/ui/formatters.py."""

from __future__ import annotations

import datetime as dt
import json

import pytest
import yaml

from smart_todo.models import Attachment, TaskStats
from smart_todo.utils.ui.formatters import (
    format_date,
    format_output,
    format_stats,
    format_tasks,
    get_completion_color,
    get_progress_bar,
    task_to_dict,
)


def test_task_to_dict_drops_attachment_data(make_task):
    file = Attachment(name="a.pdf", mime_type="application/pdf", size=4, data="data:application/pdf;base64,JVBERg==")
    data = task_to_dict(make_task(file=file, date=dt.date(2024, 5, 20)))
    assert data["date"] == "2024-05-20"
    assert data["file"] == {"name": "a.pdf", "mime_type": "application/pdf", "size": 4}


class TestFormatTasks:
    def test_json_output(self, make_task, capsys):
        tasks = [make_task(title="A"), make_task(title="B")]
        format_tasks(tasks, "json")
        data = json.loads(capsys.readouterr().out)
        assert [t["title"] for t in data] == ["A", "B"]

    def test_yaml_output(self, make_task, capsys):
        format_tasks([make_task(title="A")], "yaml")
        data = yaml.safe_load(capsys.readouterr().out)
        assert data[0]["title"] == "A"

    def test_quiet_output(self, make_task, capsys):
        task = make_task()
        format_tasks([task], "quiet")
        assert capsys.readouterr().out.strip() == task.id

    def test_pretty_empty(self, capsys):
        format_tasks([], "pretty")
        assert "No tasks found" in capsys.readouterr().out

    def test_pretty_keeps_order_and_flags_late(self, make_task, today, capsys):
        late = make_task(title="Late one", date=today - dt.timedelta(days=2))
        fine = make_task(title="Fine one", date=today + dt.timedelta(days=9), priority="high")
        format_tasks([fine, late], "pretty", today=today)
        out = capsys.readouterr().out
        assert out.index("Fine one") < out.index("Late one")
        assert "Late" in out
        assert "HIGH" in out
        assert "2 active, 0 completed" in out

    def test_pretty_shows_file_and_suffix(self, make_task, today, capsys):
        file = Attachment(name="scan.png", mime_type="image/png", size=1, data="")
        task = make_task(title="With file", file=file)
        format_tasks([task], "pretty", today=today)
        out = capsys.readouterr().out
        assert "scan.png" in out
        assert f"#{task.id[-1]}" in out

    def test_table(self, make_task, today, capsys):
        format_tasks([make_task(title="Tabled")], "table", today=today)
        assert "Tabled" in capsys.readouterr().out


def test_format_output_dict_table(capsys):
    format_output({"ai_model": "gemini"}, "table")
    out = capsys.readouterr().out
    assert "Ai Model" in out
    assert "gemini" in out


def test_format_stats(capsys):
    format_stats(TaskStats(total=4, completed=3, pending=1))
    out = capsys.readouterr().out
    assert "Total:" in out
    assert "75%" in out


class TestHelpers:
    def test_format_date_current_year(self):
        this_year = dt.date.today().replace(month=3, day=5)
        assert format_date(this_year, "%d %b") == "05 Mar"

    def test_format_date_other_year(self):
        assert format_date(dt.date(2001, 3, 5), "%d %b") == "05 Mar 2001"

    @pytest.mark.parametrize(("pct", "bar"), [(0, "░" * 10), (50, "▓" * 5 + "░" * 5), (100, "▓" * 10)])
    def test_progress_bar(self, pct, bar):
        assert get_progress_bar(pct) == bar

    @pytest.mark.parametrize(("pct", "color"), [(90, "green"), (50, "yellow"), (10, "red")])
    def test_completion_color(self, pct, color):
        assert get_completion_color(pct) == color
