"""Tests for the 'list' command."""

from __future__ import annotations

import datetime as dt
import json

import pytest
from typer.testing import CliRunner

from smart_todo.main import app
from smart_todo.utils import exit_codes

runner = CliRunner()


@pytest.fixture()
def seeded(seed_tasks, make_task, cli_storage):
    cli_storage.save_notif_pref(False)
    far = dt.date.today() + dt.timedelta(days=30)
    return seed_tasks(
        make_task(title="Low later", priority="low", date=far + dt.timedelta(days=1)),
        make_task(title="High soon", priority="high", date=far),
        make_task(title="Done high", priority="high", date=far, completed=True),
        make_task(title="Groceries", desc="milk and eggs", priority="medium", date=far),
    )


def _titles(output: str) -> list[str]:
    return [t["title"] for t in json.loads(output)]


def test_list_default_order(seeded):
    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 0, result.output
    assert _titles(result.output) == ["High soon", "Groceries", "Low later", "Done high"]


def test_list_pending_priority_desc(seeded):
    result = runner.invoke(app, ["list", "--filter", "pending", "--sort", "priority_desc", "--json"])
    assert _titles(result.output) == ["High soon", "Groceries", "Low later"]


def test_list_completed(seeded):
    result = runner.invoke(app, ["list", "--filter", "completed", "--json"])
    assert _titles(result.output) == ["Done high"]


def test_list_search(seeded):
    result = runner.invoke(app, ["list", "--search", "EGGS", "--json"])
    assert _titles(result.output) == ["Groceries"]


def test_list_pretty(seeded):
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "3 active, 1 completed" in result.output
    assert "High soon" in result.output


def test_list_empty(cli_storage):
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "No tasks found" in result.output


def test_list_uses_configured_defaults(seeded):
    from smart_todo.services.config_service import get_config_service

    get_config_service().set("ui.default_filter", "completed")
    result = runner.invoke(app, ["list", "--json"])
    assert _titles(result.output) == ["Done high"]


@pytest.mark.parametrize(
    "args",
    [["--filter", "archived"], ["--sort", "random"], ["--output", "xml"]],
)
def test_list_rejects_unknown_options(seeded, args):
    result = runner.invoke(app, ["list", *args])
    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS


def test_list_pretty_runs_deadline_scan(seed_tasks, make_task, cli_storage):
    seed_tasks(make_task(title="Overdue", date=dt.date.today() - dt.timedelta(days=1)))
    result = runner.invoke(app, ["list"])
    assert "1 task is near the deadline" in result.output
    assert "Late" in result.output

    again = runner.invoke(app, ["list"])
    assert "near the deadline" not in again.output


def test_list_json_skips_alert(seed_tasks, make_task):
    seed_tasks(make_task(title="Overdue", date=dt.date.today() - dt.timedelta(days=1)))
    result = runner.invoke(app, ["list", "--json"])
    assert _titles(result.output) == ["Overdue"]
