"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real user directories.
"""

from __future__ import annotations

import datetime as dt
import itertools
from collections.abc import Sequence
from unittest.mock import patch

import pytest

from smart_todo.adapters import JsonStorage
from smart_todo.models import Task
from smart_todo.repositories import TaskRepository
from smart_todo.services.task_store import TaskStore

# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_user_dirs(tmp_path, monkeypatch):
    """Point config, data and log directories at *tmp_path*.

    Also clears the lru_cache so each test gets a fresh ConfigService, and
    removes any API key inherited from the environment.
    """
    from smart_todo.services.config_service import API_KEY_ENV, get_config_service
    from smart_todo.utils.ui import console as console_mod

    monkeypatch.delenv(API_KEY_ENV, raising=False)
    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")

    get_config_service.cache_clear()
    console_mod.use_theme("light")
    with (
        patch("smart_todo.services.config_service.user_config_dir", return_value=config_dir),
        patch("smart_todo.services.config_service.user_data_dir", return_value=data_dir),
        patch("smart_todo.adapters.json_storage.user_data_dir", return_value=data_dir),
        patch("smart_todo.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")),
    ):
        yield
    get_config_service.cache_clear()
    console_mod.use_theme("light")


# ---------------------------------------------------------------------------
# Repositories and stores
# ---------------------------------------------------------------------------


class MemoryTaskRepository(TaskRepository):
    """In-memory TaskRepository that records every save."""

    def __init__(self, tasks: Sequence[Task] = (), fail: bool = False):
        self.tasks = list(tasks)
        self.fail = fail
        self.saves: list[list[Task]] = []

    def load_tasks(self) -> list[Task]:
        return [task.model_copy(deep=True) for task in self.tasks]

    def save_tasks(self, tasks: Sequence[Task]) -> bool:
        self.saves.append([task.model_copy(deep=True) for task in tasks])
        if self.fail:
            return False
        self.tasks = list(self.saves[-1])
        return True


@pytest.fixture()
def memory_repo() -> MemoryTaskRepository:
    return MemoryTaskRepository()


@pytest.fixture()
def storage(tmp_path) -> JsonStorage:
    """JsonStorage backed by a file in *tmp_path*."""
    return JsonStorage(tmp_path / "storage.json")


@pytest.fixture()
def json_store(storage) -> TaskStore:
    """A loaded TaskStore persisting to a temporary JSON file."""
    store = TaskStore(storage)
    store.load()
    return store


@pytest.fixture()
def today() -> dt.date:
    return dt.date(2024, 5, 10)


@pytest.fixture()
def make_task():
    """Factory building Task instances with sequential IDs."""
    counter = itertools.count(1)

    def _make(**overrides) -> Task:
        n = next(counter)
        data = {
            "id": f"{1700000000000000 + n}",
            "title": f"Task {n}",
            "desc": "",
            "date": dt.date(2024, 5, 20),
            "priority": "medium",
            "completed": False,
        }
        data.update(overrides)
        return Task(**data)

    return _make


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def cli_storage() -> JsonStorage:
    """JsonStorage at the location the CLI commands use."""
    from smart_todo.services.config_service import get_config_service

    return JsonStorage(get_config_service().storage_path)


@pytest.fixture()
def seed_tasks(cli_storage):
    """Write tasks into the CLI's storage before a command runs."""

    def _seed(*tasks: Task) -> list[Task]:
        cli_storage.save_tasks(tasks)
        return list(tasks)

    return _seed
