"""JSON file storage for the local task vault.

One JSON document holds every key, mirroring the browser local-storage keys
the data was originally kept under. Reads never raise: a missing or corrupt
document yields defaults. Writes replace the document atomically.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import os
import tempfile
from collections.abc import Sequence
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir
from pydantic import TypeAdapter, ValidationError

from smart_todo.models import Task
from smart_todo.repositories import PreferenceRepository, TaskRepository

logger = logging.getLogger(__name__)

TASKS_KEY = "smart_todo_tasks"
THEME_KEY = "smart_todo_theme"
NOTIF_KEY = "smart_todo_notif"
LAST_ALERT_KEY = "smart_todo_notified_on"

DEFAULT_THEME = "light"
THEMES = ("light", "dark")

_task_adapter = TypeAdapter(Task)


def default_storage_path() -> Path:
    """Return the default vault location under the user data directory."""
    return Path(user_data_dir("smart_todo")) / "storage.json"


class JsonStorage(TaskRepository, PreferenceRepository):
    """Task and preference repository backed by a single JSON file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else default_storage_path()

    # ------------------------------------------------------------------
    # Raw key/value access
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Error reading storage %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Storage %s is not a JSON object, ignoring it", self.path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".storage-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing storage %s: %s", self.path, e)
            return False
        return True

    def get_item(self, key: str) -> Any:
        """Return the raw value stored under *key*, or None."""
        return self._read().get(key)

    def set_item(self, key: str, value: Any) -> bool:
        """Store a JSON-serialisable value under *key*."""
        data = self._read()
        data[key] = value
        return self._write(data)

    # ------------------------------------------------------------------
    # TaskRepository
    # ------------------------------------------------------------------

    def load_tasks(self) -> list[Task]:
        raw = self.get_item(TASKS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.error("Stored tasks are not a list, ignoring them")
            return []
        tasks = []
        for index, record in enumerate(raw):
            try:
                tasks.append(_task_adapter.validate_python(record))
            except ValidationError as e:
                logger.warning("Skipping malformed task record %d: %s", index, e)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> bool:
        payload = [task.model_dump(mode="json") for task in tasks]
        saved = self.set_item(TASKS_KEY, payload)
        if saved:
            logger.debug("Saved %d task(s) to %s", len(payload), self.path)
        return saved

    # ------------------------------------------------------------------
    # PreferenceRepository
    # ------------------------------------------------------------------

    def load_theme(self) -> str:
        theme = self.get_item(THEME_KEY)
        return theme if theme in THEMES else DEFAULT_THEME

    def save_theme(self, theme: str) -> bool:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}'. Expected one of: {', '.join(THEMES)}")
        return self.set_item(THEME_KEY, theme)

    def load_notif_pref(self) -> bool:
        pref = self.get_item(NOTIF_KEY)
        if isinstance(pref, bool):
            return pref
        return True

    def save_notif_pref(self, enabled: bool) -> bool:
        return self.set_item(NOTIF_KEY, bool(enabled))

    def load_last_alert(self) -> dt.date | None:
        raw = self.get_item(LAST_ALERT_KEY)
        if not raw:
            return None
        try:
            return dt.date.fromisoformat(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed last-alert marker: %r", raw)
            return None

    def save_last_alert(self, day: dt.date) -> bool:
        return self.set_item(LAST_ALERT_KEY, day.isoformat())
