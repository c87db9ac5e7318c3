"""Shared wiring for commands: build the store, notifier and AI client."""

from __future__ import annotations

import datetime as dt

from smart_todo.adapters import JsonStorage
from smart_todo.exceptions import TaskNotFoundError
from smart_todo.models import Task
from smart_todo.services.ai import ChatSession, GeminiClient
from smart_todo.services.config_service import get_config_service
from smart_todo.services.notification_service import ConsoleNotifier
from smart_todo.services.task_store import TaskStore
from smart_todo.utils import exit_codes
from smart_todo.utils.ui.console import get_console, use_theme

from .decorators import AppError


def get_storage() -> JsonStorage:
    """Return the JSON storage configured for the current user."""
    storage = JsonStorage(get_config_service().storage_path)
    use_theme(storage.load_theme())
    return storage


def get_task_store() -> TaskStore:
    """Return a loaded TaskStore backed by the configured storage."""
    store = TaskStore(get_storage())
    store.load()
    return store


def get_notifier() -> ConsoleNotifier:
    """Return a console notifier using the stored preferences."""
    config = get_config_service().config
    return ConsoleNotifier(get_storage(), get_console(), sound=config.notifications.sound)


def get_chat_session() -> ChatSession:
    """Return a chat session bound to a configured Gemini client."""
    config_service = get_config_service()
    client = GeminiClient.from_config(config_service.config.ai, config_service.load_api_key())
    return ChatSession(client)


def parse_due_date(value: str | None, today: dt.date | None = None) -> dt.date:
    """Parse a due date given as today, tomorrow or YYYY-MM-DD.

    Raises:
        AppError: If the value is not a valid date
    """
    today = today or dt.date.today()
    if value is None:
        return today
    text = value.strip().lower()
    if text == "today":
        return today
    if text == "tomorrow":
        return today + dt.timedelta(days=1)
    try:
        return dt.date.fromisoformat(text)
    except ValueError as e:
        raise AppError(
            f"Invalid date '{value}'. Use today, tomorrow or YYYY-MM-DD.",
            exit_code=exit_codes.ERROR_INVALID_ARGS,
        ) from e


def resolve_task(store: TaskStore, task_id: str) -> Task:
    """Resolve a full ID or suffix to the matching task."""
    resolved_id = store.resolve_id(task_id)
    task = store.get(resolved_id)
    if task is None:
        raise TaskNotFoundError(f"No task found with ID or suffix '{task_id}'")
    return task
