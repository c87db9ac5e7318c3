"""Smart To-Do domain models.

Pydantic models for tasks, attachments and application configuration.
"""

from .config_models import AIConfig, AppConfig, NotificationConfig, StorageConfig, UIConfig
from .task import (
    PRIORITIES,
    Attachment,
    Priority,
    Task,
    TaskCreate,
    TaskStats,
    TaskUpdate,
    priority_rank,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskStats",
    "Attachment",
    "Priority",
    "PRIORITIES",
    "priority_rank",
    # Config models
    "AppConfig",
    "AIConfig",
    "NotificationConfig",
    "StorageConfig",
    "UIConfig",
]
