"""Task data models."""

from __future__ import annotations

import datetime as dt
import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

Priority = Literal["high", "medium", "low"]

PRIORITIES: tuple[str, ...] = ("high", "medium", "low")

# Higher rank sorts first under priority_desc
PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}
DEFAULT_PRIORITY = "medium"


def priority_rank(priority: str | None) -> int:
    """Return the sort rank of a priority, treating unknown values as medium."""
    return PRIORITY_RANK.get(priority or "", PRIORITY_RANK[DEFAULT_PRIORITY])


class Attachment(BaseModel):
    """File attached to a task.

    Attributes:
        name: Original file name
        mime_type: MIME type of the file
        size: Size in bytes
        data: Self-contained data URL (``data:<mime>;base64,<payload>``)
    """

    name: str = ""
    mime_type: str = "application/octet-stream"
    size: int = 0
    data: str = ""

    @property
    def payload(self) -> str:
        """Base64 payload with any data-URL prefix stripped."""
        if "," in self.data:
            return self.data.split(",", 1)[1]
        return self.data


class Task(BaseModel):
    """Task model representing a complete task entity.

    Attributes:
        id: Unique identifier, assigned at creation
        title: Task title
        desc: Optional longer description
        date: Due date (calendar date, no time of day)
        priority: "high", "medium" or "low"
        file: Optional attachment
        completed: Completion status
        created_at: Creation timestamp
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    title: str
    desc: str = ""
    date: dt.date
    priority: str = DEFAULT_PRIORITY
    file: Attachment | None = None
    completed: bool = False
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)

    @field_validator("desc", mode="before")
    @classmethod
    def _none_desc_to_empty(cls, v):
        return "" if v is None else v


class TaskCreate(BaseModel):
    """Model for creating a new task."""

    title: str
    desc: str = ""
    date: dt.date
    priority: Priority = DEFAULT_PRIORITY
    file: Attachment | None = None


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only fields that are explicitly set are merged.
    """

    title: str | None = None
    desc: str | None = None
    date: dt.date | None = None
    priority: Priority | None = None
    file: Attachment | None = None
    completed: bool | None = None


class TaskStats(BaseModel):
    """Counts over the whole task collection."""

    total: int = 0
    completed: int = 0
    pending: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def progress_percent(self) -> int:
        if self.total == 0:
            return 0
        return math.floor(self.completed * 100 / self.total + 0.5)
