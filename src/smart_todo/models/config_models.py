"""Configuration models for Smart To-Do."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Storage configuration."""

    path: str | None = Field(
        default=None, description="Path to the JSON store (defaults to user data dir)"
    )


class UIConfig(BaseModel):
    """UI configuration."""

    default_filter: Literal["all", "pending", "completed"] = Field(default="all")
    default_sort: Literal["date_asc", "date_desc", "priority_desc", "priority_asc"] = (
        Field(default="date_asc")
    )
    date_format: str = Field(default="%a, %d %b")


class NotificationConfig(BaseModel):
    """Deadline notification configuration."""

    sound: bool = Field(default=True)


class AIConfig(BaseModel):
    """AI assistant configuration.

    The API key is deliberately not part of this model; it is read from the
    environment or from the credentials file.
    """

    endpoint: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    model: str = Field(default="gemini-2.5-flash")
    timeout: int = Field(default=60)
    retries: int = Field(default=3, ge=1)
    backoff_seconds: float = Field(default=2.0, ge=0)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("endpoint cannot be empty")
        return v.strip().rstrip("/")


class AppConfig(BaseModel):
    """Main Smart To-Do configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    ai: AIConfig = Field(default_factory=AIConfig)
