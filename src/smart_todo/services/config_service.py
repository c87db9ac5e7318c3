"""Configuration service for managing Smart To-Do configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-separated key access (``ai.model``, ``ui.default_sort``)
- The AI API key, read from the environment or a private credentials file
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from smart_todo.models.config_models import AppConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "SMART_TODO_AI_API_KEY"
_AI_CREDENTIALS = "ai"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("smart_todo"))
        self.config_path = self.config_dir / "config.json"
        self.credentials_dir = self.config_dir / "credentials"
        self.data_dir = Path(user_data_dir("smart_todo"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.credentials_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def storage_path(self) -> Path:
        """Location of the JSON task vault."""
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser()
        return self.data_dir / "storage.json"

    def load_config(self) -> AppConfig:
        """Load configuration from storage.

        A missing file yields defaults. A corrupt file is logged and also
        yields defaults; it is left on disk untouched until the next save.
        """
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = AppConfig()
        except (OSError, ValidationError) as e:
            logger.warning("Config %s is unreadable, using defaults: %s", self.config_path, e)
            self._config = AppConfig()

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))

            # Set file permissions
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
            ValidationError: If the value is invalid for the key
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value

        # Revalidate so bad values are rejected before anything is written
        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset configuration to defaults, entirely or for a single key."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
        else:
            default_value = self.get_from_config(AppConfig(), key)
            if isinstance(default_value, BaseModel):
                default_value = default_value.model_dump()
            self.set(key, default_value)

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    # ------------------------------------------------------------------
    # AI credentials
    # ------------------------------------------------------------------

    @property
    def _ai_credentials_path(self) -> Path:
        return self.credentials_dir / f"{_AI_CREDENTIALS}.json"

    def load_api_key(self) -> str | None:
        """Return the AI API key from the environment or the credentials file."""
        env_key = os.environ.get(API_KEY_ENV, "").strip()
        if env_key:
            return env_key

        cred_path = self._ai_credentials_path
        if not cred_path.exists():
            return None
        try:
            with open(cred_path, encoding="utf-8") as f:
                return json.load(f).get("api_key") or None
        except (OSError, JSONDecodeError, AttributeError):
            logger.warning("AI credentials file %s is unreadable", cred_path)
            return None

    def save_api_key(self, api_key: str) -> None:
        """Store the AI API key in an owner-only credentials file."""
        cred_path = self._ai_credentials_path
        cred_path.parent.mkdir(parents=True, exist_ok=True)

        with open(cred_path, "w", encoding="utf-8") as f:
            json.dump({"api_key": api_key}, f, indent=2)

        # Set secure file permissions
        cred_path.chmod(0o600)

    def clear_api_key(self) -> None:
        """Remove the stored AI API key."""
        if self._ai_credentials_path.exists():
            self._ai_credentials_path.unlink()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
