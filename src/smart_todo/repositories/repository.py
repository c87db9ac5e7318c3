"""Repository abstraction layer for Smart To-Do.

Abstract base classes (ports) for persistence. The task store and the
notification service depend on these interfaces only; concrete adapters live
in ``smart_todo.adapters``.
"""

from __future__ import annotations

import datetime as dt
from abc import ABC, abstractmethod
from collections.abc import Sequence

from smart_todo.models import Task


class TaskRepository(ABC):
    """Abstract base class for task collection persistence.

    The whole collection is read and written at once; there is no partial
    or delta persistence.
    """

    @abstractmethod
    def load_tasks(self) -> list[Task]:
        """Load the persisted task collection.

        Returns:
            List of Task objects in stored order. An empty list is returned
            when nothing is stored or the stored data cannot be decoded.
        """
        raise NotImplementedError(
            "TaskRepository.load_tasks() must be implemented by adapter"
        )

    @abstractmethod
    def save_tasks(self, tasks: Sequence[Task]) -> bool:
        """Persist the full task collection.

        Args:
            tasks: Complete ordered collection to store

        Returns:
            True on success, False if the write failed. Must not raise.
        """
        raise NotImplementedError(
            "TaskRepository.save_tasks() must be implemented by adapter"
        )


class PreferenceRepository(ABC):
    """Abstract base class for simple key/value user preferences."""

    @abstractmethod
    def load_theme(self) -> str:
        """Return the stored theme, ``"light"`` when unset."""
        raise NotImplementedError(
            "PreferenceRepository.load_theme() must be implemented by adapter"
        )

    @abstractmethod
    def save_theme(self, theme: str) -> bool:
        """Store the theme."""
        raise NotImplementedError(
            "PreferenceRepository.save_theme() must be implemented by adapter"
        )

    @abstractmethod
    def load_notif_pref(self) -> bool:
        """Return whether deadline notifications are enabled (default True)."""
        raise NotImplementedError(
            "PreferenceRepository.load_notif_pref() must be implemented by adapter"
        )

    @abstractmethod
    def save_notif_pref(self, enabled: bool) -> bool:
        """Store the notification preference."""
        raise NotImplementedError(
            "PreferenceRepository.save_notif_pref() must be implemented by adapter"
        )

    @abstractmethod
    def load_last_alert(self) -> dt.date | None:
        """Return the day the last deadline alert was delivered, if any."""
        raise NotImplementedError(
            "PreferenceRepository.load_last_alert() must be implemented by adapter"
        )

    @abstractmethod
    def save_last_alert(self, day: dt.date) -> bool:
        """Record the day a deadline alert was delivered."""
        raise NotImplementedError(
            "PreferenceRepository.save_last_alert() must be implemented by adapter"
        )
