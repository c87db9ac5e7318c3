"""Repository interfaces for Smart To-Do.

This package contains abstract base classes (ABCs) that define the contracts
for persistence. Implementations (adapters) are in ``smart_todo.adapters``.
"""

from .repository import PreferenceRepository, TaskRepository

__all__ = [
    "TaskRepository",
    "PreferenceRepository",
]
