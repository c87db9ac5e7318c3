"""Custom exceptions for Smart To-Do."""


class SmartTodoError(Exception):
    """Base exception for all Smart To-Do errors."""


class TaskNotFoundError(SmartTodoError):
    """Raised when no task matches an ID or ID suffix."""


class AmbiguousTaskIdError(SmartTodoError):
    """Raised when an ID suffix matches more than one task."""


class AttachmentError(SmartTodoError):
    """Raised when an attachment cannot be read."""


class AttachmentTooLargeError(AttachmentError):
    """Raised when an attachment exceeds the size limit."""

    def __init__(self, name: str, size: int, limit: int):
        super().__init__(
            f"File '{name}' is too large ({size} bytes). Maximum is {limit} bytes."
        )
        self.name = name
        self.size = size
        self.limit = limit


class AIClientError(SmartTodoError):
    """Raised when the AI assistant request fails."""


class AIConfigError(AIClientError):
    """Raised when no API key is configured for the AI assistant."""


class AIAuthError(AIClientError):
    """Raised when the AI provider rejects the API key."""


class AIModelNotFoundError(AIClientError):
    """Raised when the configured model does not exist."""


class AIEmptyResponseError(AIClientError):
    """Raised when the AI provider returns no candidates."""
