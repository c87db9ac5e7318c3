"""Per-task chat session with the AI assistant."""

from __future__ import annotations

from typing import Any, Protocol

from smart_todo.models import Task

# MIME types the model can read directly as inline data
INLINE_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "image/png",
        "image/jpeg",
        "image/webp",
        "text/plain",
        "text/csv",
        "text/html",
    }
)


class ChatTransport(Protocol):
    async def generate(self, contents: list[dict[str, Any]]) -> str: ...

    async def close(self) -> None: ...


def build_context_parts(task: Task) -> list[dict[str, Any]]:
    """Build the opening user turn describing *task* and its attachment."""
    text = (
        "[TASK CONTEXT]\n"
        f"Title: {task.title}\n"
        f"Description: {task.desc or '-'}\n\n"
        "Instructions: Study the details of this task. If a file is attached, "
        "analyse its content to help the user."
    )
    parts: list[dict[str, Any]] = [{"text": text}]

    if task.file is not None:
        if task.file.mime_type in INLINE_MIME_TYPES:
            parts.append(
                {
                    "inline_data": {
                        "mime_type": task.file.mime_type,
                        "data": task.file.payload,
                    }
                }
            )
        else:
            parts[0]["text"] += (
                f"\n[System info: file '{task.file.name}' ({task.file.mime_type}) is "
                "attached but this format may need to be read as plain text.]"
            )
    return parts


class ChatSession:
    """Conversation history for one task.

    The first turn always carries the task context; later turns alternate
    between the user and the model.
    """

    def __init__(self, client: ChatTransport):
        self.client = client
        self.history: list[dict[str, Any]] = []
        self.task: Task | None = None

    def start(self, task: Task) -> None:
        """Reset the history and seed it with *task*'s context."""
        self.task = task
        self.history = [{"role": "user", "parts": build_context_parts(task)}]

    async def send(self, text: str | None = None) -> str:
        """Send an optional user message and return the model's reply.

        With no *text*, only the task context is sent, which asks the model
        for its first analysis.
        """
        if self.task is None:
            raise RuntimeError("ChatSession.start() must be called before send()")

        if text:
            self.history.append({"role": "user", "parts": [{"text": text}]})

        reply = await self.client.generate(self.history)
        self.history.append({"role": "model", "parts": [{"text": reply}]})
        return reply
