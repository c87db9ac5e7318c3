"""AI assistant: Gemini transport and per-task chat sessions."""

from .chat import ChatSession, build_context_parts
from .client import SYSTEM_PROMPT, GeminiClient

__all__ = ["ChatSession", "GeminiClient", "SYSTEM_PROMPT", "build_context_parts"]
