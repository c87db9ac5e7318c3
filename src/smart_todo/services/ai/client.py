"""HTTP client for the Gemini generateContent API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from smart_todo.exceptions import (
    AIAuthError,
    AIClientError,
    AIConfigError,
    AIEmptyResponseError,
    AIModelNotFoundError,
)
from smart_todo.models.config_models import AIConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a smart, friendly assistant that helps the user finish academic and
work tasks with clear step-by-step explanations.

FILE ANALYSIS:
- If the user attached an IMAGE or PDF, analyse its visual content or text in depth.
- For math or science problems, do not just give the final answer. Explain the
  method step by step.
- For text documents, summarise the key points or answer the user's specific question.

STYLE:
- Be warm, professional and encouraging.
- Use Markdown (bold, lists, code blocks) so answers are easy to read.
"""


class GeminiClient:
    """Async client for Gemini with a fixed retry policy.

    Up to ``retries`` attempts are made. Transport errors and 5xx responses
    are retried after ``attempt * backoff_seconds`` seconds; 4xx responses
    fail immediately.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = "gemini-2.5-flash",
        endpoint: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60,
        retries: int = 3,
        backoff_seconds: float = 2.0,
        system_prompt: str = SYSTEM_PROMPT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise AIConfigError(
                "No AI API key configured. Set SMART_TODO_AI_API_KEY or run "
                "'smart-todo config set-key'."
            )
        self._api_key = api_key
        self.model = model
        self.base_url = endpoint.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self.backoff_seconds = backoff_seconds
        self.system_prompt = system_prompt
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(
        cls,
        config: AIConfig,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> GeminiClient:
        return cls(
            api_key,
            model=config.model,
            endpoint=config.endpoint,
            timeout=config.timeout,
            retries=config.retries,
            backoff_seconds=config.backoff_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> GeminiClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "x-goog-api-key": self._api_key,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self._get_headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_payload(self, contents: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "contents": contents,
            "system_instruction": {"parts": [{"text": self.system_prompt}]},
        }

    async def generate(self, contents: list[dict[str, Any]]) -> str:
        """Send the conversation and return the model's reply text.

        Raises:
            AIAuthError: The API key was rejected
            AIModelNotFoundError: The model does not exist
            AIEmptyResponseError: The response had no candidates
            AIClientError: Any other failure, after retries where applicable
        """
        client = await self._get_client()
        url = f"/models/{self.model}:generateContent"
        payload = self.build_payload(contents)

        last_exception: Exception | None = None
        for attempt in range(1, self.retries + 1):
            try:
                response = await client.post(url, json=payload)
                response.raise_for_status()
                try:
                    data = response.json()
                except ValueError as e:
                    raise AIClientError("The AI returned malformed JSON.") from e
                return self._extract_reply(data)
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.warning("AI request failed (attempt %d): HTTP %d", attempt, status)
                if 400 <= status < 500:
                    raise self._client_error(e.response) from e
                last_exception = e
            except httpx.RequestError as e:
                logger.warning("AI request failed (attempt %d): %s", attempt, e)
                last_exception = e

            if attempt < self.retries:
                await asyncio.sleep(attempt * self.backoff_seconds)

        raise AIClientError(
            f"AI request failed after {self.retries} attempt(s): {last_exception}"
        ) from last_exception

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            message = data["error"].get("message")
            if message:
                return str(message)
        return f"Status {response.status_code}"

    def _client_error(self, response: httpx.Response) -> AIClientError:
        message = self._error_message(response)
        if response.status_code == 400 and "API key not valid" in message:
            return AIAuthError("API key is invalid. Check your AI settings.")
        if response.status_code == 404:
            return AIModelNotFoundError(
                f"Model '{self.model}' was not found. Try another model in 'ai.model'."
            )
        return AIClientError(message)

    @staticmethod
    def _extract_reply(data: dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            raise AIEmptyResponseError("The AI returned an empty response.")
        try:
            return candidates[0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise AIEmptyResponseError("The AI response contained no text.") from e
