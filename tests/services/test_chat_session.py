"""Unit tests for services/ai/chat.py."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from smart_todo.models import Attachment
from smart_todo.services.ai.chat import ChatSession, build_context_parts


@pytest.fixture()
def client():
    client = AsyncMock()
    client.generate = AsyncMock(return_value="Here is a plan")
    return client


def _pdf() -> Attachment:
    return Attachment(
        name="sheet.pdf",
        mime_type="application/pdf",
        size=4,
        data="data:application/pdf;base64,JVBERg==",
    )


class TestBuildContextParts:
    def test_text_part_describes_task(self, make_task):
        parts = build_context_parts(make_task(title="Solve set 3", desc="Integrals"))
        assert len(parts) == 1
        text = parts[0]["text"]
        assert text.startswith("[TASK CONTEXT]")
        assert "Title: Solve set 3" in text
        assert "Description: Integrals" in text
        assert "Instructions:" in text

    def test_supported_file_is_inlined_without_prefix(self, make_task):
        parts = build_context_parts(make_task(file=_pdf()))
        assert parts[1] == {"inline_data": {"mime_type": "application/pdf", "data": "JVBERg=="}}

    def test_unsupported_file_adds_note(self, make_task):
        docx = Attachment(
            name="essay.docx",
            mime_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            size=10,
            data="data:application/octet-stream;base64,AAAA",
        )
        parts = build_context_parts(make_task(file=docx))
        assert len(parts) == 1
        assert "essay.docx" in parts[0]["text"]
        assert "[System info:" in parts[0]["text"]


class TestChatSession:
    @pytest.mark.asyncio
    async def test_send_before_start_fails(self, client):
        session = ChatSession(client)
        with pytest.raises(RuntimeError):
            await session.send("hi")

    def test_start_seeds_history(self, client, make_task):
        session = ChatSession(client)
        session.start(make_task(title="A"))
        assert len(session.history) == 1
        assert session.history[0]["role"] == "user"

    @pytest.mark.asyncio
    async def test_first_send_without_text(self, client, make_task):
        session = ChatSession(client)
        session.start(make_task(file=_pdf()))
        reply = await session.send()

        assert reply == "Here is a plan"
        sent = client.generate.await_args.args[0]
        assert sent[0]["parts"][1]["inline_data"]["data"] == "JVBERg=="
        assert session.history[-1] == {"role": "model", "parts": [{"text": "Here is a plan"}]}

    @pytest.mark.asyncio
    async def test_follow_up_appends_turns(self, client, make_task):
        session = ChatSession(client)
        session.start(make_task())
        await session.send()
        await session.send("What next?")

        roles = [turn["role"] for turn in session.history]
        assert roles == ["user", "model", "user", "model"]
        assert session.history[2]["parts"] == [{"text": "What next?"}]

    def test_start_resets_history(self, client, make_task):
        session = ChatSession(client)
        session.start(make_task(title="A"))
        session.history.append({"role": "model", "parts": [{"text": "x"}]})
        session.start(make_task(title="B"))
        assert len(session.history) == 1
        assert "Title: B" in session.history[0]["parts"][0]["text"]
