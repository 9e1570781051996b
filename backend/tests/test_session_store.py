"""Tests for session storage and compressing sessions."""

import pytest

from superagent.domain.models.conversation import ConversationState
from superagent.infrastructure.services.compression_middleware import CompressionMiddleware
from superagent.infrastructure.services.session_store import CompressingSession, InMemorySessionStore

from conftest import StaticSummarizer, text_messages


class TestInMemorySessionStore:
    def test_get_missing(self):
        assert InMemorySessionStore().get("missing") is None

    def test_put_and_get(self):
        store = InMemorySessionStore()
        state = ConversationState(session_id="s1", messages=text_messages(2))
        store.put("s1", state)
        assert store.get("s1") is state
        assert len(store) == 1

    def test_stores_are_independent(self):
        first, second = InMemorySessionStore(), InMemorySessionStore()
        first.put("s1", ConversationState(session_id="s1"))
        assert second.get("s1") is None


class TestCompressingSession:
    @pytest.mark.asyncio
    async def test_compression_is_recorded(self, eager_context_manager):
        store = InMemorySessionStore()
        middleware = CompressionMiddleware(eager_context_manager, "test-model", summarizer=StaticSummarizer())
        session = CompressingSession(store, middleware)

        result = await session.append_and_compress("s1", text_messages(10))

        assert result.was_compressed is True
        state = store.get("s1")
        assert state.messages == result.messages
        assert state.compression_history == [result.compression_info]

    @pytest.mark.asyncio
    async def test_history_accumulates_without_compression(self, context_manager):
        store = InMemorySessionStore()
        middleware = CompressionMiddleware(context_manager, "gpt-4o", summarizer=StaticSummarizer())
        session = CompressingSession(store, middleware)
        first, second = text_messages(4), text_messages(2)

        await session.append_and_compress("s1", first)
        result = await session.append_and_compress("s1", second)

        assert result.was_compressed is False
        state = store.get("s1")
        assert state.messages == first + second
        assert state.compression_history == []
