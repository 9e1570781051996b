"""Tests for message and event models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from superagent.domain.models.compression_event import (
    CompressionEvent,
    CompressionFailedEvent,
    CompressionTriggeredEvent,
)
from superagent.domain.models.compression_result import CompressionInfo
from superagent.domain.models.message import Message, TextPart, ToolCallPart, ToolResultPart


class TestMessage:
    def test_parses_ai_sdk_shape(self):
        message = Message.model_validate({
            "role": "assistant",
            "content": [
                {"type": "text", "text": "Creating slides"},
                {"type": "tool-call", "toolCallId": "c1", "toolName": "htmlSlideTool", "args": {"topic": "AI"}},
                {"type": "tool-result", "toolCallId": "c1", "result": "<html></html>"},
            ],
        })

        assert isinstance(message.content[0], TextPart)
        assert isinstance(message.content[1], ToolCallPart)
        assert isinstance(message.content[2], ToolResultPart)
        assert message.tool_calls()[0].tool_name == "htmlSlideTool"
        assert message.text == "Creating slides"
        assert not message.is_text

    def test_plain_text(self):
        message = Message(role="user", content="hello")
        assert message.is_text
        assert message.parts == []
        assert message.text == "hello"

    def test_is_immutable(self):
        message = Message(role="user", content="hello")
        with pytest.raises(ValidationError):
            message.content = "changed"

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            Message(role="narrator", content="hello")

    def test_summary_message(self):
        first, second = Message.summary("a"), Message.summary("b")
        assert first.role == "assistant"
        assert first.id.startswith("summary-")
        assert first.id != second.id
        assert first.created_at is not None


class TestCompressionEvent:
    def test_discriminated_by_type(self):
        adapter = TypeAdapter(CompressionEvent)
        event = adapter.validate_python({"type": "compression-triggered"})
        assert isinstance(event, CompressionTriggeredEvent)

    def test_info_timestamp_is_iso8601(self):
        info = CompressionInfo(original_token_count=100, new_token_count=40, compression_ratio=0.4)
        dumped = info.model_dump(mode="json")
        assert "T" in dumped["timestamp"]

    def test_failed_event_carries_exception(self):
        error = ValueError("boom")
        event = CompressionFailedEvent(error=error)
        assert event.error is error
        assert CompressionFailedEvent.model_config["arbitrary_types_allowed"] is True
