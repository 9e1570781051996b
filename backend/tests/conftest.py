"""Shared fixtures for context compression tests."""

import asyncio
from typing import List

import pytest

from superagent.domain.models.message import Message
from superagent.infrastructure.services.context_manager import ContextManager

FILLER = "lorem ipsum dolor sit amet consectetur adipiscing elit "


def text_messages(count: int, length: int = 40) -> List[Message]:
    """Alternating user/assistant plain text messages without important keywords"""
    messages = []
    for i in range(count):
        role = "user" if i % 2 == 0 else "assistant"
        content = f"message {i} " + FILLER * (length // len(FILLER) + 1)
        messages.append(Message(role=role, content=content[:length], id=f"msg-{i}"))
    return messages


class StaticSummarizer:
    """Summarizer returning fixed text and recording its input"""

    def __init__(self, text: str = "Earlier the user discussed the weather."):
        self.text = text
        self.calls: List[List[Message]] = []

    async def __call__(self, messages: List[Message]) -> str:
        self.calls.append(list(messages))
        return self.text


class FailingSummarizer:
    def __init__(self):
        self.calls = 0

    async def __call__(self, messages: List[Message]) -> str:
        self.calls += 1
        raise RuntimeError("provider unavailable")


class BlockingSummarizer:
    """Summarizer that suspends until released"""

    def __init__(self):
        self.calls = 0
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def __call__(self, messages: List[Message]) -> str:
        self.calls += 1
        self.started.set()
        await self.release.wait()
        return "blocked summary"


class RecordingObserver:
    def __init__(self):
        self.events = []

    def on_compression_event(self, event) -> None:
        self.events.append(event)

    @property
    def types(self) -> List[str]:
        return [event.type for event in self.events]


@pytest.fixture
def context_manager():
    """Context manager for a known model with a large window"""
    return ContextManager(model="gpt-4o")


@pytest.fixture
def eager_context_manager():
    """Context manager that wants to compress almost any conversation"""
    # Unknown model: threshold = 128_000 * 0.0001 = 12.8 tokens
    return ContextManager(model="test-model", compression_threshold=0.0001)
