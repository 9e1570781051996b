"""Tests for LLM-backed summarization and summarizer construction."""

import pytest

from superagent.domain.errors import ConfigurationError, SummarizationError
from superagent.domain.models.message import Message, TextPart, ToolCallPart, ToolResultPart
from superagent.domain.models.summarizer import SummarizerProvider
from superagent.infrastructure.config import Settings
from superagent.infrastructure.external.compression.llm_summarizer import LlmSummarizer
from superagent.infrastructure.external.compression.summarizer_factory import (
    create_auto_summarizer,
    create_high_quality_summarizer,
    create_lightweight_summarizer,
    create_summarizer_for_mode,
    infer_provider,
)
from superagent.infrastructure.external.llm import AnthropicLLM, OpenAILLM, create_llm
from superagent.infrastructure.services.context_manager import ContextManager


class FakeLLM:
    def __init__(self, content="Summary of the conversation."):
        self.content = content
        self.requests = []

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def ask(self, messages, temperature=None, max_tokens=None):
        self.requests.append({"messages": messages, "temperature": temperature, "max_tokens": max_tokens})
        return {"role": "assistant", "content": self.content}


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", gemini_api_key="gemini-test", anthropic_api_key="anthropic-test")


class TestLlmSummarizer:
    @pytest.mark.asyncio
    async def test_returns_llm_text(self):
        llm = FakeLLM()
        summarizer = LlmSummarizer(lambda: llm, temperature=0.1, max_tokens=1000)

        summary = await summarizer([Message(role="user", content="Make slides about Kyoto")])

        assert summary == "Summary of the conversation."
        request = llm.requests[0]
        assert request["temperature"] == 0.1
        assert request["max_tokens"] == 1000
        assert request["messages"][0]["role"] == "system"
        assert "User: Make slides about Kyoto" in request["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_empty_response_raises(self):
        summarizer = LlmSummarizer(lambda: FakeLLM(content="  "))
        with pytest.raises(SummarizationError):
            await summarizer([Message(role="user", content="hello")])

    @pytest.mark.asyncio
    async def test_llm_created_lazily(self):
        created = []

        def factory():
            created.append(True)
            return FakeLLM()

        summarizer = LlmSummarizer(factory)
        assert created == []
        await summarizer([Message(role="user", content="hello")])
        await summarizer([Message(role="user", content="again")])
        assert created == [True]

    @pytest.mark.asyncio
    async def test_factory_errors_propagate(self):
        def factory():
            raise RuntimeError("missing api key")

        summarizer = LlmSummarizer(factory)
        with pytest.raises(RuntimeError):
            await summarizer([Message(role="user", content="hello")])

    def test_transcript_formatting(self):
        messages = [
            Message(role="user", content="Find news"),
            Message(role="assistant", content=[
                TextPart(text="Searching"),
                ToolCallPart(tool_call_id="c1", tool_name="webSearchTool", args={"query": "news"}),
            ]),
            Message(role="tool", content=[
                ToolResultPart(tool_call_id="c1", result={"items": ["x" * 300]}),
                ToolResultPart(tool_call_id="c2", result="plain result"),
            ]),
        ]

        text = LlmSummarizer.convert_messages_to_text(messages)
        lines = text.split("\n\n")

        assert lines[0] == "User: Find news"
        assert lines[1] == "Assistant: Searching"
        assert lines[2] == 'Assistant: [Tool call] webSearchTool({"query": "news"})'
        assert lines[3].startswith("System: [Tool result] c1: {")
        assert lines[3].endswith("...")
        assert len(lines[3]) == len("System: [Tool result] c1: ") + 200 + 3
        assert lines[4] == "System: [Tool result] c2: plain result"


class TestSummarizerFactory:
    @pytest.mark.parametrize("model,provider", [
        ("gemini-2.5-flash", SummarizerProvider.GEMINI),
        ("gpt-4.1", SummarizerProvider.OPENAI),
        ("o3-pro", SummarizerProvider.OPENAI),
        ("o4-mini", SummarizerProvider.OPENAI),
        ("claude-4-sonnet", SummarizerProvider.CLAUDE),
        ("grok-3", SummarizerProvider.GEMINI),
    ])
    def test_infer_provider(self, model, provider):
        assert infer_provider(model) == provider

    def test_auto_summarizer_uses_agent_provider(self, settings):
        summarizer = create_auto_summarizer("claude-4-sonnet", settings=settings)
        assert summarizer.temperature == 0.2
        assert isinstance(summarizer.llm, AnthropicLLM)
        assert summarizer.llm.model_name == "claude-3-5-sonnet-20241022"

    def test_auto_summarizer_gemini_uses_flash(self, settings):
        summarizer = create_auto_summarizer("gemini-2.5-pro", settings=settings)
        assert isinstance(summarizer.llm, OpenAILLM)
        assert summarizer.llm.model_name == "gemini-2.5-flash"

    def test_explicit_provider_wins(self, settings):
        summarizer = create_auto_summarizer("claude-4-sonnet", provider="openai", settings=settings)
        assert isinstance(summarizer.llm, OpenAILLM)
        assert summarizer.llm.model_name == "gpt-4o-mini"

    def test_mode_presets(self, settings):
        assert create_lightweight_summarizer(settings).temperature == 0.1
        assert create_high_quality_summarizer(settings).temperature == 0.2
        assert create_summarizer_for_mode("lightweight", "gpt-4o", settings=settings).temperature == 0.1
        high_quality = create_summarizer_for_mode("high-quality", "gpt-4o", settings=settings)
        assert isinstance(high_quality.llm, OpenAILLM)
        assert high_quality.llm.model_name == "gpt-4o-mini"

    def test_summary_max_tokens_from_settings(self):
        settings = Settings(gemini_api_key="gemini-test", summary_max_tokens=512)
        assert create_lightweight_summarizer(settings).max_tokens == 512

    def test_create_llm_per_provider(self, settings):
        assert isinstance(create_llm(SummarizerProvider.OPENAI, "gpt-4o-mini", 0.2, 1000, settings), OpenAILLM)
        assert isinstance(create_llm(SummarizerProvider.GEMINI, "gemini-2.5-flash", 0.2, 1000, settings), OpenAILLM)
        assert isinstance(create_llm(SummarizerProvider.CLAUDE, "claude-3-haiku", 0.2, 1000, settings), AnthropicLLM)


class TestGeminiCredentials:
    def test_missing_key_raises_instead_of_using_openai_key(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-openai-secret")
        with pytest.raises(ConfigurationError):
            create_llm(SummarizerProvider.GEMINI, "gemini-2.5-flash", 0.1, 1000,
                       Settings(openai_api_key="sk-openai-secret", gemini_api_key=None))

    def test_configured_key_is_sent(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-openai-secret")
        llm = create_llm(SummarizerProvider.GEMINI, "gemini-2.5-flash", 0.1, 1000,
                         Settings(gemini_api_key="gemini-test"))
        assert llm.client.api_key == "gemini-test"
        assert "generativelanguage.googleapis.com" in str(llm.client.base_url)

    def test_google_env_name_is_accepted(self, monkeypatch):
        monkeypatch.delenv("SUPERAGENT_GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("GOOGLE_GENERATIVE_AI_API_KEY", "google-key")
        assert Settings(_env_file=None).gemini_api_key == "google-key"

    @pytest.mark.asyncio
    async def test_missing_key_falls_back_to_rule_based_summary(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-openai-secret")
        summarizer = create_lightweight_summarizer(Settings(_env_file=None, gemini_api_key=None))
        manager = ContextManager(model="gpt-4o")

        summary = await manager.generate_summary([Message(role="user", content="hello")], summarizer)

        assert "Conversation summary" in summary
