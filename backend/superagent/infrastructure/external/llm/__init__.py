from typing import Optional

from superagent.domain.errors import ConfigurationError, UnsupportedProviderError
from superagent.domain.external.llm import LLM
from superagent.domain.models.summarizer import SummarizerProvider
from superagent.infrastructure.config import Settings, get_settings
from superagent.infrastructure.external.llm.anthropic_llm import AnthropicLLM
from superagent.infrastructure.external.llm.openai_llm import OpenAILLM


def create_llm(provider: SummarizerProvider, model: str, temperature: float,
               max_tokens: int, settings: Optional[Settings] = None) -> LLM:
    """Create the chat client for a provider"""
    settings = settings or get_settings()

    if provider == SummarizerProvider.OPENAI:
        return OpenAILLM(model, api_key=settings.openai_api_key, base_url=settings.openai_api_base,
                         temperature=temperature, max_tokens=max_tokens)
    if provider == SummarizerProvider.GEMINI:
        # AsyncOpenAI reads OPENAI_API_KEY when api_key is None
        if not settings.gemini_api_key:
            raise ConfigurationError("Gemini API key is not configured")
        return OpenAILLM(model, api_key=settings.gemini_api_key, base_url=settings.gemini_api_base,
                         temperature=temperature, max_tokens=max_tokens)
    if provider == SummarizerProvider.CLAUDE:
        return AnthropicLLM(model, api_key=settings.anthropic_api_key, base_url=settings.anthropic_api_base,
                            temperature=temperature, max_tokens=max_tokens)
    raise UnsupportedProviderError(str(provider))


__all__ = ['OpenAILLM', 'AnthropicLLM', 'create_llm']
