"""Summarizer construction per provider and compression mode.

The provider is resolved once, when the summarizer is built, and carried
explicitly from then on.
"""

from functools import partial
from typing import Dict, Optional, Union
import logging

from superagent.domain.errors import UnsupportedProviderError
from superagent.domain.external.compression import Summarizer
from superagent.domain.models.summarizer import CompressionMode, SummarizerOptions, SummarizerProvider
from superagent.infrastructure.config import Settings, get_settings
from superagent.infrastructure.external.compression.llm_summarizer import LlmSummarizer
from superagent.infrastructure.external.llm import create_llm

logger = logging.getLogger(__name__)

DEFAULT_SUMMARIZER_MODELS: Dict[SummarizerProvider, str] = {
    SummarizerProvider.GEMINI: "gemini-2.0-flash-exp",
    SummarizerProvider.OPENAI: "gpt-4o-mini",
    SummarizerProvider.CLAUDE: "claude-3-5-sonnet-20241022",
}

FAST_GEMINI_MODEL = "gemini-2.5-flash"


def create_ai_summarizer(options: SummarizerOptions, settings: Optional[Settings] = None) -> LlmSummarizer:
    """Create an LLM summarizer for the given provider options"""
    provider = options.provider
    if provider not in DEFAULT_SUMMARIZER_MODELS:
        raise UnsupportedProviderError(str(provider))

    model = options.model or DEFAULT_SUMMARIZER_MODELS[provider]
    logger.debug(f"Creating {provider.value} summarizer with model {model}")

    llm_factory = partial(
        create_llm, provider, model, options.temperature, options.max_tokens, settings
    )
    return LlmSummarizer(llm_factory, temperature=options.temperature, max_tokens=options.max_tokens)


def infer_provider(model: str) -> SummarizerProvider:
    """Guess the provider family of a model name, defaulting to Gemini"""
    name = model.lower()
    if "gemini" in name:
        return SummarizerProvider.GEMINI
    if "gpt" in name or "o3" in name or "o4" in name:
        return SummarizerProvider.OPENAI
    if "claude" in name:
        return SummarizerProvider.CLAUDE
    return SummarizerProvider.GEMINI


def _max_tokens(settings: Optional[Settings]) -> int:
    return (settings or get_settings()).summary_max_tokens


def create_auto_summarizer(model: str,
                           provider: Optional[Union[SummarizerProvider, str]] = None,
                           settings: Optional[Settings] = None) -> LlmSummarizer:
    """Create a summarizer matching the agent's provider

    Args:
        model: The agent model, used to infer the provider when none is given
        provider: Explicit provider, takes precedence over inference
    """
    resolved = SummarizerProvider(provider) if provider else infer_provider(model)
    return create_ai_summarizer(
        SummarizerOptions(
            provider=resolved,
            model=FAST_GEMINI_MODEL if resolved == SummarizerProvider.GEMINI else None,
            temperature=0.2,
            max_tokens=_max_tokens(settings),
        ),
        settings,
    )


def create_lightweight_summarizer(settings: Optional[Settings] = None) -> LlmSummarizer:
    """Fast Gemini Flash summarizer"""
    return create_ai_summarizer(
        SummarizerOptions(provider=SummarizerProvider.GEMINI, model=FAST_GEMINI_MODEL,
                          temperature=0.1, max_tokens=_max_tokens(settings)),
        settings,
    )


def create_high_quality_summarizer(settings: Optional[Settings] = None) -> LlmSummarizer:
    return create_ai_summarizer(
        SummarizerOptions(provider=SummarizerProvider.GEMINI, model=FAST_GEMINI_MODEL,
                          temperature=0.2, max_tokens=_max_tokens(settings)),
        settings,
    )


def create_summarizer_for_mode(mode: Union[CompressionMode, str], model: str,
                               provider: Optional[Union[SummarizerProvider, str]] = None,
                               settings: Optional[Settings] = None) -> Summarizer:
    """Create the summarizer used by a compression mode

    high-quality uses the agent's own provider and falls back to the
    lightweight summarizer if that cannot be built.
    """
    mode = CompressionMode(mode)

    if mode == CompressionMode.LIGHTWEIGHT:
        return create_lightweight_summarizer(settings)
    if mode == CompressionMode.AUTO:
        return create_auto_summarizer(model, provider, settings)

    try:
        return create_auto_summarizer(model, provider, settings)
    except (UnsupportedProviderError, ValueError) as e:
        logger.warning(f"High-quality summarizer unavailable, using lightweight: {e}")
        return create_lightweight_summarizer(settings)
