"""Token limits for supported models.

Values follow the providers' published context windows. Unknown models are
not an error: they miss the table and callers fall back to
DEFAULT_CONTEXT_WINDOW.
"""

import math
from typing import Dict, List, Optional

from superagent.domain.models.token_limit import ModelTokenLimit

# Default compression threshold (95% of context window)
DEFAULT_COMPRESSION_THRESHOLD = 0.95

# Default fallback context window for unknown models
DEFAULT_CONTEXT_WINDOW = 128_000

LARGE_CONTEXT_WINDOW = 1_000_000
MEDIUM_CONTEXT_WINDOW = 200_000

TOKEN_LIMITS: Dict[str, ModelTokenLimit] = {
    # OpenAI GPT-4.1 series
    "gpt-4.1": ModelTokenLimit(context_window=1_000_000, max_output=32_000,
                               description="GPT-4.1 with 1M context window"),
    "gpt-4.1-mini": ModelTokenLimit(context_window=1_000_000, max_output=16_000,
                                    description="GPT-4.1 mini with 1M context window"),
    "gpt-4.1-nano": ModelTokenLimit(context_window=1_000_000, max_output=8_000,
                                    description="GPT-4.1 nano with 1M context window"),
    # OpenAI o-series
    "o3": ModelTokenLimit(context_window=200_000, max_output=100_000,
                          description="OpenAI o3 with 200k context window"),
    "o3-pro": ModelTokenLimit(context_window=200_000, max_output=100_000,
                              description="OpenAI o3 Pro with 200k context window"),
    "o3-pro-2025-06-10": ModelTokenLimit(context_window=200_000, max_output=100_000,
                                         description="OpenAI o3 Pro (2025-06-10) with 200k context window"),
    "o4-mini": ModelTokenLimit(context_window=200_000, max_output=32_000,
                               description="OpenAI o4-mini with 200k context window"),
    # Anthropic Claude 4 series
    "claude-4-opus": ModelTokenLimit(context_window=200_000, max_output=8_000,
                                     description="Claude 4 Opus with 200k context window"),
    "claude-4-sonnet": ModelTokenLimit(context_window=200_000, max_output=8_000,
                                       description="Claude 4 Sonnet with 200k context window"),
    # Google Gemini 2.5 series
    "gemini-2.5-pro": ModelTokenLimit(context_window=1_000_000, max_output=8_000,
                                      description="Gemini 2.5 Pro with 1M context window"),
    "gemini-2.5-flash": ModelTokenLimit(context_window=1_048_576, max_output=8_000,
                                        description="Gemini 2.5 Flash with 1,048,576 context window"),
    "gemini-2.5-flash-lite": ModelTokenLimit(context_window=1_000_000, max_output=8_000,
                                             description="Gemini 2.5 Flash-Lite with 1M context window"),
    # Earlier Gemini models
    "gemini-2.0-flash-exp": ModelTokenLimit(context_window=1_048_576, max_output=8_000,
                                            description="Gemini 2.0 Flash Experimental with 1,048,576 context window"),
    "gemini-1.5-pro": ModelTokenLimit(context_window=2_097_152, max_output=8_000,
                                      description="Gemini 1.5 Pro with 2M context window"),
    "gemini-1.5-flash": ModelTokenLimit(context_window=1_048_576, max_output=8_000,
                                        description="Gemini 1.5 Flash with 1,048,576 context window"),
    # Legacy OpenAI models
    "gpt-4": ModelTokenLimit(context_window=128_000, max_output=4_000,
                             description="GPT-4 with 128k context window"),
    "gpt-4-turbo": ModelTokenLimit(context_window=128_000, max_output=4_000,
                                   description="GPT-4 Turbo with 128k context window"),
    "gpt-4o": ModelTokenLimit(context_window=128_000, max_output=16_000,
                              description="GPT-4o with 128k context window"),
    "gpt-4o-mini": ModelTokenLimit(context_window=128_000, max_output=16_000,
                                   description="GPT-4o mini with 128k context window"),
    # Legacy Claude models
    "claude-3-5-sonnet": ModelTokenLimit(context_window=200_000, max_output=8_000,
                                         description="Claude 3.5 Sonnet with 200k context window"),
    "claude-3-opus": ModelTokenLimit(context_window=200_000, max_output=4_000,
                                     description="Claude 3 Opus with 200k context window"),
    "claude-3-haiku": ModelTokenLimit(context_window=200_000, max_output=4_000,
                                      description="Claude 3 Haiku with 200k context window"),
}

# Known spellings of the same model
MODEL_ALIASES: Dict[str, str] = {
    "gpt-4-1": "gpt-4.1",
    "gpt-4.1.0": "gpt-4.1",
    "claude-opus-4": "claude-4-opus",
    "claude-sonnet-4": "claude-4-sonnet",
    "gemini-pro-2.5": "gemini-2.5-pro",
    "gemini-flash-2.5": "gemini-2.5-flash",
}


def normalize_model_name(model: str) -> str:
    return MODEL_ALIASES.get(model, model)


def get_token_limit(model: str) -> Optional[ModelTokenLimit]:
    """Get token limit for a model, or None if the model is unknown"""
    return TOKEN_LIMITS.get(normalize_model_name(model))


def get_context_limit(model: str) -> int:
    """Get context window for a model, falling back to DEFAULT_CONTEXT_WINDOW"""
    limit = get_token_limit(model)
    return limit.context_window if limit else DEFAULT_CONTEXT_WINDOW


def get_compression_threshold(model: str) -> Optional[int]:
    """Get the token count that triggers compression (95% of context window)

    Returns None for unknown models; callers fall back to a ratio of
    get_context_limit().
    """
    limit = get_token_limit(model)
    if limit is None:
        return None
    return math.floor(limit.context_window * DEFAULT_COMPRESSION_THRESHOLD)


def supports_large_context(model: str) -> bool:
    limit = get_token_limit(model)
    return limit is not None and limit.context_window >= LARGE_CONTEXT_WINDOW


def get_models_by_context_size() -> Dict[str, List[str]]:
    """Group known models by context window size

    Returns:
        {"large": >= 1M, "medium": 200k - 999k, "standard": < 200k}
    """
    groups: Dict[str, List[str]] = {"large": [], "medium": [], "standard": []}
    for model, limit in TOKEN_LIMITS.items():
        if limit.context_window >= LARGE_CONTEXT_WINDOW:
            groups["large"].append(model)
        elif limit.context_window >= MEDIUM_CONTEXT_WINDOW:
            groups["medium"].append(model)
        else:
            groups["standard"].append(model)
    return groups
