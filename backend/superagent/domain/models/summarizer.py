from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SummarizerProvider(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    CLAUDE = "claude"


class CompressionMode(str, Enum):
    LIGHTWEIGHT = "lightweight"
    AUTO = "auto"
    HIGH_QUALITY = "high-quality"


class SummarizerOptions(BaseModel):
    """Which backend summarizes conversation history, and how"""
    provider: SummarizerProvider
    model: Optional[str] = None
    temperature: float = 0.3
    max_tokens: int = 1000
