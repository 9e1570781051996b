from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SUPERAGENT_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="SUPERAGENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        protected_namespaces=(),
        populate_by_name=True,
    )

    # Agent model whose context window is protected
    model_name: str = "gemini-2.5-flash"

    # Context compression
    compression_threshold: float = 0.95
    max_messages: int = 20
    preserve_important_messages: bool = True
    enable_semantic_recall: bool = False
    enable_auto_compression: bool = True
    compression_mode: Literal["lightweight", "auto", "high-quality"] = "auto"
    summarizer_provider: Optional[Literal["gemini", "openai", "claude"]] = None
    summary_max_tokens: int = 1000

    # Provider credentials
    openai_api_key: Optional[str] = None
    openai_api_base: Optional[str] = None
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SUPERAGENT_GEMINI_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY"),
    )
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    anthropic_api_key: Optional[str] = None
    anthropic_api_base: Optional[str] = None

    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
