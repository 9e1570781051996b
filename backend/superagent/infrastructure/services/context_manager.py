from typing import List, Dict, Any, Optional, Iterable
from superagent.domain.external.compression import Summarizer, TokenEstimator
from superagent.domain.models.compression_result import CompressionInfo, CompressionOutcome, ToolCallResult
from superagent.domain.models.message import Message
from superagent.infrastructure.config import get_settings
from superagent.infrastructure.external.compression.importance import ImportanceClassifier, MessagePartition
from superagent.infrastructure.external.compression.token_estimator import HeuristicTokenEstimator, estimate_text_tokens
from superagent.infrastructure.external.compression.token_limits import (
    DEFAULT_COMPRESSION_THRESHOLD,
    get_compression_threshold,
    get_context_limit,
)
import logging
import json

logger = logging.getLogger(__name__)

# Tool results below this estimated size are always worth keeping
SMALL_TOOL_RESULT_TOKENS = 250

# Topic keywords reported by the rule-based summary
SUMMARY_TOPICS = [
    ("Presentation creation", ("slide", "presentation")),
    ("Information search", ("search",)),
    ("Image generation", ("image",)),
    ("Video generation", ("video",)),
    ("Browser automation", ("browser",)),
]


class ContextManager:
    """Decides when a conversation must shrink and builds the compressed history

    Compression keeps important messages verbatim and replaces everything
    else with one synthetic summary message placed before them.
    """

    def __init__(self, model: str,
                 compression_threshold: float = DEFAULT_COMPRESSION_THRESHOLD,
                 max_messages: int = 20,
                 preserve_important_messages: bool = True,
                 enable_semantic_recall: bool = False,
                 important_tools: Optional[Iterable[str]] = None,
                 token_estimator: Optional[TokenEstimator] = None):
        self._model = model
        self._compression_threshold = compression_threshold
        self._max_messages = max_messages
        self._preserve_important_messages = preserve_important_messages
        self._enable_semantic_recall = enable_semantic_recall
        self._classifier = ImportanceClassifier(important_tools)
        self._token_estimator = token_estimator or HeuristicTokenEstimator()

    @classmethod
    def from_settings(cls, model: Optional[str] = None, **overrides: Any) -> "ContextManager":
        """Create a ContextManager from application settings"""
        settings = get_settings()
        options: Dict[str, Any] = {
            "compression_threshold": settings.compression_threshold,
            "max_messages": settings.max_messages,
            "preserve_important_messages": settings.preserve_important_messages,
            "enable_semantic_recall": settings.enable_semantic_recall,
        }
        options.update(overrides)
        return cls(model or settings.model_name, **options)

    @property
    def model(self) -> str:
        return self._model

    @property
    def classifier(self) -> ImportanceClassifier:
        return self._classifier

    def estimate_token_count(self, messages: List[Message]) -> int:
        return self._token_estimator.estimate_token_count(messages)

    def get_context_limit(self) -> int:
        return get_context_limit(self._model)

    def should_compress(self, messages: List[Message], force: bool = False) -> bool:
        """Check if compression is needed based on estimated token count"""
        if force:
            return True

        if not messages:
            return False

        token_count = self.estimate_token_count(messages)
        threshold = get_compression_threshold(self._model)

        if threshold is None:
            # Unknown model: ratio of the default context window
            threshold = self.get_context_limit() * self._compression_threshold

        should = token_count > threshold
        if should:
            logger.info(f"Compression needed: {token_count} tokens > {threshold} threshold (model: {self._model})")
        return should

    def extract_important_messages(self, messages: List[Message]) -> MessagePartition:
        return self._classifier.partition(messages, self._preserve_important_messages)

    async def generate_summary(self, messages: List[Message],
                               summarizer: Optional[Summarizer] = None) -> str:
        """Summarize messages, falling back to a rule-based summary

        Summarizer failures are never propagated.
        """
        if summarizer is not None:
            try:
                return await summarizer(messages)
            except Exception as e:
                logger.warning(f"AI summarization failed, falling back to simple summary: {e}")

        return self._build_fallback_summary(messages)

    def _build_fallback_summary(self, messages: List[Message]) -> str:
        user_messages = 0
        tool_calls = 0
        generated_content = 0
        topics: List[str] = []

        for message in messages:
            if message.role == "user":
                user_messages += 1

            tool_calls += len(message.tool_calls())

            if isinstance(message.content, str):
                content = message.content.lower()
                if "generated" in content or "created" in content:
                    generated_content += 1
                for topic, keywords in SUMMARY_TOPICS:
                    if topic not in topics and any(keyword in content for keyword in keywords):
                        topics.append(topic)

        summary = "=== Conversation summary ===\n"
        summary += f"User messages: {user_messages}\n"
        summary += f"Tool executions: {tool_calls}\n"
        summary += f"Generated content: {generated_content}\n"
        if topics:
            summary += f"Main topics: {', '.join(topics)}\n"
        summary += "\nImportant information is preserved in the following messages."
        return summary

    async def compress_conversation(self, messages: List[Message],
                                    summarizer: Optional[Summarizer] = None) -> CompressionOutcome:
        """Compress conversation history to fit within token limits

        Returns [summary] + important messages in their original order. The
        summary is omitted when every message is important.
        """
        if not messages:
            return CompressionOutcome(
                compressed_messages=[],
                compression_info=CompressionInfo(
                    original_token_count=0,
                    new_token_count=0,
                    compression_ratio=1.0,
                ),
            )

        original_token_count = self.estimate_token_count(messages)

        partition = self.extract_important_messages(messages)
        logger.info(f"Message separation: important={len(partition.important)}, regular={len(partition.regular)}")

        compressed_messages: List[Message] = []
        if partition.regular:
            summary = await self.generate_summary(partition.regular, summarizer)
            compressed_messages.append(Message.summary(summary))
        compressed_messages.extend(partition.important)

        new_token_count = self.estimate_token_count(compressed_messages)
        compression_ratio = new_token_count / original_token_count if original_token_count > 0 else 1.0

        logger.info(f"Compression completed: {original_token_count} -> {new_token_count} tokens "
                    f"(ratio {compression_ratio:.2f}, {len(messages)} -> {len(compressed_messages)} messages)")

        return CompressionOutcome(
            compressed_messages=compressed_messages,
            compression_info=CompressionInfo(
                original_token_count=original_token_count,
                new_token_count=new_token_count,
                compression_ratio=compression_ratio,
            ),
        )

    def filter_tool_results(self, tool_results: List[ToolCallResult]) -> List[ToolCallResult]:
        """Keep important tools and small results"""
        kept = []
        for result in tool_results:
            if self._classifier.is_important_tool(result.tool_name):
                kept.append(result)
                continue

            output = json.dumps(result.output, ensure_ascii=False, default=str)
            if estimate_text_tokens(output) < SMALL_TOOL_RESULT_TOKENS:
                kept.append(result)
        return kept

    def get_memory_config(self) -> Dict[str, Any]:
        """Memory settings for the agent runtime"""
        return {
            "last_messages": self._max_messages,
            "semantic_recall": False,  # no vector store
            "threads": {"generate_title": True},
            "compression_enabled": True,
            "compression_threshold": self._compression_threshold,
        }

    def update_model(self, new_model: str) -> None:
        logger.info(f"Context manager model changed: {self._model} -> {new_model}")
        self._model = new_model

    def get_config(self) -> Dict[str, Any]:
        return {
            "model": self._model,
            "compression_threshold": self._compression_threshold,
            "max_messages": self._max_messages,
            "preserve_important_messages": self._preserve_important_messages,
            "enable_semantic_recall": self._enable_semantic_recall,
        }
