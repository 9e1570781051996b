from typing import Protocol, List

from superagent.domain.models.message import Message
from superagent.domain.models.compression_event import CompressionEvent


class Summarizer(Protocol):
    """Summarizer interface - defined in Domain layer"""

    async def __call__(self, messages: List[Message]) -> str:
        """Summarize conversation history

        Args:
            messages: Messages to be summarized, never mutated

        Returns:
            Summary text of bounded length

        Raises:
            Exception: Any provider failure. Callers do not retry.
        """
        ...


class TokenEstimator(Protocol):
    """Token estimator interface"""

    def estimate_token_count(self, messages: List[Message]) -> int:
        """Estimate token count of messages

        Args:
            messages: Messages to be estimated

        Returns:
            Non-negative estimated token count
        """
        ...


class CompressionObserver(Protocol):
    """Receives compression lifecycle events"""

    def on_compression_event(self, event: CompressionEvent) -> None:
        ...
