from superagent.domain.external.compression import TokenEstimator
from superagent.domain.models.message import Message, TextPart, MessagePart
import json
import logging
import math
from typing import List

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN = 4
STRUCTURED_CHARS_PER_TOKEN = 3  # Tool calls/results encode denser
MESSAGE_OVERHEAD_TOKENS = 10  # Role and metadata


def estimate_text_tokens(text: str) -> int:
    """Simple token estimation (1 token ≈ 4 characters)"""
    if not text:
        return 0
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def _compact_json(part: MessagePart) -> str:
    return json.dumps(
        part.model_dump(by_alias=True, mode="json"),
        separators=(",", ":"),
        ensure_ascii=False,
    )


class HeuristicTokenEstimator(TokenEstimator):
    """Character-count based token estimator

    The estimate is deliberately model-agnostic; it only has to be good
    enough to decide when a conversation is approaching the context window.
    """

    def estimate_message_tokens(self, message: Message) -> int:
        tokens = MESSAGE_OVERHEAD_TOKENS

        if isinstance(message.content, str):
            tokens += estimate_text_tokens(message.content)
            return tokens

        for part in message.content:
            if isinstance(part, TextPart):
                tokens += estimate_text_tokens(part.text)
            else:
                tokens += math.ceil(len(_compact_json(part)) / STRUCTURED_CHARS_PER_TOKEN)

        return tokens

    def estimate_token_count(self, messages: List[Message]) -> int:
        return sum(self.estimate_message_tokens(message) for message in messages)


_default_estimator = HeuristicTokenEstimator()


def estimate_token_count(messages: List[Message]) -> int:
    """Estimate token count of messages with the default heuristic"""
    return _default_estimator.estimate_token_count(messages)
