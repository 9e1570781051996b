from superagent.domain.models.message import (
    Message,
    MessageContent,
    MessagePart,
    Role,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)
from superagent.domain.models.token_limit import ModelTokenLimit
from superagent.domain.models.compression_result import (
    CompressionInfo,
    CompressionOutcome,
    CompressionResult,
    ToolCallResult,
)
from superagent.domain.models.compression_event import (
    CompressionCompletedEvent,
    CompressionEvent,
    CompressionFailedEvent,
    CompressionTriggeredEvent,
)
from superagent.domain.models.conversation import ConversationState
from superagent.domain.models.summarizer import CompressionMode, SummarizerOptions, SummarizerProvider

__all__ = [
    'Message', 'MessageContent', 'MessagePart', 'Role', 'TextPart', 'ToolCallPart', 'ToolResultPart',
    'ModelTokenLimit',
    'CompressionInfo', 'CompressionOutcome', 'CompressionResult', 'ToolCallResult',
    'CompressionEvent', 'CompressionTriggeredEvent', 'CompressionCompletedEvent', 'CompressionFailedEvent',
    'ConversationState',
    'CompressionMode', 'SummarizerOptions', 'SummarizerProvider',
]
