from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Any, Optional

from pydantic import BaseModel, Field

from superagent.domain.models.message import Message


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CompressionInfo(BaseModel):
    """Compression statistics for a single compression event"""
    original_token_count: int
    new_token_count: int
    compression_ratio: float  # new / original, not clamped
    timestamp: datetime = Field(default_factory=_utcnow)


class CompressionOutcome(BaseModel):
    """Result of ContextManager.compress_conversation"""
    compressed_messages: List[Message]
    compression_info: CompressionInfo


@dataclass
class CompressionResult:
    """Result returned to the agent by the compression middleware.

    Attributes:
        messages: Messages to send to the model. When nothing was compressed
            this is the caller's own list object, untouched.
        was_compressed: Whether compression was performed.
        compression_info: Statistics, present only when compressed.
    """
    messages: List[Message]
    was_compressed: bool
    compression_info: Optional[CompressionInfo] = None


class ToolCallResult(BaseModel):
    """Recorded tool execution"""
    tool_name: str
    input: Any = None
    output: Any = None
    timestamp: datetime = Field(default_factory=_utcnow)
    token_count: Optional[int] = None
