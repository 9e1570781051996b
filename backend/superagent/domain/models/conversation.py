from typing import List, Optional

from pydantic import BaseModel, Field

from superagent.domain.models.compression_result import CompressionInfo
from superagent.domain.models.message import Message


class ConversationState(BaseModel):
    """Persisted state of one chat session"""
    session_id: str
    model: Optional[str] = None
    messages: List[Message] = Field(default_factory=list)
    compression_history: List[CompressionInfo] = Field(default_factory=list)
