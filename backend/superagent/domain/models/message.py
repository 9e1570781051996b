import uuid
from datetime import datetime, timezone
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant", "tool", "system"]


class TextPart(BaseModel):
    """Plain text part of a structured message"""
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = ""


class ToolCallPart(BaseModel):
    """Tool invocation requested by the assistant"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str = Field(default="", alias="toolCallId")
    tool_name: str = Field(alias="toolName")
    args: Any = None


class ToolResultPart(BaseModel):
    """Result returned by a tool invocation"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["tool-result"] = "tool-result"
    tool_call_id: str = Field(default="", alias="toolCallId")
    tool_name: Optional[str] = Field(default=None, alias="toolName")
    result: Any = None


MessagePart = Annotated[
    Union[TextPart, ToolCallPart, ToolResultPart],
    Field(discriminator="type"),
]

MessageContent = Union[str, List[MessagePart]]


class Message(BaseModel):
    """Conversation message

    Content is either plain text or an ordered list of text / tool-call /
    tool-result parts. Messages are immutable values.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: Role
    content: MessageContent = ""
    id: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @property
    def is_text(self) -> bool:
        return isinstance(self.content, str)

    @property
    def parts(self) -> List[MessagePart]:
        if isinstance(self.content, str):
            return []
        return list(self.content)

    @property
    def text(self) -> str:
        """Plain text content, or the joined text parts of a structured message"""
        if isinstance(self.content, str):
            return self.content
        return "\n".join(part.text for part in self.content if isinstance(part, TextPart))

    def tool_calls(self) -> List[ToolCallPart]:
        return [part for part in self.parts if isinstance(part, ToolCallPart)]

    @classmethod
    def summary(cls, text: str) -> "Message":
        """Build the synthetic message that stands in for summarized history"""
        return cls(
            role="assistant",
            content=text,
            id=f"summary-{uuid.uuid4().hex}",
            created_at=datetime.now(timezone.utc),
        )
