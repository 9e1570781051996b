from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from superagent.domain.models.message import Message

logger = logging.getLogger(__name__)

# Tools whose results change downstream state and must survive compression
DEFAULT_IMPORTANT_TOOLS: Tuple[str, ...] = (
    "htmlSlideTool",
    "webSearchTool",
    "geminiImageGenerationTool",
    "geminiVideoGenerationTool",
    "imagen4GenerationTool",
    "graphicRecordingTool",
    "minimaxTTSTool",
)

DEFAULT_IMPORTANT_KEYWORDS: Tuple[str, ...] = ("error", "failed", "generated", "created")

RECENT_MESSAGES_TO_KEEP = 3


@dataclass
class MessagePartition:
    """Important messages are kept verbatim, regular ones are summarized"""
    important: List[Message] = field(default_factory=list)
    regular: List[Message] = field(default_factory=list)


class ImportanceClassifier:
    """Split a conversation into important and regular messages

    A message is important when any of these holds:
    - it is one of the last `recent_count` messages
    - it calls a tool from the important tools allow-list
    - its plain text content mentions one of the keywords (case-insensitive)

    The rules favour keeping too much over losing a tool result that turns
    out to matter later.
    """

    def __init__(self, important_tools: Optional[Iterable[str]] = None,
                 recent_count: int = RECENT_MESSAGES_TO_KEEP,
                 keywords: Sequence[str] = DEFAULT_IMPORTANT_KEYWORDS):
        self.important_tools = frozenset(
            DEFAULT_IMPORTANT_TOOLS if important_tools is None else important_tools
        )
        self.recent_count = recent_count
        self.keywords = tuple(keyword.lower() for keyword in keywords)

    def is_important_tool(self, tool_name: Optional[str]) -> bool:
        return bool(tool_name) and tool_name in self.important_tools

    def _calls_important_tool(self, message: Message) -> bool:
        return any(self.is_important_tool(part.tool_name) for part in message.tool_calls())

    def _mentions_keyword(self, message: Message) -> bool:
        if not isinstance(message.content, str):
            return False
        content = message.content.lower()
        return any(keyword in content for keyword in self.keywords)

    def partition(self, messages: Sequence[Message], preserve_important: bool = True) -> MessagePartition:
        """Stable partition of messages, preserving original order in both sets"""
        if not preserve_important:
            return MessagePartition(important=[], regular=list(messages))

        result = MessagePartition()
        recent_start = len(messages) - min(self.recent_count, len(messages))

        for index, message in enumerate(messages):
            if (index >= recent_start
                    or self._calls_important_tool(message)
                    or self._mentions_keyword(message)):
                result.important.append(message)
            else:
                result.regular.append(message)

        logger.debug(f"Partitioned {len(messages)} messages: "
                     f"important={len(result.important)}, regular={len(result.regular)}")
        return result
