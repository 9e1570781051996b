from superagent.domain.errors import SummarizationError
from superagent.domain.external.compression import Summarizer
from superagent.domain.external.llm import LLM
from superagent.domain.models.message import Message, TextPart, ToolCallPart, ToolResultPart
import logging
import json
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TOOL_RESULT_PREVIEW_CHARS = 200

SUMMARY_SYSTEM_PROMPT = "You are an expert at summarizing conversation history for an AI agent."

ROLE_LABELS = {
    "user": "User",
    "assistant": "Assistant",
}


class LlmSummarizer(Summarizer):
    """LLM-based conversation summarizer

    The LLM client is created on the first call, so missing credentials
    surface as a summarization failure instead of a construction failure.
    """

    def __init__(self, llm_factory: Callable[[], LLM], temperature: float = 0.3,
                 max_tokens: int = 1000):
        self._llm_factory = llm_factory
        self._llm: Optional[LLM] = None
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    @property
    def llm(self) -> LLM:
        if self._llm is None:
            self._llm = self._llm_factory()
        return self._llm

    async def __call__(self, messages: List[Message]) -> str:
        conversation_text = self.convert_messages_to_text(messages)
        logger.info(f"Starting summarization: messages={len(messages)}, text_len={len(conversation_text)}")

        llm = self.llm
        response = await llm.ask(
            [
                {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
                {"role": "user", "content": self._get_summary_prompt(conversation_text)},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

        summary = (response.get("content") or "").strip()
        if not summary:
            raise SummarizationError(f"Empty summary returned by {llm.model_name}")

        logger.info(f"Summarization completed: summary_len={len(summary)}")
        return summary

    @staticmethod
    def convert_messages_to_text(messages: List[Message]) -> str:
        """Render messages as a readable transcript"""
        text_parts = []

        for message in messages:
            role_label = ROLE_LABELS.get(message.role, message.role)

            if isinstance(message.content, str):
                text_parts.append(f"{role_label}: {message.content}")
                continue

            for part in message.content:
                if isinstance(part, TextPart):
                    text_parts.append(f"{role_label}: {part.text}")
                elif isinstance(part, ToolCallPart):
                    args = json.dumps(part.args, ensure_ascii=False, default=str)
                    text_parts.append(f"{role_label}: [Tool call] {part.tool_name}({args})")
                elif isinstance(part, ToolResultPart):
                    if isinstance(part.result, str):
                        result_text = part.result
                    else:
                        result_json = json.dumps(part.result, ensure_ascii=False, default=str)
                        result_text = result_json[:TOOL_RESULT_PREVIEW_CHARS] + "..."
                    text_parts.append(f"System: [Tool result] {part.tool_call_id}: {result_text}")

        return "\n\n".join(text_parts)

    def _get_summary_prompt(self, conversation_text: str) -> str:
        return f"""
Please summarize the following conversation history, following these rules:

1. **Keep key information**: the user's intent, the tools that were executed and the results they produced
2. **Be concise**: reduce the token count substantially while keeping the context
3. **Ensure continuity**: the conversation must be able to continue naturally after this summary
4. **Tool results**: include important tool executions and their results in the summary

Conversation history:
{conversation_text}

This summary replaces the original conversation history and is used by the assistant to understand the context and respond appropriately. Do not lose important information such as user questions, tool results, or generated content.

Summary:
"""
