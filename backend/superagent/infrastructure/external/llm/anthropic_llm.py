from typing import List, Dict, Any, Optional
from anthropic import AsyncAnthropic
from anthropic.types import TextBlock
from superagent.domain.external.llm import LLM
import logging


logger = logging.getLogger(__name__)

class AnthropicLLM(LLM):
    """Anthropic messages API client"""

    def __init__(self, model_name: str, api_key: Optional[str] = None,
                 base_url: Optional[str] = None, temperature: float = 0.3,
                 max_tokens: int = 1000):
        self.client = AsyncAnthropic(
            api_key=api_key,
            base_url=base_url
        )

        self._model_name = model_name
        self._temperature = temperature
        self._max_tokens = max_tokens
        logger.info(f"Initialized Anthropic LLM with model: {self._model_name}")

    @property
    def model_name(self) -> str:
        return self._model_name

    async def ask(self, messages: List[Dict[str, str]],
                  temperature: Optional[float] = None,
                  max_tokens: Optional[int] = None) -> Dict[str, Any]:
        """Send chat request to Anthropic API

        System messages are moved to the dedicated `system` parameter.
        """
        system_parts = [m["content"] for m in messages if m.get("role") == "system"]
        chat_messages = [
            {"role": m["role"], "content": m["content"]}
            for m in messages if m.get("role") != "system"
        ]

        try:
            logger.debug(f"Sending request to Anthropic, model: {self._model_name}")
            params: Dict[str, Any] = {
                "model": self._model_name,
                "temperature": self._temperature if temperature is None else temperature,
                "max_tokens": self._max_tokens if max_tokens is None else max_tokens,
                "messages": chat_messages,
            }
            if system_parts:
                params["system"] = "\n\n".join(system_parts)

            response = await self.client.messages.create(**params)
            text = "".join(
                block.text for block in response.content if isinstance(block, TextBlock)
            )
            return {"role": "assistant", "content": text}
        except Exception as e:
            logger.error(f"Error calling Anthropic API: {str(e)}")
            raise
