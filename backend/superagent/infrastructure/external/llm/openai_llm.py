from typing import List, Dict, Any, Optional
from openai import AsyncOpenAI
from superagent.domain.external.llm import LLM
import logging


logger = logging.getLogger(__name__)

class OpenAILLM(LLM):
    """OpenAI chat completions client

    Also serves any OpenAI-compatible endpoint (Gemini is reached through
    its OpenAI-compatible base URL).
    """

    def __init__(self, model_name: str, api_key: Optional[str] = None,
                 base_url: Optional[str] = None, temperature: float = 0.3,
                 max_tokens: int = 1000):
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url
        )

        self._model_name = model_name
        self._temperature = temperature
        self._max_tokens = max_tokens
        logger.info(f"Initialized OpenAI LLM with model: {self._model_name}")

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    async def ask(self, messages: List[Dict[str, str]],
                  temperature: Optional[float] = None,
                  max_tokens: Optional[int] = None) -> Dict[str, Any]:
        """Send chat request to OpenAI API"""
        try:
            logger.debug(f"Sending request to OpenAI, model: {self._model_name}")
            response = await self.client.chat.completions.create(
                model=self._model_name,
                temperature=self._temperature if temperature is None else temperature,
                max_tokens=self._max_tokens if max_tokens is None else max_tokens,
                messages=messages,
            )
            return response.choices[0].message.model_dump()
        except Exception as e:
            logger.error(f"Error calling OpenAI API: {str(e)}")
            raise
