from typing import Protocol, List, Dict, Any, Optional


class LLM(Protocol):
    """Chat completion interface used for summarization"""

    @property
    def model_name(self) -> str:
        ...

    async def ask(self, messages: List[Dict[str, str]],
                  temperature: Optional[float] = None,
                  max_tokens: Optional[int] = None) -> Dict[str, Any]:
        """Send chat request

        Args:
            messages: OpenAI style messages ({"role", "content"})
            temperature: Sampling temperature override
            max_tokens: Output token limit override

        Returns:
            Assistant message as {"role": "assistant", "content": str}
        """
        ...
