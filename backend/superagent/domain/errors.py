class SuperAgentError(Exception):
    """Base error for the context compression core"""


class ConfigurationError(SuperAgentError):
    """Invalid or missing configuration"""


class UnsupportedProviderError(ConfigurationError):
    """Summarizer provider is not supported"""

    def __init__(self, provider: str):
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


class SummarizationError(SuperAgentError):
    """LLM summarization did not produce a usable summary"""
