from superagent.domain.external.llm import LLM
from superagent.domain.external.compression import Summarizer, TokenEstimator, CompressionObserver
from superagent.domain.external.session_store import SessionStore

__all__ = ['LLM', 'Summarizer', 'TokenEstimator', 'CompressionObserver', 'SessionStore']
