from superagent.infrastructure.external.compression.token_estimator import HeuristicTokenEstimator, estimate_token_count
from superagent.infrastructure.external.compression.importance import ImportanceClassifier, MessagePartition
from superagent.infrastructure.external.compression.llm_summarizer import LlmSummarizer
from superagent.infrastructure.external.compression.summarizer_factory import (
    create_ai_summarizer,
    create_auto_summarizer,
    create_high_quality_summarizer,
    create_lightweight_summarizer,
    create_summarizer_for_mode,
    infer_provider,
)

__all__ = [
    'HeuristicTokenEstimator', 'estimate_token_count',
    'ImportanceClassifier', 'MessagePartition',
    'LlmSummarizer',
    'create_ai_summarizer', 'create_auto_summarizer', 'create_high_quality_summarizer',
    'create_lightweight_summarizer', 'create_summarizer_for_mode', 'infer_provider',
]
