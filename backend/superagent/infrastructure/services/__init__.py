from superagent.infrastructure.services.context_manager import ContextManager
from superagent.infrastructure.services.compression_middleware import (
    CallbackCompressionObserver,
    CompressionMiddleware,
    NoopCompressionObserver,
    create_compression_middleware,
    enable_context_compression,
    with_compression_middleware,
)
from superagent.infrastructure.services.session_store import CompressingSession, InMemorySessionStore

__all__ = [
    'ContextManager',
    'CompressionMiddleware', 'CallbackCompressionObserver', 'NoopCompressionObserver',
    'create_compression_middleware', 'enable_context_compression', 'with_compression_middleware',
    'CompressingSession', 'InMemorySessionStore',
]
