from typing import Any, Awaitable, Callable, Dict, List, Optional, Union
from superagent.domain.external.compression import CompressionObserver, Summarizer
from superagent.domain.models.compression_event import (
    CompressionCompletedEvent,
    CompressionEvent,
    CompressionFailedEvent,
    CompressionTriggeredEvent,
)
from superagent.domain.models.compression_result import CompressionResult
from superagent.domain.models.message import Message
from superagent.domain.models.summarizer import CompressionMode, SummarizerProvider
from superagent.infrastructure.config import get_settings
from superagent.infrastructure.external.compression.summarizer_factory import create_summarizer_for_mode
from superagent.infrastructure.services.context_manager import ContextManager
import logging

logger = logging.getLogger(__name__)


class NoopCompressionObserver(CompressionObserver):
    def on_compression_event(self, event: CompressionEvent) -> None:
        pass


class CallbackCompressionObserver(CompressionObserver):
    """Adapts a plain callable to the observer interface"""

    def __init__(self, callback: Callable[[CompressionEvent], None]):
        self._callback = callback

    def on_compression_event(self, event: CompressionEvent) -> None:
        self._callback(event)


class CompressionMiddleware:
    """Compresses conversation history before each model invocation

    Compression is best effort: every failure returns the original messages.
    Compression is not reentrant; a call made while another compression is
    in flight returns the original messages without compressing.
    """

    def __init__(self, context_manager: ContextManager, model: str,
                 enable_auto_compression: bool = True,
                 compression_mode: Union[CompressionMode, str] = CompressionMode.AUTO,
                 summarizer_provider: Optional[Union[SummarizerProvider, str]] = None,
                 summarizer: Optional[Summarizer] = None,
                 observer: Optional[CompressionObserver] = None):
        self._context_manager = context_manager
        self._model = model
        self._enable_auto_compression = enable_auto_compression
        self._compression_mode = CompressionMode(compression_mode)
        self._summarizer_provider = SummarizerProvider(summarizer_provider) if summarizer_provider else None
        self._custom_summarizer = summarizer is not None
        self._summarizer = summarizer or self._create_summarizer()
        self._observer = observer or NoopCompressionObserver()
        self._is_compressing = False

    @property
    def is_compressing(self) -> bool:
        return self._is_compressing

    @property
    def context_manager(self) -> ContextManager:
        return self._context_manager

    @property
    def summarizer(self) -> Summarizer:
        return self._summarizer

    def _create_summarizer(self) -> Summarizer:
        return create_summarizer_for_mode(self._compression_mode, self._model, self._summarizer_provider)

    async def check_and_compress(self, messages: List[Message]) -> CompressionResult:
        """Compress messages if they exceed the model's compression threshold

        Call before sending messages to the model.
        """
        if not self._enable_auto_compression or self._is_compressing:
            return CompressionResult(messages=messages, was_compressed=False)

        try:
            if not self._context_manager.should_compress(messages):
                return CompressionResult(messages=messages, was_compressed=False)

            self._emit_event(CompressionTriggeredEvent())
            return await self._perform_compression(messages)
        except Exception as e:
            logger.exception(f"Compression check failed: {e}")
            self._emit_event(CompressionFailedEvent(error=e))
            return CompressionResult(messages=messages, was_compressed=False)

    async def force_compress(self, messages: List[Message]) -> CompressionResult:
        """Compress messages regardless of token count"""
        if self._is_compressing:
            return CompressionResult(messages=messages, was_compressed=False)

        try:
            self._emit_event(CompressionTriggeredEvent())
            return await self._perform_compression(messages)
        except Exception as e:
            logger.exception(f"Forced compression failed: {e}")
            self._emit_event(CompressionFailedEvent(error=e))
            return CompressionResult(messages=messages, was_compressed=False)

    async def _perform_compression(self, messages: List[Message]) -> CompressionResult:
        self._is_compressing = True
        try:
            outcome = await self._context_manager.compress_conversation(messages, self._summarizer)

            self._emit_event(CompressionCompletedEvent(compression_info=outcome.compression_info))

            return CompressionResult(
                messages=outcome.compressed_messages,
                was_compressed=True,
                compression_info=outcome.compression_info,
            )
        finally:
            self._is_compressing = False

    def update_model(self, new_model: str) -> None:
        """Switch the agent model and rebuild the summarizer for it"""
        self._model = new_model
        self._context_manager.update_model(new_model)
        if not self._custom_summarizer:
            self._summarizer = self._create_summarizer()

    def set_auto_compression(self, enabled: bool) -> None:
        self._enable_auto_compression = enabled

    def set_compression_mode(self, mode: Union[CompressionMode, str]) -> None:
        self._compression_mode = CompressionMode(mode)
        if not self._custom_summarizer:
            self._summarizer = self._create_summarizer()

    def get_status(self) -> Dict[str, Any]:
        return {
            "is_compressing": self._is_compressing,
            "auto_compression_enabled": self._enable_auto_compression,
            "compression_mode": self._compression_mode.value,
            "model": self._model,
        }

    def _emit_event(self, event: CompressionEvent) -> None:
        try:
            self._observer.on_compression_event(event)
        except Exception as e:
            logger.exception(f"Error in compression event handler: {e}")


def create_compression_middleware(model: Optional[str] = None, **options: Any) -> CompressionMiddleware:
    """Create compression middleware with default settings

    Keyword options override the CompressionMiddleware arguments; a
    `context_manager` may be passed to replace the default one.
    """
    settings = get_settings()
    model = model or settings.model_name

    context_manager = options.pop("context_manager", None) or ContextManager.from_settings(model)

    params: Dict[str, Any] = {
        "enable_auto_compression": settings.enable_auto_compression,
        "compression_mode": settings.compression_mode,
        "summarizer_provider": settings.summarizer_provider,
    }
    params.update(options)
    return CompressionMiddleware(context_manager=context_manager, model=model, **params)


def enable_context_compression(model: str,
                               compression_mode: Union[CompressionMode, str] = CompressionMode.AUTO,
                               max_messages: int = 20,
                               enable_auto_compression: bool = True,
                               enable_semantic_recall: bool = False,
                               **options: Any) -> CompressionMiddleware:
    """Quick setup of context compression for an agent"""
    context_manager = ContextManager(
        model,
        max_messages=max_messages,
        preserve_important_messages=True,
        enable_semantic_recall=enable_semantic_recall,
    )
    return create_compression_middleware(
        model,
        context_manager=context_manager,
        compression_mode=compression_mode,
        enable_auto_compression=enable_auto_compression,
        **options,
    )


ProcessFunction = Callable[[Dict[str, Any]], Awaitable[Any]]


def with_compression_middleware(middleware: CompressionMiddleware
                                ) -> Callable[[Dict[str, Any], ProcessFunction], Awaitable[Any]]:
    """Wrap agent processing so that payload["messages"] is compressed first

    When compression happened and the result is a dict, the compression
    info is attached under "compression_info".
    """

    async def run(payload: Dict[str, Any], process: ProcessFunction) -> Any:
        result = await middleware.check_and_compress(payload["messages"])
        compressed_payload = {**payload, "messages": result.messages}

        output = await process(compressed_payload)

        if result.was_compressed and isinstance(output, dict):
            output["compression_info"] = result.compression_info
        return output

    return run
