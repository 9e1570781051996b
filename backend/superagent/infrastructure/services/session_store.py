from typing import Dict, List, Optional
from superagent.domain.external.session_store import SessionStore
from superagent.domain.models.compression_result import CompressionResult
from superagent.domain.models.conversation import ConversationState
from superagent.domain.models.message import Message
from superagent.infrastructure.services.compression_middleware import CompressionMiddleware
import logging

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionStore):
    """Per-instance in-memory session store"""

    def __init__(self):
        self._states: Dict[str, ConversationState] = {}

    def get(self, session_id: str) -> Optional[ConversationState]:
        return self._states.get(session_id)

    def put(self, session_id: str, state: ConversationState) -> None:
        self._states[session_id] = state

    def __len__(self) -> int:
        return len(self._states)


class CompressingSession:
    """Keeps a session's history compressed as new messages arrive"""

    def __init__(self, store: SessionStore, middleware: CompressionMiddleware):
        self._store = store
        self._middleware = middleware

    async def append_and_compress(self, session_id: str, new_messages: List[Message]) -> CompressionResult:
        """Append messages to the session, compress if needed, and save

        Returns the messages to send to the model.
        """
        state = self._store.get(session_id) or ConversationState(session_id=session_id)
        messages = state.messages + list(new_messages)

        result = await self._middleware.check_and_compress(messages)

        history = list(state.compression_history)
        if result.was_compressed and result.compression_info is not None:
            history.append(result.compression_info)
            logger.info(f"Session {session_id} compressed: {len(messages)} -> {len(result.messages)} messages")

        self._store.put(session_id, state.model_copy(update={
            "messages": list(result.messages),
            "compression_history": history,
        }))
        return result
