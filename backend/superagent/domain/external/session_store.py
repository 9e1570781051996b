from typing import Protocol, Optional

from superagent.domain.models.conversation import ConversationState


class SessionStore(Protocol):
    """Conversation state storage owned by the calling application"""

    def get(self, session_id: str) -> Optional[ConversationState]:
        ...

    def put(self, session_id: str, state: ConversationState) -> None:
        ...
