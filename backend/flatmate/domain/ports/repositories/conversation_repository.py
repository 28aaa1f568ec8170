"""
Conversation Repository Port - Interface for conversation persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_by_user(self, user_id: UserId, limit: int) -> list[Conversation]:
        """Most recently updated first, with last_message populated."""
        ...

    @abstractmethod
    async def save(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete the conversation and its messages. Returns True if deleted."""
        ...
