"""
Message Repository Port - Interface for message persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from flatmate.domain.entities.message import Message
from flatmate.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId, limit: Optional[int] = None
    ) -> list[Message]:
        """Messages ordered by created_at ascending; with a limit, the latest `limit`."""
        ...

    @abstractmethod
    async def save(self, message: Message) -> None: ...
