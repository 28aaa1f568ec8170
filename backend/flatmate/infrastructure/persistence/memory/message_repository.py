"""
In-memory Message Repository. Messages are kept in insertion order.
"""

from typing import Optional

from flatmate.domain.entities.message import Message
from flatmate.domain.ports.repositories import MessageRepository
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.infrastructure.persistence.memory.database import InMemoryDatabase


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_conversation(
        self, conversation_id: ConversationId, limit: Optional[int] = None
    ) -> list[Message]:
        messages = list(self._db.messages.get(conversation_id.value, []))
        if limit is not None:
            messages = messages[-limit:] if limit > 0 else []
        return messages

    async def save(self, message: Message) -> None:
        self._db.messages.setdefault(message.conversation_id.value, []).append(message)
