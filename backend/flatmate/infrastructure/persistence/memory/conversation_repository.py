"""
In-memory Conversation Repository.
"""

from dataclasses import replace
from typing import Optional

from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.ports.repositories import ConversationRepository
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId
from flatmate.infrastructure.persistence.memory.database import InMemoryDatabase

PREVIEW_LENGTH = 50


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        return self._db.conversations.get(conversation_id.value)

    async def get_by_user(self, user_id: UserId, limit: int) -> list[Conversation]:
        owned = [
            c for c in self._db.conversations.values() if c.is_owned_by(user_id)
        ]
        owned.sort(key=lambda c: c.updated_at, reverse=True)
        return [
            replace(c, last_message=self._last_message(c.id)) for c in owned[:limit]
        ]

    async def save(self, conversation: Conversation) -> None:
        self._db.conversations[conversation.id.value] = conversation

    async def delete(self, conversation_id: ConversationId) -> bool:
        self._db.messages.pop(conversation_id.value, None)
        return self._db.conversations.pop(conversation_id.value, None) is not None

    def _last_message(self, conversation_id: ConversationId) -> Optional[str]:
        for message in reversed(self._db.messages.get(conversation_id.value, [])):
            if message.role != "system":
                return message.content[:PREVIEW_LENGTH]
        return None
