"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma model fields: id, user_id, title, created_at, updated_at
- Domain entity: Conversation with value objects (ConversationId, UserId)
- last_message is the newest non-system message, truncated for previews
"""

from typing import Optional

from prisma import Prisma
from prisma.models import Conversation as PrismaConversation

from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.ports.repositories import ConversationRepository
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId

PREVIEW_LENGTH = 50


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            user_id=UserId(record.user_id),
            title=record.title,
            created_at=record.created_at,
            updated_at=record.updated_at,
            last_message=(
                record.messages[0].content[:PREVIEW_LENGTH] if record.messages else None
            ),
        )

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def get_by_user(self, user_id: UserId, limit: int) -> list[Conversation]:
        """Get conversations for user, ordered by updated_at desc."""
        records = await self._prisma.conversation.find_many(
            where={"user_id": user_id.value},
            order={"updated_at": "desc"},
            take=limit,
            include={
                "messages": {
                    "where": {"role": {"not": "system"}},
                    "order_by": {"created_at": "desc"},
                    "take": 1,
                }
            },
        )
        return [self._to_entity(record) for record in records]

    async def save(self, conversation: Conversation) -> None:
        """Save (create or update) conversation."""
        await self._prisma.conversation.upsert(
            where={"id": conversation.id.value},
            data={
                "create": {
                    "id": conversation.id.value,
                    "user_id": conversation.user_id.value,
                    "title": conversation.title,
                    "created_at": conversation.created_at,
                    "updated_at": conversation.updated_at,
                },
                "update": {
                    "title": conversation.title,
                    "updated_at": conversation.updated_at,
                },
            },
        )

    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete by ID; messages go with it (onDelete: Cascade)."""
        record = await self._prisma.conversation.delete(
            where={"id": conversation_id.value}
        )
        return record is not None
