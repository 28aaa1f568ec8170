"""
Prisma Message Repository Implementation.

Messages are returned oldest first. With a limit, the newest `limit`
messages are fetched (desc + take) and reversed back into chat order.
"""

from typing import Optional

from prisma import Prisma
from prisma.models import Message as PrismaMessage

from flatmate.domain.entities.message import Message
from flatmate.domain.ports.repositories import MessageRepository
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.message_id import MessageId


class PrismaMessageRepository(MessageRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            role=record.role,
            content=record.content,
            created_at=record.created_at,
        )

    async def get_by_conversation(
        self, conversation_id: ConversationId, limit: Optional[int] = None
    ) -> list[Message]:
        if limit is None:
            records = await self._prisma.message.find_many(
                where={"conversation_id": conversation_id.value},
                order={"created_at": "asc"},
            )
            return [self._to_entity(record) for record in records]

        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order={"created_at": "desc"},
            take=limit,
        )
        records.reverse()  # Now oldest first
        return [self._to_entity(record) for record in records]

    async def save(self, message: Message) -> None:
        # Messages are immutable, so a plain insert is enough
        await self._prisma.message.create(
            data={
                "id": message.id.value,
                "conversation_id": message.conversation_id.value,
                "role": message.role,
                "content": message.content,
                "created_at": message.created_at,
            }
        )
