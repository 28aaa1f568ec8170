"""
Prisma storage provider (STORAGE_BACKEND=prisma).

Kept apart from container.py because importing `prisma` needs a generated
client; the memory backend never imports this module.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from flatmate.domain.ports.repositories import (
    AppointmentRepository,
    ConversationRepository,
    ListingRepository,
    MessageRepository,
)
from flatmate.infrastructure.persistence.prisma import (
    PrismaAppointmentRepository,
    PrismaConversationRepository,
    PrismaListingRepository,
    PrismaMessageRepository,
)


class PrismaStorageProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_listing_repository(self, prisma: Prisma) -> ListingRepository:
        return PrismaListingRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_appointment_repository(self, prisma: Prisma) -> AppointmentRepository:
        return PrismaAppointmentRepository(prisma)
