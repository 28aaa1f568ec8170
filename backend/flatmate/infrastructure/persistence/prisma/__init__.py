"""
Prisma repositories. Importing this package requires a generated client
(`prisma generate --schema backend/prisma/schema.prisma`).
"""

from flatmate.infrastructure.persistence.prisma.conversation_repository import (
    PrismaConversationRepository,
)
from flatmate.infrastructure.persistence.prisma.message_repository import (
    PrismaMessageRepository,
)
from flatmate.infrastructure.persistence.prisma.listing_repository import (
    PrismaListingRepository,
)
from flatmate.infrastructure.persistence.prisma.appointment_repository import (
    PrismaAppointmentRepository,
)

__all__ = [
    "PrismaConversationRepository",
    "PrismaMessageRepository",
    "PrismaListingRepository",
    "PrismaAppointmentRepository",
]
