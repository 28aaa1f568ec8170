"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (in-memory, Prisma, ...)

Infrastructure layer provides implementations.
"""

from flatmate.domain.ports.repositories.conversation_repository import ConversationRepository
from flatmate.domain.ports.repositories.message_repository import MessageRepository
from flatmate.domain.ports.repositories.listing_repository import ListingRepository
from flatmate.domain.ports.repositories.appointment_repository import AppointmentRepository

__all__ = [
    "ConversationRepository",
    "MessageRepository",
    "ListingRepository",
    "AppointmentRepository",
]
