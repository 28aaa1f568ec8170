from flatmate.infrastructure.persistence.memory.database import InMemoryDatabase
from flatmate.infrastructure.persistence.memory.conversation_repository import (
    InMemoryConversationRepository,
)
from flatmate.infrastructure.persistence.memory.message_repository import (
    InMemoryMessageRepository,
)
from flatmate.infrastructure.persistence.memory.listing_repository import (
    InMemoryListingRepository,
)
from flatmate.infrastructure.persistence.memory.appointment_repository import (
    InMemoryAppointmentRepository,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryConversationRepository",
    "InMemoryMessageRepository",
    "InMemoryListingRepository",
    "InMemoryAppointmentRepository",
]
