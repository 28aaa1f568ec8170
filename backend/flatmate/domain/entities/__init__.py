"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.entities.message import Message
from flatmate.domain.entities.listing import Listing
from flatmate.domain.entities.appointment import Appointment

__all__ = [
    "Conversation",
    "Message",
    "Listing",
    "Appointment",
]
