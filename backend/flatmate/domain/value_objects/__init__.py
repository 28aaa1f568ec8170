"""
VALUE OBJECTS - Immutable typed identifiers and values.
"""

from flatmate.domain.value_objects.entity_id import EntityId
from flatmate.domain.value_objects.user_id import UserId
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.message_id import MessageId
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.appointment_id import AppointmentId
from flatmate.domain.value_objects.search_filters import SearchFilters

__all__ = [
    "EntityId",
    "UserId",
    "ConversationId",
    "MessageId",
    "ListingId",
    "AppointmentId",
    "SearchFilters",
]
