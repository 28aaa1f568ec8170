"""ConversationId - identity of a conversation."""

from dataclasses import dataclass

from flatmate.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True)
class ConversationId(EntityId):
    pass
