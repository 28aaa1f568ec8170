"""MessageId - identity of a message."""

from dataclasses import dataclass

from flatmate.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True)
class MessageId(EntityId):
    pass
