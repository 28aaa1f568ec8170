"""ListingId - identity of a listing."""

from dataclasses import dataclass

from flatmate.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True)
class ListingId(EntityId):
    pass
