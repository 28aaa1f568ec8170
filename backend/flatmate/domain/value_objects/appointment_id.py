"""AppointmentId - identity of a appointment."""

from dataclasses import dataclass

from flatmate.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True)
class AppointmentId(EntityId):
    pass
