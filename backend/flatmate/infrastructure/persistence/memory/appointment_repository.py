"""
In-memory Appointment Repository.
"""

from typing import Optional

from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.ports.repositories import AppointmentRepository
from flatmate.domain.value_objects.appointment_id import AppointmentId
from flatmate.domain.value_objects.user_id import UserId
from flatmate.infrastructure.persistence.memory.database import InMemoryDatabase


class InMemoryAppointmentRepository(AppointmentRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, appointment_id: AppointmentId) -> Optional[Appointment]:
        return self._db.appointments.get(appointment_id.value)

    async def get_by_user(self, user_id: UserId) -> list[Appointment]:
        appointments = [
            a for a in self._db.appointments.values() if a.user_id == user_id
        ]
        return sorted(appointments, key=lambda a: a.created_at)

    async def save(self, appointment: Appointment) -> None:
        self._db.appointments[appointment.id.value] = appointment
