"""
Prisma Appointment Repository Implementation.
"""

from typing import Optional

from prisma import Prisma
from prisma.models import Appointment as PrismaAppointment

from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.ports.repositories import AppointmentRepository
from flatmate.domain.value_objects.appointment_id import AppointmentId
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.user_id import UserId


class PrismaAppointmentRepository(AppointmentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaAppointment) -> Appointment:
        return Appointment(
            id=AppointmentId(record.id),
            user_id=UserId(record.user_id),
            listing_id=ListingId(record.listing_id),
            scheduled_time=record.scheduled_time,
            status=record.status,
            notes=record.notes,
            created_at=record.created_at,
        )

    async def get_by_id(self, appointment_id: AppointmentId) -> Optional[Appointment]:
        record = await self._prisma.appointment.find_unique(
            where={"id": appointment_id.value}
        )
        return self._to_entity(record) if record else None

    async def get_by_user(self, user_id: UserId) -> list[Appointment]:
        records = await self._prisma.appointment.find_many(
            where={"user_id": user_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def save(self, appointment: Appointment) -> None:
        await self._prisma.appointment.upsert(
            where={"id": appointment.id.value},
            data={
                "create": {
                    "id": appointment.id.value,
                    "user_id": appointment.user_id.value,
                    "listing_id": appointment.listing_id.value,
                    "scheduled_time": appointment.scheduled_time,
                    "status": appointment.status,
                    "notes": appointment.notes,
                    "created_at": appointment.created_at,
                },
                "update": {
                    "status": appointment.status,
                    "notes": appointment.notes,
                },
            },
        )
