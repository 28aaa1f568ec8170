"""List Appointments Query."""

from dataclasses import dataclass

from flatmate.application.common.interfaces import Query, QueryHandler
from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.ports.repositories import AppointmentRepository
from flatmate.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListAppointmentsQuery(Query[list[Appointment]]):
    user_id: UserId


class ListAppointmentsHandler(QueryHandler[list[Appointment]]):
    def __init__(self, appointment_repository: AppointmentRepository):
        self._appointment_repository = appointment_repository

    async def execute(self, query: ListAppointmentsQuery) -> list[Appointment]:
        return await self._appointment_repository.get_by_user(query.user_id)
