"""Update Appointment Status Command."""

from dataclasses import dataclass

from flatmate.application.common.interfaces import Command, CommandHandler
from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from flatmate.domain.ports.repositories import AppointmentRepository
from flatmate.domain.value_objects.appointment_id import AppointmentId
from flatmate.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateAppointmentStatusCommand(Command[Appointment]):
    appointment_id: str
    user_id: UserId
    status: str


class UpdateAppointmentStatusHandler(CommandHandler[Appointment]):
    def __init__(self, appointment_repository: AppointmentRepository):
        self._appointments = appointment_repository

    async def execute(self, command: UpdateAppointmentStatusCommand) -> Appointment:
        try:
            appointment_id = AppointmentId(command.appointment_id)
        except ValueError as e:
            raise EntityNotFoundError("Appointment not found") from e

        appointment = await self._appointments.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundError("Appointment not found")
        if appointment.user_id.value != command.user_id.value:
            raise AccessDeniedError("You can only update your own appointments")

        try:
            appointment.update_status(command.status)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._appointments.save(appointment)
        return appointment
