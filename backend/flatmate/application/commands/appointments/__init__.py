"""Viewing appointment commands."""

from .schedule_viewing import ScheduleViewingCommand, ScheduleViewingHandler
from .update_appointment_status import (
    UpdateAppointmentStatusCommand,
    UpdateAppointmentStatusHandler,
)

__all__ = [
    "ScheduleViewingCommand",
    "ScheduleViewingHandler",
    "UpdateAppointmentStatusCommand",
    "UpdateAppointmentStatusHandler",
]
