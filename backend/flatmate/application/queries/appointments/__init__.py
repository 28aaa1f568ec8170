"""Appointment queries."""

from flatmate.application.queries.appointments.list_appointments import (
    ListAppointmentsQuery,
    ListAppointmentsHandler,
)

__all__ = ["ListAppointmentsQuery", "ListAppointmentsHandler"]
