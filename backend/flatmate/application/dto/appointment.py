"""Appointment DTO."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from flatmate.domain.entities.appointment import Appointment


class AppointmentDTO(BaseModel):
    id: str
    listing_id: str
    scheduled_time: datetime
    status: str
    notes: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, appointment: Appointment) -> AppointmentDTO:
        return cls(
            id=appointment.id.value,
            listing_id=appointment.listing_id.value,
            scheduled_time=appointment.scheduled_time,
            status=appointment.status,
            notes=appointment.notes,
            created_at=appointment.created_at,
        )
