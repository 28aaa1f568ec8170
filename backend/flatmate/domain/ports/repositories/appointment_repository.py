"""
Appointment Repository Port - Interface for viewing appointments.
"""

from abc import ABC, abstractmethod
from typing import Optional

from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.value_objects.appointment_id import AppointmentId
from flatmate.domain.value_objects.user_id import UserId


class AppointmentRepository(ABC):
    @abstractmethod
    async def get_by_id(self, appointment_id: AppointmentId) -> Optional[Appointment]: ...

    @abstractmethod
    async def get_by_user(self, user_id: UserId) -> list[Appointment]: ...

    @abstractmethod
    async def save(self, appointment: Appointment) -> None: ...
