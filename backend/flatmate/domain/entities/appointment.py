"""
Appointment Entity - A scheduled viewing of a listing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from flatmate.domain.value_objects.appointment_id import AppointmentId
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.user_id import UserId

STATUSES = ("pending", "confirmed", "cancelled")


@dataclass
class Appointment:
    id: AppointmentId
    user_id: UserId
    listing_id: ListingId
    scheduled_time: datetime
    status: str = "pending"
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.status not in STATUSES:
            raise ValueError(
                f"Invalid status: {self.status}. Must be one of {list(STATUSES)}."
            )

    @classmethod
    def create(
        cls,
        user_id: UserId,
        listing_id: ListingId,
        scheduled_time: datetime,
        notes: Optional[str] = None,
    ) -> Appointment:
        return cls(
            id=AppointmentId.generate(),
            user_id=user_id,
            listing_id=listing_id,
            scheduled_time=scheduled_time,
            notes=notes,
        )

    @property
    def is_active(self) -> bool:
        return self.status != "cancelled"

    def update_status(self, status: str) -> None:
        if status not in STATUSES:
            raise ValueError(
                f"Invalid status: {status}. Must be one of {list(STATUSES)}."
            )
        self.status = status
