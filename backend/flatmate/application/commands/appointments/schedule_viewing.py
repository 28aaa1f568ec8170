"""
Schedule Viewing Command - book a viewing for a listing.

Active (not cancelled) appointments are capped per subscription tier;
a negative limit means unlimited. Unknown tiers get the free tier's limit.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from flatmate.application.common.interfaces import Command, CommandHandler
from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from flatmate.domain.ports.repositories import (
    AppointmentRepository,
    ListingRepository,
)
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleViewingCommand(Command[Appointment]):
    user_id: UserId
    tier: str
    listing_id: str
    scheduled_time: datetime
    notes: Optional[str] = None


class ScheduleViewingHandler(CommandHandler[Appointment]):
    def __init__(
        self,
        appointment_repository: AppointmentRepository,
        listing_repository: ListingRepository,
        tier_limits: dict[str, int],
    ):
        self._appointments = appointment_repository
        self._listings = listing_repository
        self._tier_limits = tier_limits

    async def execute(self, command: ScheduleViewingCommand) -> Appointment:
        try:
            listing_id = ListingId(command.listing_id)
        except ValueError as e:
            raise DomainValidationError(f"Invalid listing id: {command.listing_id}") from e

        if await self._listings.get_by_id(listing_id) is None:
            raise EntityNotFoundError("Listing not found")

        limit = self._tier_limits.get(command.tier, self._tier_limits.get("free", 1))
        if limit >= 0:
            existing = await self._appointments.get_by_user(command.user_id)
            active = [a for a in existing if a.is_active]
            if len(active) >= limit:
                raise AccessDeniedError(
                    f"{command.tier.capitalize()} tier is limited to {limit} scheduled viewing"
                    + ("" if limit == 1 else "s")
                )

        appointment = Appointment.create(
            user_id=command.user_id,
            listing_id=listing_id,
            scheduled_time=command.scheduled_time,
            notes=command.notes,
        )
        await self._appointments.save(appointment)
        logger.info(
            f"Scheduled viewing {appointment.id} of listing {listing_id} for {command.user_id}"
        )
        return appointment
