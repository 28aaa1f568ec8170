"""
Tests for viewing appointments: tier limits, ownership and status changes.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from flatmate.application.commands.appointments import (
    ScheduleViewingCommand,
    ScheduleViewingHandler,
    UpdateAppointmentStatusCommand,
    UpdateAppointmentStatusHandler,
)
from flatmate.config.settings import Config
from flatmate.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from flatmate.domain.value_objects.user_id import UserId

USER = UserId("user-1")
WHEN = datetime.now(timezone.utc) + timedelta(days=2)

LIMITS = {"free": 1, "monthly": 2, "annual": -1}


@pytest.fixture()
def listing_id(database):
    return next(iter(database.listings))


@pytest.fixture()
def schedule(repos, listing_id):
    handler = ScheduleViewingHandler(repos["appointments"], repos["listings"], LIMITS)

    def _schedule(tier="free", user=USER, target=None):
        return asyncio.run(
            handler.execute(
                ScheduleViewingCommand(
                    user_id=user,
                    tier=tier,
                    listing_id=target or listing_id,
                    scheduled_time=WHEN,
                )
            )
        )

    return _schedule


@pytest.fixture()
def update_status(repos):
    handler = UpdateAppointmentStatusHandler(repos["appointments"])

    def _update(appointment_id, status, user=USER):
        return asyncio.run(
            handler.execute(
                UpdateAppointmentStatusCommand(
                    appointment_id=appointment_id, user_id=user, status=status
                )
            )
        )

    return _update


class TestScheduleViewing:
    def test_creates_pending_appointment(self, schedule, listing_id):
        appointment = schedule()

        assert appointment.status == "pending"
        assert appointment.listing_id.value == listing_id

    def test_free_tier_limited_to_one(self, schedule):
        schedule()

        with pytest.raises(AccessDeniedError, match="Free tier is limited to 1 scheduled viewing$"):
            schedule()

    def test_monthly_tier_limit(self, schedule):
        schedule(tier="monthly")
        schedule(tier="monthly")

        with pytest.raises(AccessDeniedError, match="2 scheduled viewings"):
            schedule(tier="monthly")

    def test_annual_tier_is_unlimited(self, schedule):
        for _ in range(5):
            schedule(tier="annual")

    def test_cancelled_appointments_do_not_count(self, schedule, update_status):
        first = schedule()
        update_status(first.id.value, "cancelled")

        assert schedule().status == "pending"

    def test_limits_are_per_user(self, schedule):
        schedule()

        assert schedule(user=UserId("user-2")).user_id.value == "user-2"

    def test_unknown_listing(self, schedule):
        with pytest.raises(EntityNotFoundError):
            schedule(target="2f1d0c3e-7a44-4e09-9a51-0c1b8f3f9f11")

    def test_malformed_listing_id(self, schedule):
        with pytest.raises(DomainValidationError):
            schedule(target="listing-1")

    def test_default_tier_limits(self):
        assert Config.APPOINTMENT_LIMITS["free"] == 1
        assert Config.APPOINTMENT_LIMITS["monthly"] == 10
        assert Config.APPOINTMENT_LIMITS["annual"] < 0


class TestUpdateStatus:
    def test_owner_can_confirm(self, schedule, update_status):
        appointment = schedule()

        assert update_status(appointment.id.value, "confirmed").status == "confirmed"

    def test_other_user_is_denied(self, schedule, update_status):
        appointment = schedule()

        with pytest.raises(AccessDeniedError):
            update_status(appointment.id.value, "cancelled", user=UserId("user-2"))

    def test_invalid_status(self, schedule, update_status):
        appointment = schedule()

        with pytest.raises(DomainValidationError):
            update_status(appointment.id.value, "done")

    def test_unknown_appointment(self, update_status):
        with pytest.raises(EntityNotFoundError):
            update_status("nope", "confirmed")
