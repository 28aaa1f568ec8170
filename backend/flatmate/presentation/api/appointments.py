"""
Appointments API Router - schedule and manage listing viewings.

Scheduling is capped per subscription tier (tier claim of the caller's token).
"""

from datetime import datetime
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from flatmate.application.commands.appointments import (
    ScheduleViewingCommand,
    ScheduleViewingHandler,
    UpdateAppointmentStatusCommand,
    UpdateAppointmentStatusHandler,
)
from flatmate.application.dto import AppointmentDTO
from flatmate.application.queries.appointments import (
    ListAppointmentsHandler,
    ListAppointmentsQuery,
)
from flatmate.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from flatmate.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class ScheduleViewingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    listing_id: str = Field(alias="listingId")
    scheduled_time: datetime = Field(alias="scheduledTime")
    notes: Optional[str] = None


class UpdateStatusRequest(BaseModel):
    status: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=AppointmentDTO, status_code=status.HTTP_201_CREATED)
@inject
async def schedule_viewing(
    request: ScheduleViewingRequest,
    handler: FromDishka[ScheduleViewingHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = ScheduleViewingCommand(
        user_id=current_user.user_id,
        tier=current_user.tier,
        listing_id=request.listing_id,
        scheduled_time=request.scheduled_time,
        notes=request.notes,
    )
    try:
        appointment = await handler.execute(command)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    return AppointmentDTO.from_entity(appointment)


@router.get("", response_model=list[AppointmentDTO], status_code=status.HTTP_200_OK)
@inject
async def list_appointments(
    handler: FromDishka[ListAppointmentsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    appointments = await handler.execute(
        ListAppointmentsQuery(user_id=current_user.user_id)
    )
    return [AppointmentDTO.from_entity(a) for a in appointments]


@router.patch(
    "/{appointment_id}/status",
    response_model=AppointmentDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def update_appointment_status(
    appointment_id: str,
    request: UpdateStatusRequest,
    handler: FromDishka[UpdateAppointmentStatusHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = UpdateAppointmentStatusCommand(
        appointment_id=appointment_id,
        user_id=current_user.user_id,
        status=request.status,
    )
    try:
        appointment = await handler.execute(command)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return AppointmentDTO.from_entity(appointment)
