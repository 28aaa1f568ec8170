"""
Leases API Router - lease text analysis for paid subscribers.
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from flatmate.application.commands.leases import AnalyzeLeaseCommand, AnalyzeLeaseHandler
from flatmate.application.dto import LeaseAnalysisDTO
from flatmate.domain.exceptions import AccessDeniedError, DomainValidationError
from flatmate.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class AnalyzeLeaseRequest(BaseModel):
    text: str


router = APIRouter(prefix="/leases", tags=["leases"])


@router.post("/analyze", response_model=LeaseAnalysisDTO, status_code=status.HTTP_200_OK)
@inject
async def analyze_lease(
    request: AnalyzeLeaseRequest,
    handler: FromDishka[AnalyzeLeaseHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = AnalyzeLeaseCommand(
        user_id=current_user.user_id, tier=current_user.tier, text=request.text
    )
    try:
        result = await handler.execute(command)
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return LeaseAnalysisDTO(analysis=result.analysis, degraded=result.degraded)
