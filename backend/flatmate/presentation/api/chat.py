"""
Chat API Router - one conversational search turn per request.

Flow:
  HTTP Request → Router → SendMessageCommand → SendMessageHandler
                                 ↓                 ├─ search → listings
  HTTP Response ← ChatTurnDTO ←──┘                 └─ chat → LLM (fallback on failure)
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from flatmate.application.commands.chat import SendMessageCommand, SendMessageHandler
from flatmate.application.dto import (
    ChatTurnDTO,
    ConversationDTO,
    ListingDTO,
    MessageDTO,
)
from flatmate.domain.exceptions import AccessDeniedError, DomainValidationError
from flatmate.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class ChatRequest(BaseModel):
    """
    Request body for a chat turn.

    Matches frontend:
    {"message": "2 bedroom flat in Berlin under 1200€", "conversationId": "uuid" | null}
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    conversation_id: Optional[str] = Field(default=None, alias="conversationId")


# ==================== ROUTER ====================

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatTurnDTO, status_code=status.HTTP_200_OK)
@inject
async def chat(
    request: ChatRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Handle one chat turn and return the assistant reply."""
    command = SendMessageCommand(
        user_id=current_user.user_id,
        content=request.message,
        conversation_id=request.conversation_id,
    )
    try:
        result = await handler.execute(command)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    return ChatTurnDTO(
        message=MessageDTO.from_entity(result.message),
        conversation=ConversationDTO.from_entity(result.conversation),
        listings=(
            [ListingDTO.from_entity(l) for l in result.listings]
            if result.listings
            else None
        ),
        degraded=result.degraded,
    )
