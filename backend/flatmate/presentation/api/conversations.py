"""
Conversations API Router - list, read and delete the caller's conversations.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from flatmate.application.commands.conversations import (
    DeleteConversationCommand,
    DeleteConversationHandler,
)
from flatmate.application.dto import ConversationDTO, ConversationListDTO, MessageDTO
from flatmate.application.queries.chat import GetChatHistoryHandler, GetChatHistoryQuery
from flatmate.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from flatmate.domain.exceptions import AccessDeniedError, EntityNotFoundError
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== RESPONSE MODELS ====================


class DeleteConversationResponse(BaseModel):
    success: bool


class GetConversationResponse(BaseModel):
    conversation: ConversationDTO
    messages: list[MessageDTO]


def _parse_id(conversation_id: str) -> ConversationId:
    try:
        return ConversationId(conversation_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Conversation {conversation_id} not found",
        ) from e


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.get("", response_model=ConversationListDTO, status_code=status.HTTP_200_OK)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's conversations, most recently updated first."""
    query = ListConversationsQuery(user_id=current_user.user_id)
    conversations = await handler.execute(query)
    return ConversationListDTO(
        conversations=[ConversationDTO.from_entity(c) for c in conversations],
        total=len(conversations),
    )


@router.get(
    "/{conversation_id}",
    response_model=GetConversationResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    handler: FromDishka[GetChatHistoryHandler],
    current_user: AuthUser = Depends(get_current_user),
    limit: Optional[int] = Query(default=None, ge=1),
):
    """Get a conversation with its messages (system message included)."""
    try:
        result = await handler.execute(
            GetChatHistoryQuery(
                conversation_id=_parse_id(conversation_id),
                user_id=current_user.user_id,
                limit=limit,
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    return GetConversationResponse(
        conversation=ConversationDTO.from_entity(result.conversation),
        messages=[MessageDTO.from_entity(m) for m in result.messages],
    )


@router.delete(
    "/{conversation_id}",
    response_model=DeleteConversationResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_conversation(
    conversation_id: str,
    handler: FromDishka[DeleteConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete conversation by ID."""
    try:
        success = await handler.execute(
            DeleteConversationCommand(
                conversation_id=_parse_id(conversation_id),
                user_id=current_user.user_id,
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    return DeleteConversationResponse(success=success)
