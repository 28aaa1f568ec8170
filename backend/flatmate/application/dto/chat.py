"""Chat DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from flatmate.application.dto.conversation import ConversationDTO
from flatmate.application.dto.listing import ListingDTO
from flatmate.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    conversation_id: str
    role: str
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            role=message.role,
            content=message.content,
            created_at=message.created_at,
        )


class ChatTurnDTO(BaseModel):
    """Result of one chat turn: the assistant reply, its conversation, matched listings."""

    message: MessageDTO
    conversation: ConversationDTO
    listings: Optional[list[ListingDTO]] = None
    degraded: bool = False
