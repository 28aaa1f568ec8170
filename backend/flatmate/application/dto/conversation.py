"""Conversation DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from flatmate.domain.entities.conversation import Conversation


class ConversationDTO(BaseModel):
    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    last_message: Optional[str] = None

    @classmethod
    def from_entity(cls, conversation: Conversation) -> ConversationDTO:
        return cls(
            id=conversation.id.value,
            title=conversation.title,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
            last_message=conversation.last_message,
        )


class ConversationListDTO(BaseModel):
    conversations: list[ConversationDTO]
    total: int
