"""
Conversation Entity - A chat thread between one user and the assistant.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId

@dataclass
class Conversation:
    id: ConversationId
    user_id: UserId
    title: str
    created_at: datetime
    updated_at: datetime
    last_message: Optional[str] = None

    @classmethod
    def create(cls, user_id: UserId, title: str) -> Conversation:
        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            user_id=user_id,
            title=title,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def title_from_message(content: str, length: int = 30) -> str:
        """First `length` characters of the opening message."""
        if len(content) > length:
            return content[:length] + "..."
        return content

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id.value == user_id.value

    def touch(self) -> None:
        """Bump updated_at; called on every new message."""
        self.updated_at = datetime.now(timezone.utc)
