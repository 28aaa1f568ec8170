"""
Message Entity - A single message in a conversation. Immutable once created.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.message_id import MessageId

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    role: str
    content: str
    created_at: datetime

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Invalid role: {self.role}")

    @classmethod
    def create(cls, conversation_id: ConversationId, role: str, content: str) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=datetime.now(timezone.utc),
        )

    def as_chat_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
