"""
GetChatHistory Query - Get conversation with messages.

Loads conversation + messages when the chat widget reopens a conversation.
"""

from dataclasses import dataclass
from typing import Optional

from flatmate.application.common.interfaces import Query, QueryHandler
from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.entities.message import Message
from flatmate.domain.exceptions import AccessDeniedError, EntityNotFoundError
from flatmate.domain.ports.repositories import ConversationRepository, MessageRepository
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId


@dataclass
class GetChatHistoryResult:
    """Result containing conversation metadata and messages."""

    conversation: Conversation
    messages: list[Message]


@dataclass(frozen=True)
class GetChatHistoryQuery(Query[GetChatHistoryResult]):
    conversation_id: ConversationId
    user_id: UserId
    limit: Optional[int] = None  # None = handler default


class GetChatHistoryHandler(QueryHandler[GetChatHistoryResult]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        default_limit: Optional[int] = None,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo
        self._default_limit = default_limit

    async def execute(self, query: GetChatHistoryQuery) -> GetChatHistoryResult:
        """
        Get conversation with chat history.

        Raises:
            EntityNotFoundError: If conversation doesn't exist
            AccessDeniedError: If user doesn't own the conversation
        """
        conversation = await self._conv_repo.get_by_id(query.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {query.conversation_id.value} not found"
            )

        if not conversation.is_owned_by(query.user_id):
            raise AccessDeniedError("Unauthorized access to conversation")

        # latest `limit` messages, oldest first
        messages = await self._msg_repo.get_by_conversation(
            query.conversation_id, limit=query.limit or self._default_limit
        )

        return GetChatHistoryResult(conversation=conversation, messages=messages)
