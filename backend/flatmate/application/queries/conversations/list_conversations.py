"""List Conversations Query."""

from dataclasses import dataclass
from typing import Optional

from flatmate.application.common.interfaces import Query, QueryHandler
from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from flatmate.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: UserId
    limit: Optional[int] = None  # None = handler default


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(
        self, conversation_repository: ConversationRepository, default_limit: int = 50
    ):
        self._conversation_repository = conversation_repository
        self._default_limit = default_limit

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        return await self._conversation_repository.get_by_user(
            query.user_id, query.limit or self._default_limit
        )
