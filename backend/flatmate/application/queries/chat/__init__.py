"""Chat-related queries."""

from flatmate.application.queries.chat.get_chat_history import (
    GetChatHistoryQuery,
    GetChatHistoryHandler,
    GetChatHistoryResult,
)

__all__ = [
    "GetChatHistoryQuery",
    "GetChatHistoryHandler",
    "GetChatHistoryResult",
]
