"""Application services used by the chat use case."""

from flatmate.application.services.search_parameter_extractor import (
    SearchParameterExtractor,
)
from flatmate.application.services.conversation_locks import ConversationLocks

__all__ = ["SearchParameterExtractor", "ConversationLocks"]
