"""Conversation commands."""

from .delete_conversation import DeleteConversationCommand, DeleteConversationHandler

__all__ = [
    "DeleteConversationCommand",
    "DeleteConversationHandler",
]
