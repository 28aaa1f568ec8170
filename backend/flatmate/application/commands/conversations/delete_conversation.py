"""Delete Conversation Command."""

from dataclasses import dataclass

from flatmate.application.common.interfaces import Command, CommandHandler
from flatmate.domain.exceptions.access_denied import AccessDeniedError
from flatmate.domain.exceptions.entity_not_found import EntityNotFoundError
from flatmate.domain.ports.repositories import ConversationRepository
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class DeleteConversationCommand(Command[bool]):
    conversation_id: ConversationId
    user_id: UserId


class DeleteConversationHandler(CommandHandler[bool]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: DeleteConversationCommand) -> bool:
        conversation_id = command.conversation_id

        conversation = await self._conversation_repository.get_by_id(conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {conversation_id.value} not found."
            )

        if not conversation.is_owned_by(command.user_id):
            raise AccessDeniedError("User does not own this conversation.")

        return await self._conversation_repository.delete(conversation_id)
