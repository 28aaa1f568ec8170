"""
SendMessage Command - One chat turn (user message in, assistant reply out).

Handler:
1. Validate the message (empty -> DomainValidationError, nothing written)
2. Resolve the conversation: reuse an owned one, or create one seeded with
   the system prompt (unknown / foreign id -> AccessDeniedError, nothing written)
3. Save the user message
4. Search intent: extract filters, query listings, format the reply
   Otherwise: send the full history to the LLM (fallback reply on Err)
5. Save the assistant message and return it with the conversation and listings
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flatmate.application.common.interfaces import Command, CommandHandler
from flatmate.application.services.conversation_locks import ConversationLocks
from flatmate.application.services.search_parameter_extractor import (
    SearchParameterExtractor,
)
from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.entities.listing import Listing
from flatmate.domain.entities.message import Message
from flatmate.domain.exceptions import AccessDeniedError, DomainValidationError
from flatmate.domain.ports.llm_client import LLMClient
from flatmate.domain.ports.repositories import (
    ConversationRepository,
    ListingRepository,
    MessageRepository,
)
from flatmate.domain.result import Err
from flatmate.domain.services import replies
from flatmate.domain.services.intent_classifier import IntentClassifier
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId
from flatmate.observability.metrics import (
    ChatIntent,
    FallbackOperation,
    MetricsErrorType,
    decrement_active_chat_turns,
    increment_active_chat_turns,
    increment_chat_turn,
    increment_error,
    increment_llm_fallback,
)

logger = logging.getLogger(__name__)

UNAUTHORIZED_CONVERSATION = "Conversation not found or unauthorized"


@dataclass
class SendMessageResult:
    message: Message
    conversation: Conversation
    listings: Optional[list[Listing]] = None
    degraded: bool = False  # True when the reply is fallback content


@dataclass(frozen=True)
class SendMessageCommand(Command[SendMessageResult]):
    user_id: UserId
    content: str
    conversation_id: Optional[str] = None


class SendMessageHandler(CommandHandler[SendMessageResult]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        listing_repo: ListingRepository,
        llm_client: LLMClient,
        classifier: IntentClassifier,
        extractor: SearchParameterExtractor,
        locks: ConversationLocks,
        title_length: int = 30,
    ):
        self.conv_repo = conv_repo
        self.msg_repo = msg_repo
        self.listing_repo = listing_repo
        self.llm_client = llm_client
        self.classifier = classifier
        self.extractor = extractor
        self.locks = locks
        self.title_length = title_length

    async def execute(self, command: SendMessageCommand) -> SendMessageResult:
        content = command.content.strip()
        if not content:
            raise DomainValidationError("Message content cannot be empty.")

        increment_active_chat_turns()
        try:
            conversation = await self._find_conversation(command)
            if conversation is None:
                conversation = await self._start_conversation(command.user_id, content)
                return await self._run_turn(conversation, content)

            async with self.locks.hold(conversation.id.value):
                return await self._run_turn(conversation, content)
        finally:
            decrement_active_chat_turns()

    async def _find_conversation(
        self, command: SendMessageCommand
    ) -> Optional[Conversation]:
        """Owned conversation for a supplied id, None when no id was supplied."""
        raw_id = (command.conversation_id or "").strip()
        if not raw_id:
            return None

        try:
            conversation_id = ConversationId(raw_id)
        except ValueError:
            conversation_id = None

        conversation = None
        if conversation_id is not None:
            conversation = await self.conv_repo.get_by_id(conversation_id)
        if conversation is None or not conversation.is_owned_by(command.user_id):
            logger.warning(
                f"User {command.user_id} denied access to conversation {raw_id}"
            )
            increment_error(MetricsErrorType.ACCESS_DENIED)
            raise AccessDeniedError(UNAUTHORIZED_CONVERSATION)
        return conversation

    async def _start_conversation(self, user_id: UserId, content: str) -> Conversation:
        conversation = Conversation.create(
            user_id=user_id,
            title=Conversation.title_from_message(content, self.title_length),
        )
        await self.conv_repo.save(conversation)
        await self._append(conversation, "system", replies.SYSTEM_PROMPT)
        logger.info(f"Created conversation {conversation.id} for user {user_id}")
        return conversation

    async def _run_turn(
        self, conversation: Conversation, content: str
    ) -> SendMessageResult:
        await self._append(conversation, "user", content)

        if self.classifier.is_search_request(content):
            increment_chat_turn(ChatIntent.SEARCH)
            filters = await self.extractor.extract(content)
            listings = await self.listing_repo.search(filters)
            logger.info(
                f"Search turn in {conversation.id}: filters={filters.to_dict()} "
                f"matches={len(listings)}"
            )
            reply = await self._append(
                conversation, "assistant", replies.format_search_reply(listings)
            )
            return SendMessageResult(
                message=reply,
                conversation=conversation,
                listings=listings or None,
            )

        increment_chat_turn(ChatIntent.CONVERSATION)
        history = await self.msg_repo.get_by_conversation(conversation.id)
        result = await self.llm_client.complete([m.as_chat_dict() for m in history])

        degraded = isinstance(result, Err)
        if degraded:
            logger.warning(
                f"LLM reply failed for conversation {conversation.id}, "
                f"using fallback reply: {result.error}"
            )
            increment_llm_fallback(FallbackOperation.COMPLETION)
            reply_text = replies.FALLBACK_REPLY
        else:
            reply_text = result.value.strip() or replies.EMPTY_COMPLETION_REPLY

        reply = await self._append(conversation, "assistant", reply_text)
        return SendMessageResult(
            message=reply, conversation=conversation, degraded=degraded
        )

    async def _append(self, conversation: Conversation, role: str, content: str) -> Message:
        message = Message.create(
            conversation_id=conversation.id, role=role, content=content
        )
        await self.msg_repo.save(message)
        conversation.touch()
        await self.conv_repo.save(conversation)
        return message
