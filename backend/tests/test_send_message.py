"""
Tests for SendMessageHandler (one chat turn).

Run with: pytest tests/test_send_message.py -v
"""

import asyncio
from types import SimpleNamespace

import pytest

from flatmate.application.commands.chat import SendMessageCommand
from flatmate.application.services import ConversationLocks
from flatmate.domain.exceptions import AccessDeniedError, DomainValidationError
from flatmate.domain.services import replies
from flatmate.domain.value_objects.conversation_id import ConversationId
from flatmate.domain.value_objects.user_id import UserId
from flatmate.infrastructure.llm import OpenAILLMClient

from conftest import FakeLLMClient

USER = UserId("user-1")
OTHER_USER = UserId("user-2")


def send(handler, content, conversation_id=None, user=USER):
    return asyncio.run(
        handler.execute(
            SendMessageCommand(user_id=user, content=content, conversation_id=conversation_id)
        )
    )


def stored_messages(database, conversation):
    return database.messages.get(conversation.id.value, [])


class TestNewConversation:
    def test_creates_conversation_with_system_message(self, make_handler, database):
        result = send(make_handler(FakeLLMClient(reply="Hi there!")), "Hello")

        messages = stored_messages(database, result.conversation)
        assert [m.role for m in messages] == ["system", "user", "assistant"]
        assert messages[0].content == replies.SYSTEM_PROMPT
        assert messages[1].content == "Hello"
        assert result.message.content == "Hi there!"
        assert result.listings is None
        assert not result.degraded

    def test_title_is_truncated_opening_message(self, make_handler):
        text = "Hello, could you help me with a question about my lease?"

        result = send(make_handler(FakeLLMClient()), text)

        assert result.conversation.title == text[:30] + "..."

    def test_short_title_is_kept(self, make_handler):
        result = send(make_handler(FakeLLMClient()), "Hello")

        assert result.conversation.title == "Hello"


class TestConversationTurns:
    def test_reuses_owned_conversation_and_sends_full_history(self, make_handler, database):
        llm = FakeLLMClient(reply="Sure.")
        handler = make_handler(llm)
        first = send(handler, "Hello")

        second = send(handler, "Tell me more", conversation_id=first.conversation.id.value)

        assert second.conversation.id == first.conversation.id
        assert len(database.conversations) == 1
        history = llm.complete_calls[-1]
        assert [m["role"] for m in history] == ["system", "user", "assistant", "user"]
        assert history[-1]["content"] == "Tell me more"

    def test_updated_at_moves_forward(self, make_handler):
        handler = make_handler(FakeLLMClient())
        first = send(handler, "Hello")
        created = first.conversation.created_at

        second = send(handler, "Again", conversation_id=first.conversation.id.value)

        assert second.conversation.updated_at >= created

    @pytest.mark.parametrize(
        "conversation_id",
        ["not-a-uuid", "2f1d0c3e-7a44-4e09-9a51-0c1b8f3f9f11"],
    )
    def test_unknown_or_malformed_id_is_denied(self, make_handler, database, conversation_id):
        with pytest.raises(AccessDeniedError, match="not found or unauthorized"):
            send(make_handler(FakeLLMClient()), "Hello", conversation_id=conversation_id)

        assert database.conversations == {}
        assert database.messages == {}

    def test_foreign_conversation_is_denied_without_writes(self, make_handler, database):
        handler = make_handler(FakeLLMClient())
        owned = send(handler, "Hello", user=OTHER_USER)
        before = list(stored_messages(database, owned.conversation))

        with pytest.raises(AccessDeniedError):
            send(handler, "Let me in", conversation_id=owned.conversation.id.value)

        assert stored_messages(database, owned.conversation) == before

    @pytest.mark.parametrize("content", ["", "   \n\t"])
    def test_empty_message_is_rejected(self, make_handler, database, content):
        with pytest.raises(DomainValidationError):
            send(make_handler(FakeLLMClient()), content)

        assert database.conversations == {}

    def test_empty_completion_gets_default_reply(self, make_handler):
        result = send(make_handler(FakeLLMClient(reply="   ")), "Hello")

        assert result.message.content == replies.EMPTY_COMPLETION_REPLY
        assert not result.degraded


class TestDegradedReplies:
    def test_llm_error_yields_fallback_reply(self, make_handler, database):
        result = send(make_handler(FakeLLMClient(fail=True)), "Hello")

        assert result.degraded
        assert result.message.content == replies.FALLBACK_REPLY
        roles = [m.role for m in stored_messages(database, result.conversation)]
        assert roles == ["system", "user", "assistant"]

    def test_raising_provider_never_escapes(self, make_handler, database):
        async def create(**kwargs):
            raise RuntimeError("connection reset")

        raising = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
        llm = OpenAILLMClient(client=raising, model="gpt-4o")

        result = send(make_handler(llm), "Hello")

        assert result.degraded
        assert result.message.content.startswith("[Offline mode]")
        roles = [m.role for m in stored_messages(database, result.conversation)]
        assert roles.count("user") == 1
        assert roles.count("assistant") == 1

    def test_missing_credentials_still_answers_searches(self, make_handler):
        llm = OpenAILLMClient(client=None, model="gpt-4o")

        result = send(make_handler(llm), "Find a flat in Berlin under 1000 EUR")

        assert [l.title for l in result.listings] == ["Kreuzberg studio"]
        assert not result.degraded


class TestSearchTurns:
    def test_search_end_to_end_with_llm_extraction(self, make_handler):
        llm = FakeLLMClient(extraction={"location": "Berlin", "maxPrice": 1200, "bedrooms": 2})

        result = send(make_handler(llm), "Find me a 2-bedroom apartment in Berlin under €1200")

        assert [l.title for l in result.listings] == ["Mitte two-bed"]
        assert result.message.content.startswith("I found 1 properties matching your criteria")
        assert "**Mitte two-bed** in Berlin Mitte" in result.message.content
        assert "€1100/month" in result.message.content
        assert llm.complete_calls == []

    def test_search_end_to_end_with_fallback_extraction(self, make_handler):
        result = send(
            make_handler(FakeLLMClient(fail=True)),
            "Find me a 2-bedroom apartment in Berlin under €1200",
        )

        assert [l.title for l in result.listings] == ["Mitte two-bed"]
        assert not result.degraded

    def test_no_matches(self, make_handler):
        llm = FakeLLMClient(extraction={"location": "Paris"})

        result = send(make_handler(llm), "Find an apartment in Paris")

        assert result.listings is None
        assert result.message.content == replies.NO_MATCHES_REPLY


class TestTurnSerialization:
    def test_turns_on_one_conversation_do_not_interleave(self, make_handler, database):
        class SlowLLM(FakeLLMClient):
            async def complete(self, messages):
                await asyncio.sleep(0.01)
                return await super().complete(messages)

        locks = ConversationLocks()
        handler = make_handler(SlowLLM(reply="ok"), locks=locks)
        first = send(handler, "Hello")
        conversation_id = first.conversation.id.value

        async def two_turns():
            await asyncio.gather(
                handler.execute(SendMessageCommand(USER, "one", conversation_id)),
                handler.execute(SendMessageCommand(USER, "two", conversation_id)),
            )

        asyncio.run(two_turns())

        roles = [m.role for m in stored_messages(database, first.conversation)]
        assert roles == ["system", "user", "assistant", "user", "assistant", "user", "assistant"]
        assert len(locks) == 0
